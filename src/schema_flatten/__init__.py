"""Schema flatten - data-tree child resolution for schema-driven code generators."""

from __future__ import annotations

import logging

from schema_flatten.algorithm.policy import CompressionPolicy, translate_policy
from schema_flatten.algorithm.wrappers import find_first_non_choice_or_case
from schema_flatten.api import (
    find_all_children,
    flatten_tree,
    resolve_children,
)
from schema_flatten.errors import (
    DuplicateChildName,
    NestedConfigStatePair,
    SchemaFlattenError,
    StructuralError,
)
from schema_flatten.flattener import SchemaFlattener
from schema_flatten.result import ResolvedChildSet, ordered_names
from schema_flatten.tree.builder import SchemaTreeBuilder
from schema_flatten.tree.nodes import ConfigVisibility, NodeKind, SchemaNode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompressionPolicy",
    "ConfigVisibility",
    "DuplicateChildName",
    "NestedConfigStatePair",
    "NodeKind",
    "ResolvedChildSet",
    "SchemaFlattenError",
    "SchemaFlattener",
    "SchemaNode",
    "SchemaTreeBuilder",
    "StructuralError",
    "find_all_children",
    "find_first_non_choice_or_case",
    "flatten_tree",
    "ordered_names",
    "resolve_children",
    "translate_policy",
]
