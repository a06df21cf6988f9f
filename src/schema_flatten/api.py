"""Public API functions for schema-flatten.

This module provides the user-facing functions: resolve_children,
find_all_children and flatten_tree.  flatten_tree creates a fresh
SchemaFlattener per call to guarantee zero global state between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schema_flatten.algorithm.policy import CompressionPolicy, translate_policy
from schema_flatten.algorithm.resolver import resolve_children
from schema_flatten.flattener import SchemaFlattener

if TYPE_CHECKING:
    from schema_flatten.result import ResolvedChildSet
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["find_all_children", "flatten_tree", "resolve_children"]


def find_all_children(
    node: SchemaNode,
    *,
    compress_paths: bool,
    exclude_state: bool,
) -> ResolvedChildSet:
    """Resolve the children of ``node`` from the legacy boolean flags.

    The flags are translated with translate_policy(), so
    COMPRESSED_PREFER_STATE is not reachable through this function.

    Args:
        node:           Node whose children are wanted.
        compress_paths: Elide config/state and list-wrapper containers.
        exclude_state:  Drop read-only nodes.

    Returns:
        The ResolvedChildSet for ``node``.
    """
    return resolve_children(node, translate_policy(compress_paths, exclude_state))


def flatten_tree(
    root: SchemaNode,
    policy: CompressionPolicy = CompressionPolicy.UNCOMPRESSED,
    strict: bool = False,
) -> dict[str, ResolvedChildSet]:
    """Resolve the children of every entity below ``root``.

    Args:
        root:   Schema root (or any subtree root).
        policy: Compression policy.  Defaults to UNCOMPRESSED.
        strict: Raise SchemaFlattenError if any structural error is recorded.

    Returns:
        Mapping from node path to the node's ResolvedChildSet, for the root
        and every container or list reachable through resolved children.
    """
    return SchemaFlattener(policy=policy, strict=strict).flatten(root)
