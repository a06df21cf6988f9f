"""Tree subpackage for schema tree primitives.

Re-exports the public API for the tree module:
- SchemaNode: dataclass representing a node in the schema tree
- NodeKind: StrEnum of the six node kinds (LEAF, LEAFREF, CONTAINER, LIST, CHOICE, CASE)
- ConfigVisibility: StrEnum of the declared visibility (WRITABLE, READ_ONLY, INHERITED)
- SchemaTreeBuilder: converts a nested mapping description into a SchemaNode tree
"""

from schema_flatten.tree.builder import SchemaTreeBuilder
from schema_flatten.tree.nodes import ConfigVisibility, NodeKind, SchemaNode

__all__ = ["ConfigVisibility", "NodeKind", "SchemaNode", "SchemaTreeBuilder"]
