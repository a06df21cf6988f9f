"""SchemaNode dataclass plus the NodeKind and ConfigVisibility StrEnums.

These are the input types of the flattening algorithm.  A tree of SchemaNode
objects is produced by an external loader (or by ``SchemaTreeBuilder``) and is
treated as read-only from then on: the resolver only ever copies references
to nodes, never node bodies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["ConfigVisibility", "NodeKind", "SchemaNode"]

# Names of the containers that mirror intended (config) and applied (state) data.
CONFIG_STATE_NAMES = frozenset({"config", "state"})


class NodeKind(StrEnum):
    """Enumeration of the six schema node kinds.

    - LEAF      -> "leaf"      : A terminal value (leaf, leaf-list, anydata).
    - LEAFREF   -> "leafref"   : A leaf whose type references another leaf.
    - CONTAINER -> "container" : A directory holding named children.
    - LIST      -> "list"      : A keyed directory holding named children.
    - CHOICE    -> "choice"    : A wrapper grouping alternative cases.
    - CASE      -> "case"      : A wrapper grouping the members of one alternative.
    """

    LEAF = auto()
    LEAFREF = auto()
    CONTAINER = auto()
    LIST = auto()
    CHOICE = auto()
    CASE = auto()


class ConfigVisibility(StrEnum):
    """Declared read/write visibility of a schema node.

    INHERITED means the node declares nothing and takes the effective value of
    its nearest ancestor that does.  The root is implicitly writable.
    """

    WRITABLE = auto()
    READ_ONLY = auto()
    INHERITED = auto()


_DIR_KINDS = frozenset(
    {NodeKind.CONTAINER, NodeKind.LIST, NodeKind.CHOICE, NodeKind.CASE}
)
_WRAPPER_KINDS = frozenset({NodeKind.CHOICE, NodeKind.CASE})


@dataclass(slots=True, eq=False)
class SchemaNode:
    """A node in the schema tree.

    Nodes compare by identity: two nodes with equal fields at different
    positions of the tree are different nodes.

    Attributes:
        name:     Local name, unique among the node's raw siblings.
        kind:     Which kind of node this is (see NodeKind).
        config:   Declared visibility (see ConfigVisibility).
        path:     Slash separated ancestor chain, e.g. "/interfaces/interface".
                  Used only in error messages.
        children: Child nodes keyed by local name, in declaration order.
        parent:   The enclosing node, or None for the root.
    """

    name: str
    kind: NodeKind
    config: ConfigVisibility = ConfigVisibility.INHERITED
    path: str = ""
    children: dict[str, SchemaNode] = field(default_factory=dict)
    parent: SchemaNode | None = field(default=None, repr=False)

    def is_config(self) -> bool:
        """Return True if the node is effectively writable.

        Walks up the parent chain until a node with an explicit visibility is
        found; a chain with no explicit value at all is writable.
        """
        node: SchemaNode | None = self
        while node is not None:
            if node.config is ConfigVisibility.READ_ONLY:
                return False
            if node.config is ConfigVisibility.WRITABLE:
                return True
            node = node.parent
        return True

    def is_dir(self) -> bool:
        return self.kind in _DIR_KINDS

    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    def is_list(self) -> bool:
        return self.kind is NodeKind.LIST

    def is_leafref(self) -> bool:
        return self.kind is NodeKind.LEAFREF

    def is_choice_or_case(self) -> bool:
        return self.kind in _WRAPPER_KINDS

    def is_config_state(self) -> bool:
        """Return True for a container literally named "config" or "state"."""
        return self.is_container() and self.name in CONFIG_STATE_NAMES

    def iter_children(self) -> Iterator[SchemaNode]:
        """Yield the declared children in declaration order."""
        yield from self.children.values()
