"""YangsonLoader: builds a SchemaNode tree from a yangson schema.

Wraps the schema tree of a ``yangson.DataModel`` with a lazy import so that
the base install (no yangson installed) never triggers an ``ImportError`` at
module level.  The ``yangson`` package is only required when ``YangsonLoader``
is *instantiated*.

Install the optional dependency with::

    pip install schema-flatten[yangson]

Example::

    from yangson import DataModel
    from schema_flatten.loaders.yangson import YangsonLoader

    dm = DataModel.from_file("yang-library.json", ["modules"])
    root = YangsonLoader().load(dm)

**Visibility mapping:**
yangson records an explicit ``config`` statement in a node's private content
type (``None`` when the node inherits).  ``ContentType.nonconfig`` maps to
READ_ONLY, any other explicit value to WRITABLE and ``None`` to INHERITED,
which keeps the inheritance decision inside ``SchemaNode.is_config()``.
"""

from __future__ import annotations

import logging
from typing import Any

from schema_flatten.tree.nodes import ConfigVisibility, NodeKind, SchemaNode

__all__ = ["YangsonLoader"]

logger = logging.getLogger(__name__)


class YangsonLoader:
    """Schema loader converting yangson schema nodes into SchemaNodes.

    Performs a lazy import of ``yangson`` inside ``__init__``, so importing
    this module on a base install does not raise ``ImportError``.  The error
    is deferred until the class is *instantiated*.

    Node mapping:
        ContainerNode and the schema root    -> CONTAINER
        ListNode                             -> LIST
        ChoiceNode / CaseNode                -> CHOICE / CASE
        LeafNode with a leafref type         -> LEAFREF
        LeafNode, LeafListNode, anydata/xml  -> LEAF
        rpc, action and notification nodes   -> skipped (not data tree nodes)

    Raises:
        ImportError: If ``yangson`` is not installed.  The message includes
            the install command.
    """

    def __init__(self) -> None:
        try:
            from yangson import schemanode
            from yangson.datatype import LeafrefType
            from yangson.enumerations import ContentType
        except ImportError as exc:
            raise ImportError(
                "yangson is required for YangsonLoader. "
                "Install it with: pip install schema-flatten[yangson]"
            ) from exc

        self._sn: Any = schemanode
        self._leafref_type: Any = LeafrefType
        self._nonconfig: Any = ContentType.nonconfig

    def load(self, source: Any) -> SchemaNode:
        """Convert a yangson schema into a SchemaNode tree.

        Args:
            source: A ``yangson.DataModel`` (its ``schema`` root is used) or
                any yangson schema node.

        Returns:
            The root SchemaNode.  A schema root (``SchemaTreeNode``) becomes a
            container named "" with path "".

        Raises:
            TypeError: If ``source`` is neither a DataModel nor a schema node,
                or is a node kind with no data tree counterpart.
            ValueError: If two sibling data nodes share a local name, which
                happens when modules augment the same node with equal names.
        """
        ynode = getattr(source, "schema", source)
        if not isinstance(ynode, self._sn.SchemaNode):
            raise TypeError(
                f"Expected a yangson DataModel or SchemaNode, got {type(source)!r}"
            )

        node = self._convert(ynode, parent=None)
        if node is None:
            msg = f"{type(ynode).__name__} has no data tree counterpart"
            raise TypeError(msg)
        return node

    def _convert(self, ynode: Any, parent: SchemaNode | None) -> SchemaNode | None:
        """Convert one yangson node and its subtree, or return None to skip it."""
        kind = self._kind(ynode)
        if kind is None:
            logger.debug("Skipping yangson %s %r", type(ynode).__name__, ynode.name)
            return None

        is_root = isinstance(ynode, self._sn.SchemaTreeNode)
        name = "" if is_root else ynode.name
        node = SchemaNode(
            name=name,
            kind=kind,
            config=self._visibility(ynode),
            path=f"{parent.path}/{name}" if parent is not None else "",
            parent=parent,
        )

        # Siblings from different modules (e.g. via augment) may share a local name.
        seen: dict[str, Any] = {}
        for ychild in getattr(ynode, "children", ()):
            child = self._convert(ychild, parent=node)
            if child is None:
                continue
            if child.name in seen:
                msg = (
                    f"{child.path} is declared twice: "
                    f"{self._qualified(seen[child.name])} and {self._qualified(ychild)}"
                )
                raise ValueError(msg)
            seen[child.name] = ychild
            node.children[child.name] = child
        return node

    @staticmethod
    def _qualified(ynode: Any) -> str:
        ns = getattr(ynode, "ns", None)
        return f"{ns}:{ynode.name}" if ns else ynode.name

    def _kind(self, ynode: Any) -> NodeKind | None:
        sn = self._sn
        if isinstance(ynode, (sn.RpcActionNode, sn.NotificationNode)):
            return None
        if isinstance(ynode, (sn.SchemaTreeNode, sn.ContainerNode)):
            return NodeKind.CONTAINER
        if isinstance(ynode, sn.ListNode):
            return NodeKind.LIST
        if isinstance(ynode, sn.ChoiceNode):
            return NodeKind.CHOICE
        if isinstance(ynode, sn.CaseNode):
            return NodeKind.CASE
        if isinstance(ynode, sn.LeafNode) and isinstance(ynode.type, self._leafref_type):
            return NodeKind.LEAFREF
        if isinstance(ynode, (sn.LeafNode, sn.LeafListNode, sn.AnyContentNode)):
            return NodeKind.LEAF
        return None

    def _visibility(self, ynode: Any) -> ConfigVisibility:
        ctype = ynode._ctype
        if ctype is None:
            return ConfigVisibility.INHERITED
        if ctype == self._nonconfig:
            return ConfigVisibility.READ_ONLY
        return ConfigVisibility.WRITABLE
