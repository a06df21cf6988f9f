"""SchemaTreeBuilder: converts a nested mapping description into a SchemaNode tree.

The description format mirrors what a JSON dump of a parsed schema looks like::

    {
        "kind": "container",
        "config": true,            # true / false / null (inherited)
        "children": {
            "name": {"type": "string"},
            "ref":  {"type": "leafref"},
        },
    }

Rules:
- ``kind`` is any NodeKind value.  When omitted it defaults to ``container``
  for descriptions that carry ``children`` and to ``leaf`` otherwise.
- A leaf whose ``type`` is ``leafref`` becomes a LEAFREF node.
- ``config`` may be a bool, ``None`` or a ConfigVisibility value.

Paths are built during traversal: a root named ``""`` has path ``""`` and
each level appends ``"/{name}"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from schema_flatten.tree.nodes import ConfigVisibility, NodeKind, SchemaNode

# Type alias for one node description
NodeDescription = Mapping[str, Any]

_CONFIG_FROM_BOOL = {
    True: ConfigVisibility.WRITABLE,
    False: ConfigVisibility.READ_ONLY,
    None: ConfigVisibility.INHERITED,
}


@dataclass
class SchemaTreeBuilder:
    """Converts a nested mapping description into a wired SchemaNode tree.

    Every node produced has its ``parent`` and ``path`` set, so visibility
    inheritance and error messages work on the returned tree straight away.
    Children keep the insertion order of the description mappings.

    Example::
        builder = SchemaTreeBuilder()
        root = builder.build(
            {"children": {"config": {"children": {"mtu": {}}}}},
            name="interface",
        )
        # root: CONTAINER("interface") -> CONTAINER("config") -> LEAF("mtu")
    """

    def build(
        self,
        description: NodeDescription,
        name: str = "",
        parent: SchemaNode | None = None,
    ) -> SchemaNode:
        """Convert a node description to a SchemaNode tree.

        Args:
            description: Mapping describing the node (see module docstring).
            name:        Local name of the node.  Defaults to "" (root).
            parent:      Enclosing node, used to derive the path.

        Returns:
            The SchemaNode for ``description`` with all descendants attached.

        Raises:
            TypeError:  If a description or its ``children`` is not a mapping.
            ValueError: If ``kind`` or ``config`` holds an unknown value, or a
                        non-directory node declares children.
        """
        if not isinstance(description, Mapping):
            raise TypeError(
                f"Node description for {name!r} must be a mapping, "
                f"got {type(description)!r}"
            )

        raw_children = description.get("children")
        if raw_children is not None and not isinstance(raw_children, Mapping):
            raise TypeError(
                f"children of {name!r} must be a mapping, got {type(raw_children)!r}"
            )

        if parent is not None:
            path = f"{parent.path}/{name}"
        else:
            path = f"/{name}" if name else ""

        node = SchemaNode(
            name=name,
            kind=self._kind(description, name),
            config=self._config(description.get("config"), name),
            path=path,
            parent=parent,
        )

        if raw_children and not node.is_dir():
            msg = f"{node.kind} node {node.path!r} cannot declare children"
            raise ValueError(msg)

        for child_name, child_description in (raw_children or {}).items():
            node.children[child_name] = self.build(
                child_description, name=child_name, parent=node
            )

        return node

    def _kind(self, description: NodeDescription, name: str) -> NodeKind:
        """Resolve the NodeKind of a description, applying the defaults."""
        raw_kind = description.get("kind")
        if raw_kind is None:
            kind = NodeKind.CONTAINER if "children" in description else NodeKind.LEAF
        else:
            try:
                kind = NodeKind(raw_kind)
            except ValueError:
                msg = f"Unknown kind {raw_kind!r} for node {name!r}"
                raise ValueError(msg) from None

        if kind is NodeKind.LEAF and description.get("type") == "leafref":
            return NodeKind.LEAFREF
        return kind

    @staticmethod
    def _config(raw_config: Any, name: str) -> ConfigVisibility:
        """Map a bool / None / string config value to ConfigVisibility."""
        if isinstance(raw_config, ConfigVisibility):
            return raw_config
        if raw_config is None or isinstance(raw_config, bool):
            return _CONFIG_FROM_BOOL[raw_config]
        try:
            return ConfigVisibility(raw_config)
        except ValueError:
            msg = f"Unknown config value {raw_config!r} for node {name!r}"
            raise ValueError(msg) from None
