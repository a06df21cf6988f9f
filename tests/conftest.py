"""Shared schema tree fixtures.

Trees are built with SchemaTreeBuilder from nested mapping descriptions so
each test reads like the schema it exercises.
"""

from __future__ import annotations

from typing import Any

import pytest

from schema_flatten.tree.builder import SchemaTreeBuilder
from schema_flatten.tree.nodes import SchemaNode

# /interface with a config/state pair
INTERFACE: dict[str, Any] = {
    "kind": "container",
    "children": {
        "config": {"children": {"admin-state": {}}},
        "state": {
            "config": False,
            "children": {
                "admin-state": {},
                "oper-state": {},
                "counters": {"children": {"in-pkts": {}}},
            },
        },
    },
}

# /interfaces/interface/interface-list: a singleton list wrapper
INTERFACES_WRAPPER: dict[str, Any] = {
    "kind": "container",
    "children": {
        "interface": {
            "kind": "container",
            "children": {
                "interface-list": {
                    "kind": "list",
                    "children": {"name": {"type": "leafref"}},
                },
            },
        },
    },
}

# An OpenConfig-shaped schema root with keyed lists, config/state pairs and
# list wrappers at two levels.
OPENCONFIG_ROOT: dict[str, Any] = {
    "kind": "container",
    "children": {
        "interfaces": {
            "children": {
                "interface": {
                    "kind": "list",
                    "children": {
                        "name": {"type": "leafref"},
                        "config": {"children": {"name": {}, "mtu": {}}},
                        "state": {
                            "config": False,
                            "children": {
                                "name": {},
                                "mtu": {},
                                "oper-status": {},
                                "counters": {
                                    "children": {"in-pkts": {}, "out-pkts": {}}
                                },
                            },
                        },
                        "subinterfaces": {
                            "children": {
                                "subinterface": {
                                    "kind": "list",
                                    "children": {
                                        "index": {"type": "leafref"},
                                        "config": {"children": {"index": {}}},
                                        "state": {
                                            "config": False,
                                            "children": {
                                                "index": {},
                                                "admin-status": {},
                                            },
                                        },
                                    },
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}


@pytest.fixture
def builder() -> SchemaTreeBuilder:
    """Fresh SchemaTreeBuilder instance."""
    return SchemaTreeBuilder()


@pytest.fixture
def build(builder: SchemaTreeBuilder) -> Any:
    """Return a callable ``build(description, name="root") -> SchemaNode``."""

    def _build(description: dict[str, Any], name: str = "root") -> SchemaNode:
        return builder.build(description, name=name)

    return _build


@pytest.fixture
def interface(builder: SchemaTreeBuilder) -> SchemaNode:
    """The /interface container with config and state children."""
    return builder.build(INTERFACE, name="interface")


@pytest.fixture
def interfaces(builder: SchemaTreeBuilder) -> SchemaNode:
    """The /interfaces container wrapping a single list."""
    return builder.build(INTERFACES_WRAPPER, name="interfaces")


@pytest.fixture
def openconfig_root(builder: SchemaTreeBuilder) -> SchemaNode:
    """Unnamed schema root holding the interfaces model."""
    return builder.build(OPENCONFIG_ROOT)
