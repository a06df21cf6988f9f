"""Deterministic schema generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Three tiers, each shaped like an OpenConfig model: N keyed lists wrapped in
a container, every list carrying a config/state pair of M mirrored leaves
plus a few operational-only leaves and a choice.
"""

from __future__ import annotations

from typing import Any

import pytest

from schema_flatten.tree.builder import SchemaTreeBuilder
from schema_flatten.tree.nodes import SchemaNode


def generate_list_entry(num_leaves: int, prefix: str) -> dict[str, Any]:
    """Generate one keyed list description with a config/state pair."""
    mirrored = {f"{prefix}-leaf-{i}": {} for i in range(num_leaves)}
    return {
        "kind": "list",
        "children": {
            "name": {"type": "leafref"},
            "config": {"children": {"name": {}, **mirrored}},
            "state": {
                "config": False,
                "children": {
                    "name": {},
                    **mirrored,
                    "oper-status": {},
                    "counters": {"children": {"in-pkts": {}, "out-pkts": {}}},
                },
            },
            "mode": {
                "kind": "choice",
                "children": {
                    "a": {"kind": "case", "children": {f"{prefix}-a": {}}},
                    "b": {"kind": "case", "children": {f"{prefix}-b": {}}},
                },
            },
        },
    }


def generate_schema(num_lists: int, num_leaves: int) -> dict[str, Any]:
    """Generate a root with ``num_lists`` wrapped lists of ``num_leaves`` leaves."""
    return {
        "children": {
            f"group-{i}s": {
                "children": {f"group-{i}": generate_list_entry(num_leaves, f"g{i}")},
            }
            for i in range(num_lists)
        },
    }


def _build(num_lists: int, num_leaves: int) -> SchemaNode:
    return SchemaTreeBuilder().build(generate_schema(num_lists, num_leaves))


# --- Fixtures for each size tier ---


@pytest.fixture
def schema_small() -> SchemaNode:
    """5 lists x 10 mirrored leaves."""
    return _build(5, 10)


@pytest.fixture
def schema_medium() -> SchemaNode:
    """50 lists x 20 mirrored leaves."""
    return _build(50, 20)


@pytest.fixture
def schema_large() -> SchemaNode:
    """200 lists x 50 mirrored leaves."""
    return _build(200, 50)
