"""Tests for SchemaLoader Protocol conformance.

Verifies that:
- User-defined classes with a conformant ``load`` method satisfy the Protocol.
- Classes without ``load`` (or with wrong method names) do not satisfy it.
- A conformant loader's output feeds straight into resolve_children().
"""

from __future__ import annotations

from typing import Any

from schema_flatten import CompressionPolicy, SchemaNode, resolve_children
from schema_flatten.protocols import SchemaLoader
from schema_flatten.tree import SchemaTreeBuilder


class _DictLoader:
    """Minimal user-defined loader conforming to SchemaLoader."""

    def load(self, source: Any) -> SchemaNode:
        return SchemaTreeBuilder().build(source, name="device")


class _NoLoadLoader:
    """Class with no load method, so not a SchemaLoader."""

    def parse(self, source: Any) -> SchemaNode:
        return SchemaTreeBuilder().build(source)


class _WrongNameLoader:
    """Class with a wrong method name, so not a SchemaLoader."""

    def load_schema(self, source: Any) -> SchemaNode:
        return SchemaTreeBuilder().build(source)


# ---------------------------------------------------------------------------
# Positive conformance tests
# ---------------------------------------------------------------------------


def test_user_defined_loader_passes_isinstance():  # type: ignore[no-untyped-def]
    """User-defined class with correct load() signature satisfies Protocol."""
    assert isinstance(_DictLoader(), SchemaLoader) is True


def test_user_defined_loader_output_resolves():  # type: ignore[no-untyped-def]
    """A loaded tree can be resolved without further wiring."""
    root = _DictLoader().load(
        {"children": {"config": {"children": {"hostname": {}}}}}
    )
    resolved = resolve_children(root, CompressionPolicy.COMPRESSED_PREFER_CONFIG)
    assert resolved.names() == ["hostname"]
    assert resolved["hostname"].path == "/device/config/hostname"


# ---------------------------------------------------------------------------
# Negative conformance tests
# ---------------------------------------------------------------------------


def test_class_without_load_fails_isinstance():  # type: ignore[no-untyped-def]
    assert isinstance(_NoLoadLoader(), SchemaLoader) is False


def test_wrong_method_name_fails_isinstance():  # type: ignore[no-untyped-def]
    assert isinstance(_WrongNameLoader(), SchemaLoader) is False
