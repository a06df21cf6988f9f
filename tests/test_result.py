"""Tests for the ResolvedChildSet frozen dataclass and ordered_names().

Covers:
- Construction with and without errors
- Frozen (immutable) enforcement
- Mapping-style access: len, in, [], iteration in insertion order
- names() / ordered_names() return alphabetical order
- ok and raise_for_errors()
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from schema_flatten.errors import DuplicateChildName, SchemaFlattenError
from schema_flatten.result import ResolvedChildSet, ordered_names
from schema_flatten.tree.nodes import NodeKind, SchemaNode

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_children(*names: str) -> dict[str, SchemaNode]:
    """Return a child mapping of leaves, in the given order."""
    return {n: SchemaNode(name=n, kind=NodeKind.LEAF, path=f"/x/{n}") for n in names}


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestResolvedChildSetConstruction:
    def test_defaults_to_no_errors(self) -> None:
        result = ResolvedChildSet(children=make_children("a"))
        assert result.errors == ()
        assert result.ok is True

    def test_with_errors(self) -> None:
        error = DuplicateChildName(path="/x/ch/a", name="a")
        result = ResolvedChildSet(children=make_children("a"), errors=(error,))
        assert result.ok is False
        assert result.errors == (error,)

    def test_frozen(self) -> None:
        result = ResolvedChildSet(children={})
        with pytest.raises(FrozenInstanceError):
            result.children = {}  # type: ignore[misc]

    def test_equality(self) -> None:
        children = make_children("a", "b")
        assert ResolvedChildSet(children=children) == ResolvedChildSet(
            children=dict(children)
        )


# ---------------------------------------------------------------------------
# Mapping-style access
# ---------------------------------------------------------------------------


class TestResolvedChildSetAccess:
    def test_len_contains_getitem(self) -> None:
        children = make_children("b", "a")
        result = ResolvedChildSet(children=children)
        assert len(result) == 2
        assert "a" in result
        assert "c" not in result
        assert result["b"] is children["b"]

    def test_getitem_missing_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            ResolvedChildSet(children={})["missing"]

    def test_iteration_keeps_insertion_order(self) -> None:
        result = ResolvedChildSet(children=make_children("z", "a", "m"))
        assert list(result) == ["z", "a", "m"]

    def test_names_are_alphabetical(self) -> None:
        result = ResolvedChildSet(children=make_children("z", "a", "m"))
        assert result.names() == ["a", "m", "z"]

    def test_ordered_names(self) -> None:
        assert ordered_names(make_children("oper-state", "admin-state")) == [
            "admin-state",
            "oper-state",
        ]
        assert ordered_names({}) == []


# ---------------------------------------------------------------------------
# raise_for_errors
# ---------------------------------------------------------------------------


class TestRaiseForErrors:
    def test_no_errors_does_not_raise(self) -> None:
        ResolvedChildSet(children=make_children("a")).raise_for_errors()

    def test_raises_with_every_error(self) -> None:
        errors = (
            DuplicateChildName(path="/x/c1/a", name="a"),
            DuplicateChildName(path="/x/c2/a", name="a"),
        )
        result = ResolvedChildSet(children=make_children("a"), errors=errors)
        with pytest.raises(SchemaFlattenError) as excinfo:
            result.raise_for_errors()
        assert excinfo.value.errors == errors


class TestModuleExports:
    def test_all(self) -> None:
        import schema_flatten.result as mod

        assert set(mod.__all__) == {"ResolvedChildSet", "ordered_names"}
