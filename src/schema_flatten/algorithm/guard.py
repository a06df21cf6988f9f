"""Duplicate guard: first-writer-wins insertion into a resolved child mapping."""

from __future__ import annotations

from collections.abc import Container
from enum import StrEnum, auto
from typing import TYPE_CHECKING

from schema_flatten.errors import DuplicateChildName

if TYPE_CHECKING:
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["GuardMode", "add_child"]


class GuardMode(StrEnum):
    """How add_child treats a name that is already present.

    - STRICT:   Every duplicate is an error.
    - TOLERANT: Duplicates of whitelisted names are dropped silently; any
                other duplicate is an error.
    """

    STRICT = auto()
    TOLERANT = auto()


def add_child(
    children: dict[str, SchemaNode],
    name: str,
    node: SchemaNode,
    *,
    mode: GuardMode = GuardMode.STRICT,
    whitelist: Container[str] = frozenset(),
) -> DuplicateChildName | None:
    """Insert ``name -> node`` into ``children`` unless ``name`` is taken.

    An existing entry is never overwritten.

    Args:
        children:  Mapping being built (mutated in place).
        name:      Child name to insert under.
        node:      Schema node the name maps to.
        mode:      STRICT or TOLERANT duplicate handling.
        whitelist: Names whose duplicates are expected in TOLERANT mode.

    Returns:
        None when the node was inserted or silently dropped, otherwise the
        DuplicateChildName error naming ``node``'s path.
    """
    if name not in children:
        children[name] = node
        return None
    if mode is GuardMode.TOLERANT and name in whitelist:
        return None
    return DuplicateChildName(path=node.path, name=name)
