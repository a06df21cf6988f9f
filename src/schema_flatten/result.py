"""ResolvedChildSet dataclass for child resolution output.

This module provides the result type returned by resolve_children() calls:
the best-effort child mapping together with every recoverable error found
while building it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from schema_flatten.errors import SchemaFlattenError, StructuralError

if TYPE_CHECKING:
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["ResolvedChildSet", "ordered_names"]


def ordered_names(children: Mapping[str, SchemaNode]) -> list[str]:
    """Return the keys of a child mapping in alphabetical order."""
    return sorted(children)


@dataclass(frozen=True, slots=True)
class ResolvedChildSet:
    """Resolved data-tree children of one schema node.

    Attributes:
        children: Mapping from child name to the node it now represents.  The
            node may sit several levels below the resolved node once config/
            state containers, list wrappers and choice/case wrappers have been
            flattened away.  When two nodes collide, the first one wins.
        errors:   Structural errors recorded while building ``children``, in
            the order they were found.
    """

    children: dict[str, SchemaNode]
    errors: tuple[StructuralError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def names(self) -> list[str]:
        """Return the child names in alphabetical order."""
        return ordered_names(self.children)

    def raise_for_errors(self) -> None:
        """Raise SchemaFlattenError if any structural error was recorded."""
        if self.errors:
            raise SchemaFlattenError(self.errors)

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def __getitem__(self, name: str) -> SchemaNode:
        return self.children[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)
