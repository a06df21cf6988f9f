"""Structural error records and the SchemaFlattenError exception.

Structural errors are *records*, not exceptions: the resolver accumulates them
alongside the partial child set and keeps going.  Callers that want a hard
failure call ``ResolvedChildSet.raise_for_errors()``, which raises
SchemaFlattenError carrying every record.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "DuplicateChildName",
    "NestedConfigStatePair",
    "SchemaFlattenError",
    "StructuralError",
]


@dataclass(frozen=True, slots=True)
class StructuralError:
    """A recoverable problem found while resolving a node's children.

    Attributes:
        path: Path of the offending schema node.
        name: Child name the problem was found under.
    """

    path: str
    name: str

    @property
    def message(self) -> str:
        return f"{self.path}: structural error"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class DuplicateChildName(StructuralError):
    """Two nodes flatten to the same child name and no whitelist excuses it."""

    @property
    def message(self) -> str:
        return f"{self.path} was duplicate"


@dataclass(frozen=True, slots=True)
class NestedConfigStatePair(StructuralError):
    """A config/state container declared directly inside another one."""

    @property
    def message(self) -> str:
        return f"{self.path} is a {self.name} container nested in a config/state container"


class SchemaFlattenError(ValueError):
    """Raised on request when structural errors were recorded."""

    def __init__(self, errors: Sequence[StructuralError]) -> None:
        self.errors: tuple[StructuralError, ...] = tuple(errors)
        lines = "\n".join(f"  {err}" for err in self.errors)
        super().__init__(f"{len(self.errors)} structural error(s):\n{lines}")
