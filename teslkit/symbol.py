"""Typed indices into symbol tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["Symbol", "GlobalSymbol", "LocalSymbol"]


@dataclass(frozen=True)
class Symbol:
    """An index into a table; the largest 32-bit value marks an invalid symbol.

    Symbols of different classes never compare equal.
    """

    MAX_INDEX: ClassVar[int] = 0xFFFFFFFF
    INVALID_INDEX: ClassVar[int] = 0xFFFFFFFF

    index: int | None = None

    def __post_init__(self) -> None:
        if self.index is None:
            object.__setattr__(self, "index", self.INVALID_INDEX)
        elif not 0 <= self.index <= self.INVALID_INDEX:
            raise ValueError(f"symbol index out of range: {self.index}")

    def is_valid(self) -> bool:
        """True unless this is the invalid symbol."""
        return self.index != self.INVALID_INDEX


@dataclass(frozen=True)
class GlobalSymbol(Symbol):
    """A symbol shared across the whole environment."""


@dataclass(frozen=True)
class LocalSymbol(Symbol):
    """A symbol local to one table instance."""