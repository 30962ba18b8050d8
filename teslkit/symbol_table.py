"""Tables of values addressed by symbols."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .symbol import GlobalSymbol, LocalSymbol, Symbol

__all__ = ["SymbolTableFullError", "FlatSymbolTable", "LayeredSymbolTable"]

V = TypeVar("V")


class SymbolTableFullError(OverflowError):
    """The table holds as many entries as its symbol type can address."""


class FlatSymbolTable(Generic[V]):
    """Values stored densely; a symbol's index is its position."""

    def __init__(self, symbol_type: type[Symbol] = GlobalSymbol) -> None:
        self.symbol_type = symbol_type
        self._data: list[V] = []

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[V]:
        return iter(self._data)

    def has(self, sym: Symbol) -> bool:
        """True if ``sym`` addresses a stored value."""
        return sym.index < len(self._data)

    def is_full(self) -> bool:
        """True once no further symbol can be handed out."""
        return len(self._data) == self.symbol_type.MAX_INDEX

    def get(self, sym: Symbol) -> V | None:
        """The value for ``sym``, or None if there is none."""
        if sym.index < len(self._data):
            return self._data[sym.index]
        return None

    def push_back(self, value: V) -> Symbol:
        """Append ``value`` and return the symbol that addresses it."""
        if self.is_full():
            raise SymbolTableFullError(f"table of {self.symbol_type.__name__} is full")
        sym = self.symbol_type(len(self._data))
        self._data.append(value)
        return sym

    def set(self, sym: Symbol, value: V) -> None:
        """Replace the value for an existing ``sym``."""
        if sym.index >= len(self._data):
            raise IndexError(f"no entry for symbol index {sym.index}")
        self._data[sym.index] = value


class LayeredSymbolTable(FlatSymbolTable[V]):
    """Values addressed by global symbols through a sparse map to local ones."""

    def __init__(
        self,
        global_symbol_type: type[Symbol] = GlobalSymbol,
        local_symbol_type: type[Symbol] = LocalSymbol,
    ) -> None:
        super().__init__(local_symbol_type)
        self.global_symbol_type = global_symbol_type
        self._indices: list[Symbol] = []

    def has(self, sym: Symbol) -> bool:
        """True if global ``sym`` maps to a stored value."""
        if sym.index < len(self._indices):
            return super().has(self._indices[sym.index])
        return False

    def get(self, sym: Symbol) -> V | None:
        """The value for global ``sym``, or None if there is none."""
        if sym.index < len(self._indices):
            return super().get(self._indices[sym.index])
        return None

    def get_local_symbol(self, sym: Symbol) -> Symbol:
        """The local symbol for global ``sym``; invalid if it has none."""
        if sym.index < len(self._indices):
            return self._indices[sym.index]
        return self.symbol_type()

    def insert(self, sym: Symbol, value: V) -> Symbol:
        """Store ``value`` under global ``sym`` and return its new local symbol."""
        if sym.index >= len(self._indices):
            missing = sym.index + 1 - len(self._indices)
            self._indices.extend(self.symbol_type() for _ in range(missing))
        local = self.push_back(value)
        self._indices[sym.index] = local
        return local

    def set(self, sym: Symbol, value: V) -> bool:
        """Replace the value for global ``sym``; False if ``sym`` is beyond the map.

        Raises IndexError if ``sym`` lies within the map but was never inserted.
        """
        if sym.index < len(self._indices):
            super().set(self._indices[sym.index], value)
            return True
        return False