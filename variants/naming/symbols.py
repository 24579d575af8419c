"""
Symbol and Symbol Table Data Structures.

A ``Symbol`` is one enumerated value with its naming configuration; a
``SymbolTable`` is the ordered set of symbols of one enumerated type plus the
type-wide policies and feature flags. Both are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .policy import TypePolicy, ValuePolicy, parse_type_policy, parse_value_policy
from ..utils.exceptions import DeclarationError


@dataclass(frozen=True)
class Symbol:
    """One enumerated value and its per-value naming overrides."""

    identifier: str
    primary_policy: Optional[ValuePolicy] = None
    abbr_policy: Optional[ValuePolicy] = None
    skip: bool = False

    @property
    def is_iterable(self) -> bool:
        """Whether the symbol takes part in iteration, listings and lookup."""
        return not self.skip


@dataclass(frozen=True)
class SymbolTable:
    """The symbols of one enumerated type, in declaration order."""

    symbols: Tuple[Symbol, ...] = ()
    type_primary_policy: Optional[TypePolicy] = None
    type_abbr_policy: Optional[TypePolicy] = None
    emit_display: bool = False
    emit_from_str: bool = False
    name: str = ""

    def __post_init__(self):
        if not isinstance(self.symbols, tuple):
            object.__setattr__(self, 'symbols', tuple(self.symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def iterable_symbols(self) -> Tuple[Symbol, ...]:
        """Non-skipped symbols in declaration order."""
        return tuple(symbol for symbol in self.symbols if symbol.is_iterable)

    @property
    def iterable_count(self) -> int:
        return sum(1 for symbol in self.symbols if symbol.is_iterable)

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return tuple(symbol.identifier for symbol in self.symbols)


class SymbolTableBuilder:
    """Builder for creating SymbolTable objects from raw configuration values."""

    def __init__(self):
        self._name: str = ""
        self._symbols: List[Symbol] = []
        self._type_primary_policy: Optional[TypePolicy] = None
        self._type_abbr_policy: Optional[TypePolicy] = None
        self._emit_display = False
        self._emit_from_str = False

    def with_name(self, name: str) -> 'SymbolTableBuilder':
        """Set the enumerated type name."""
        self._name = name
        return self

    def with_rename(self, policy: Any) -> 'SymbolTableBuilder':
        """Set the type-level primary policy."""
        self._type_primary_policy = parse_type_policy(policy)
        return self

    def with_rename_abbr(self, policy: Any) -> 'SymbolTableBuilder':
        """Set the type-level abbreviation policy."""
        self._type_abbr_policy = parse_type_policy(policy)
        return self

    def with_display(self, enabled: bool = True) -> 'SymbolTableBuilder':
        self._emit_display = bool(enabled)
        return self

    def with_from_str(self, enabled: bool = True) -> 'SymbolTableBuilder':
        self._emit_from_str = bool(enabled)
        return self

    def with_symbol(
        self,
        identifier: str,
        rename: Any = None,
        rename_abbr: Any = None,
        skip: bool = False,
    ) -> 'SymbolTableBuilder':
        """Append a symbol, parsing its value-level policies."""
        self._symbols.append(Symbol(
            identifier=identifier,
            primary_policy=parse_value_policy(rename),
            abbr_policy=parse_value_policy(rename_abbr),
            skip=bool(skip),
        ))
        return self

    def build(self) -> SymbolTable:
        """Build and validate the table."""
        table = SymbolTable(
            symbols=tuple(self._symbols),
            type_primary_policy=self._type_primary_policy,
            type_abbr_policy=self._type_abbr_policy,
            emit_display=self._emit_display,
            emit_from_str=self._emit_from_str,
            name=self._name,
        )

        validate_symbol_table(table)
        return table


def validate_symbol_table(table: SymbolTable) -> None:
    """
    Check that identifiers are non-empty strings and unique.

    The resolution engine never calls this; it is applied where tables are
    assembled from untyped declarations.

    Raises:
        DeclarationError: If an identifier is empty, not a string or repeated
    """
    source = table.name or None
    seen = set()
    for position, symbol in enumerate(table.symbols):
        if not isinstance(symbol.identifier, str) or not symbol.identifier:
            raise DeclarationError(f"Variant #{position} has an empty identifier", source=source)
        if symbol.identifier in seen:
            raise DeclarationError(f"Duplicate variant identifier '{symbol.identifier}'", source=source)
        seen.add(symbol.identifier)
