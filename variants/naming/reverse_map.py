"""
Reverse Mapping (string -> symbol).

Every non-skipped symbol contributes two match keys, its primary and its
abbreviated name. Lookups compare keys exactly and return the first match in
declaration order, so when two symbols share a key the earlier one wins.
Shared keys are reported as collisions and can be rejected in strict mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from .resolution import ResolvedNamingTable
from .symbols import Symbol, SymbolTable
from ..utils.config import get_config
from ..utils.exceptions import DuplicateKeyError, LookupNotFoundError
from ..utils.logging import VariantsLogger

_log = VariantsLogger(__name__)

MatchEntry = Tuple[str, Symbol]


@dataclass(frozen=True)
class ReverseMap:
    """Ordered match keys of a table."""

    entries: Tuple[MatchEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MatchEntry]:
        return iter(self.entries)

    def __contains__(self, text: object) -> bool:
        return any(key == text for key, _ in self.entries)

    def keys(self) -> Tuple[str, ...]:
        """Match keys in lookup order, duplicates included."""
        return tuple(key for key, _ in self.entries)

    def find(self, text: str) -> Symbol:
        """
        Return the first symbol whose primary or abbreviated name equals text.

        Args:
            text: Input string, compared byte-for-byte

        Returns:
            The matching symbol

        Raises:
            LookupNotFoundError: If no key matches
        """
        for key, symbol in self.entries:
            if key == text:
                return symbol

        _log.log_lookup_miss(text, len(self.entries))
        raise LookupNotFoundError(text, self.keys())

    def get(self, text: str, default: Optional[Symbol] = None) -> Optional[Symbol]:
        """Like ``find`` but return ``default`` instead of raising."""
        for key, symbol in self.entries:
            if key == text:
                return symbol
        return default

    def collisions(self) -> Dict[str, Tuple[Symbol, ...]]:
        """
        Find keys claimed by more than one distinct symbol.

        A symbol whose primary and abbreviated names coincide does not
        collide with itself.

        Returns:
            Shared key mapped to its symbols in declaration order; the first
            symbol is the one lookups return
        """
        owners: Dict[str, list] = {}
        for key, symbol in self.entries:
            claimants = owners.setdefault(key, [])
            if symbol not in claimants:
                claimants.append(symbol)

        return {key: tuple(symbols) for key, symbols in owners.items() if len(symbols) > 1}


def build_reverse_map(
    table: SymbolTable,
    resolved: ResolvedNamingTable,
    detect_collisions: Optional[bool] = None,
    strict: Optional[bool] = None,
) -> ReverseMap:
    """
    Build the reverse lookup table for a resolved table.

    Args:
        table: The symbol table that was resolved
        resolved: Names resolved from ``table``
        detect_collisions: Log shared keys; defaults to the configuration
        strict: Raise on shared keys; defaults to the configuration

    Returns:
        Reverse map with primary then abbreviated key per non-skipped symbol

    Raises:
        ValueError: If ``resolved`` was produced from a different table
        DuplicateKeyError: In strict mode, if distinct symbols share a key
    """
    if resolved.table != table:
        raise ValueError("Resolved names do not belong to this symbol table")

    config = get_config().reverse_map
    if detect_collisions is None:
        detect_collisions = config.detect_collisions
    if strict is None:
        strict = config.strict

    entries = []
    for name in resolved.iter_iterable():
        entries.append((name.primary, name.symbol))
        entries.append((name.abbreviated, name.symbol))
    reverse_map = ReverseMap(entries=tuple(entries))

    if detect_collisions or strict:
        collisions = reverse_map.collisions()
        if detect_collisions:
            for key, symbols in collisions.items():
                _log.log_collision(key, [symbol.identifier for symbol in symbols])
        if strict and collisions:
            raise DuplicateKeyError({
                key: [symbol.identifier for symbol in symbols]
                for key, symbols in collisions.items()
            })

    return reverse_map
