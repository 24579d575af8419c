"""
Iteration Order and Listings.

Derives the filtered iteration order of a table and the quoted, comma
separated listings of its primary and abbreviated names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .resolution import ResolvedNamingTable
from .symbols import Symbol, SymbolTable
from ..utils.string_utils import join_listing


@dataclass(frozen=True)
class Listing:
    """Iteration order and listings of the non-skipped symbols."""

    iteration_order: Tuple[Symbol, ...]
    primary_names: Tuple[str, ...]
    abbr_names: Tuple[str, ...]
    primary_listing: str
    abbr_listing: str

    @property
    def count(self) -> int:
        """Number of iterable symbols."""
        return len(self.iteration_order)


def build_listing(table: SymbolTable, resolved: ResolvedNamingTable) -> Listing:
    """
    Build the iteration order and listings for a resolved table.

    Args:
        table: The symbol table that was resolved
        resolved: Names resolved from ``table``

    Returns:
        Listing over the non-skipped symbols, in declaration order

    Raises:
        ValueError: If ``resolved`` was produced from a different table
    """
    if resolved.table != table:
        raise ValueError("Resolved names do not belong to this symbol table")

    iterable = tuple(resolved.iter_iterable())
    primary_names = tuple(name.primary for name in iterable)
    abbr_names = tuple(name.abbreviated for name in iterable)

    return Listing(
        iteration_order=tuple(name.symbol for name in iterable),
        primary_names=primary_names,
        abbr_names=abbr_names,
        primary_listing=join_listing(primary_names),
        abbr_listing=join_listing(abbr_names),
    )
