"""
Naming Pipeline.

Runs the single resolution pass over a symbol table and bundles every
derived artifact for the emission layer:

    SymbolTable -> resolve_table -> ResolvedNamingTable
                                 -> build_listing      -> Listing
                                 -> build_reverse_map  -> ReverseMap
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .listing import Listing, build_listing
from .resolution import ResolvedNamingTable, resolve_table
from .reverse_map import ReverseMap, build_reverse_map
from .symbols import SymbolTable


@dataclass(frozen=True)
class NamingArtifacts:
    """Everything derived from one symbol table."""

    table: SymbolTable
    resolved: ResolvedNamingTable
    listing: Listing
    reverse_map: ReverseMap


def run_naming(
    table: SymbolTable,
    detect_collisions: Optional[bool] = None,
    strict: Optional[bool] = None,
) -> NamingArtifacts:
    """
    Resolve a table and derive its listing and reverse map.

    Args:
        table: Symbol table to process
        detect_collisions: Forwarded to ``build_reverse_map``
        strict: Forwarded to ``build_reverse_map``

    Returns:
        The naming artifacts
    """
    resolved = resolve_table(table)
    return NamingArtifacts(
        table=table,
        resolved=resolved,
        listing=build_listing(table, resolved),
        reverse_map=build_reverse_map(table, resolved, detect_collisions=detect_collisions, strict=strict),
    )
