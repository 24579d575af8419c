"""
Variant Naming Core.

This package resolves the textual names of enumerated values:

- policy.py: type-level and value-level rename policies
- symbols.py: Symbol / SymbolTable model and builder
- resolution.py: primary and abbreviated name cascades
- listing.py: iteration order and quoted listings
- reverse_map.py: string -> symbol lookup table
- declaration.py: symbol tables from YAML/JSON declarations
- pipeline.py: the full resolution pass
"""

from .policy import (
    TypePolicy,
    PolicyKind,
    ValuePolicy,
    parse_type_policy,
    parse_value_policy,
)

from .symbols import (
    Symbol,
    SymbolTable,
    SymbolTableBuilder,
    validate_symbol_table,
)

from .resolution import (
    PolicyContext,
    NamingRule,
    PRIMARY_RULES,
    VALUE_BASE_RULES,
    ABBR_RULES,
    ResolvedName,
    ResolvedNamingTable,
    match_rule,
    resolve_primary,
    resolve_value_base,
    resolve_abbr,
    resolve_symbol,
    resolve_table,
)

from .listing import Listing, build_listing

from .reverse_map import ReverseMap, build_reverse_map

from .declaration import table_from_dict, load_declaration

from .pipeline import NamingArtifacts, run_naming

__all__ = [
    # Policies
    "TypePolicy",
    "PolicyKind",
    "ValuePolicy",
    "parse_type_policy",
    "parse_value_policy",
    # Symbols
    "Symbol",
    "SymbolTable",
    "SymbolTableBuilder",
    "validate_symbol_table",
    # Resolution
    "PolicyContext",
    "NamingRule",
    "PRIMARY_RULES",
    "VALUE_BASE_RULES",
    "ABBR_RULES",
    "ResolvedName",
    "ResolvedNamingTable",
    "match_rule",
    "resolve_primary",
    "resolve_value_base",
    "resolve_abbr",
    "resolve_symbol",
    "resolve_table",
    # Derived artifacts
    "Listing",
    "build_listing",
    "ReverseMap",
    "build_reverse_map",
    # Declarations
    "table_from_dict",
    "load_declaration",
    # Pipeline
    "NamingArtifacts",
    "run_naming",
]
