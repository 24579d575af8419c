"""
Variants: naming resolution for enumerated values

Given the values of an enumerated type, each optionally annotated with
per-value rename overrides, and type-wide default rename policies, Variants
computes a primary and an abbreviated name for every value, the filtered
iteration order, quoted listings and a reverse string-to-value lookup.

Key Features:
- Deterministic primary/abbreviated name cascades
- Skip flag excluding values from iteration, listings and lookup
- Collision reporting with an optional strict mode
- YAML/JSON declarations and a decorator for Python enums

Usage:
    from enum import Enum
    from variants import variants

    @variants(rename="uppercase", rename_abbr="lowercase", from_str=True)
    class Weekday(Enum):
        Monday = 1
        Tuesday = 2

    Weekday.Monday.as_str()      # "MONDAY"
    Weekday.from_str("tue")      # Weekday.Tuesday
"""

__version__ = "0.1.0"
__author__ = "Variants Team"
__email__ = "variants@example.com"

# Public API exports
from .naming import (
    TypePolicy,
    ValuePolicy,
    Symbol,
    SymbolTable,
    SymbolTableBuilder,
    resolve_primary,
    resolve_abbr,
    resolve_table,
    build_listing,
    build_reverse_map,
    table_from_dict,
    load_declaration,
    run_naming,
)

from .surface import (
    variants,
    build_surface,
    get_surface,
)

from .utils import (
    VariantsError,
    LookupNotFoundError,
    DuplicateKeyError,
    get_config,
    VariantsConfig,
)

__all__ = [
    "TypePolicy",
    "ValuePolicy",
    "Symbol",
    "SymbolTable",
    "SymbolTableBuilder",
    "resolve_primary",
    "resolve_abbr",
    "resolve_table",
    "build_listing",
    "build_reverse_map",
    "table_from_dict",
    "load_declaration",
    "run_naming",
    "variants",
    "build_surface",
    "get_surface",
    "VariantsError",
    "LookupNotFoundError",
    "DuplicateKeyError",
    "get_config",
    "VariantsConfig",
]
