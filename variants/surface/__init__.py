"""
Python enum surface for resolved variant names.
"""

from .binding import (
    NamingSurface,
    table_from_enum,
    build_surface,
    variants,
    get_surface,
)

__all__ = [
    "NamingSurface",
    "table_from_enum",
    "build_surface",
    "variants",
    "get_surface",
]
