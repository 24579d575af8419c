"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import pytest


def test_main_package_import():
    """Test that the main variants package can be imported."""
    import variants

    # Check basic attributes
    assert hasattr(variants, '__version__')
    assert hasattr(variants, '__author__')
    assert hasattr(variants, 'resolve_table')
    assert hasattr(variants, 'variants')


def test_naming_imports():
    """Test that naming submodules can be imported."""
    from variants.naming import (
        TypePolicy,
        ValuePolicy,
        Symbol,
        SymbolTable,
        resolve_primary,
        resolve_abbr,
        build_listing,
        build_reverse_map,
        run_naming,
    )

    assert TypePolicy is not None
    assert ValuePolicy is not None
    assert Symbol is not None
    assert SymbolTable is not None
    assert callable(resolve_primary)
    assert callable(resolve_abbr)
    assert callable(build_listing)
    assert callable(build_reverse_map)
    assert callable(run_naming)


def test_utils_imports():
    """Test that utility modules can be imported."""
    from variants.utils import (
        VariantsError,
        LookupNotFoundError,
        get_config,
        get_logger,
        ABBR_WIDTH,
        ascii_upper,
    )

    assert issubclass(LookupNotFoundError, VariantsError)
    assert ABBR_WIDTH == 3
    assert ascii_upper("a") == "A"
    assert get_logger("x").name == "variants.x"
    assert get_config() is get_config()


def test_cli_entry_point_importable():
    """Test that the console script target exists."""
    from variants.utils.info import main

    assert callable(main)
