"""
Pytest configuration and shared fixtures for Variants tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
from pathlib import Path
from typing import Any, Dict, List

from variants.naming import SymbolTable, SymbolTableBuilder
from variants.utils.config import reset_config


WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from the global configuration and its env overrides."""
    for name in ("VARIANTS_STRICT_COLLISIONS", "VARIANTS_DETECT_COLLISIONS", "VARIANTS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


def build_table(
    identifiers: List[str],
    overrides: Dict[str, Dict[str, Any]] = None,
    **options: Any,
) -> SymbolTable:
    """Build a table from identifiers, per-identifier overrides and type-level options."""
    overrides = overrides or {}
    builder = (
        SymbolTableBuilder()
        .with_name(options.get("name", "Weekday"))
        .with_rename(options.get("rename"))
        .with_rename_abbr(options.get("rename_abbr"))
        .with_display(options.get("display", False))
        .with_from_str(options.get("from_str", False))
    )
    for identifier in identifiers:
        builder.with_symbol(identifier, **overrides.get(identifier, {}))
    return builder.build()


@pytest.fixture
def weekdays() -> List[str]:
    """The seven weekday identifiers in declaration order."""
    return list(WEEKDAYS)


@pytest.fixture
def table_factory():
    """Factory building weekday-style tables."""
    return build_table


@pytest.fixture
def weekday_table(weekdays) -> SymbolTable:
    """Weekday table with no policies at all."""
    return build_table(weekdays)


@pytest.fixture
def declaration_dir(tmp_path) -> Path:
    """Directory for declaration files written by a test."""
    path = tmp_path / "declarations"
    path.mkdir()
    return path
