"""
Declaration Loading.

Builds symbol tables from plain data, either in memory or from a YAML/JSON
file. A declaration looks like::

    name: Weekday
    rename: uppercase
    rename_abbr: lowercase
    display: true
    from_str: true
    variants:
      - Monday
      - ident: Tuesday
        rename: DayAfterMonday
        rename_abbr: [uppercase]
      - ident: Wednesday
        skip: true

A file holds either one declaration or a list of them under ``enums``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from .symbols import SymbolTable, SymbolTableBuilder
from ..utils.constants import (
    DECLARATION_KEY_ENUMS,
    SYMBOL_KEY_IDENT,
    SYMBOL_KEY_RENAME,
    SYMBOL_KEY_RENAME_ABBR,
    SYMBOL_KEY_SKIP,
    SYMBOL_KEYS,
    TABLE_KEY_DISPLAY,
    TABLE_KEY_FROM_STR,
    TABLE_KEY_NAME,
    TABLE_KEY_RENAME,
    TABLE_KEY_RENAME_ABBR,
    TABLE_KEY_VARIANTS,
    TABLE_KEYS,
    YAML_SUFFIXES,
)
from ..utils.exceptions import DeclarationError, InvalidPolicyError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _check_keys(data: Mapping, allowed: frozenset, what: str, source: Optional[str]) -> None:
    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        raise DeclarationError(
            f"Unknown {what} option(s) {unknown}, expected one of {sorted(allowed)}", source=source
        )


def _check_flag(value: Any, key: str, source: Optional[str]) -> bool:
    if not isinstance(value, bool):
        raise DeclarationError(f"Option '{key}' must be a boolean, got {value!r}", source=source)
    return value


def table_from_dict(data: Mapping, source: Optional[str] = None) -> SymbolTable:
    """
    Create a symbol table from a declaration mapping.

    Args:
        data: Declaration with ``variants`` and optional type-level options
        source: Optional origin used in error messages

    Returns:
        The validated symbol table

    Raises:
        DeclarationError: If the declaration is malformed
        InvalidPolicyError: If a rename option cannot be interpreted
    """
    if not isinstance(data, Mapping):
        raise DeclarationError(f"Declaration must be a mapping, got {type(data).__name__}", source=source)
    _check_keys(data, TABLE_KEYS, "type-level", source)

    name = data.get(TABLE_KEY_NAME, "")
    source = source or name or None
    variants = data.get(TABLE_KEY_VARIANTS)
    if not isinstance(variants, list):
        raise DeclarationError(f"'{TABLE_KEY_VARIANTS}' must be a list", source=source)

    builder = (
        SymbolTableBuilder()
        .with_name(str(name))
        .with_rename(data.get(TABLE_KEY_RENAME))
        .with_rename_abbr(data.get(TABLE_KEY_RENAME_ABBR))
        .with_display(_check_flag(data.get(TABLE_KEY_DISPLAY, False), TABLE_KEY_DISPLAY, source))
        .with_from_str(_check_flag(data.get(TABLE_KEY_FROM_STR, False), TABLE_KEY_FROM_STR, source))
    )

    for entry in variants:
        if isinstance(entry, str):
            builder.with_symbol(entry)
            continue
        if not isinstance(entry, Mapping):
            raise DeclarationError(f"Variant must be a string or a mapping, got {entry!r}", source=source)

        _check_keys(entry, SYMBOL_KEYS, "variant-level", source)
        identifier = entry.get(SYMBOL_KEY_IDENT)
        if not isinstance(identifier, str):
            raise DeclarationError(f"Variant is missing '{SYMBOL_KEY_IDENT}': {dict(entry)!r}", source=source)

        try:
            builder.with_symbol(
                identifier,
                rename=entry.get(SYMBOL_KEY_RENAME),
                rename_abbr=entry.get(SYMBOL_KEY_RENAME_ABBR),
                skip=_check_flag(entry.get(SYMBOL_KEY_SKIP, False), SYMBOL_KEY_SKIP, source),
            )
        except InvalidPolicyError as e:
            e.details.setdefault('variant', identifier)
            raise

    table = builder.build()
    logger.debug(f"Declared '{table.name}' with {len(table)} variants")
    return table


def _read_file(path: Path) -> Any:
    """Read a YAML or JSON declaration file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise DeclarationError(f"Cannot read declaration file: {e}", source=str(path)) from e
    except (ValueError, yaml.YAMLError) as e:
        raise DeclarationError(f"Cannot parse declaration file: {e}", source=str(path)) from e


def load_declaration(path: Union[str, Path]) -> List[SymbolTable]:
    """
    Load every symbol table declared in a file.

    Args:
        path: YAML (``.yaml``/``.yml``) or JSON declaration file

    Returns:
        Symbol tables in file order

    Raises:
        DeclarationError: If the file is unreadable or malformed
    """
    path = Path(path)
    data = _read_file(path)

    if isinstance(data, Mapping) and DECLARATION_KEY_ENUMS in data:
        declarations = data[DECLARATION_KEY_ENUMS]
        if not isinstance(declarations, list):
            raise DeclarationError(f"'{DECLARATION_KEY_ENUMS}' must be a list", source=str(path))
    else:
        declarations = [data]

    tables = [table_from_dict(declaration, source=str(path)) for declaration in declarations]
    logger.info(f"Loaded {len(tables)} declaration(s) from {path}")
    return tables
