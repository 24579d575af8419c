"""
Constants for the Variants naming engine.

This module consolidates the fixed values of the naming contract (abbreviation
width, listing quoting and separator), the recognized configuration keywords,
and the defaults used by the configuration and logging layers.
"""

from __future__ import annotations


# =============================================================================
# Naming Contract Constants
# =============================================================================

# Abbreviations keep this many leading bytes of the base string
ABBR_WIDTH = 3

# Byte encoding used for truncation and ASCII-only case folding
NAME_ENCODING = "utf-8"

# Lone surrogates are carried through encoding as three-byte sequences
NAME_ERRORS = "surrogatepass"

# Listing format: "Foo", "Bar"
LISTING_QUOTE = '"'
LISTING_SEPARATOR = ", "


# =============================================================================
# Policy Keywords
# =============================================================================

KEYWORD_UPPERCASE = "uppercase"
KEYWORD_LOWERCASE = "lowercase"
KEYWORD_LITERAL = "literal"

# Valid alternatives reported when a keyword is not recognized
TYPE_POLICY_KEYWORDS = (KEYWORD_UPPERCASE, KEYWORD_LOWERCASE)
VALUE_POLICY_KEYWORDS = (KEYWORD_UPPERCASE, KEYWORD_LOWERCASE, "...")


# =============================================================================
# Declaration Keys
# =============================================================================

TABLE_KEY_NAME = "name"
TABLE_KEY_RENAME = "rename"
TABLE_KEY_RENAME_ABBR = "rename_abbr"
TABLE_KEY_DISPLAY = "display"
TABLE_KEY_FROM_STR = "from_str"
TABLE_KEY_VARIANTS = "variants"

SYMBOL_KEY_IDENT = "ident"
SYMBOL_KEY_RENAME = "rename"
SYMBOL_KEY_RENAME_ABBR = "rename_abbr"
SYMBOL_KEY_SKIP = "skip"

TABLE_KEYS = frozenset({
    TABLE_KEY_NAME,
    TABLE_KEY_RENAME,
    TABLE_KEY_RENAME_ABBR,
    TABLE_KEY_DISPLAY,
    TABLE_KEY_FROM_STR,
    TABLE_KEY_VARIANTS,
})

SYMBOL_KEYS = frozenset({
    SYMBOL_KEY_IDENT,
    SYMBOL_KEY_RENAME,
    SYMBOL_KEY_RENAME_ABBR,
    SYMBOL_KEY_SKIP,
})

# Top-level key of a declaration file holding several tables
DECLARATION_KEY_ENUMS = "enums"

YAML_SUFFIXES = (".yaml", ".yml")


# =============================================================================
# Configuration Constants
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = "variants.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_LOG_LEVEL = "VARIANTS_LOG_LEVEL"
ENV_STRICT_COLLISIONS = "VARIANTS_STRICT_COLLISIONS"
ENV_DETECT_COLLISIONS = "VARIANTS_DETECT_COLLISIONS"

TRUTHY_VALUES = ("1", "true", "yes")
