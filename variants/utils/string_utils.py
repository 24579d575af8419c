"""
String Manipulation Utilities for the Variants naming engine.

This module provides the byte-oriented text helpers the resolution engine is
built on: ASCII-only case folding, fixed-width byte truncation, and the
quoting and joining used for variant listings.
"""

from __future__ import annotations

from typing import Iterable

from .constants import ABBR_WIDTH, LISTING_QUOTE, LISTING_SEPARATOR, NAME_ENCODING, NAME_ERRORS


# =============================================================================
# Case Folding
# =============================================================================

def ascii_upper(text: str) -> str:
    """
    Uppercase the ASCII letters of text.

    Non-ASCII code points pass through unchanged.

    Args:
        text: Text to transform

    Returns:
        Text with every ASCII lowercase letter converted to uppercase
    """
    return text.encode(NAME_ENCODING, NAME_ERRORS).upper().decode(NAME_ENCODING, NAME_ERRORS)


def ascii_lower(text: str) -> str:
    """
    Lowercase the ASCII letters of text.

    Non-ASCII code points pass through unchanged.

    Args:
        text: Text to transform

    Returns:
        Text with every ASCII uppercase letter converted to lowercase
    """
    return text.encode(NAME_ENCODING, NAME_ERRORS).lower().decode(NAME_ENCODING, NAME_ERRORS)


# =============================================================================
# Truncation
# =============================================================================

def byte_length(text: str) -> int:
    """Return the encoded length of text in bytes."""
    return len(text.encode(NAME_ENCODING, NAME_ERRORS))


def truncate_bytes(text: str, width: int = ABBR_WIDTH) -> str:
    """
    Keep the first ``width`` bytes of text.

    Text that already fits is returned as is, without padding. When the cut
    falls inside a multi-byte code point the partial code point is dropped,
    so the result never exceeds ``width`` bytes.

    Args:
        text: Text to truncate
        width: Maximum number of bytes to keep

    Returns:
        Truncated text
    """
    encoded = text.encode(NAME_ENCODING, NAME_ERRORS)
    if len(encoded) <= width:
        return text

    # Back off to the start of a code point
    cut = width
    while cut > 0 and (encoded[cut] & 0xC0) == 0x80:
        cut -= 1
    return encoded[:cut].decode(NAME_ENCODING, NAME_ERRORS)


# =============================================================================
# Listing Formatting
# =============================================================================

def quote_name(name: str) -> str:
    """Wrap a resolved name in double quotes."""
    return f"{LISTING_QUOTE}{name}{LISTING_QUOTE}"


def join_listing(names: Iterable[str]) -> str:
    """
    Quote each name and join them with the listing separator.

    Args:
        names: Resolved names in iteration order

    Returns:
        Listing such as ``"Foo", "Bar"``; empty string for no names
    """
    return LISTING_SEPARATOR.join(quote_name(name) for name in names)
