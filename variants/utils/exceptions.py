"""
Custom exception definitions.

This module defines the exception hierarchy for Variants-specific
errors. Resolution itself is total over well-formed tables; these errors
come from reverse lookups, strict collision checks and declaration input.
"""

from typing import Any, Dict, Optional, Sequence


class VariantsError(Exception):
    """
    Base exception for all Variants-related errors.

    This is the root exception class for all Variants-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize Variants error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class LookupNotFoundError(VariantsError, LookupError):
    """
    Raised when a reverse lookup matches no variant.

    Callers usually treat this as a parse failure of user input.
    """

    def __init__(self, text: str, accepted: Sequence[str] = ()):
        """
        Initialize lookup error.

        Args:
            text: The input string that matched no key
            accepted: Keys that would have matched, in lookup order
        """
        super().__init__(f"No variant matches {text!r}", {'key_count': len(accepted)})
        self.text = text
        self.accepted = tuple(accepted)


class DuplicateKeyError(VariantsError):
    """
    Raised in strict mode when distinct variants share a match key.

    Without strict mode the earlier-declared variant silently wins.
    """

    def __init__(self, collisions: Dict[str, Sequence[str]]):
        """
        Initialize duplicate key error.

        Args:
            collisions: Shared key mapped to the identifiers claiming it
        """
        keys = ", ".join(repr(key) for key in collisions)
        super().__init__(f"Duplicate match keys: {keys}", {'collision_count': len(collisions)})
        self.collisions = {key: tuple(idents) for key, idents in collisions.items()}


class InvalidPolicyError(VariantsError):
    """
    Raised when a rename policy value cannot be interpreted.

    This covers unknown keywords, wrong item counts in list form
    and literal values of the wrong type.
    """

    def __init__(self, message: str, value: Any = None, alternatives: Sequence[str] = ()):
        """
        Initialize policy error.

        Args:
            message: Error description
            value: The offending configuration value
            alternatives: Valid keywords for the position
        """
        details = {}
        if value is not None:
            details['value'] = repr(value)
        if alternatives:
            details['expected'] = "|".join(alternatives)

        super().__init__(message, details)
        self.value = value
        self.alternatives = tuple(alternatives)


class DeclarationError(VariantsError):
    """
    Raised when a declaration cannot be turned into a symbol table.

    This includes unknown keys, missing identifiers, duplicate
    identifiers and unreadable declaration files.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        """
        Initialize declaration error.

        Args:
            message: Error description
            source: Optional file or table the declaration came from
        """
        details = {}
        if source is not None:
            details['source'] = source

        super().__init__(message, details)
        self.source = source
