"""
Unit tests for the exception hierarchy.
"""

import pytest

from variants.utils.exceptions import (
    DeclarationError,
    DuplicateKeyError,
    InvalidPolicyError,
    LookupNotFoundError,
    VariantsError,
)


class TestVariantsExceptions:
    """Test cases for custom exception classes."""

    def test_variants_error_basic(self):
        """Test basic VariantsError functionality."""
        error = VariantsError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_variants_error_with_details(self):
        """Test VariantsError with details."""
        details = {"key1": "value1", "key2": 42}
        error = VariantsError("Test error", details)

        assert error.message == "Test error"
        assert error.details == details
        assert str(error) == "Test error (key1=value1, key2=42)"

    def test_lookup_not_found_error(self):
        """Test LookupNotFoundError functionality."""
        error = LookupNotFoundError("Funday", ["Monday", "Mon"])

        assert error.text == "Funday"
        assert error.accepted == ("Monday", "Mon")
        assert error.details["key_count"] == 2
        assert "No variant matches 'Funday'" in str(error)

    def test_lookup_not_found_is_lookup_error(self):
        """Test that callers can catch lookups failures generically."""
        with pytest.raises(LookupError):
            raise LookupNotFoundError("x")

    def test_duplicate_key_error(self):
        """Test DuplicateKeyError functionality."""
        error = DuplicateKeyError({"Win": ["Window", "Winter"], "Sat": ["Sat", "Saturday"]})

        assert error.collisions == {"Win": ("Window", "Winter"), "Sat": ("Sat", "Saturday")}
        assert error.details["collision_count"] == 2
        assert "'Win', 'Sat'" in str(error)

    def test_invalid_policy_error(self):
        """Test InvalidPolicyError functionality."""
        error = InvalidPolicyError("Unknown rename policy", "shout", ("uppercase", "lowercase"))

        assert error.value == "shout"
        assert error.alternatives == ("uppercase", "lowercase")
        assert error.details == {"value": "'shout'", "expected": "uppercase|lowercase"}

    def test_invalid_policy_error_without_context(self):
        """Test InvalidPolicyError with only a message."""
        error = InvalidPolicyError("Too few items")
        assert str(error) == "Too few items"

    def test_declaration_error(self):
        """Test DeclarationError functionality."""
        error = DeclarationError("Duplicate variant identifier 'A'", source="Letters")

        assert error.source == "Letters"
        assert str(error) == "Duplicate variant identifier 'A' (source=Letters)"
        assert DeclarationError("no source").source is None

    @pytest.mark.parametrize("error", [
        LookupNotFoundError("x"),
        DuplicateKeyError({}),
        InvalidPolicyError("bad"),
        DeclarationError("bad"),
    ])
    def test_hierarchy(self, error):
        """Test that every error derives from VariantsError."""
        assert isinstance(error, VariantsError)
