"""
Rename Policies.

Two independent policy domains exist:

- ``TypePolicy``: attached to a whole enumerated type, either uppercase or
  lowercase. Used as a fallback when a variant carries no override.
- ``ValuePolicy``: attached to one variant, either a literal replacement or
  an uppercase/lowercase transform.

The ``parse_*`` helpers turn configuration keywords into typed policies and
reject anything they cannot interpret.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..utils.constants import (
    KEYWORD_LITERAL,
    KEYWORD_LOWERCASE,
    KEYWORD_UPPERCASE,
    TYPE_POLICY_KEYWORDS,
    VALUE_POLICY_KEYWORDS,
)
from ..utils.exceptions import InvalidPolicyError


class TypePolicy(Enum):
    """Type-level rename policy."""

    UPPERCASE = KEYWORD_UPPERCASE
    LOWERCASE = KEYWORD_LOWERCASE


class PolicyKind(Enum):
    """Kinds of value-level rename policy."""

    LITERAL = KEYWORD_LITERAL
    UPPERCASE = KEYWORD_UPPERCASE
    LOWERCASE = KEYWORD_LOWERCASE


@dataclass(frozen=True)
class ValuePolicy:
    """A rename policy attached to a single variant."""

    kind: PolicyKind
    text: Optional[str] = None

    def __post_init__(self):
        """Validate the policy payload."""
        if self.kind is PolicyKind.LITERAL:
            if not isinstance(self.text, str):
                raise TypeError("Literal policy text must be a string")
        elif self.text is not None:
            raise ValueError(f"{self.kind.value} policy does not take a text")

    @classmethod
    def literal(cls, text: str) -> "ValuePolicy":
        """Replace the name with ``text`` verbatim."""
        return cls(PolicyKind.LITERAL, text)

    @classmethod
    def uppercase(cls) -> "ValuePolicy":
        return cls(PolicyKind.UPPERCASE)

    @classmethod
    def lowercase(cls) -> "ValuePolicy":
        return cls(PolicyKind.LOWERCASE)

    @property
    def is_literal(self) -> bool:
        return self.kind is PolicyKind.LITERAL

    def __str__(self) -> str:
        if self.is_literal:
            return f"{KEYWORD_LITERAL}({self.text!r})"
        return self.kind.value


def has_kind(policy: Optional[ValuePolicy], kind: PolicyKind) -> bool:
    """Check whether an optional value policy is of the given kind."""
    return policy is not None and policy.kind is kind


def _unwrap_single(value: Any) -> Any:
    """Unwrap the list form ``[item]`` used by ``rename(item)``."""
    if isinstance(value, (list, tuple)):
        if not value:
            raise InvalidPolicyError("Too few items, expected exactly 1", value=list(value))
        if len(value) > 1:
            raise InvalidPolicyError("Too many items, expected exactly 1", value=list(value))
        return value[0]
    return value


def parse_type_policy(value: Any) -> Optional[TypePolicy]:
    """
    Interpret a type-level rename configuration value.

    Args:
        value: ``None``, a ``TypePolicy``, a keyword string or a
            one-element list holding a keyword

    Returns:
        The typed policy, or None when the option is absent

    Raises:
        InvalidPolicyError: If the value is not a recognized keyword
    """
    if value is None or isinstance(value, TypePolicy):
        return value

    keyword = _unwrap_single(value)
    if not isinstance(keyword, str):
        raise InvalidPolicyError(
            "Unsupported format, expected a keyword", value=keyword, alternatives=TYPE_POLICY_KEYWORDS
        )
    if keyword not in TYPE_POLICY_KEYWORDS:
        raise InvalidPolicyError(
            f"Unknown rename policy '{keyword}'", value=keyword, alternatives=TYPE_POLICY_KEYWORDS
        )
    return TypePolicy(keyword)


def parse_value_policy(value: Any) -> Optional[ValuePolicy]:
    """
    Interpret a value-level rename configuration value.

    A keyword (``"uppercase"``/``"lowercase"``) selects a case transform and
    any other string is a literal replacement. ``{"literal": text}`` forces a
    literal, which is how a keyword itself is used as a name.

    Args:
        value: ``None``, a policy object, a string, a one-element list
            or a ``{"literal": text}`` mapping

    Returns:
        The typed policy, or None when the option is absent

    Raises:
        InvalidPolicyError: If the value cannot be interpreted
    """
    if value is None or isinstance(value, ValuePolicy):
        return value
    if isinstance(value, TypePolicy):
        return ValuePolicy(PolicyKind(value.value))

    if isinstance(value, Mapping):
        if set(value) != {KEYWORD_LITERAL}:
            raise InvalidPolicyError(
                f"Expected a single '{KEYWORD_LITERAL}' key", value=dict(value)
            )
        text = value[KEYWORD_LITERAL]
        if not isinstance(text, str):
            raise InvalidPolicyError("Unexpected literal type, expected a string", value=text)
        return ValuePolicy.literal(text)

    item = _unwrap_single(value)
    if not isinstance(item, str):
        raise InvalidPolicyError(
            "Unexpected literal type, expected a string", value=item, alternatives=VALUE_POLICY_KEYWORDS
        )
    if item == KEYWORD_UPPERCASE:
        return ValuePolicy.uppercase()
    if item == KEYWORD_LOWERCASE:
        return ValuePolicy.lowercase()
    return ValuePolicy.literal(item)
