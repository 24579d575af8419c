"""
Name Resolution Engine.

This module computes the primary and abbreviated names of every symbol. Both
cascades are expressed as ordered rule tables evaluated first-match-wins:

Primary name (``PRIMARY_RULES``):

1. value-level literal -> the literal text, verbatim
2. value-level uppercase -> uppercased identifier
3. value-level lowercase -> lowercased identifier
4. type-level uppercase -> uppercased identifier
5. type-level lowercase -> lowercased identifier
6. otherwise -> the identifier unchanged

Abbreviated name (``ABBR_RULES``):

1. value-level literal -> the literal text, never truncated
2. value-level uppercase -> value base, uppercased, first 3 bytes
3. value-level lowercase -> value base, lowercased, first 3 bytes
4. type-level uppercase -> same as 2
5. type-level lowercase -> same as 3
6. otherwise -> resolved primary name, first 3 bytes

The *value base* is the primary name computed from the value-level policy
alone, ignoring type-level policies. Each symbol is resolved from its own
data and the type-level policies only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, Tuple

from .policy import PolicyKind, TypePolicy, has_kind
from .symbols import Symbol, SymbolTable
from ..utils.logging import VariantsLogger
from ..utils.string_utils import ascii_lower, ascii_upper, truncate_bytes

_log = VariantsLogger(__name__)


@dataclass(frozen=True)
class PolicyContext:
    """Type-level policies shared by every symbol of a table."""

    type_primary_policy: Optional[TypePolicy] = None
    type_abbr_policy: Optional[TypePolicy] = None

    @classmethod
    def for_table(cls, table: SymbolTable) -> "PolicyContext":
        return cls(table.type_primary_policy, table.type_abbr_policy)


@dataclass(frozen=True)
class NamingRule:
    """One step of a resolution cascade."""

    name: str
    applies: Callable[[Symbol, PolicyContext], bool]
    produce: Callable[[Symbol, PolicyContext], str]


def match_rule(rules: Sequence[NamingRule], symbol: Symbol, context: PolicyContext) -> NamingRule:
    """Return the first rule that applies to the symbol."""
    for rule in rules:
        if rule.applies(symbol, context):
            return rule
    # Every cascade ends with an unconditional rule
    raise LookupError(f"No naming rule applies to '{symbol.identifier}'")


def _apply(rules: Sequence[NamingRule], symbol: Symbol, context: PolicyContext) -> Tuple[str, str]:
    rule = match_rule(rules, symbol, context)
    return rule.name, rule.produce(symbol, context)


# =============================================================================
# Primary Name
# =============================================================================

def _always(symbol: Symbol, context: PolicyContext) -> bool:
    return True


# Value-level steps, shared by the primary cascade and the value base
_VALUE_RULES: Tuple[NamingRule, ...] = (
    NamingRule(
        "value-literal",
        lambda s, c: has_kind(s.primary_policy, PolicyKind.LITERAL),
        lambda s, c: s.primary_policy.text,
    ),
    NamingRule(
        "value-uppercase",
        lambda s, c: has_kind(s.primary_policy, PolicyKind.UPPERCASE),
        lambda s, c: ascii_upper(s.identifier),
    ),
    NamingRule(
        "value-lowercase",
        lambda s, c: has_kind(s.primary_policy, PolicyKind.LOWERCASE),
        lambda s, c: ascii_lower(s.identifier),
    ),
)

_IDENTIFIER_RULE = NamingRule("identifier", _always, lambda s, c: s.identifier)

PRIMARY_RULES: Tuple[NamingRule, ...] = _VALUE_RULES + (
    NamingRule(
        "type-uppercase",
        lambda s, c: s.primary_policy is None and c.type_primary_policy is TypePolicy.UPPERCASE,
        lambda s, c: ascii_upper(s.identifier),
    ),
    NamingRule(
        "type-lowercase",
        lambda s, c: s.primary_policy is None and c.type_primary_policy is TypePolicy.LOWERCASE,
        lambda s, c: ascii_lower(s.identifier),
    ),
    _IDENTIFIER_RULE,
)

VALUE_BASE_RULES: Tuple[NamingRule, ...] = _VALUE_RULES + (_IDENTIFIER_RULE,)


def resolve_primary(symbol: Symbol, type_primary_policy: Optional[TypePolicy] = None) -> str:
    """
    Resolve the primary name of a symbol.

    Args:
        symbol: Symbol to name
        type_primary_policy: Type-level ``rename`` policy, if any

    Returns:
        The primary name
    """
    _, name = _apply(PRIMARY_RULES, symbol, PolicyContext(type_primary_policy))
    return name


def resolve_value_base(symbol: Symbol) -> str:
    """Resolve the name from the value-level policy alone, ignoring type-level policies."""
    _, name = _apply(VALUE_BASE_RULES, symbol, PolicyContext())
    return name


# =============================================================================
# Abbreviated Name
# =============================================================================

def _upper_abbr(symbol: Symbol, context: PolicyContext) -> str:
    return truncate_bytes(ascii_upper(resolve_value_base(symbol)))


def _lower_abbr(symbol: Symbol, context: PolicyContext) -> str:
    return truncate_bytes(ascii_lower(resolve_value_base(symbol)))


def _primary_abbr(symbol: Symbol, context: PolicyContext) -> str:
    return truncate_bytes(resolve_primary(symbol, context.type_primary_policy))


ABBR_RULES: Tuple[NamingRule, ...] = (
    NamingRule(
        "value-literal",
        lambda s, c: has_kind(s.abbr_policy, PolicyKind.LITERAL),
        lambda s, c: s.abbr_policy.text,
    ),
    NamingRule(
        "value-uppercase",
        lambda s, c: has_kind(s.abbr_policy, PolicyKind.UPPERCASE),
        _upper_abbr,
    ),
    NamingRule(
        "value-lowercase",
        lambda s, c: has_kind(s.abbr_policy, PolicyKind.LOWERCASE),
        _lower_abbr,
    ),
    NamingRule(
        "type-uppercase",
        lambda s, c: s.abbr_policy is None and c.type_abbr_policy is TypePolicy.UPPERCASE,
        _upper_abbr,
    ),
    NamingRule(
        "type-lowercase",
        lambda s, c: s.abbr_policy is None and c.type_abbr_policy is TypePolicy.LOWERCASE,
        _lower_abbr,
    ),
    NamingRule("truncated-primary", _always, _primary_abbr),
)


def resolve_abbr(
    symbol: Symbol,
    type_primary_policy: Optional[TypePolicy] = None,
    type_abbr_policy: Optional[TypePolicy] = None,
) -> str:
    """
    Resolve the abbreviated name of a symbol.

    Args:
        symbol: Symbol to name
        type_primary_policy: Type-level ``rename`` policy, if any
        type_abbr_policy: Type-level ``rename_abbr`` policy, if any

    Returns:
        The abbreviated name; at most 3 bytes unless it is a literal override
    """
    _, name = _apply(ABBR_RULES, symbol, PolicyContext(type_primary_policy, type_abbr_policy))
    return name


# =============================================================================
# Resolved Naming Table
# =============================================================================

@dataclass(frozen=True)
class ResolvedName:
    """The names of one symbol together with the rules that produced them."""

    symbol: Symbol
    primary: str
    abbreviated: str
    primary_rule: str = ""
    abbr_rule: str = ""

    @property
    def identifier(self) -> str:
        return self.symbol.identifier


@dataclass(frozen=True)
class ResolvedNamingTable:
    """Resolved names for every symbol of a table, in declaration order."""

    table: SymbolTable
    names: Tuple[ResolvedName, ...]

    def __iter__(self) -> Iterator[ResolvedName]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    @property
    def iterable_count(self) -> int:
        return self.table.iterable_count

    def iter_iterable(self) -> Iterator[ResolvedName]:
        """Iterate over names of non-skipped symbols."""
        return (name for name in self.names if name.symbol.is_iterable)

    def lookup(self, identifier: str) -> ResolvedName:
        """Return the resolved names of the symbol with this identifier."""
        for name in self.names:
            if name.identifier == identifier:
                return name
        raise KeyError(identifier)

    def primary_of(self, identifier: str) -> str:
        return self.lookup(identifier).primary

    def abbr_of(self, identifier: str) -> str:
        return self.lookup(identifier).abbreviated


def resolve_symbol(symbol: Symbol, context: PolicyContext) -> ResolvedName:
    """Resolve both names of one symbol."""
    primary_rule, primary = _apply(PRIMARY_RULES, symbol, context)
    abbr_rule, abbreviated = _apply(ABBR_RULES, symbol, context)
    return ResolvedName(symbol, primary, abbreviated, primary_rule, abbr_rule)


def resolve_table(table: SymbolTable) -> ResolvedNamingTable:
    """
    Resolve every symbol of a table.

    Skipped symbols are resolved too: they keep a string form even though
    they are excluded from iteration, listings and reverse lookup.

    Args:
        table: Symbol table to resolve

    Returns:
        The resolved naming table
    """
    _log.log_resolution_start(table.name, len(table.symbols))

    context = PolicyContext.for_table(table)
    names = []
    for symbol in table.symbols:
        resolved = resolve_symbol(symbol, context)
        _log.log_symbol_resolved(
            symbol.identifier, resolved.primary, resolved.abbreviated,
            resolved.primary_rule, resolved.abbr_rule,
        )
        names.append(resolved)

    return ResolvedNamingTable(table=table, names=tuple(names))
