"""
Enum Binding.

Attaches resolved names to a Python ``enum.Enum`` class. The surface gives
each member a primary and an abbreviated string form, iterates the
non-skipped members, and (when requested) parses strings back to members::

    @variants(rename="uppercase", rename_abbr="lowercase", from_str=True)
    class Weekday(Enum):
        Monday = 1
        Tuesday = 2

    Weekday.Monday.as_str()        # "MONDAY"
    Weekday.Monday.as_str_abbr()   # "mon"
    Weekday.from_str("mon")        # Weekday.Monday
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Type, Union

from ..naming.pipeline import NamingArtifacts, run_naming
from ..naming.symbols import SymbolTable, SymbolTableBuilder
from ..utils.constants import SYMBOL_KEY_RENAME, SYMBOL_KEY_RENAME_ABBR, SYMBOL_KEY_SKIP
from ..utils.exceptions import DeclarationError, VariantsError
from ..utils.logging import get_logger

logger = get_logger(__name__)

SURFACE_ATTRIBUTE = "__variants__"

_OVERRIDE_KEYS = frozenset({SYMBOL_KEY_RENAME, SYMBOL_KEY_RENAME_ABBR, SYMBOL_KEY_SKIP})


class NamingSurface:
    """Resolved names of an enum class, keyed by its members."""

    def __init__(self, enum_cls: Type[Enum], artifacts: NamingArtifacts):
        self.enum_cls = enum_cls
        self.artifacts = artifacts

    @property
    def table(self) -> SymbolTable:
        return self.artifacts.table

    def _member(self, identifier: str) -> Enum:
        return self.enum_cls[identifier]

    def as_str(self, member: Enum) -> str:
        """Primary name of a member."""
        return self.artifacts.resolved.primary_of(member.name)

    def as_str_abbr(self, member: Enum) -> str:
        """Abbreviated name of a member."""
        return self.artifacts.resolved.abbr_of(member.name)

    def iter_variants(self) -> Iterator[Enum]:
        """Iterate over non-skipped members in definition order."""
        return (self._member(symbol.identifier) for symbol in self.artifacts.listing.iteration_order)

    def iter_variants_as_str(self) -> Iterator[str]:
        return iter(self.artifacts.listing.primary_names)

    def iter_variants_as_str_abbr(self) -> Iterator[str]:
        return iter(self.artifacts.listing.abbr_names)

    @property
    def iterable_count(self) -> int:
        return self.artifacts.listing.count

    @property
    def variants_list_str(self) -> str:
        """Quoted, comma separated primary names."""
        return self.artifacts.listing.primary_listing

    @property
    def variants_list_str_abbr(self) -> str:
        """Quoted, comma separated abbreviated names."""
        return self.artifacts.listing.abbr_listing

    def from_str(self, text: str) -> Enum:
        """
        Parse a primary or abbreviated name back to its member.

        Raises:
            VariantsError: If the table was not declared with ``from_str``
            LookupNotFoundError: If no name matches
        """
        if not self.table.emit_from_str:
            raise VariantsError(
                f"'{self.enum_cls.__name__}' was not declared with from_str",
                {'enum': self.enum_cls.__name__},
            )
        symbol = self.artifacts.reverse_map.find(text)
        return self._member(symbol.identifier)

    def attach(self) -> None:
        """Install the surface methods on the enum class."""
        surface = self
        methods: Dict[str, Any] = {
            "as_str": lambda member: surface.as_str(member),
            "as_str_abbr": lambda member: surface.as_str_abbr(member),
            "iter_variants": staticmethod(surface.iter_variants),
            "iter_variants_as_str": staticmethod(surface.iter_variants_as_str),
            "iter_variants_as_str_abbr": staticmethod(surface.iter_variants_as_str_abbr),
            "ITERABLE_VARIANTS_COUNT": surface.iterable_count,
            "VARIANTS_LIST_STR": surface.variants_list_str,
            "VARIANTS_LIST_STR_ABBR": surface.variants_list_str_abbr,
        }
        if self.table.emit_from_str:
            methods["from_str"] = staticmethod(surface.from_str)
        if self.table.emit_display:
            methods["__str__"] = lambda member: surface.as_str(member)
            methods["__format__"] = lambda member, spec: format(surface.as_str(member), spec)

        clashes = sorted(name for name in methods if name in self.enum_cls.__members__)
        if clashes:
            raise DeclarationError(
                f"Members {clashes} shadow generated attributes", source=self.enum_cls.__name__
            )

        # A re-attached surface replaces its own earlier methods
        if SURFACE_ATTRIBUTE not in vars(self.enum_cls):
            defined = sorted(name for name in methods if name in vars(self.enum_cls))
            overridden = [name for name in defined if not name.startswith("__")]
            if overridden:
                raise DeclarationError(
                    f"Methods {overridden} shadow generated attributes", source=self.enum_cls.__name__
                )
            for name in defined:
                logger.warning(f"{self.enum_cls.__name__}.{name} is replaced by the display surface")

        for name, value in methods.items():
            setattr(self.enum_cls, name, value)
        setattr(self.enum_cls, SURFACE_ATTRIBUTE, self)
        logger.debug(f"Attached naming surface to {self.enum_cls.__name__}")


def table_from_enum(
    enum_cls: Type[Enum],
    rename: Any = None,
    rename_abbr: Any = None,
    display: bool = False,
    from_str: bool = False,
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> SymbolTable:
    """
    Derive a symbol table from an enum class.

    Member names are the identifiers, in definition order; aliases are not
    separate symbols.

    Args:
        enum_cls: The enum class
        rename: Type-level primary policy
        rename_abbr: Type-level abbreviation policy
        display: Make ``str(member)`` return the primary name
        from_str: Generate the ``from_str`` parser
        overrides: Member name mapped to ``rename``/``rename_abbr``/``skip``

    Returns:
        The validated symbol table
    """
    overrides = dict(overrides or {})
    unknown = sorted(name for name in overrides if name not in enum_cls.__members__)
    if unknown:
        raise DeclarationError(f"Overrides for unknown members {unknown}", source=enum_cls.__name__)

    builder = (
        SymbolTableBuilder()
        .with_name(enum_cls.__name__)
        .with_rename(rename)
        .with_rename_abbr(rename_abbr)
        .with_display(display)
        .with_from_str(from_str)
    )
    for member in enum_cls:
        options = overrides.get(member.name, {})
        bad_keys = sorted(key for key in options if key not in _OVERRIDE_KEYS)
        if bad_keys:
            raise DeclarationError(
                f"Unknown override option(s) {bad_keys} for '{member.name}'", source=enum_cls.__name__
            )
        builder.with_symbol(
            member.name,
            rename=options.get(SYMBOL_KEY_RENAME),
            rename_abbr=options.get(SYMBOL_KEY_RENAME_ABBR),
            skip=options.get(SYMBOL_KEY_SKIP, False),
        )
    return builder.build()


def build_surface(
    enum_cls: Type[Enum],
    table: Optional[SymbolTable] = None,
    strict: Optional[bool] = None,
    **options: Any,
) -> NamingSurface:
    """
    Run the naming pipeline for an enum class.

    Args:
        enum_cls: The enum class
        table: Prebuilt table; derived from ``enum_cls`` and ``options`` when None
        strict: Reject shared match keys; defaults to the configuration
        **options: Forwarded to ``table_from_enum``

    Returns:
        The naming surface (not yet attached)
    """
    if table is None:
        table = table_from_enum(enum_cls, **options)
    elif options:
        raise TypeError("Pass either a table or naming options, not both")
    else:
        missing = sorted(ident for ident in table.identifiers if ident not in enum_cls.__members__)
        if missing:
            raise DeclarationError(f"Table names unknown members {missing}", source=enum_cls.__name__)
        uncovered = [member.name for member in enum_cls if member.name not in table.identifiers]
        if uncovered:
            raise DeclarationError(f"Table misses members {uncovered}", source=enum_cls.__name__)

    return NamingSurface(enum_cls, run_naming(table, strict=strict))


def variants(
    enum_cls: Optional[Type[Enum]] = None, **options: Any
) -> Union[Type[Enum], Callable[[Type[Enum]], Type[Enum]]]:
    """
    Class decorator attaching a naming surface to an enum.

    Usable bare (``@variants``) or with options (``@variants(rename="lowercase")``).
    """
    def decorate(cls: Type[Enum]) -> Type[Enum]:
        build_surface(cls, **options).attach()
        return cls

    if enum_cls is not None:
        return decorate(enum_cls)
    return decorate


def get_surface(enum_cls: Type[Enum]) -> NamingSurface:
    """Return the surface attached by ``variants``."""
    surface = getattr(enum_cls, SURFACE_ATTRIBUTE, None)
    if surface is None:
        raise VariantsError(f"'{enum_cls.__name__}' has no naming surface attached")
    return surface
