"""Dispatcher synthesis.

Builds the table mapping (language, region) and language to generated
classes, and renders the aggregate module: abstract base, supported-locale
enumeration, language predicate, lookup function, and delegate.

Lookup is two-phase and order-independent:
    1. Exact (language, region) match returns the region-variant class.
    2. Language match returns the language-default class.
    3. Anything else is unsupported.

The lookup function is the runtime counterpart of the class hierarchy:
the region-variant class object embodies "region overrides language".

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from typedloc.codegen.hierarchy import render_abstract_members
from typedloc.codegen.templates import (
    AGGREGATE_MODULE_TEMPLATE,
    LANGUAGE_CASE_TEMPLATE,
    PACKAGE_INIT_TEMPLATE,
    REGION_CASE_TEMPLATE,
    render,
)
from typedloc.constants import GENERATED_HEADER, LOCALE_SEPARATOR
from typedloc.diagnostics import ErrorTemplate, UnsupportedLocaleError
from typedloc.locale_utils import LocaleId, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typedloc.catalog.grouping import LocaleGroup
    from typedloc.codegen.naming import NamingScheme

__all__ = [
    "DispatchEntry",
    "DispatchTable",
    "build_dispatch_table",
    "render_aggregate_module",
    "render_lookup_body",
    "render_package_init",
]


@dataclass(frozen=True, slots=True)
class DispatchEntry:
    """Target of one dispatch branch.

    Attributes:
        locale: Locale the branch returns
        class_name: Generated class to instantiate
        module_name: Module defining the class
    """

    locale: LocaleId
    class_name: str
    module_name: str


@dataclass(frozen=True, slots=True)
class DispatchTable:
    """Two-level lookup derived from the locale groups.

    Attributes:
        locales: Every supported locale, grouped by language, default first
        region_entries: (language, region) -> region-variant entry
        language_entries: language -> language-default entry
    """

    locales: tuple[LocaleId, ...]
    region_entries: Mapping[tuple[str, str], DispatchEntry] = field(default_factory=dict)
    language_entries: Mapping[str, DispatchEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "region_entries", MappingProxyType(dict(self.region_entries)))
        object.__setattr__(
            self, "language_entries", MappingProxyType(dict(self.language_entries))
        )

    @property
    def supported_locales(self) -> tuple[tuple[str, str | None], ...]:
        """Every (language, region) pair plus every bare (language, None)."""
        return tuple((locale.language, locale.region) for locale in self.locales)

    @property
    def supported_languages(self) -> tuple[str, ...]:
        return tuple(self.language_entries)

    def is_supported(self, language: str) -> bool:
        return _split_requested(language)[0] in self.language_entries

    def resolve(self, language: str, region: str | None = None) -> DispatchEntry:
        """Resolve a requested locale with the emitted lookup's semantics.

        Raises:
            UnsupportedLocaleError: If the language has no generated classes
        """
        if region is not None:
            entry = self.region_entries.get((language, region))
            if entry is not None:
                return entry
        entry = self.language_entries.get(language)
        if entry is not None:
            return entry
        requested = language if region is None else f"{language}_{region}"
        raise UnsupportedLocaleError(ErrorTemplate.unsupported_locale(requested))

    def resolve_locale(self, locale_code: str) -> DispatchEntry:
        """Resolve a locale string such as 'en-US', 'fr' or 'en_US.UTF-8'."""
        return self.resolve(*_split_requested(locale_code))


def _split_requested(locale_code: str) -> tuple[str, str | None]:
    """Split a requested locale the way the emitted _split_locale does.

    The '.encoding' suffix is dropped before separators and casing are
    normalized, so 'en_US.UTF-8' and 'en-us' both give ('en', 'US').
    """
    code = normalize_locale(locale_code.split(".", 1)[0])
    language, _, region = code.partition(LOCALE_SEPARATOR)
    return language, region or None


def build_dispatch_table(
    groups: Mapping[str, LocaleGroup], naming: NamingScheme
) -> DispatchTable:
    """Derive the dispatch table from fallback-checked groups."""
    locales: list[LocaleId] = []
    region_entries: dict[tuple[str, str], DispatchEntry] = {}
    language_entries: dict[str, DispatchEntry] = {}
    for language, group in groups.items():
        module = naming.language_module(language)
        for locale in group.locales:
            locales.append(locale)
            entry = DispatchEntry(
                locale=locale, class_name=naming.class_name(locale), module_name=module
            )
            if locale.region is None:
                language_entries[language] = entry
            else:
                region_entries[(language, locale.region)] = entry
    return DispatchTable(
        locales=tuple(locales),
        region_entries=region_entries,
        language_entries=language_entries,
    )


def render_lookup_body(table: DispatchTable) -> str:
    """Render the two match statements of the lookup function.

    The region match is omitted when no region variants exist, since an
    empty match statement is a syntax error.
    """
    blocks: list[str] = []
    if table.region_entries:
        cases = "".join(
            render(
                REGION_CASE_TEMPLATE,
                language=repr(language),
                region=repr(region),
                module=entry.module_name,
                name=entry.class_name,
            )
            for (language, region), entry in table.region_entries.items()
        )
        blocks.append(f"    match (language, region):\n{cases}")
    cases = "".join(
        render(
            LANGUAGE_CASE_TEMPLATE,
            language=repr(language),
            module=entry.module_name,
            name=entry.class_name,
        )
        for language, entry in table.language_entries.items()
    )
    blocks.append(f"    match language:\n{cases}")
    return "".join(f"\n{block}" for block in blocks)


def render_aggregate_module(
    table: DispatchTable, template_keys: Iterable[str], naming: NamingScheme
) -> str:
    """Render the module holding the base class and the dispatcher."""
    supported_locales = "".join(
        f"    ({language!r}, {region!r}),\n" for language, region in table.supported_locales
    )
    supported_languages = ", ".join(repr(language) for language in table.supported_languages)
    return render(
        AGGREGATE_MODULE_TEMPLATE,
        header=GENERATED_HEADER,
        locale_list=", ".join(locale.canonical for locale in table.locales),
        base=naming.base_class,
        delegate=naming.delegate_class,
        lookup=naming.lookup_function,
        supported_locales=supported_locales,
        supported_languages=supported_languages,
        abstract_members=render_abstract_members(template_keys),
        lookup_body=render_lookup_body(table),
    )


def render_package_init(naming: NamingScheme) -> str:
    """Render the package __init__ re-exporting the aggregate module."""
    return render(
        PACKAGE_INIT_TEMPLATE,
        header=GENERATED_HEADER,
        module=naming.aggregate_module,
        base=naming.base_class,
        delegate=naming.delegate_class,
        lookup=naming.lookup_function,
    )
