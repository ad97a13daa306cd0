"""Locale identifier parsing and canonicalization.

Centralizes locale format handling used throughout the generator. Every
input file name passes through parse_locale() before any other processing,
so downstream components only ever see validated LocaleId values.

Language and region codes are validated against CLDR reference tables
provided by Babel. The tables are loaded once per display locale and passed
explicitly, never read from module-level state.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel import Locale

from typedloc.constants import (
    DEFAULT_DISPLAY_LOCALE,
    LOCALE_INPUT_SEPARATORS,
    LOCALE_SEPARATOR,
)
from typedloc.diagnostics import ErrorTemplate, InvalidLanguageError, InvalidRegionError

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "LocaleId",
    "ReferenceData",
    "canonicalize_locale",
    "get_reference_data",
    "locale_from_path",
    "normalize_locale",
    "parse_locale",
]

_SUBTAG_SEPARATOR: re.Pattern[str] = re.compile(
    "[" + "".join(re.escape(sep) for sep in LOCALE_INPUT_SEPARATORS) + "]"
)


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """Immutable language and region tables.

    Attributes:
        languages: Language code -> display name (e.g., 'en' -> 'English')
        regions: Region code -> display name (e.g., 'US' -> 'United States')
    """

    languages: Mapping[str, str]
    regions: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))

    @classmethod
    def from_babel(cls, display_locale: str = DEFAULT_DISPLAY_LOCALE) -> ReferenceData:
        """Build tables from Babel CLDR data.

        Only bare language codes are kept; CLDR also lists regional and
        script names such as 'en_AU' or 'zh_Hans' which are not languages.

        Args:
            display_locale: Locale used for the display names

        Raises:
            babel.core.UnknownLocaleError: If display_locale is not in CLDR
            ValueError: If display_locale is malformed
        """
        display = Locale.parse(normalize_locale(display_locale))
        languages = {
            code: name
            for code, name in display.languages.items()
            if code.isascii() and code.isalpha() and code.islower()
        }
        regions = dict(display.territories.items())
        return cls(languages=languages, regions=regions)

    def language_name(self, language: str) -> str:
        """Display name for a language, or the code itself if unknown."""
        return self.languages.get(language, language)

    def region_name(self, region: str) -> str:
        """Display name for a region, or the code itself if unknown."""
        return self.regions.get(region, region)

    def describe(self, locale: LocaleId) -> str:
        """Human-readable locale description.

        Example:
            >>> reference.describe(LocaleId("en", "US"))
            'English, as used in United States'
        """
        name = self.language_name(locale.language)
        if locale.region is None:
            return name
        return f"{name}, as used in {self.region_name(locale.region)}"


@functools.lru_cache(maxsize=8)
def get_reference_data(display_locale: str = DEFAULT_DISPLAY_LOCALE) -> ReferenceData:
    """Get reference tables with caching.

    CLDR data is loaded once per display locale for the process.

    Args:
        display_locale: Locale used for display names

    Returns:
        ReferenceData built from Babel
    """
    return ReferenceData.from_babel(display_locale)


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Validated (language, region) pair.

    Attributes:
        language: Lowercase language code (e.g., 'en')
        region: Uppercase region code, or None for the language-default
    """

    language: str
    region: str | None = field(default=None)

    @property
    def canonical(self) -> str:
        """Canonical string form: 'en' or 'en_US'."""
        if self.region is None:
            return self.language
        return f"{self.language}{LOCALE_SEPARATOR}{self.region}"

    @property
    def is_language_default(self) -> bool:
        """True when the locale has no region qualifier."""
        return self.region is None

    def sort_key(self) -> tuple[str, str]:
        """Ordering key placing the language-default before its regions."""
        return (self.language, self.region or "")

    def __str__(self) -> str:
        return self.canonical


def normalize_locale(locale_code: str) -> str:
    """Normalize separators and casing without validating codes.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    The language subtag is lowercased and the region subtag uppercased.

    Args:
        locale_code: Locale code in either format, any casing

    Returns:
        Normalized locale code

    Example:
        >>> normalize_locale("EN-us")
        'en_US'
        >>> normalize_locale("fr")
        'fr'
    """
    subtags = _SUBTAG_SEPARATOR.split(locale_code.strip())
    language, *rest = subtags
    if not rest:
        return language.lower()
    return LOCALE_SEPARATOR.join([language.lower(), rest[0].upper(), *rest[1:]])


def parse_locale(locale_code: str, reference: ReferenceData) -> LocaleId:
    """Parse and validate a locale string.

    Args:
        locale_code: Raw locale string (e.g., 'en', 'en-US', 'EN_us')
        reference: Language and region tables to validate against

    Returns:
        Validated LocaleId

    Raises:
        InvalidLanguageError: If the language is empty or unknown
        InvalidRegionError: If the region is unknown or extra subtags follow it

    Example:
        >>> parse_locale("en-us", reference)
        LocaleId(language='en', region='US')
    """
    subtags = _SUBTAG_SEPARATOR.split(locale_code.strip())
    language = subtags[0].lower()
    if language not in reference.languages:
        raise InvalidLanguageError(
            ErrorTemplate.invalid_language(language, locale_code),
            locale_code=locale_code,
        )
    if len(subtags) == 1:
        return LocaleId(language)
    if len(subtags) > 2:
        raise InvalidRegionError(
            ErrorTemplate.unsupported_subtags(locale_code),
            locale_code=locale_code,
        )
    region = subtags[1].upper()
    if region not in reference.regions:
        raise InvalidRegionError(
            ErrorTemplate.invalid_region(region, locale_code),
            locale_code=locale_code,
        )
    return LocaleId(language, region)


def locale_from_path(path: str | Path, reference: ReferenceData) -> LocaleId:
    """Parse the locale encoded in a file name.

    Uses the final path segment with everything after the first '.' removed,
    so 'locale-input/en-US.json' yields en_US.

    Args:
        path: File path
        reference: Language and region tables to validate against

    Returns:
        Validated LocaleId
    """
    stem = Path(path).name.split(".", 1)[0]
    return parse_locale(stem, reference)


def canonicalize_locale(locale_code: str, reference: ReferenceData) -> str:
    """Validate a locale string and return its canonical form.

    Idempotent: canonicalize_locale(canonicalize_locale(x)) == canonicalize_locale(x).
    """
    return parse_locale(locale_code, reference).canonical
