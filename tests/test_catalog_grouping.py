"""Tests for catalog/grouping.py: language groups and fallback checks.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from tests.strategies import locale_group_sets
from typedloc.catalog.grouping import (
    LocaleGroup,
    build_locale_groups,
    group_locales,
    require_fallbacks,
)
from typedloc.diagnostics import DiagnosticCode, MissingFallbackLocaleError
from typedloc.locale_utils import LocaleId


class TestLocaleGroup:
    """Test LocaleGroup accessors."""

    def test_with_default(self) -> None:
        group = LocaleGroup("en", (None, "GB", "US"))
        assert group.has_default
        assert group.region_variants == ("GB", "US")
        assert group.locales == (LocaleId("en"), LocaleId("en", "GB"), LocaleId("en", "US"))

    def test_without_default(self) -> None:
        group = LocaleGroup("fr", ("CA",))
        assert not group.has_default
        assert group.region_variants == ("CA",)


class TestGroupLocales:
    """Test grouping without fallback checks."""

    def test_groups_sorted_default_first(self) -> None:
        groups = group_locales(
            [LocaleId("fr"), LocaleId("en", "US"), LocaleId("en"), LocaleId("en", "GB")]
        )
        assert list(groups) == ["en", "fr"]
        assert groups["en"].regions == (None, "GB", "US")
        assert groups["fr"].regions == (None,)

    def test_incomplete_group_kept(self) -> None:
        groups = group_locales([LocaleId("fr", "CA")])
        assert groups["fr"].regions == ("CA",)

    def test_empty(self) -> None:
        assert group_locales([]) == {}


class TestRequireFallbacks:
    """Test the language-default requirement."""

    def test_missing_default_fails(self) -> None:
        groups = group_locales([LocaleId("en"), LocaleId("fr", "US"), LocaleId("fr", "GB")])
        with pytest.raises(MissingFallbackLocaleError) as exc_info:
            require_fallbacks(groups, "locale-input")
        error = exc_info.value
        assert error.language == "fr"
        assert error.regions == ("GB", "US")
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.MISSING_FALLBACK_LOCALE
        assert "'fr'" in error.diagnostic.message
        assert error.diagnostic.hint == "Add fr.json in locale-input"

    def test_first_offending_language_reported(self) -> None:
        groups = group_locales([LocaleId("pt", "BR"), LocaleId("es", "419")])
        with pytest.raises(MissingFallbackLocaleError) as exc_info:
            require_fallbacks(groups)
        assert exc_info.value.language == "es"

    def test_build_with_default_succeeds(self) -> None:
        groups = build_locale_groups(
            [LocaleId("fr", "US"), LocaleId("fr"), LocaleId("fr", "GB")]
        )
        assert groups["fr"].regions == (None, "GB", "US")


class TestGroupingProperties:
    """Property tests over generated locale sets."""

    @given(locales=locale_group_sets())
    def test_default_first_then_sorted_regions(self, locales: list[LocaleId]) -> None:
        """PROPERTY: groups start with None and list regions in sorted order."""
        groups = build_locale_groups(locales)
        for group in groups.values():
            assert group.regions[0] is None
            assert list(group.region_variants) == sorted(group.region_variants)

    @given(locales=locale_group_sets())
    def test_every_locale_in_exactly_one_group(self, locales: list[LocaleId]) -> None:
        """PROPERTY: grouping neither drops nor duplicates locales."""
        groups = group_locales(locales)
        grouped = [locale for group in groups.values() for locale in group.locales]
        assert sorted(grouped, key=LocaleId.sort_key) == sorted(locales, key=LocaleId.sort_key)
        assert list(groups) == sorted(groups)

    @given(locales=locale_group_sets(with_defaults=False))
    def test_missing_defaults_always_rejected(self, locales: list[LocaleId]) -> None:
        """PROPERTY: a region without its language-default never passes."""
        event(f"languages={len({locale.language for locale in locales})}")
        with pytest.raises(MissingFallbackLocaleError):
            build_locale_groups(locales)
