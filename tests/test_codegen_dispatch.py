"""Tests for codegen/dispatch.py: dispatch table and aggregate module.

Python 3.13+.
"""

from __future__ import annotations

import ast

import pytest
from hypothesis import given

from tests.strategies import locale_group_sets
from typedloc.catalog.grouping import build_locale_groups
from typedloc.codegen.dispatch import (
    DispatchTable,
    build_dispatch_table,
    render_aggregate_module,
    render_lookup_body,
    render_package_init,
)
from typedloc.codegen.naming import NamingScheme
from typedloc.diagnostics import DiagnosticCode, UnsupportedLocaleError
from typedloc.locale_utils import LocaleId

_NAMING = NamingScheme()


def _table(*locales: LocaleId) -> DispatchTable:
    return build_dispatch_table(build_locale_groups(locales), _NAMING)


class TestDispatchTable:
    """Test resolution semantics."""

    def test_exact_match_wins(self) -> None:
        table = _table(LocaleId("en"), LocaleId("en", "US"))
        assert table.resolve("en", "US").class_name == "L10nEnUs"
        assert table.resolve("en", "US").module_name == "l10n_en"

    def test_language_fallback(self) -> None:
        table = _table(LocaleId("en"), LocaleId("en", "US"))
        assert table.resolve("en", "GB").class_name == "L10nEn"
        assert table.resolve("en").class_name == "L10nEn"

    def test_unsupported_language(self) -> None:
        table = _table(LocaleId("en"))
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            table.resolve("fr", "CA")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.UNSUPPORTED_LOCALE
        assert exc_info.value.diagnostic.locale_code == "fr_CA"

    def test_resolve_locale_string(self) -> None:
        table = _table(LocaleId("pt"), LocaleId("pt", "BR"))
        assert table.resolve_locale("pt-br").class_name == "L10nPtBr"
        assert table.resolve_locale("PT").class_name == "L10nPt"

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [
            ("en_US.UTF-8", "L10nEnUs"),
            ("en-us.utf8", "L10nEnUs"),
            ("en_GB.UTF-8", "L10nEn"),
            ("en.UTF-8", "L10nEn"),
        ],
    )
    def test_resolve_locale_drops_encoding(self, requested: str, expected: str) -> None:
        table = _table(LocaleId("en"), LocaleId("en", "US"))
        assert table.resolve_locale(requested).class_name == expected
        assert table.is_supported(requested)

    def test_supported_enumeration(self) -> None:
        table = _table(LocaleId("fr"), LocaleId("en", "US"), LocaleId("en"))
        assert table.supported_locales == (("en", None), ("en", "US"), ("fr", None))
        assert table.supported_languages == ("en", "fr")

    def test_is_supported_ignores_region(self) -> None:
        table = _table(LocaleId("en"))
        assert table.is_supported("en")
        assert table.is_supported("en-AU")
        assert not table.is_supported("de")

    @given(locales=locale_group_sets())
    def test_resolution_properties(self, locales: list[LocaleId]) -> None:
        """PROPERTY: every supported locale resolves to its own class."""
        table = _table(*locales)
        for locale in locales:
            assert table.resolve(locale.language, locale.region).locale == locale
        for language in table.supported_languages:
            assert table.resolve(language, "ZZ").locale == LocaleId(language)


class TestRenderLookupBody:
    """Test the emitted match statements."""

    def test_region_match_before_language_match(self) -> None:
        body = render_lookup_body(_table(LocaleId("en"), LocaleId("en", "US")))
        assert body.index("match (language, region):") < body.index("match language:")
        assert "case ('en', 'US'):" in body
        assert "from .l10n_en import L10nEnUs" in body
        assert "case 'en':" in body

    def test_region_match_omitted_without_variants(self) -> None:
        body = render_lookup_body(_table(LocaleId("en"), LocaleId("fr")))
        assert "match (language, region)" not in body
        assert body.count("case ") == 2


class TestRenderAggregateModule:
    """Test the aggregate module text."""

    def test_compiles_and_declares_api(self) -> None:
        table = _table(LocaleId("en"), LocaleId("en", "US"), LocaleId("es", "419"), LocaleId("es"))
        source = render_aggregate_module(table, ("title", "body"), _NAMING)
        tree = ast.parse(source)

        classes = {node.name for node in tree.body if isinstance(node, ast.ClassDef)}
        functions = {node.name for node in tree.body if isinstance(node, ast.FunctionDef)}
        assert {"L10n", "L10nDelegate", "UnsupportedLocaleError"} <= classes
        assert {"is_supported", "lookup_l10n"} <= functions
        assert "('es', '419')," in source
        assert "Supported locales: en, en_US, es, es_419." in source

    def test_custom_prefix(self) -> None:
        naming = NamingScheme("Strings")
        table = build_dispatch_table(build_locale_groups([LocaleId("de")]), naming)
        source = render_aggregate_module(table, ("title",), naming)
        compile(source, "strings.py", "exec")
        assert "class Strings(ABC):" in source
        assert "def lookup_strings(locale: str) -> Strings:" in source
        assert "class StringsDelegate:" in source

    def test_package_init(self) -> None:
        source = render_package_init(_NAMING)
        compile(source, "__init__.py", "exec")
        assert "from .l10n import (" in source
        assert "lookup_l10n," in source
