"""Tests for catalog/consistency.py: template schema and key checks.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import accessor_keys, key_sets
from typedloc.catalog.consistency import (
    TemplateKeySet,
    check_key_coverage,
    check_key_subset,
    validate_translation_sets,
)
from typedloc.catalog.loading import TranslationSet
from typedloc.diagnostics import (
    DiagnosticCode,
    InvalidKeyError,
    MissingKeyError,
    UnknownKeyError,
)
from typedloc.locale_utils import LocaleId

_DIR = Path("locale-input")


def _set(locale: LocaleId, entries: dict[str, str]) -> TranslationSet:
    return TranslationSet(locale, _DIR / f"{locale}.json", entries)


def _template(*keys: str) -> TemplateKeySet:
    return TemplateKeySet.from_translation_set(_set(LocaleId("en"), dict.fromkeys(keys, "x")))


class TestTemplateKeySet:
    """Test schema construction."""

    def test_keeps_template_order(self) -> None:
        template = _template("title", "body", "footer")
        assert template.keys == ("title", "body", "footer")
        assert list(template) == ["title", "body", "footer"]
        assert len(template) == 3
        assert "body" in template
        assert "missing" not in template

    @pytest.mark.parametrize(
        "key",
        ["class", "with-dash", "1st", "_private", "locale_name", "has space", "", "\ufb01le"],
    )
    def test_invalid_accessor_names(self, key: str) -> None:
        with pytest.raises(InvalidKeyError) as exc_info:
            _template("ok", key)
        assert exc_info.value.key == key
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_KEY

    def test_compatibility_form_colliding_with_ascii_key(self) -> None:
        """The ligature key compiles to the identifier 'file' and would shadow it."""
        with pytest.raises(InvalidKeyError) as exc_info:
            _template("file", "\ufb01le")
        assert exc_info.value.key == "\ufb01le"

    def test_soft_keywords_allowed(self) -> None:
        assert _template("match", "case", "type").keys == ("match", "case", "type")


class TestCheckKeySubset:
    """Test the subset-of-template rule."""

    def test_fewer_keys_accepted(self) -> None:
        check_key_subset(_template("a", "b"), _set(LocaleId("en", "US"), {"a": "US1"}))

    def test_unknown_key_cites_key_and_file(self) -> None:
        candidate = _set(LocaleId("es"), {"a": "1", "b": "2", "extra": "3"})
        with pytest.raises(UnknownKeyError) as exc_info:
            check_key_subset(_template("a", "b"), candidate)
        assert exc_info.value.key == "extra"
        assert exc_info.value.source_path == str(_DIR / "es.json")
        assert "extra" in str(exc_info.value)
        assert "es.json" in str(exc_info.value)

    def test_first_offending_key_in_candidate_order(self) -> None:
        candidate = _set(LocaleId("fr"), {"zeta": "1", "a": "2", "alpha": "3"})
        with pytest.raises(UnknownKeyError) as exc_info:
            check_key_subset(_template("a"), candidate)
        assert exc_info.value.key == "zeta"

    @given(keys=key_sets(min_size=1), data=st.data())
    def test_subsets_always_pass(self, keys: list[str], data: st.DataObject) -> None:
        """PROPERTY: any subset of the template keys passes."""
        subset = data.draw(st.lists(st.sampled_from(keys), unique=True))
        event(f"subset_ratio={'full' if len(subset) == len(keys) else 'partial'}")
        check_key_subset(_template(*keys), _set(LocaleId("fr", "CA"), dict.fromkeys(subset, "v")))

    @given(keys=key_sets(min_size=1), extra=accessor_keys())
    def test_foreign_key_always_fails(self, keys: list[str], extra: str) -> None:
        """PROPERTY: a key outside the template fails with UnknownKeyError."""
        if extra in keys:
            return
        candidate = _set(LocaleId("fr"), {**dict.fromkeys(keys, "v"), extra: "v"})
        with pytest.raises(UnknownKeyError) as exc_info:
            check_key_subset(_template(*keys), candidate)
        assert exc_info.value.key == extra


class TestCheckKeyCoverage:
    """Test the language-default completeness rule."""

    def test_complete_set_passes(self) -> None:
        check_key_coverage(_template("a", "b"), _set(LocaleId("fr"), {"b": "2", "a": "1"}))

    def test_missing_key_reported_in_template_order(self) -> None:
        with pytest.raises(MissingKeyError) as exc_info:
            check_key_coverage(_template("a", "b", "c"), _set(LocaleId("fr"), {"a": "1"}))
        assert exc_info.value.key == "b"


class TestValidateTranslationSets:
    """Test the combined validation pass."""

    def test_region_variant_may_be_sparse(self) -> None:
        template = _template("a", "b")
        validate_translation_sets(
            template,
            [
                _set(LocaleId("en"), {"a": "1", "b": "2"}),
                _set(LocaleId("en", "US"), {"a": "US1"}),
                _set(LocaleId("en", "GB"), {}),
            ],
        )

    def test_language_default_must_be_complete(self) -> None:
        with pytest.raises(MissingKeyError):
            validate_translation_sets(
                _template("a", "b"),
                [_set(LocaleId("en"), {"a": "1", "b": "2"}), _set(LocaleId("fr"), {"a": "1"})],
            )

    def test_unknown_key_reported_before_missing_key(self) -> None:
        with pytest.raises(UnknownKeyError):
            validate_translation_sets(
                _template("a", "b"), [_set(LocaleId("es"), {"a": "1", "extra": "2"})]
            )
