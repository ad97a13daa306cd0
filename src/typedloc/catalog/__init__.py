"""Translation catalog: loading, schema consistency, and locale grouping.

Submodules:
    loading     - TranslationLoader protocol, JsonTranslationLoader,
                  LocaleFile, TranslationSet, discovery
    consistency - TemplateKeySet and key subset/coverage checks
    grouping    - LocaleGroup and language-default fallback resolution

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from typedloc.catalog.consistency import (
    TemplateKeySet,
    check_key_coverage,
    check_key_subset,
    validate_translation_sets,
)
from typedloc.catalog.grouping import (
    LocaleGroup,
    build_locale_groups,
    group_locales,
    require_fallbacks,
)
from typedloc.catalog.loading import (
    JsonTranslationLoader,
    LocaleFile,
    TranslationLoader,
    TranslationSet,
    discover_locale_files,
    load_translation_set,
    select_template,
)

__all__ = [
    # Loading
    "TranslationLoader",
    "JsonTranslationLoader",
    "LocaleFile",
    "TranslationSet",
    "discover_locale_files",
    "select_template",
    "load_translation_set",
    # Consistency
    "TemplateKeySet",
    "check_key_subset",
    "check_key_coverage",
    "validate_translation_sets",
    # Grouping
    "LocaleGroup",
    "group_locales",
    "require_fallbacks",
    "build_locale_groups",
]
