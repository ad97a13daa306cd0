"""Source skeletons for generated modules.

Each skeleton is a string.Template with named ${slot} placeholders.
Substitution is single-pass, so text inserted into one slot is never
rescanned for another. Literal dollar signs in skeletons must be written
as $$.

Python 3.13+. Zero external dependencies.
"""

from string import Template

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "render",
    # Class level
    "CLASS_TEMPLATE",
    "MEMBER_TEMPLATE",
    "ABSTRACT_MEMBER_TEMPLATE",
    # Module level
    "LANGUAGE_MODULE_TEMPLATE",
    "AGGREGATE_MODULE_TEMPLATE",
    "PACKAGE_INIT_TEMPLATE",
    # Dispatch fragments
    "REGION_CASE_TEMPLATE",
    "LANGUAGE_CASE_TEMPLATE",
]


def render(template: Template, **slots: str) -> str:
    """Fill every slot of a skeleton.

    Raises:
        KeyError: If the skeleton names a slot that was not provided
    """
    return template.substitute(slots)


# ============================================================================
# CLASS LEVEL
# ============================================================================

CLASS_TEMPLATE = Template('''\
class ${name}(${parent}):
    """${docstring}"""

    def __init__(self${parameters}) -> None:
        super().__init__(${arguments})
${members}''')

MEMBER_TEMPLATE = Template('''
    @property
    def ${key}(self) -> str:
        return ${literal}
''')

ABSTRACT_MEMBER_TEMPLATE = Template('''
    @property
    @abstractmethod
    def ${key}(self) -> str:
        """Translation for ``${key}``."""
''')

# ============================================================================
# MODULE LEVEL
# ============================================================================

LANGUAGE_MODULE_TEMPLATE = Template('''\
"""${header}

Translations for ${language_name} (``${language}``).
"""

from __future__ import annotations

from .${module} import ${base}

__all__ = [
${exports}]


${classes}''')

AGGREGATE_MODULE_TEMPLATE = Template('''\
"""${header}

Supported locales: ${locale_list}.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_LOCALES",
    "${base}",
    "${delegate}",
    "UnsupportedLocaleError",
    "is_supported",
    "${lookup}",
]

SUPPORTED_LOCALES: tuple[tuple[str, str | None], ...] = (
${supported_locales})

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({${supported_languages}})


class UnsupportedLocaleError(LookupError):
    """Raised when no generated class matches the requested locale."""


def _split_locale(locale: str) -> tuple[str, str | None]:
    """Split 'en-US', 'en_us' or 'en_US.UTF-8' into ('en', 'US')."""
    code = locale.split(".", 1)[0].replace("-", "_")
    language, _, region = code.partition("_")
    return language.lower(), region.upper() or None


class ${base}(ABC):
    """Accessors shared by every generated translation class."""

    def __init__(self, locale_name: str) -> None:
        language, region = _split_locale(locale_name)
        self.locale_name = language if region is None else f"{language}_{region}"
${abstract_members}

def is_supported(language: str) -> bool:
    """Return True if translations exist for the language of a locale."""
    return _split_locale(language)[0] in SUPPORTED_LANGUAGES


def ${lookup}(locale: str) -> ${base}:
    """Return the translations for a locale.

    An exact language and region match wins; otherwise the
    language-default translations are returned.

    Raises:
        UnsupportedLocaleError: If the language is not supported
    """
    language, region = _split_locale(locale)
${lookup_body}
    raise UnsupportedLocaleError(
        f"${lookup}() failed to load translations for the locale {locale!r}. "
        "This is likely because the locale is not supported by the application. "
        "Check that the locale is listed in SUPPORTED_LOCALES."
    )


class ${delegate}:
    """Localization delegate resolving locales to generated translations."""

    supported_locales: tuple[tuple[str, str | None], ...] = SUPPORTED_LOCALES

    def is_supported(self, locale: str) -> bool:
        return is_supported(locale)

    def load(self, locale: str) -> ${base}:
        return ${lookup}(locale)
''')

PACKAGE_INIT_TEMPLATE = Template('''\
"""${header}"""

from .${module} import (
    SUPPORTED_LANGUAGES,
    SUPPORTED_LOCALES,
    UnsupportedLocaleError,
    ${base},
    ${delegate},
    is_supported,
    ${lookup},
)

__all__ = [
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_LOCALES",
    "${base}",
    "${delegate}",
    "UnsupportedLocaleError",
    "is_supported",
    "${lookup}",
]
''')

# ============================================================================
# DISPATCH FRAGMENTS
# ============================================================================

REGION_CASE_TEMPLATE = Template('''\
        case (${language}, ${region}):
            from .${module} import ${name}

            return ${name}()
''')

LANGUAGE_CASE_TEMPLATE = Template('''\
        case ${language}:
            from .${module} import ${name}

            return ${name}()
''')
