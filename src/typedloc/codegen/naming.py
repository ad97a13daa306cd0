"""Deterministic names for generated classes, modules, and functions.

The dispatcher references classes by name without storing them, so every
name is a pure function of the class prefix and the locale.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typedloc.constants import DEFAULT_CLASS_PREFIX
from typedloc.core.identifier_validation import is_valid_class_prefix, title_subtag

if TYPE_CHECKING:
    from typedloc.locale_utils import LocaleId

__all__ = ["NamingScheme"]


@dataclass(frozen=True, slots=True)
class NamingScheme:
    """Names derived from the namespace token.

    Example:
        >>> naming = NamingScheme("L10n")
        >>> naming.class_name(LocaleId("en", "US"))
        'L10nEnUs'
        >>> naming.language_module("en")
        'l10n_en'
    """

    prefix: str = DEFAULT_CLASS_PREFIX

    def __post_init__(self) -> None:
        if not is_valid_class_prefix(self.prefix):
            msg = f"Class prefix must be an ASCII identifier, got {self.prefix!r}"
            raise ValueError(msg)

    @property
    def base_class(self) -> str:
        """Abstract base class: L10n."""
        return self.prefix

    @property
    def delegate_class(self) -> str:
        """Localization delegate class: L10nDelegate."""
        return f"{self.prefix}Delegate"

    @property
    def aggregate_module(self) -> str:
        """Module holding the base class and dispatcher: l10n."""
        return self.prefix.lower()

    @property
    def lookup_function(self) -> str:
        """Dispatcher function: lookup_l10n."""
        return f"lookup_{self.aggregate_module}"

    def class_name(self, locale: LocaleId) -> str:
        """Class for a locale: title-cased language then region."""
        name = self.prefix + title_subtag(locale.language)
        if locale.region is not None:
            name += title_subtag(locale.region)
        return name

    def language_module(self, language: str) -> str:
        """Module bundling one language's classes: l10n_en."""
        return f"{self.aggregate_module}_{language}"

    def file_name(self, module: str) -> str:
        return f"{module}.py"
