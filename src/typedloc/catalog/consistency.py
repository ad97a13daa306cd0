"""Key-set consistency checks against the template locale.

The template locale's keys form the authoritative schema. Every other
translation set may only use keys from it, and language-default sets must
define all of them because their generated classes implement the full
abstract base. Region variants are sparse overrides and may omit keys.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typedloc.core.identifier_validation import is_valid_accessor_name
from typedloc.diagnostics import (
    ErrorTemplate,
    InvalidKeyError,
    MissingKeyError,
    UnknownKeyError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from typedloc.catalog.loading import TranslationSet
    from typedloc.locale_utils import LocaleId

__all__ = [
    "TemplateKeySet",
    "check_key_coverage",
    "check_key_subset",
    "validate_translation_sets",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TemplateKeySet:
    """Ordered key schema declared by the template locale.

    Attributes:
        locale: Template locale
        source_path: Template file
        keys: Keys in template file order
    """

    locale: LocaleId
    source_path: Path
    keys: tuple[str, ...]

    @classmethod
    def from_translation_set(cls, template: TranslationSet) -> TemplateKeySet:
        """Build the schema from the template's translation set.

        Raises:
            InvalidKeyError: If a key cannot be emitted as an accessor name
        """
        for key in template.keys:
            if not is_valid_accessor_name(key):
                raise InvalidKeyError(
                    ErrorTemplate.invalid_key(key, str(template.source_path)),
                    key=key,
                    source_path=str(template.source_path),
                )
        return cls(locale=template.locale, source_path=template.source_path, keys=template.keys)

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)


def check_key_subset(template: TemplateKeySet, candidate: TranslationSet) -> None:
    """Require every candidate key to be declared by the template.

    Raises:
        UnknownKeyError: Naming the first offending key in candidate order
    """
    known = frozenset(template.keys)
    for key in candidate.keys:
        if key not in known:
            raise UnknownKeyError(
                ErrorTemplate.unknown_key(key, str(candidate.source_path)),
                key=key,
                source_path=str(candidate.source_path),
            )


def check_key_coverage(template: TemplateKeySet, candidate: TranslationSet) -> None:
    """Require a language-default set to define every template key.

    Raises:
        MissingKeyError: Naming the first missing key in template order
    """
    present = frozenset(candidate.keys)
    for key in template.keys:
        if key not in present:
            raise MissingKeyError(
                ErrorTemplate.missing_key(key, str(candidate.source_path)),
                key=key,
                source_path=str(candidate.source_path),
            )


def validate_translation_sets(
    template: TemplateKeySet, translation_sets: Iterable[TranslationSet]
) -> None:
    """Check every translation set against the template schema.

    Raises:
        UnknownKeyError: If any set uses a key outside the template
        MissingKeyError: If a language-default set omits a template key
    """
    for translation_set in translation_sets:
        check_key_subset(template, translation_set)
        if translation_set.locale.is_language_default:
            check_key_coverage(template, translation_set)
        logger.debug(
            "Keys of %s consistent with template %s",
            translation_set.locale,
            template.locale,
        )
