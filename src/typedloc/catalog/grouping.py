"""Locale grouping and language-default fallback resolution.

Groups validated locales by language. A language with region variants but
no unqualified file leaves the dispatcher a language branch with no class
to fall back to, so every group must contain the language-default.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typedloc.constants import DEFAULT_INPUT_DIR
from typedloc.diagnostics import ErrorTemplate, MissingFallbackLocaleError
from typedloc.locale_utils import LocaleId

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "LocaleGroup",
    "build_locale_groups",
    "group_locales",
    "require_fallbacks",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleGroup:
    """Region tags present for one language.

    None is the sentinel for the language-default and, when present, is
    always the first entry; region codes follow in sorted order.

    Attributes:
        language: Language code shared by the group
        regions: Region tags, None for the language-default
    """

    language: str
    regions: tuple[str | None, ...]

    @property
    def has_default(self) -> bool:
        """True when the group contains a language-default locale."""
        return None in self.regions

    @property
    def region_variants(self) -> tuple[str, ...]:
        """Region codes without the sentinel."""
        return tuple(region for region in self.regions if region is not None)

    @property
    def locales(self) -> tuple[LocaleId, ...]:
        """Locales of the group, language-default first."""
        return tuple(LocaleId(self.language, region) for region in self.regions)


def group_locales(locales: Iterable[LocaleId]) -> dict[str, LocaleGroup]:
    """Group locales by language without checking fallbacks.

    Args:
        locales: Validated locales in any order

    Returns:
        Language -> LocaleGroup, ordered by language
    """
    collected: dict[str, set[str | None]] = {}
    for locale in locales:
        collected.setdefault(locale.language, set()).add(locale.region)

    groups: dict[str, LocaleGroup] = {}
    for language in sorted(collected):
        tags = collected[language]
        regions = sorted(tag for tag in tags if tag is not None)
        ordered: tuple[str | None, ...] = (None, *regions) if None in tags else tuple(regions)
        groups[language] = LocaleGroup(language=language, regions=ordered)
        logger.debug("Grouped %s: %s", language, ordered)
    return groups


def require_fallbacks(
    groups: Mapping[str, LocaleGroup], input_dir: str = DEFAULT_INPUT_DIR
) -> None:
    """Fail on the first group lacking a language-default.

    Args:
        groups: Groups from group_locales()
        input_dir: Input directory, named in the hint

    Raises:
        MissingFallbackLocaleError: Naming the language and its regions
    """
    for language, group in groups.items():
        if not group.has_default:
            raise MissingFallbackLocaleError(
                ErrorTemplate.missing_fallback_locale(
                    language, group.region_variants, input_dir
                ),
                language=language,
                regions=group.region_variants,
            )


def build_locale_groups(
    locales: Iterable[LocaleId], input_dir: str = DEFAULT_INPUT_DIR
) -> dict[str, LocaleGroup]:
    """Group locales and require a language-default in every group."""
    groups = group_locales(locales)
    require_fallbacks(groups, input_dir)
    return groups
