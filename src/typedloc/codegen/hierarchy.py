"""Class hierarchy synthesis.

Emits a fixed two-level override hierarchy below the abstract base:

    L10n (abstract base, one abstract property per template key)
      L10nEn (language-default, every key)
        L10nEnUs (region-variant, only its own keys)

Region variants inherit every key they do not override from their
language-default class, so the generated text stays small and canonical
translations live in one place.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from typedloc.codegen.templates import (
    ABSTRACT_MEMBER_TEMPLATE,
    CLASS_TEMPLATE,
    LANGUAGE_MODULE_TEMPLATE,
    MEMBER_TEMPLATE,
    render,
)
from typedloc.constants import GENERATED_HEADER
from typedloc.locale_utils import LocaleId

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typedloc.catalog.grouping import LocaleGroup
    from typedloc.catalog.loading import TranslationSet
    from typedloc.codegen.naming import NamingScheme
    from typedloc.locale_utils import ReferenceData

__all__ = [
    "GeneratedClass",
    "render_abstract_members",
    "render_class",
    "render_language_module",
    "resolve_member",
    "synthesize_class",
    "synthesize_hierarchy",
]

logger = logging.getLogger(__name__)

# Region-variant -> language-default; the abstract base holds no values.
_MAX_RESOLUTION_HOPS = 2


@dataclass(frozen=True, slots=True)
class GeneratedClass:
    """One emitted accessor class.

    Attributes:
        name: Class name
        parent_name: Base class name
        locale: Locale the class translates
        members: Own key -> literal value, in translation file order
    """

    name: str
    parent_name: str
    locale: LocaleId
    members: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @property
    def is_language_default(self) -> bool:
        return self.locale.is_language_default


def synthesize_class(translation_set: TranslationSet, naming: NamingScheme) -> GeneratedClass:
    """Decide name, parent, and members for one locale.

    A language-default class extends the abstract base; a region-variant
    extends its language-default class. Members are exactly the set's keys.
    """
    locale = translation_set.locale
    if locale.is_language_default:
        parent = naming.base_class
    else:
        parent = naming.class_name(LocaleId(locale.language))
    return GeneratedClass(
        name=naming.class_name(locale),
        parent_name=parent,
        locale=locale,
        members=translation_set.entries,
    )


def synthesize_hierarchy(
    groups: Mapping[str, LocaleGroup],
    translation_sets: Mapping[LocaleId, TranslationSet],
    naming: NamingScheme,
) -> dict[str, tuple[GeneratedClass, ...]]:
    """Synthesize every class, bundled per language.

    Args:
        groups: Fallback-checked locale groups
        translation_sets: Loaded set for every locale of every group
        naming: Naming scheme

    Returns:
        Language -> classes, language-default first then region variants
    """
    hierarchy: dict[str, tuple[GeneratedClass, ...]] = {}
    for language, group in groups.items():
        classes = []
        for locale in group.locales:
            generated = synthesize_class(translation_sets[locale], naming)
            classes.append(generated)
            logger.info("Generated %s", locale)
        hierarchy[language] = tuple(classes)
    return hierarchy


def resolve_member(
    classes: Mapping[str, GeneratedClass], class_name: str, key: str
) -> str | None:
    """Find the value a class returns for a key.

    Looks at the class itself, then at most one ancestor. The abstract
    base never provides values.

    Args:
        classes: Class name -> GeneratedClass registry
        class_name: Class to start from
        key: Accessor name

    Returns:
        Translated string, or None if no class in the chain defines the key
    """
    current = classes.get(class_name)
    for _ in range(_MAX_RESOLUTION_HOPS):
        if current is None:
            return None
        if key in current.members:
            return current.members[key]
        current = classes.get(current.parent_name)
    return None


def render_abstract_members(keys: Iterable[str]) -> str:
    """Abstract property declarations for the base class."""
    return "".join(render(ABSTRACT_MEMBER_TEMPLATE, key=key) for key in keys)


def render_class(generated: GeneratedClass, reference: ReferenceData) -> str:
    """Render one class definition.

    A language-default constructor takes an optional locale name defaulting
    to the bare language; a region-variant constructor takes nothing and
    forwards its canonical locale to the language-default.
    """
    locale = generated.locale
    if generated.is_language_default:
        parameters = f", locale_name: str = {locale.language!r}"
        arguments = "locale_name"
    else:
        parameters = ""
        arguments = repr(locale.canonical)

    members = "".join(
        render(MEMBER_TEMPLATE, key=key, literal=repr(value))
        for key, value in generated.members.items()
    )
    return render(
        CLASS_TEMPLATE,
        name=generated.name,
        parent=generated.parent_name,
        docstring=f"The translation for {reference.describe(locale)} (``{locale}``).",
        parameters=parameters,
        arguments=arguments,
        members=members,
    )


def render_language_module(
    language: str,
    classes: Iterable[GeneratedClass],
    naming: NamingScheme,
    reference: ReferenceData,
) -> str:
    """Render the module bundling one language's classes."""
    classes = tuple(classes)
    exports = "".join(f"    {generated.name!r},\n" for generated in classes)
    return render(
        LANGUAGE_MODULE_TEMPLATE,
        header=GENERATED_HEADER,
        language_name=reference.language_name(language),
        language=language,
        module=naming.aggregate_module,
        base=naming.base_class,
        exports=exports,
        classes="\n\n".join(render_class(generated, reference) for generated in classes),
    )
