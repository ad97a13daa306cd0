"""Identifier rules for generated Python source.

This module provides the single source of truth for the names the code
generator emits: accessor properties derived from translation keys, class
names derived from locales, and module names derived from languages.

Accessor Grammar:
    A Python identifier in NFKC form that is not a keyword, does not start with '_'
    and is not a reserved attribute of the generated base class.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import unicodedata

from typedloc.constants import RESERVED_ACCESSOR_NAMES

__all__ = [
    "is_valid_accessor_name",
    "is_valid_class_prefix",
    "title_subtag",
]


def is_valid_accessor_name(name: str) -> bool:
    """Check if a translation key can be emitted as a property name.

    Args:
        name: Translation key

    Returns:
        True if the key is usable as a generated accessor

    Example:
        >>> is_valid_accessor_name("welcome_title")
        True
        >>> is_valid_accessor_name("class")
        False
        >>> is_valid_accessor_name("\ufb01le")  # compiles to "file"
        False
        >>> is_valid_accessor_name("welcome-title")
        False
    """
    return (
        name.isidentifier()
        and unicodedata.normalize("NFKC", name) == name
        and not keyword.iskeyword(name)
        and not name.startswith("_")
        and name not in RESERVED_ACCESSOR_NAMES
    )


def is_valid_class_prefix(prefix: str) -> bool:
    """Check if a namespace token can start generated class names.

    The prefix doubles as the aggregate module name in lowercase, so it is
    restricted to ASCII.

    Example:
        >>> is_valid_class_prefix("L10n")
        True
        >>> is_valid_class_prefix("9Strings")
        False
    """
    return (
        prefix.isascii()
        and prefix.isidentifier()
        and not keyword.iskeyword(prefix.lower())
        and not prefix.startswith("_")
    )


def title_subtag(subtag: str) -> str:
    """Uppercase first character and lowercase the rest.

    Example:
        >>> title_subtag("en")
        'En'
        >>> title_subtag("US")
        'Us'
    """
    return subtag[:1].upper() + subtag[1:].lower()
