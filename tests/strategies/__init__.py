"""Hypothesis strategies for typedloc property-based testing.

Usage:
    from tests.strategies import raw_locale_codes, key_sets
"""

from .locales import (
    LANGUAGE_POOL,
    REGION_POOL,
    accessor_keys,
    key_sets,
    locale_group_sets,
    raw_locale_codes,
)

__all__ = [
    "LANGUAGE_POOL",
    "REGION_POOL",
    "accessor_keys",
    "key_sets",
    "locale_group_sets",
    "raw_locale_codes",
]
