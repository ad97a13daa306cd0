"""Shared constants for typedloc.

Constants are grouped by domain:
- Configuration defaults: Used when no configuration value is provided
- Locale format: Canonical separator and accepted input separators
- Input limits: DoS prevention via size constraints
- Generated code: Reserved names and file naming

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Configuration defaults
    "DEFAULT_INPUT_DIR",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_TEMPLATE",
    "DEFAULT_CLASS_PREFIX",
    "DEFAULT_DISPLAY_LOCALE",
    "CONFIG_TABLE",
    # Locale format
    "LOCALE_SEPARATOR",
    "LOCALE_INPUT_SEPARATORS",
    # Input limits
    "TRANSLATION_FILE_SUFFIX",
    "MAX_SOURCE_SIZE",
    # Generated code
    "RESERVED_ACCESSOR_NAMES",
    "GENERATED_HEADER",
]

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

DEFAULT_INPUT_DIR: str = "locale-input"
DEFAULT_OUTPUT_DIR: str = "locale-output"

# Template locale; the ".json" suffix is optional in configuration.
DEFAULT_TEMPLATE: str = "en"

# Namespace token prefixed to every generated class name (L10nEn, L10nEnUs).
# The aggregate module is named after it in lowercase (l10n.py).
DEFAULT_CLASS_PREFIX: str = "L10n"

# Locale used for language/region display names in generated docstrings.
DEFAULT_DISPLAY_LOCALE: str = "en"

# pyproject.toml table holding generator settings: [tool.typedloc]
CONFIG_TABLE: str = "typedloc"

# ============================================================================
# LOCALE FORMAT
# ============================================================================

# Canonical form joins lowercase language and uppercase region: en_US
LOCALE_SEPARATOR: str = "_"

# File names may use either BCP-47 (en-US) or POSIX (en_US) separators.
LOCALE_INPUT_SEPARATORS: tuple[str, ...] = ("-", "_")

# ============================================================================
# INPUT LIMITS
# ============================================================================

TRANSLATION_FILE_SUFFIX: str = ".json"

# Maximum translation file size in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# GENERATED CODE
# ============================================================================

# Attribute set by the generated abstract base; keys may not shadow it.
RESERVED_ACCESSOR_NAMES: frozenset[str] = frozenset({"locale_name"})

GENERATED_HEADER: str = "Generated by typedloc. Do not edit."
