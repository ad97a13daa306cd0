"""Diagnostic system for generator errors.

Provides structured error diagnostics with codes, hints, and source paths.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogError,
    ConfigError,
    DuplicateLocaleError,
    InvalidKeyError,
    InvalidLanguageError,
    InvalidRegionError,
    InvalidTranslationFileError,
    LocaleError,
    MissingFallbackLocaleError,
    MissingFileError,
    MissingInputDirectoryError,
    MissingKeyError,
    MissingTemplateError,
    OutputWriteError,
    SourceIOError,
    TypedlocError,
    UnknownKeyError,
    UnsupportedLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "ConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateLocaleError",
    "ErrorTemplate",
    "InvalidKeyError",
    "InvalidLanguageError",
    "InvalidRegionError",
    "InvalidTranslationFileError",
    "LocaleError",
    "MissingFallbackLocaleError",
    "MissingFileError",
    "MissingInputDirectoryError",
    "MissingKeyError",
    "MissingTemplateError",
    "OutputFormat",
    "OutputWriteError",
    "SourceIOError",
    "TypedlocError",
    "UnknownKeyError",
    "UnsupportedLocaleError",
]
