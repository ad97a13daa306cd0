"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for generator failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale identifier errors (parsing, table lookup)
        2000-2999: Catalog errors (template schema, fallbacks, keys)
        3000-3999: I/O errors (input discovery, output writing)
        4000-4999: Configuration errors
        5000-5999: Dispatch errors
    """

    # Locale identifier errors (1000-1999)
    INVALID_LANGUAGE = 1001
    INVALID_REGION = 1002
    DUPLICATE_LOCALE = 1003

    # Catalog errors (2000-2999)
    MISSING_TEMPLATE = 2001
    MISSING_FALLBACK_LOCALE = 2002
    UNKNOWN_KEY = 2003
    MISSING_KEY = 2004
    INVALID_KEY = 2005
    INVALID_TRANSLATION_FILE = 2006

    # I/O errors (3000-3999)
    MISSING_INPUT_DIRECTORY = 3001
    MISSING_FILE = 3002
    OUTPUT_WRITE_FAILED = 3003

    # Configuration errors (4000-4999)
    INVALID_CONFIG = 4001

    # Dispatch errors (5000-5999)
    UNSUPPORTED_LOCALE = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: Input or output file the error refers to
        locale_code: Locale the error refers to
        key: Translation key the error refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    locale_code: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_KEY]: Key 'extra' not found in template
              --> locale-input/es.json
              = help: Add 'extra' to the template file or remove it from this file

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
