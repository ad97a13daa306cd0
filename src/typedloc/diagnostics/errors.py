"""Generator exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error aborts the current generation run.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "TypedlocError",
    # Locale identifiers
    "LocaleError",
    "InvalidLanguageError",
    "InvalidRegionError",
    "DuplicateLocaleError",
    # Catalog
    "CatalogError",
    "MissingTemplateError",
    "MissingFallbackLocaleError",
    "UnknownKeyError",
    "MissingKeyError",
    "InvalidKeyError",
    "InvalidTranslationFileError",
    # I/O
    "SourceIOError",
    "MissingInputDirectoryError",
    "MissingFileError",
    "OutputWriteError",
    # Configuration
    "ConfigError",
    # Dispatch
    "UnsupportedLocaleError",
]


class TypedlocError(Exception):
    """Base exception for all generator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TypedlocError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


# ============================================================================
# LOCALE IDENTIFIERS
# ============================================================================


class LocaleError(TypedlocError):
    """Malformed or unknown locale identifier.

    Attributes:
        locale_code: The raw locale string that failed validation
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class InvalidLanguageError(LocaleError):
    """Language subtag is empty, malformed, or absent from the language table."""


class InvalidRegionError(LocaleError):
    """Region subtag is absent from the region table, or extra subtags follow it."""


class DuplicateLocaleError(LocaleError):
    """Two input files canonicalize to the same locale.

    Example:
        en-US.json and en_us.json both resolve to en_US.
    """


# ============================================================================
# CATALOG
# ============================================================================


class CatalogError(TypedlocError):
    """Translation catalog is inconsistent with its template or fallbacks."""


class MissingTemplateError(CatalogError):
    """Configured template file is not among the input files."""


class MissingFallbackLocaleError(CatalogError):
    """A language has region variants but no language-default file.

    Attributes:
        language: Language code of the incomplete group
        regions: Region variants found for the language
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language: str,
        regions: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.language = language
        self.regions = regions


class _KeyError(CatalogError):
    """Shared shape for errors naming a key in a source file."""

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        key: str,
        source_path: str = "",
    ) -> None:
        super().__init__(message)
        self.key = key
        self.source_path = source_path


class UnknownKeyError(_KeyError):
    """A locale file uses a key absent from the template schema."""


class MissingKeyError(_KeyError):
    """A language-default file omits a key declared by the template."""


class InvalidKeyError(_KeyError):
    """A template key cannot be emitted as an accessor name."""


class InvalidTranslationFileError(CatalogError):
    """Translation file is not a flat JSON object of strings.

    Attributes:
        source_path: The offending file
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str = "") -> None:
        super().__init__(message)
        self.source_path = source_path


# ============================================================================
# I/O
# ============================================================================


class SourceIOError(TypedlocError):
    """Filesystem failure while reading inputs or writing outputs.

    Attributes:
        path: Path involved in the failure
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class MissingInputDirectoryError(SourceIOError):
    """Configured input directory does not exist."""


class MissingFileError(SourceIOError):
    """Discovered input file disappeared or cannot be read."""


class OutputWriteError(SourceIOError):
    """Generated file could not be written."""


# ============================================================================
# CONFIGURATION
# ============================================================================


class ConfigError(TypedlocError):
    """Configuration file or value is invalid."""


# ============================================================================
# DISPATCH
# ============================================================================


class UnsupportedLocaleError(TypedlocError):
    """Requested locale resolves to no generated class.

    Raised by DispatchTable.resolve(). The emitted lookup function raises
    its own LookupError subclass at runtime.
    """
