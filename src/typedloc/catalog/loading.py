"""Translation file discovery and loading.

Provides the protocol for translation loaders, a JSON filesystem
implementation, and the immutable records the rest of the pipeline consumes.

Components:
    TranslationLoader - Protocol for reading one key->string mapping
    JsonTranslationLoader - Disk-based loader for flat JSON objects
    LocaleFile - Discovered input file with its validated locale
    TranslationSet - Immutable key->string mapping for one locale

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from typedloc.constants import MAX_SOURCE_SIZE, TRANSLATION_FILE_SUFFIX
from typedloc.diagnostics import (
    DuplicateLocaleError,
    ErrorTemplate,
    InvalidTranslationFileError,
    MissingFileError,
    MissingInputDirectoryError,
    MissingTemplateError,
)
from typedloc.locale_utils import LocaleId, ReferenceData, locale_from_path, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TranslationLoader",
    # Concrete loader
    "JsonTranslationLoader",
    # Records
    "LocaleFile",
    "TranslationSet",
    # Pipeline steps
    "discover_locale_files",
    "select_template",
    "load_translation_set",
]

logger = logging.getLogger(__name__)


class TranslationLoader(Protocol):
    """Protocol for reading a translation file.

    Implementations return a flat key->string mapping in file order.

    Example:
        >>> class InMemoryLoader:
        ...     def __init__(self, data):
        ...         self.data = data
        ...     def load(self, path):
        ...         return self.data[Path(path).name]
    """

    def load(self, path: Path) -> Mapping[str, str]:
        """Load the key->string mapping stored at path.

        Raises:
            MissingFileError: If the file cannot be read
            InvalidTranslationFileError: If content is not a flat string mapping
        """


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict[str, object]:
    """object_pairs_hook rejecting keys declared twice in one object."""
    result: dict[str, object] = {}
    for key, value in pairs:
        if key in result:
            msg = f"duplicate key '{key}'"
            raise ValueError(msg)
        result[key] = value
    return result


@dataclass(frozen=True, slots=True)
class JsonTranslationLoader:
    """File system loader for flat JSON translation objects.

    Attributes:
        max_source_size: Maximum accepted file size in bytes
    """

    max_source_size: int = MAX_SOURCE_SIZE

    def load(self, path: Path) -> dict[str, str]:
        """Read and validate a JSON translation file.

        Args:
            path: File to read

        Returns:
            Key->string mapping in file order

        Raises:
            MissingFileError: If the file does not exist or cannot be read
            InvalidTranslationFileError: If the file is too large, not UTF-8,
                not valid JSON, not an object, declares a key twice, or has
                non-string values
        """
        source_path = str(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise MissingFileError(
                ErrorTemplate.missing_file(source_path), path=source_path
            ) from e

        if len(raw) > self.max_source_size:
            reason = f"file size {len(raw)} exceeds limit of {self.max_source_size} bytes"
            raise InvalidTranslationFileError(
                ErrorTemplate.invalid_translation_file(source_path, reason),
                source_path=source_path,
            )

        try:
            data = json.loads(raw.decode("utf-8"), object_pairs_hook=_reject_duplicate_keys)
        except (UnicodeDecodeError, ValueError) as e:
            raise InvalidTranslationFileError(
                ErrorTemplate.invalid_translation_file(source_path, str(e)),
                source_path=source_path,
            ) from e
        except RecursionError as e:
            raise InvalidTranslationFileError(
                ErrorTemplate.invalid_translation_file(source_path, "nesting too deep"),
                source_path=source_path,
            ) from e

        if not isinstance(data, dict):
            raise InvalidTranslationFileError(
                ErrorTemplate.invalid_translation_file(
                    source_path, f"expected a JSON object, got {type(data).__name__}"
                ),
                source_path=source_path,
            )

        for key, value in data.items():
            if not isinstance(value, str):
                reason = f"value of '{key}' is {type(value).__name__}, expected string"
                raise InvalidTranslationFileError(
                    ErrorTemplate.invalid_translation_file(source_path, reason),
                    source_path=source_path,
                )

        return data


@dataclass(frozen=True, slots=True)
class LocaleFile:
    """Input file paired with the locale parsed from its name."""

    locale: LocaleId
    path: Path


@dataclass(frozen=True, slots=True)
class TranslationSet:
    """Immutable key->string mapping for exactly one locale.

    Attributes:
        locale: Locale the translations belong to
        source_path: File the translations were read from
        entries: Read-only key->string mapping in file order
    """

    locale: LocaleId
    source_path: Path
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @property
    def keys(self) -> tuple[str, ...]:
        """Keys in file order."""
        return tuple(self.entries)


def discover_locale_files(
    input_dir: Path, reference: ReferenceData
) -> tuple[LocaleFile, ...]:
    """Find translation files and parse their locales.

    Every file name must be a valid locale; invalid names abort discovery
    rather than being skipped.

    Args:
        input_dir: Directory holding *.json translation files
        reference: Language and region tables

    Returns:
        LocaleFiles ordered by language, language-default first

    Raises:
        MissingInputDirectoryError: If input_dir does not exist
        InvalidLanguageError: If a file name has an unknown language
        InvalidRegionError: If a file name has an unknown region
        DuplicateLocaleError: If two files resolve to the same locale
    """
    if not input_dir.is_dir():
        raise MissingInputDirectoryError(
            ErrorTemplate.missing_input_directory(str(input_dir)), path=str(input_dir)
        )

    paths = sorted(
        p for p in input_dir.iterdir() if p.is_file() and p.suffix == TRANSLATION_FILE_SUFFIX
    )

    seen: dict[LocaleId, Path] = {}
    for path in paths:
        locale = locale_from_path(path, reference)
        if locale in seen:
            raise DuplicateLocaleError(
                ErrorTemplate.duplicate_locale(locale.canonical, str(seen[locale]), str(path)),
                locale_code=locale.canonical,
            )
        seen[locale] = path
        logger.debug("Discovered %s as locale %s", path, locale)

    ordered = sorted(seen.items(), key=lambda item: item[0].sort_key())
    return tuple(LocaleFile(locale=locale, path=path) for locale, path in ordered)


def select_template(
    files: Iterable[LocaleFile], input_dir: Path, template: str
) -> LocaleFile:
    """Pick the configured template among discovered files.

    Args:
        files: Discovered locale files
        input_dir: Input directory (for the diagnostic)
        template: Template file name or locale, with or without the .json
            suffix; casing and separator follow the locale rules

    Raises:
        MissingTemplateError: If no discovered file has that name
    """
    file_name = template
    if not file_name.endswith(TRANSLATION_FILE_SUFFIX):
        file_name += TRANSLATION_FILE_SUFFIX
    # Compared like discovered names: 'en_US', 'en-us' and 'en-US.json' are one locale.
    wanted = normalize_locale(file_name.split(".", 1)[0])
    for locale_file in files:
        if locale_file.locale.canonical == wanted:
            return locale_file
    template_path = str(input_dir / file_name)
    raise MissingTemplateError(ErrorTemplate.missing_template(template_path))


def load_translation_set(
    locale_file: LocaleFile, loader: TranslationLoader | None = None
) -> TranslationSet:
    """Load one discovered file into a TranslationSet.

    Args:
        locale_file: File and locale to load
        loader: Loader to use (default: JsonTranslationLoader)
    """
    active_loader = loader if loader is not None else JsonTranslationLoader()
    entries = active_loader.load(locale_file.path)
    logger.debug("Loaded %d keys for %s", len(entries), locale_file.locale)
    return TranslationSet(
        locale=locale_file.locale, source_path=locale_file.path, entries=entries
    )
