"""Generation pipeline.

Sequences the generator phases for one run:

    discover -> select template -> group -> load -> check keys
             -> synthesize classes -> synthesize dispatcher -> write

Every phase before "write" is pure with respect to the output directory.
The first failure aborts the run before any file is written, so a
half-generated hierarchy is never left behind. Each file is replaced
atomically.

Python 3.13+.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel import UnknownLocaleError

from typedloc.catalog import (
    TemplateKeySet,
    build_locale_groups,
    discover_locale_files,
    load_translation_set,
    select_template,
    validate_translation_sets,
)
from typedloc.codegen import (
    NamingScheme,
    build_dispatch_table,
    render_aggregate_module,
    render_language_module,
    render_package_init,
    synthesize_hierarchy,
)
from typedloc.config import GeneratorConfig
from typedloc.diagnostics import ConfigError, ErrorTemplate, OutputWriteError
from typedloc.locale_utils import get_reference_data

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typedloc.catalog import LocaleGroup, TranslationLoader
    from typedloc.codegen import DispatchTable, GeneratedClass
    from typedloc.locale_utils import LocaleId, ReferenceData

__all__ = [
    "GenerationResult",
    "LocaleCodeGenerator",
    "generate",
    "write_atomic",
]

logger = logging.getLogger(__name__)

PACKAGE_INIT_FILE: str = "__init__.py"


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one generation run.

    Attributes:
        locales: Every processed locale, grouped by language
        groups: Language -> LocaleGroup
        classes: Language -> generated classes, language-default first
        dispatch: Dispatch table behind the emitted lookup function
        outputs: File name -> generated source
        written: Paths written (empty when writing was skipped)
    """

    locales: tuple[LocaleId, ...]
    groups: Mapping[str, LocaleGroup]
    classes: Mapping[str, tuple[GeneratedClass, ...]]
    dispatch: DispatchTable
    outputs: Mapping[str, str]
    written: tuple[Path, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))
        object.__setattr__(self, "outputs", MappingProxyType(dict(self.outputs)))


def write_atomic(path: Path, content: str) -> None:
    """Replace path with content without exposing a partial file.

    Writes to a temporary file in the target directory and renames it over
    the destination; on failure the temporary file is removed.

    Raises:
        OSError: If writing or renaming fails
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


class LocaleCodeGenerator:
    """Turns a directory of translation files into a Python package.

    Example:
        >>> generator = LocaleCodeGenerator(GeneratorConfig(input_dir=Path("i18n")))
        >>> result = generator.generate()
        >>> sorted(result.outputs)
        ['__init__.py', 'l10n.py', 'l10n_en.py']
    """

    __slots__ = ("_config", "_loader", "_naming", "_reference")

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        reference: ReferenceData | None = None,
        loader: TranslationLoader | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Run configuration (default: GeneratorConfig())
            reference: Language/region tables (default: Babel CLDR data for
                config.display_locale, loaded on first use)
            loader: Translation file loader (default: JSON)
        """
        self._config = config if config is not None else GeneratorConfig()
        self._reference = reference
        self._loader = loader
        self._naming = NamingScheme(self._config.class_prefix)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def naming(self) -> NamingScheme:
        return self._naming

    @property
    def reference(self) -> ReferenceData:
        """Reference tables, loaded from Babel on first access.

        Raises:
            ConfigError: If display_locale is unknown to CLDR
        """
        if self._reference is None:
            try:
                self._reference = get_reference_data(self._config.display_locale)
            except (UnknownLocaleError, ValueError) as e:
                raise ConfigError(
                    ErrorTemplate.invalid_config(
                        f"unknown display-locale {self._config.display_locale!r}"
                    )
                ) from e
        return self._reference

    def build(self) -> GenerationResult:
        """Validate inputs and render every output in memory.

        Raises:
            TypedlocError: On the first validation failure
        """
        config = self._config
        reference = self.reference

        files = discover_locale_files(config.input_dir, reference)
        template_file = select_template(files, config.input_dir, config.template)
        groups = build_locale_groups(
            (locale_file.locale for locale_file in files), str(config.input_dir)
        )

        translation_sets = {
            locale_file.locale: load_translation_set(locale_file, self._loader)
            for locale_file in files
        }
        template_keys = TemplateKeySet.from_translation_set(
            translation_sets[template_file.locale]
        )
        validate_translation_sets(template_keys, translation_sets.values())

        hierarchy = synthesize_hierarchy(groups, translation_sets, self._naming)
        dispatch = build_dispatch_table(groups, self._naming)

        naming = self._naming
        outputs: dict[str, str] = {}
        for language, classes in hierarchy.items():
            file_name = naming.file_name(naming.language_module(language))
            outputs[file_name] = render_language_module(language, classes, naming, reference)
        outputs[naming.file_name(naming.aggregate_module)] = render_aggregate_module(
            dispatch, template_keys.keys, naming
        )
        outputs[PACKAGE_INIT_FILE] = render_package_init(naming)

        return GenerationResult(
            locales=dispatch.locales,
            groups=groups,
            classes=hierarchy,
            dispatch=dispatch,
            outputs=outputs,
        )

    def write_outputs(self, outputs: Mapping[str, str]) -> tuple[Path, ...]:
        """Write rendered files into the output directory.

        Raises:
            OutputWriteError: If the directory or a file cannot be written
        """
        output_dir = self._config.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(
                ErrorTemplate.output_write_failed(str(output_dir), str(e)),
                path=str(output_dir),
            ) from e

        written: list[Path] = []
        for file_name, content in outputs.items():
            path = output_dir / file_name
            try:
                write_atomic(path, content)
            except OSError as e:
                raise OutputWriteError(
                    ErrorTemplate.output_write_failed(str(path), str(e)), path=str(path)
                ) from e
            logger.info("Wrote %s", path)
            written.append(path)
        return tuple(written)

    def generate(self, *, write: bool = True) -> GenerationResult:
        """Run the whole pipeline.

        Args:
            write: If False, validate and render without touching the
                output directory

        Raises:
            TypedlocError: On the first failure
        """
        result = self.build()
        if not write:
            return result
        written = self.write_outputs(result.outputs)
        return GenerationResult(
            locales=result.locales,
            groups=result.groups,
            classes=result.classes,
            dispatch=result.dispatch,
            outputs=result.outputs,
            written=written,
        )


def generate(config: GeneratorConfig | None = None, *, write: bool = True) -> GenerationResult:
    """Generate the translation package described by config."""
    return LocaleCodeGenerator(config).generate(write=write)
