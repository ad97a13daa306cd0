"""Generator configuration.

Provides a single frozen dataclass holding every setting of a generation
run, and a loader reading the [tool.typedloc] table of pyproject.toml.

Example pyproject.toml:
    [tool.typedloc]
    input-dir = "locale-input"
    output-dir = "src/myapp/l10n"
    template = "en.json"
    class-prefix = "L10n"

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING

from typedloc.constants import (
    CONFIG_TABLE,
    DEFAULT_CLASS_PREFIX,
    DEFAULT_DISPLAY_LOCALE,
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TEMPLATE,
)
from typedloc.core.identifier_validation import is_valid_class_prefix
from typedloc.diagnostics import ConfigError, ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["DEFAULT_CONFIG_FILE", "GeneratorConfig", "load_config"]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: str = "pyproject.toml"


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for one generation run.

    All fields have defaults; GeneratorConfig() reads ./locale-input and
    writes ./locale-output using en.json as the template.

    Attributes:
        input_dir: Directory holding translation files
        output_dir: Directory receiving the generated package
        template: Template file name, '.json' suffix optional
        class_prefix: Namespace token of generated class names
        display_locale: Locale for language/region names in docstrings
    """

    input_dir: Path = field(default_factory=lambda: Path(DEFAULT_INPUT_DIR))
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    template: str = DEFAULT_TEMPLATE
    class_prefix: str = DEFAULT_CLASS_PREFIX
    display_locale: str = DEFAULT_DISPLAY_LOCALE

    def __post_init__(self) -> None:
        """Coerce paths and validate values at construction time.

        Raises:
            ConfigError: If template is empty or a path, or class_prefix is
                not an ASCII identifier
        """
        object.__setattr__(self, "input_dir", Path(self.input_dir))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        if not self.template or Path(self.template).name != self.template:
            raise ConfigError(
                ErrorTemplate.invalid_config(
                    f"template must be a file name, got {self.template!r}"
                )
            )
        if not is_valid_class_prefix(self.class_prefix):
            raise ConfigError(
                ErrorTemplate.invalid_config(
                    f"class-prefix must be an ASCII identifier, got {self.class_prefix!r}"
                )
            )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, object], source_path: str | None = None
    ) -> GeneratorConfig:
        """Build a configuration from a TOML table with kebab-case keys.

        Raises:
            ConfigError: On unknown keys or non-string values
        """
        known = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigError(
                    ErrorTemplate.invalid_config(f"unknown setting '{key}'", source_path)
                )
            if not isinstance(value, str):
                raise ConfigError(
                    ErrorTemplate.invalid_config(f"'{key}' must be a string", source_path)
                )
            values[known[key]] = value
        return cls(**values)  # type: ignore[arg-type]


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load configuration from a TOML file.

    Settings are read from the [tool.typedloc] table. Without an explicit
    path, a missing ./pyproject.toml or a missing table yields defaults.

    Args:
        path: Explicit configuration file; must exist when given

    Raises:
        ConfigError: If an explicit file is missing, or the file is invalid
    """
    config_path = path if path is not None else Path(DEFAULT_CONFIG_FILE)
    if not config_path.is_file():
        if path is not None:
            raise ConfigError(
                ErrorTemplate.invalid_config("file not found", str(config_path))
            )
        logger.debug("No %s found, using default configuration", config_path)
        return GeneratorConfig()

    try:
        document = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(ErrorTemplate.invalid_config(str(e), str(config_path))) from e

    tool = document.get("tool", {})
    section = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
    if section is None:
        logger.debug("No [tool.%s] table in %s, using defaults", CONFIG_TABLE, config_path)
        return GeneratorConfig()
    if not isinstance(section, dict):
        raise ConfigError(
            ErrorTemplate.invalid_config(f"[tool.{CONFIG_TABLE}] must be a table", str(config_path))
        )
    return GeneratorConfig.from_mapping(section, str(config_path))
