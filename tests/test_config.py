"""Tests for config.py: GeneratorConfig and pyproject.toml loading.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from typedloc.config import GeneratorConfig, load_config
from typedloc.diagnostics import ConfigError, DiagnosticCode


class TestGeneratorConfig:
    """Test defaults and validation."""

    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.input_dir == Path("locale-input")
        assert config.output_dir == Path("locale-output")
        assert config.template == "en"
        assert config.class_prefix == "L10n"
        assert config.display_locale == "en"

    def test_paths_coerced(self) -> None:
        config = GeneratorConfig(input_dir="i18n", output_dir="src/app/l10n")  # type: ignore[arg-type]
        assert config.input_dir == Path("i18n")
        assert config.output_dir == Path("src/app/l10n")

    @pytest.mark.parametrize("template", ["", "sub/en.json"])
    def test_invalid_template(self, template: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            GeneratorConfig(template=template)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CONFIG

    def test_invalid_prefix(self) -> None:
        with pytest.raises(ConfigError, match="class-prefix"):
            GeneratorConfig(class_prefix="my-prefix")

    def test_frozen(self) -> None:
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.template = "fr"  # type: ignore[misc]

    def test_from_mapping(self) -> None:
        config = GeneratorConfig.from_mapping(
            {"input-dir": "i18n", "template": "fr.json", "class-prefix": "Strings"}
        )
        assert config.input_dir == Path("i18n")
        assert config.template == "fr.json"
        assert config.class_prefix == "Strings"
        assert config.output_dir == Path("locale-output")

    def test_from_mapping_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="unknown setting 'input_dir'"):
            GeneratorConfig.from_mapping({"input_dir": "i18n"})

    def test_from_mapping_non_string(self) -> None:
        with pytest.raises(ConfigError, match="'template' must be a string"):
            GeneratorConfig.from_mapping({"template": 1})


class TestLoadConfig:
    """Test reading [tool.typedloc] tables."""

    def test_reads_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "app"\n\n'
            '[tool.typedloc]\ninput-dir = "i18n"\noutput-dir = "src/app/l10n"\n',
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.input_dir == Path("i18n")
        assert config.output_dir == Path("src/app/l10n")

    def test_missing_table_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "app"\n', encoding="utf-8")
        assert load_config(path) == GeneratorConfig()

    def test_no_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config() == GeneratorConfig()

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="file not found"):
            load_config(tmp_path / "absent.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.typedloc\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.source_path == str(path)

    def test_table_must_be_table(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool]\ntypedloc = "yes"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a table"):
            load_config(path)
