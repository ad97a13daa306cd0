"""Pytest configuration for the typedloc test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import importlib
import json
import os
import sys
import uuid
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from types import ModuleType
from typing import TypeAlias

import pytest
from hypothesis import Phase, Verbosity, settings

from typedloc.locale_utils import ReferenceData

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================

# Small fixed tables keep unit tests independent of CLDR releases.
TEST_LANGUAGES: dict[str, str] = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "pt": "Portuguese",
}

TEST_REGIONS: dict[str, str] = {
    "AT": "Austria",
    "BR": "Brazil",
    "CA": "Canada",
    "GB": "United Kingdom",
    "US": "United States",
    "419": "Latin America",
}


@pytest.fixture
def reference() -> ReferenceData:
    """Deterministic language/region tables."""
    return ReferenceData(languages=TEST_LANGUAGES, regions=TEST_REGIONS)


WriteLocales: TypeAlias = Callable[[Mapping[str, Mapping[str, object]]], Path]


@pytest.fixture
def write_locales(tmp_path: Path) -> WriteLocales:
    """Write {file_stem: {key: value}} as JSON files into a fresh input dir."""

    def _write(files: Mapping[str, Mapping[str, object]]) -> Path:
        input_dir = tmp_path / "locale-input"
        input_dir.mkdir(exist_ok=True)
        for stem, entries in files.items():
            (input_dir / f"{stem}.json").write_text(
                json.dumps(entries, ensure_ascii=False), encoding="utf-8"
            )
        return input_dir

    return _write


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory whose name is a unique importable package name."""
    return tmp_path / f"generated_{uuid.uuid4().hex}"


@pytest.fixture
def import_generated(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[Path], ModuleType]]:
    """Import a generated package directory and unload it afterwards."""
    imported: list[str] = []

    def _import(package_dir: Path) -> ModuleType:
        monkeypatch.syspath_prepend(str(package_dir.parent))
        importlib.invalidate_caches()
        imported.append(package_dir.name)
        return importlib.import_module(package_dir.name)

    yield _import

    for name in list(sys.modules):
        if any(name == pkg or name.startswith(f"{pkg}.") for pkg in imported):
            del sys.modules[name]
