"""typedloc Example - Generate and Use a Translation Package.

Demonstrates the full cycle in a temporary directory:
1. Write per-locale JSON files (en, en-US, fr, fr-CA)
2. Generate the typed translation package
3. Import it and look up translations with region fallback
4. Show the diagnostic reported for a missing language-default

Python 3.13+.
"""

from __future__ import annotations

import importlib
import json
import sys
import tempfile
from pathlib import Path

from typedloc import GeneratorConfig, LocaleCodeGenerator, TypedlocError
from typedloc.diagnostics import DiagnosticFormatter

TRANSLATIONS = {
    "en": {"app_title": "Colour Picker", "greeting": "Hello", "farewell": "Goodbye"},
    "en-US": {"app_title": "Color Picker"},
    "fr": {"app_title": "Sélecteur de couleur", "greeting": "Bonjour", "farewell": "Au revoir"},
    "fr-CA": {"farewell": "Bonne journée"},
}


def write_inputs(input_dir: Path, translations: dict[str, dict[str, str]]) -> None:
    input_dir.mkdir(parents=True, exist_ok=True)
    for stem, entries in translations.items():
        (input_dir / f"{stem}.json").write_text(
            json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8"
        )


def example_1_generate_and_lookup(root: Path) -> None:
    """Example 1: Generate a package and resolve locales."""
    print("=" * 60)
    print("Example 1: Generate and look up")
    print("=" * 60)

    write_inputs(root / "locale-input", TRANSLATIONS)
    config = GeneratorConfig(
        input_dir=root / "locale-input", output_dir=root / "demo_l10n"
    )
    result = LocaleCodeGenerator(config).generate()
    for path in result.written:
        print(f"  wrote {path.name}")

    sys.path.insert(0, str(root))
    try:
        l10n = importlib.import_module("demo_l10n")
    finally:
        sys.path.remove(str(root))

    for locale in ("en_US", "en_GB", "fr_CA", "fr-BE"):
        strings = l10n.lookup_l10n(locale)
        print(
            f"  {locale:6} -> {type(strings).__name__:9} "
            f"{strings.app_title} / {strings.greeting} / {strings.farewell}"
        )

    try:
        l10n.lookup_l10n("de")
    except l10n.UnsupportedLocaleError as e:
        print(f"  de     -> {type(e).__name__}")


def example_2_missing_fallback(root: Path) -> None:
    """Example 2: Region variant without a language-default."""
    print("\n" + "=" * 60)
    print("Example 2: Missing language-default")
    print("=" * 60)

    input_dir = root / "broken-input"
    write_inputs(input_dir, {"en": TRANSLATIONS["en"], "pt-BR": {"greeting": "Olá"}})
    config = GeneratorConfig(input_dir=input_dir, output_dir=root / "broken_l10n")
    try:
        LocaleCodeGenerator(config).generate()
    except TypedlocError as e:
        if e.diagnostic is not None:
            print(DiagnosticFormatter().format(e.diagnostic))
    print(f"  output written: {(root / 'broken_l10n').exists()}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        example_1_generate_and_lookup(Path(tmp))
        example_2_missing_fallback(Path(tmp))
