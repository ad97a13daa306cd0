"""typedloc - typed translation classes generated from per-locale JSON files.

Reads a directory of translation files named by locale (en.json,
en-US.json, fr.json), validates them against a template locale, and emits
a Python package: an abstract base class with one property per key, one
class per locale (region variants override only the keys they define),
and a lookup function resolving a requested locale with language-level
fallback.

Public API:
    LocaleCodeGenerator - Generation pipeline
    generate - Run the pipeline with a configuration
    GeneratorConfig - Run configuration
    load_config - Read configuration from pyproject.toml
    LocaleId - Validated (language, region) pair
    parse_locale - Parse and validate a locale string

Exceptions:
    TypedlocError - Base exception class

Submodules:
    typedloc.catalog - Loading, key consistency, locale grouping
    typedloc.codegen - Class hierarchy and dispatcher synthesis
    typedloc.diagnostics - Error types and diagnostic formatting
"""

from .config import GeneratorConfig, load_config
from .diagnostics import TypedlocError
from .generator import GenerationResult, LocaleCodeGenerator, generate
from .locale_utils import LocaleId, ReferenceData, canonicalize_locale, parse_locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("typedloc")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "LocaleCodeGenerator",
    "LocaleId",
    "ReferenceData",
    "TypedlocError",
    "__version__",
    "canonicalize_locale",
    "generate",
    "load_config",
    "parse_locale",
]
