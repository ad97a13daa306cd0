"""Command-line entry point.

Runs the generator with configuration from ./pyproject.toml.

Exit Codes:
    0: Generation (or --check validation) succeeded
    1: Any generator error; a single diagnostic line is written to stderr

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from typedloc.config import load_config
from typedloc.diagnostics import DiagnosticFormatter, OutputFormat, TypedlocError
from typedloc.generator import LocaleCodeGenerator

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typedloc",
        description="Generate typed translation classes from per-locale JSON files.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [tool.typedloc] table (default: ./pyproject.toml)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate translation files without writing output",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.SIMPLE.value,
        help="Diagnostic output format (default: simple)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every discovered file and group",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator and return the process exit code."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format), color=sys.stderr.isatty()
    )

    try:
        config = load_config(args.config)
        result = LocaleCodeGenerator(config).generate(write=not args.check)
    except TypedlocError as e:
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(str(e), file=sys.stderr)
        return 1

    if args.check:
        logger.info("Validated %d locale(s)", len(result.locales))
    else:
        logger.info(
            "Generated %d locale(s) into %s", len(result.locales), config.output_dir
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
