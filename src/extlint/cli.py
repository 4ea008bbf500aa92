"""CLI entry point: ``extlint unused-files``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from extlint import __version__
from extlint.config import Settings
from extlint.constants import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_OK,
    EXIT_UNUSED_FILES,
)
from extlint.errors import (
    ConfigurationError,
    UnsupportedInputError,
    exit_code_for,
)
from extlint.logging_config import setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"extlint {__version__}")
        return EXIT_OK

    if args.command == "unused-files":
        return _run_unused_files(args)

    parser.print_help()
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="extlint",
        description="Lint-phase checks for the extension sources.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    unused = sub.add_parser(
        "unused-files",
        help="Report connector scripts nothing references",
    )
    unused.add_argument(
        "--src-dir",
        default=None,
        help="Extension source directory (default: from settings, src)",
    )
    unused.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def _run_unused_files(args: argparse.Namespace) -> int:
    """Execute the unused-files command."""
    from extlint.services.lint_service import run_unused_files

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Configuration error: invalid settings: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    if args.src_dir:
        settings = settings.model_copy(update={"src_dir": Path(args.src_dir)})
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        report = run_unused_files(settings)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return exit_code_for(exc) or EXIT_CONFIGURATION_ERROR
    except UnsupportedInputError as exc:
        print(f"Unsupported input: {exc} ({exc.path})", file=sys.stderr)
        return exit_code_for(exc) or EXIT_CONFIGURATION_ERROR

    for diagnostic in report.diagnostics:
        print(diagnostic.message)

    if report.ok:
        print(f"No unused files ({report.scanned} checked)")
        return EXIT_OK

    print(
        f"\n{len(report.diagnostics)} unused file(s) "
        f"out of {report.scanned} checked"
    )
    return EXIT_UNUSED_FILES


if __name__ == "__main__":
    sys.exit(main())
