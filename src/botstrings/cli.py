"""Command-line entry point for build steps.

Usage:
    botstrings generate data/strings/responses -o bot/generated_bot_strings.py
    botstrings generate data/strings/responses --default-locale en-US > out.py
    botstrings check data/strings/responses

Exit Codes:
    0   Success
    1   Resource directory missing, or (check) a response file failed to load
    2   Invalid arguments

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from botstrings.codegen import generate_source, write_generated
from botstrings.config import GeneratorConfig
from botstrings.constants import DEFAULT_CLASS_NAME, DEFAULT_LOCALE
from botstrings.errors import ResourceDiscoveryError
from botstrings.localization import load_directory

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with generate and check subcommands."""
    parser = argparse.ArgumentParser(
        prog="botstrings",
        description="Generate typed response accessors from responses.*.json files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate into a file (untouched when already up to date):
  botstrings generate data/strings/responses -o bot/generated_bot_strings.py

  # Report malformed files and untranslated keys:
  botstrings check data/strings/responses
""",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate the accessor module")
    generate.add_argument("resource_dir", type=Path, help="Directory of response files")
    generate.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file (default: print to stdout)",
    )
    generate.add_argument(
        "--default-locale",
        default=DEFAULT_LOCALE,
        help=f"Locale driving parameter inference (default: {DEFAULT_LOCALE})",
    )
    generate.add_argument(
        "--class-name",
        default=DEFAULT_CLASS_NAME,
        help=f"Name of the generated class (default: {DEFAULT_CLASS_NAME})",
    )

    check = subparsers.add_parser("check", help="Report load problems and missing keys")
    check.add_argument("resource_dir", type=Path, help="Directory of response files")
    check.add_argument(
        "--default-locale",
        default=DEFAULT_LOCALE,
        help=f"Locale other locales are compared against (default: {DEFAULT_LOCALE})",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _run_generate(args: argparse.Namespace) -> int:
    try:
        config = GeneratorConfig(
            default_locale=args.default_locale,
            class_name=args.class_name,
        )
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    resources, summary = load_directory(args.resource_dir)
    if not summary.all_successful:
        for result in summary.get_failed():
            logger.warning("Skipped %s (%s)", result.source_path, result.status)

    source = generate_source(resources, config)
    if args.output is None:
        sys.stdout.write(source)
        return 0

    if write_generated(args.output, source):
        print(f"[OK] Wrote {args.output}")
    else:
        print(f"[OK] {args.output} is up to date")
    return 0


def _run_check(args: argparse.Namespace) -> int:
    resources, summary = load_directory(args.resource_dir)

    for result in summary.results:
        label = "OK" if result.is_success else "ERROR"
        print(f"[{label}] {result.source_path}: {result.status} ({result.key_count} keys)")

    default = resources.get(args.default_locale)
    if default is None:
        print(f"[WARN] Default locale '{args.default_locale}' has no response file")
    else:
        for locale in sorted(resources):
            if locale == args.default_locale:
                continue
            missing = [key for key in sorted(default) if key not in resources[locale]]
            if missing:
                print(f"[WARN] {locale}: {len(missing)} keys missing")

    return 0 if summary.all_successful else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "generate":
            return _run_generate(args)
        return _run_check(args)
    except ResourceDiscoveryError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
