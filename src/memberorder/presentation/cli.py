"""Command line interface.

    memberorder check PATH... [--config FILE] [--format text|json|rich] [-v]
    memberorder categories [--config FILE]

Exit status: 0 in order, 1 violations found, 2 usage or configuration error
or a file that could not be analyzed (the other files are still checked).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from memberorder import __version__
from memberorder.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from memberorder.application.services.analyzer import MemberOrderAnalyzer
from memberorder.domain.exceptions import DocumentError, MemberOrderError
from memberorder.domain.model.check_result import CheckResult, FileReport
from memberorder.domain.model.configuration import OrderConfig
from memberorder.domain.model.enums import MemberCategory
from memberorder.infrastructure.adapters.config_loader import find_config, load_config
from memberorder.infrastructure.adapters.file_document import iter_source_files, load_document

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from memberorder.application.reporters import BaseReporter
    from memberorder.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

_REPORTERS: dict[str, type[BaseReporter]] = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "rich": ConsoleReporter,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="memberorder",
        description="Check that C# class members appear in canonical order.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check .cs files or directories")
    check.add_argument("paths", nargs="+", type=Path, help="Files or directories")
    check.add_argument("--config", type=Path, help="memberorder.toml or pyproject.toml")
    check.add_argument(
        "--format",
        choices=sorted(_REPORTERS),
        default="text",
        help="Output format (default: text)",
    )

    categories = subparsers.add_parser("categories", help="Show the effective member order")
    categories.add_argument("--config", type=Path, help="memberorder.toml or pyproject.toml")

    return parser


def main(argv: Sequence[str] | None = None, output: TextIO | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])
        output: Report stream (default: sys.stdout)

    Returns:
        Exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    output = output if output is not None else sys.stdout

    try:
        if args.command == "categories":
            return _run_categories(args, output)
        return _run_check(args, output)
    except MemberOrderError as e:
        print(f"memberorder: {e}", file=sys.stderr)
        return EXIT_ERROR


def _resolve_config(explicit: Path | None, start: Path) -> OrderConfig:
    """Load --config, else the nearest config file, else defaults."""
    path = explicit if explicit is not None else find_config(start)
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return OrderConfig()
    return load_config(path)


def _run_check(args: argparse.Namespace, output: TextIO) -> int:
    """Analyze files and report."""
    config = _resolve_config(args.config, args.paths[0])
    if not config.enabled:
        logger.info("Member order checking disabled by configuration")
        return EXIT_OK

    analyzer = MemberOrderAnalyzer(config.canonical_order())
    reports: list[FileReport] = []
    skipped = 0
    for path in iter_source_files(args.paths):
        report = _check_file(analyzer, path)
        if report is None:
            skipped += 1
        else:
            reports.append(report)
    result = CheckResult(files=tuple(reports))

    reporter: ReporterProtocol = _REPORTERS[args.format](output)
    reporter.report(result)
    if not result.passed:
        return EXIT_VIOLATIONS
    return EXIT_ERROR if skipped else EXIT_OK


def _check_file(analyzer: MemberOrderAnalyzer, path: Path) -> FileReport | None:
    """Analyze one file. None if it could not be read or analyzed.

    Failures are logged and never stop the other files.
    """
    try:
        document = load_document(path)
    except DocumentError as e:
        logger.warning("Skipping file: %s", e)
        return None

    try:
        violations = analyzer.analyze(document)
    except Exception:
        logger.exception("Member order analysis failed for %s", path)
        return None
    return FileReport(path=path, violations=violations)


def _run_categories(args: argparse.Namespace, output: TextIO) -> int:
    """Print the effective canonical order."""
    config = _resolve_config(args.config, Path.cwd())
    order = config.canonical_order()
    for category in order:
        print(f"{order.rank_of(category):>3}  {category.label}", file=output)
    for category in MemberCategory:
        if category not in order.ranks:
            print(f"{order.tail_rank:>3}  {category.label} (unlisted)", file=output)
    return EXIT_OK


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
