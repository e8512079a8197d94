from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kokwame import __version__
from kokwame.analysis.report import problematic
from kokwame.analysis.severity import Severity
from kokwame.core.config import Options
from kokwame.core.errors import KokwameError
from kokwame.parsing.treesitter import FileTreeProvider, parsers_available
from kokwame.reporting.formatters import ConsolePresenter, format_json, format_text
from kokwame.session import setup

logger = logging.getLogger("kokwame")


class StaticPosition:
    """Cursor position given on the command line."""

    def __init__(self, row: int, column: int = 0) -> None:
        self.row = row
        self.column = column

    def cursor_position(self) -> tuple[int, int]:
        return self.row, self.column


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kokwame", description="Code quality metrics for functions")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("path", help="Source file to analyze")
    common.add_argument("--config", dest="config_path", help="Path to YAML/JSON config file")
    common.add_argument("--low", type=float, help="Low complexity threshold (overrides config)")
    common.add_argument("--high", type=float, help="High complexity threshold (overrides config)")
    common.add_argument("-v", "--verbose", action="store_true", help="Verbose logging on stderr")

    info_parser = subparsers.add_parser(
        "info", parents=[common], help="Show metrics of the function at a line"
    )
    info_parser.add_argument("--line", type=int, required=True, help="Line number (1-based)")
    info_parser.add_argument("--column", type=int, default=0, help="Column (0-based)")

    diag_parser = subparsers.add_parser(
        "diagnostics", parents=[common], help="List functions that are too complex"
    )
    diag_parser.add_argument("--all", action="store_true", help="Include functions below the low threshold")
    diag_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    diag_parser.add_argument("--output", help="Write output to file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not parsers_available():
        logger.warning("tree_sitter_languages is not installed; nothing will be analyzed")
    try:
        options = _load_options(args)
        if args.command == "info":
            return _info(args, options)
        return _diagnostics(args, options)
    except KokwameError as exc:
        print(f"kokwame: {exc}", file=sys.stderr)
        return 1


def _load_options(args) -> Options:
    options = Options.load(args.config_path)
    overrides = {}
    if args.low is not None:
        overrides["threshold_low"] = args.low
    if args.high is not None:
        overrides["threshold_high"] = args.high
    return options.merged(overrides) if overrides else options


def _info(args, options: Options) -> int:
    session = setup(
        options,
        tree_provider=FileTreeProvider(args.path),
        position_provider=StaticPosition(args.line - 1, args.column),
        presenter=ConsolePresenter(options.border),
    )
    session.info()
    return 0


def _diagnostics(args, options: Options) -> int:
    session = setup(
        options,
        tree_provider=FileTreeProvider(args.path),
        position_provider=StaticPosition(0),
        presenter=ConsolePresenter(options.border),
    )
    report = session.report()
    if not args.all:
        report = problematic(report, options.threshold_low)
    if args.format == "json":
        output = format_json(args.path, report)
    else:
        output = format_text(args.path, report)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        print(output, end="")
    return 2 if any(info.severity is Severity.ERROR for info in report) else 0
