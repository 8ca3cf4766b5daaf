"""Command-line tool that shows records read back from the log directory."""

from __future__ import annotations

import sys
from typing import Sequence

from .argparser import ArgParser
from .levels import parse_level
from .manager import get_manager


def build_parser() -> ArgParser:
    """Return the parser for the analyser's options."""
    parser = ArgParser("Analyser", "Log analyser tool")
    parser.add_option("d", "date", "Analysis Date From(YYYY-MM-DD)", False)
    parser.add_option("r", "reverse", "Reverse logs", True, "false")
    parser.add_option("n", "number", "Filter Numbers", False, "30")
    parser.add_option("l", "level", "Filter Level", False, "INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analyser; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    try:
        parser.parse(argv)
        date = parser.get_option_value("date")
        reverse = parser.get_option_value("reverse") == "true"
        total = int(parser.get_option_value("n"))
        level = parse_level(parser.get_option_value("level"))
    except ValueError as exc:
        print(f"parse error: {exc}", file=sys.stderr)
        parser.print_usage()
        return 1

    manager = get_manager()
    try:
        history = manager.get_history(level, total, reverse, date)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    manager.print_logs(history)
    return 0


if __name__ == "__main__":
    sys.exit(main())