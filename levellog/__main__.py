"""Command line entry point: write log lines to stderr.

    python -m levellog --level warning --flags date,time "disk almost full"
    some_command | python -m levellog --level info
"""

import argparse
import sys
from typing import Optional

from . import config
from .adapters import StderrAdapter
from .logger import Logger

# Table-driven dispatch: --level name -> Logger method
METHODS = {
    "print": "println",
    "debug": "debugln",
    "info": "infoln",
    "warning": "warningln",
    "error": "errorln",
    "fatal": "fatalln",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levellog", description="Write leveled log lines to stderr."
    )
    parser.add_argument(
        "--level",
        choices=sorted(METHODS),
        default="print",
        help="Severity of each line (default: unleveled print)",
    )
    parser.add_argument(
        "--flags",
        default=config.LEVELLOG_FLAGS,
        help="Comma list of header flags (default: %(default)s)",
    )
    parser.add_argument(
        "--levels",
        default=config.LEVELLOG_LEVELS,
        help="Comma list of enabled severities (default: %(default)s)",
    )
    parser.add_argument("message", nargs="*", help="Message words; stdin lines if omitted")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        flags = config.parse_flags(args.flags)
        levels = config.parse_levels(args.levels)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logger = Logger(StderrAdapter(), flags, levels)
    log = getattr(logger, METHODS[args.level])

    lines = [" ".join(args.message)] if args.message else sys.stdin
    for line in lines:
        err = log(line.rstrip("\n"))
        if err is not None:
            print(f"ERROR: log write failed: {err}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
