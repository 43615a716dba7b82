"""Command-line entry point: interpret an mlisp source file."""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

from mlisp.config import LOG_LEVELS, Config
from mlisp.interpreter import Interpreter
from mlisp.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlisp",
        description="Evaluate each top-level form of an mlisp file and print its value.",
    )
    parser.add_argument("path", help="source file to interpret")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="logging verbosity (default: $MLISP_LOG_LEVEL or none)",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=None,
        help="report a failing form and continue with the next one",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env(log_level=args.log_level, keep_going=args.keep_going)
    except ValueError as e:
        logging.error("%s", e)
        return 2

    configure_logging(config.log_level)

    try:
        failures = Interpreter(config).run_file(args.path)
    except (OSError, UnicodeError) as e:
        logging.error("Cannot read %s: %s", args.path, e)
        return 1
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
