"""Command line driver: evaluate one file and print a transcript.

    minischeme program.scm

For every expression the driver prints the expression, evaluates it against
the global environment and prints "  => " followed by the result. The first
error aborts the whole run.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from minischeme import __version__, config
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter
from minischeme.logging_config import setup_logging

logger = logging.getLogger("minischeme")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minischeme",
        description="Evaluate a minischeme source file and print each result.",
    )
    parser.add_argument("file", help="source file to evaluate")
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $MINISCHEME_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="write logs to this file instead of stderr (default: $MINISCHEME_LOG_FILE)",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        help="raise the host recursion limit for deeply nested programs "
        "(default: $MINISCHEME_RECURSION_LIMIT)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or config.get_log_level(), args.log_file or config.get_log_file())

    try:
        limit = args.recursion_limit or config.get_recursion_limit()
    except ValueError as ex:
        parser.error(str(ex))
    if limit:
        sys.setrecursionlimit(limit)
        logger.debug("Recursion limit set to %d", limit)

    try:
        with open(args.file, "r", encoding="utf-8") as handle:
            source = handle.read()
    except OSError as ex:
        logger.error("Cannot read %s: %s", args.file, ex)
        print(f"minischeme: cannot read {args.file}: {ex.strerror}", file=sys.stderr)
        return 1

    interp = Interpreter()
    try:
        interp.run(source, sys.stdout)
    except SchemeError as ex:
        sys.stdout.flush()
        logger.error("%s: %s", type(ex).__name__, ex)
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    except RecursionError:
        sys.stdout.flush()
        logger.error("Recursion limit exceeded while evaluating %s", args.file)
        print("Error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
