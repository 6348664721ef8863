"""
Command line entry point.

Parses process arguments, configures logging, creates the session, and runs
the interactive loop.
"""

import argparse
import logging
import sys

from memshell.config import LOG_LEVELS, ShellConfig
from memshell.repl import run_repl
from memshell.session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memshell",
        description="Interactive in-memory folder tree (ls, pwd, mkdir, cd, quit).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging level for diagnostics written to stderr.",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """
    Run the interpreter as a program.

    Params:
        argv: Arguments without the program name, ``sys.argv[1:]`` by default

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    config = ShellConfig(log_level=args.log_level)
    configure_logging(config.log_level)

    session = Session()
    return run_repl(session, config)
