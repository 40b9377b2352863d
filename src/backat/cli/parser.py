"""Argument parser construction for the back-at CLI."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import IO

from backat import __version__
from backat.config.settings import DEFAULT_PREFIX


class Mode(str, Enum):
    """Which kind of input the program expects, chosen by its name."""

    AT = "back-at"
    IN = "back-in"


USAGES: dict[Mode, str] = {
    Mode.AT: "%(prog)s HH:MM (or HH:MMpm)",
    Mode.IN: "%(prog)s DURATION (e.g. 15m)",
}


class HelpToStderrParser(argparse.ArgumentParser):
    """ArgumentParser that writes help text to stderr."""

    def print_help(self, file: IO[str] | None = None) -> None:
        super().print_help(file or sys.stderr)


def mode_for_prog(prog: str) -> Mode:
    """Pick the input mode from the invoked program name (default: back-at)."""
    if Path(prog).stem == Mode.IN.value:
        return Mode.IN
    return Mode.AT


def program_name(argv0: str | None = None) -> str:
    """Display name of the running program."""
    name = Path(argv0 if argv0 is not None else sys.argv[0]).name
    if not name or name.startswith("__main__"):
        return Mode.AT.value
    return name


def build_parser(mode: Mode, prog: str | None = None) -> argparse.ArgumentParser:
    """Build the parser for the given mode."""
    parser = HelpToStderrParser(
        prog=prog or mode.value,
        usage=USAGES[mode],
        description="Show a progress bar until you are back.",
    )
    parser.add_argument(
        "when",
        nargs="*",
        metavar="HH:MM" if mode is Mode.AT else "DURATION",
        help=(
            "time of day to count down to (14:30, 4pm, 2:45pm)"
            if mode is Mode.AT
            else "how long to count down for (15m, 1h30m)"
        ),
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help="progress bar prefix",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
        help="show version and exit",
    )
    return parser


def parse_args(
    argv: Sequence[str] | None = None, prog: str | None = None
) -> argparse.Namespace:
    """Parse command line arguments for the program named ``prog``."""
    prog = prog or program_name()
    mode = mode_for_prog(prog)
    args = build_parser(mode, prog).parse_args(argv)
    args.mode = mode
    return args
