"""CLI orchestration: resolve the end time and run the countdown."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from datetime import datetime

from backat.cli.parser import Mode, parse_args
from backat.config.settings import CountdownConfig
from backat.countdown.clock import Clock, SystemClock
from backat.countdown.state import Session
from backat.errors import (
    ArgumentCountError,
    BackAtError,
    PastDeadlineError,
    TerminalError,
)
from backat.timeparse import parse_duration, parse_time

logger = logging.getLogger(__name__)


def resolve_end(mode: Mode, text: str, now: datetime) -> datetime:
    """Turn the positional argument into an end time for the given mode."""
    if mode is Mode.IN:
        return parse_duration(text, now)
    return parse_time(text, now)


def build_session(
    args: argparse.Namespace, clock: Clock
) -> tuple[Session, CountdownConfig]:
    """Validate arguments and create the session to run."""
    if len(args.when) != 1:
        raise ArgumentCountError(len(args.when))

    text = args.when[0]
    end = resolve_end(args.mode, text, clock.now())
    start = clock.now()
    if end <= start:
        raise PastDeadlineError(text)

    logger.info("Mode %s, input %r, counting down to %s", args.mode.value, text, end)
    config = CountdownConfig(prefix=args.prefix)
    session = Session.create(
        start, end, prefix=config.prefix, bar_width=config.default_width
    )
    return session, config


def launch_tui(session: Session, config: CountdownConfig) -> int:
    """Run the countdown TUI inline until it exits."""
    from backat.tui.app import CountdownApp

    app = CountdownApp(session, config)
    try:
        app.run(inline=True, inline_no_clear=True, mouse=False)
    except OSError as e:
        raise TerminalError(f"terminal: {e}") from e

    if app.return_code:
        raise TerminalError(f"display exited with status {app.return_code}")
    return 0


def run(
    argv: Sequence[str] | None = None,
    *,
    prog: str | None = None,
    configure_logging: Callable[[], None] | None = None,
    clock: Clock | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and run the countdown."""
    args = parse_args(argv, prog)

    if configure_logging is not None:
        configure_logging()

    try:
        session, config = build_session(args, clock or SystemClock())
        return launch_tui(session, config)
    except BackAtError as e:
        logger.error("%s: %s", type(e).__name__, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
