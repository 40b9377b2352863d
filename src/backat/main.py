"""Main module for back-at."""

import logging
import sys

from backat.cli import run
from backat.config.paths import get_paths
from backat.config.settings import get_log_level


def setup_logging() -> None:
    """Configure logging to file for debugging.

    The TUI owns the terminal, so nothing is logged to stderr.
    """
    log_file = get_paths().debug_log
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, mode="w")
    except OSError:
        handler = logging.NullHandler()

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )
    logging.info("back-at starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the back-at and back-in commands."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
