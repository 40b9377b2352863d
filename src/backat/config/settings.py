"""Countdown configuration passed into the renderer and runner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_PREFIX = "☕ "
LOG_LEVEL_ENV = "BACKAT_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class CountdownConfig:
    """Display and timing settings for one countdown.

    ``flash`` and ``show_remaining`` select the complete behavior (flash
    phase after completion, remaining time next to the bar). Turning both
    off gives the plain bar that exits as soon as it is full.
    """

    prefix: str = DEFAULT_PREFIX
    max_width: int = 80
    default_width: int = 40
    chrome: int = 6
    tick_interval: float = 1.0
    flash_interval: float = 0.2
    total_flashes: int = 6  # 3 full on/off cycles
    flash: bool = True
    show_remaining: bool = True


def get_log_level() -> int:
    """Resolve the logging level from the environment, default INFO."""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, level, logging.INFO)
