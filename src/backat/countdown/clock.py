"""Clock and scheduler seams for the countdown runner."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current wall-clock time."""

    def now(self) -> datetime: ...


class Scheduler(Protocol):
    """One-shot deferred callbacks."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> None: ...


class SystemClock:
    """Local, timezone-aware wall clock."""

    def now(self) -> datetime:
        return datetime.now().astimezone()
