"""Session state for a running countdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from backat.errors import InvalidSessionError


class Phase(Enum):
    """Lifecycle phase of a countdown."""

    RUNNING = "running"
    FLASHING = "flashing"
    TERMINATED = "terminated"


@dataclass(frozen=True, slots=True)
class FlashState:
    """Flash-phase bookkeeping once the bar is full."""

    is_flashing: bool = False
    flash_count: int = 0
    bar_visible: bool = True


@dataclass(frozen=True, slots=True)
class Session:
    """Immutable snapshot of one countdown.

    Transitions return a new Session rather than mutating this one.
    """

    start: datetime
    duration: timedelta
    prefix: str
    bar_width: int
    fraction: float = 0.0
    elapsed: timedelta = timedelta(0)
    flash: FlashState = field(default_factory=FlashState)
    terminated: bool = False

    def __post_init__(self) -> None:
        if self.duration <= timedelta(0):
            raise InvalidSessionError(
                f"countdown duration must be positive, got {self.duration}"
            )

    @classmethod
    def create(
        cls, start: datetime, end: datetime, *, prefix: str, bar_width: int
    ) -> Session:
        """Create a session running from ``start`` until ``end``."""
        return cls(
            start=start,
            duration=end - start,
            prefix=prefix,
            bar_width=bar_width,
        )

    @property
    def phase(self) -> Phase:
        if self.terminated:
            return Phase.TERMINATED
        if self.flash.is_flashing:
            return Phase.FLASHING
        return Phase.RUNNING

    @property
    def remaining(self) -> timedelta:
        """Time left, never negative."""
        return max(self.duration - self.elapsed, timedelta(0))
