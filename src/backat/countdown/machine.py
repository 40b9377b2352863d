"""Countdown state machine as a pure transition function.

``step(session, event, config)`` returns the next session and the effect the
caller must carry out (schedule a timer, or quit). Nothing here reads the
clock or touches the terminal.

    RUNNING --tick, fraction >= 1--> FLASHING --6th flash--> TERMINATED
       |                                |
       +-------------cancel-------------+--------------------> TERMINATED
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from rich.cells import cell_len

from backat.config.settings import CountdownConfig
from backat.countdown.state import FlashState, Phase, Session


@dataclass(frozen=True, slots=True)
class Tick:
    """Periodic timer fired; ``now`` is the wall-clock time at delivery."""

    now: datetime


@dataclass(frozen=True, slots=True)
class Flash:
    """Flash timer fired."""


@dataclass(frozen=True, slots=True)
class Resize:
    """Terminal width changed."""

    width: int


@dataclass(frozen=True, slots=True)
class Cancel:
    """User asked to quit."""


Event = Tick | Flash | Resize | Cancel


@dataclass(frozen=True, slots=True)
class ScheduleTick:
    delay: float


@dataclass(frozen=True, slots=True)
class ScheduleFlash:
    delay: float


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Effect = ScheduleTick | ScheduleFlash | Quit


def bar_width_for(terminal_width: int, prefix: str, config: CountdownConfig) -> int:
    """Bar width that fits the terminal next to the prefix and time field."""
    width = terminal_width - 2 * cell_len(prefix) - config.chrome
    return max(0, min(width, config.max_width))


def completion_fraction(session: Session, now: datetime) -> float:
    """Elapsed share of the session duration at ``now``, clamped to [0, 1]."""
    fraction = (now - session.start) / session.duration
    return max(0.0, min(fraction, 1.0))


def _on_tick(
    session: Session, event: Tick, config: CountdownConfig
) -> tuple[Session, Effect | None]:
    if session.phase is not Phase.RUNNING:
        return session, None

    fraction = max(completion_fraction(session, event.now), session.fraction)
    elapsed = max(event.now - session.start, session.elapsed)

    if fraction < 1.0:
        return (
            replace(session, fraction=fraction, elapsed=elapsed),
            ScheduleTick(config.tick_interval),
        )

    if not config.flash:
        return (
            replace(session, fraction=1.0, elapsed=elapsed, terminated=True),
            Quit(),
        )

    flashing = FlashState(is_flashing=True, flash_count=0, bar_visible=True)
    return (
        replace(session, fraction=1.0, elapsed=elapsed, flash=flashing),
        ScheduleFlash(config.flash_interval),
    )


def _on_flash(
    session: Session, config: CountdownConfig
) -> tuple[Session, Effect | None]:
    if session.phase is not Phase.FLASHING:
        return session, None

    flash = FlashState(
        is_flashing=True,
        flash_count=session.flash.flash_count + 1,
        bar_visible=not session.flash.bar_visible,
    )
    if flash.flash_count >= config.total_flashes:
        return replace(session, flash=flash, terminated=True), Quit()
    return replace(session, flash=flash), ScheduleFlash(config.flash_interval)


def step(
    session: Session, event: Event, config: CountdownConfig
) -> tuple[Session, Effect | None]:
    """Apply one event and return the new session and the effect to perform."""
    if session.terminated:
        return session, None

    if isinstance(event, Tick):
        return _on_tick(session, event, config)
    if isinstance(event, Flash):
        return _on_flash(session, config)
    if isinstance(event, Resize):
        width = bar_width_for(event.width, session.prefix, config)
        return replace(session, bar_width=width), None
    if isinstance(event, Cancel):
        return replace(session, terminated=True), Quit()

    raise TypeError(f"unknown event: {event!r}")
