"""Drive the countdown state machine with a clock and a scheduler."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backat.config.settings import CountdownConfig
from backat.countdown.clock import Clock, Scheduler
from backat.countdown.machine import (
    Effect,
    Event,
    Flash,
    Quit,
    ScheduleFlash,
    ScheduleTick,
    Tick,
    step,
)
from backat.countdown.render import Frame, render_frame
from backat.countdown.state import Phase, Session

logger = logging.getLogger(__name__)


class CountdownRunner:
    """Feed events through ``step`` one at a time and carry out the effects.

    Timers are one-shot: each tick or flash handler re-arms the next one
    through the effect it returns. Once the session terminates, further
    events are dropped.
    """

    def __init__(
        self,
        session: Session,
        config: CountdownConfig,
        *,
        clock: Clock,
        scheduler: Scheduler,
        on_frame: Callable[[Frame], None],
        on_exit: Callable[[], None],
    ) -> None:
        self.session = session
        self.config = config
        self._clock = clock
        self._scheduler = scheduler
        self._on_frame = on_frame
        self._on_exit = on_exit

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def start(self) -> None:
        """Show the first frame and arm the first tick."""
        logger.info(
            "Countdown started at %s for %s", self.session.start, self.session.duration
        )
        self._on_frame(render_frame(self.session, self.config))
        self._scheduler.schedule(self.config.tick_interval, self._fire_tick)

    def dispatch(self, event: Event) -> None:
        """Handle one event, then re-render."""
        if self.session.terminated:
            logger.debug("Dropping %r after termination", event)
            return

        before = self.session.phase
        self.session, effect = step(self.session, event, self.config)
        if self.session.phase is not before:
            logger.info(
                "Phase %s -> %s on %s",
                before.value,
                self.session.phase.value,
                type(event).__name__,
            )

        self._on_frame(render_frame(self.session, self.config))
        self._apply(effect)

    def _apply(self, effect: Effect | None) -> None:
        if isinstance(effect, ScheduleTick):
            self._scheduler.schedule(effect.delay, self._fire_tick)
        elif isinstance(effect, ScheduleFlash):
            self._scheduler.schedule(effect.delay, self._fire_flash)
        elif isinstance(effect, Quit):
            self._on_exit()

    def _fire_tick(self) -> None:
        self.dispatch(Tick(self._clock.now()))

    def _fire_flash(self) -> None:
        self.dispatch(Flash())
