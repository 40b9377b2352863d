"""Countdown TUI application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.dom import DOMNode

from backat.config.settings import CountdownConfig
from backat.countdown.clock import Clock, SystemClock
from backat.countdown.machine import Cancel, Resize
from backat.countdown.render import Frame
from backat.countdown.runner import CountdownRunner
from backat.countdown.state import Session
from backat.tui.widgets.countdown_bar import CountdownBar

logger = logging.getLogger(__name__)


class TimerScheduler:
    """Scheduler backed by Textual one-shot timers."""

    def __init__(self, node: DOMNode) -> None:
        self._node = node

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._node.set_timer(delay, callback)


class CountdownApp(App[None]):
    """Inline countdown bar that exits after the flash sequence."""

    CSS = """
    Screen {
        height: auto;
        background: transparent;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
        Binding("q", "cancel", "Quit", show=False),
    ]

    def __init__(
        self,
        session: Session,
        config: CountdownConfig,
        *,
        clock: Clock | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._bar = CountdownBar()
        self.runner = CountdownRunner(
            session,
            config,
            clock=clock or SystemClock(),
            scheduler=TimerScheduler(self),
            on_frame=self._show_frame,
            on_exit=self._finish,
        )

    def compose(self) -> ComposeResult:
        yield self._bar

    def on_mount(self) -> None:
        """Size the bar to the terminal and start ticking."""
        self.runner.dispatch(Resize(self.size.width))
        self.runner.start()

    def on_resize(self, event: events.Resize) -> None:
        """Recompute the bar width for the new terminal size."""
        self.runner.dispatch(Resize(event.size.width))

    def action_cancel(self) -> None:
        """Quit immediately."""
        logger.info("Cancelled by user")
        self.runner.dispatch(Cancel())

    def _show_frame(self, frame: Frame) -> None:
        self._bar.show(frame)

    def _finish(self) -> None:
        self.exit(return_code=0)
