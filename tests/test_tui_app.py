"""Headless tests for the countdown TUI."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from backat.config.settings import CountdownConfig
from backat.countdown.render import EMPTY_CHAR
from backat.countdown.state import Phase, Session
from backat.tui.app import CountdownApp
from backat.tui.widgets.countdown_bar import CountdownBar

T0 = datetime(2026, 3, 14, 9, 0, 0, tzinfo=timezone.utc)


@dataclass
class SteppingClock:
    """Moves forward one second every time it is read."""

    current: datetime = T0

    def now(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


def make_app(seconds: int, config: CountdownConfig) -> CountdownApp:
    session = Session.create(
        T0, T0 + timedelta(seconds=seconds), prefix=config.prefix, bar_width=40
    )
    return CountdownApp(session, config, clock=SteppingClock())


def test_bar_fits_terminal_and_q_cancels() -> None:
    app = make_app(600, CountdownConfig(prefix="> "))

    async def scenario() -> None:
        async with app.run_test(size=(60, 5)) as pilot:
            await pilot.pause()
            bar = app.query_one(CountdownBar)
            assert bar.frame is not None
            assert bar.frame.plain == "> " + EMPTY_CHAR * 50 + " 10:00"
            await pilot.press("q")

    asyncio.run(scenario())

    assert app.runner.phase is Phase.TERMINATED
    assert app.runner.session.flash.flash_count == 0
    assert app.return_code == 0


def test_ctrl_c_cancels() -> None:
    app = make_app(600, CountdownConfig(prefix="> "))

    async def scenario() -> None:
        async with app.run_test(size=(60, 5)) as pilot:
            await pilot.press("ctrl+c")

    asyncio.run(scenario())

    assert app.runner.phase is Phase.TERMINATED
    assert app.return_code == 0


def test_runs_to_completion_and_exits() -> None:
    config = CountdownConfig(prefix="> ", tick_interval=0.01, flash_interval=0.01)
    app = make_app(2, config)

    async def wait_for_end() -> None:
        while app.runner.phase is not Phase.TERMINATED:
            await asyncio.sleep(0.01)

    async def scenario() -> None:
        async with app.run_test(size=(60, 5)):
            await asyncio.wait_for(wait_for_end(), timeout=5)

    asyncio.run(scenario())

    assert app.runner.session.fraction == 1.0
    assert app.runner.session.flash.flash_count == 6
    assert app.return_code == 0
