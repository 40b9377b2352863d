from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from backat.config.paths import reset_paths

T0 = datetime(2026, 3, 14, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolate_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep debug logs out of the real state directory."""
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    try:
        yield
    finally:
        reset_paths()


@dataclass
class FakeClock:
    """Clock that only moves when told to."""

    current: datetime = T0

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


@dataclass
class FakeScheduler:
    """Scheduler that fires callbacks when the paired clock is advanced."""

    clock: FakeClock
    pending: list[tuple[datetime, Callable[[], None]]] = field(default_factory=list)
    delays: list[float] = field(default_factory=list)

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self.delays.append(delay)
        self.pending.append((self.clock.now() + timedelta(seconds=delay), callback))

    def run_next(self) -> None:
        """Advance the clock to the earliest timer and fire it."""
        self.pending.sort(key=lambda item: item[0])
        due, callback = self.pending.pop(0)
        self.clock.current = max(self.clock.current, due)
        callback()

    def run_all(self, limit: int = 10_000) -> int:
        """Fire timers until none are left; return how many fired."""
        fired = 0
        while self.pending and fired < limit:
            self.run_next()
            fired += 1
        return fired


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> FakeScheduler:
    return FakeScheduler(clock)
