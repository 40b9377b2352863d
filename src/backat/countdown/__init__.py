"""Countdown core: session state, transitions, rendering and the runner."""

from backat.countdown.clock import Clock, Scheduler, SystemClock
from backat.countdown.machine import (
    Cancel,
    Flash,
    Quit,
    Resize,
    ScheduleFlash,
    ScheduleTick,
    Tick,
    bar_width_for,
    completion_fraction,
    step,
)
from backat.countdown.render import Frame, render, render_frame
from backat.countdown.runner import CountdownRunner
from backat.countdown.state import FlashState, Phase, Session

__all__ = [
    "Cancel",
    "Clock",
    "CountdownRunner",
    "Flash",
    "FlashState",
    "Frame",
    "Phase",
    "Quit",
    "Resize",
    "ScheduleFlash",
    "ScheduleTick",
    "Scheduler",
    "Session",
    "SystemClock",
    "Tick",
    "bar_width_for",
    "completion_fraction",
    "render",
    "render_frame",
    "step",
]
