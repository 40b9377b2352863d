"""Turn user input into an absolute end time.

Two modes:
- time of day (``14:30``, ``4pm``, ``2:45PM``), resolved against today's date
- duration (``15m``, ``1h30m``, ``1.5h``), added to the current time
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from backat.errors import TimeFormatError

logger = logging.getLogger(__name__)

# Tried in order; first layout that parses wins.
TIME_LAYOUTS: tuple[str, ...] = (
    "%H:%M",  # 24-hour
    "%I%p",  # 4PM
    "%I:%M%p",  # 2:45PM
)

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

# AM/PM is always English, whatever LC_TIME says.
_MERIDIEM_RE = re.compile(r"(.+?)(AM|PM)")

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"([-+]?)((?:{_NUMBER}{_UNIT})+)")
_COMPONENT_RE = re.compile(rf"({_NUMBER})({_UNIT})")


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _strptime(text: str, layout: str) -> datetime:
    """``datetime.strptime`` with a locale-independent ``%p``."""
    if not layout.endswith("%p"):
        return datetime.strptime(text, layout)

    match = _MERIDIEM_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"{text!r} has no AM/PM suffix")
    clock, meridiem = match.groups()
    parsed = datetime.strptime(clock, layout.removesuffix("%p"))
    hour = parsed.hour % 12 + (12 if meridiem == "PM" else 0)
    return parsed.replace(hour=hour)


def parse_time(text: str, now: datetime | None = None) -> datetime:
    """Parse a time of day and place it on today's date.

    Matching is case-insensitive. Raises TimeFormatError when no layout
    matches.
    """
    now = now or _local_now()
    upper = text.strip().upper()
    for layout in TIME_LAYOUTS:
        try:
            parsed = _strptime(upper, layout)
        except ValueError:
            continue
        end = now.replace(
            hour=parsed.hour,
            minute=parsed.minute,
            second=parsed.second,
            microsecond=0,
        )
        logger.debug("Parsed %r with layout %r -> %s", text, layout, end)
        return end

    raise TimeFormatError(f"unknown time format: {text!r}")


def duration_from_text(text: str) -> timedelta:
    """Parse a duration expression such as ``15m``, ``1h30m`` or ``-1.5h``.

    A bare ``0`` is accepted; every other component needs a unit suffix.
    """
    stripped = text.strip()
    if stripped in {"0", "+0", "-0"}:
        return timedelta(0)

    match = _DURATION_RE.fullmatch(stripped)
    if match is None:
        raise TimeFormatError(f"invalid duration: {text!r}")

    sign, body = match.groups()
    seconds = sum(
        float(number) * _UNIT_SECONDS[unit]
        for number, unit in _COMPONENT_RE.findall(body)
    )
    if sign == "-":
        seconds = -seconds
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise TimeFormatError(f"invalid duration: {text!r}") from e


def parse_duration(text: str, now: datetime | None = None) -> datetime:
    """Parse a duration and return the time it ends, counted from now.

    Raises TimeFormatError for unparsable or non-positive durations.
    """
    duration = duration_from_text(text)
    if duration <= timedelta(0):
        raise TimeFormatError(f"{text}: bad duration")

    now = now or _local_now()
    try:
        return now + duration
    except OverflowError as e:
        raise TimeFormatError(f"invalid duration: {text!r}") from e
