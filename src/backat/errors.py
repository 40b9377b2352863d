"""Error types raised before the countdown loop starts."""

from __future__ import annotations


class BackAtError(Exception):
    """Base class for all back-at errors reported to the user."""


class ArgumentCountError(BackAtError):
    """Wrong number of positional arguments."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("wrong number of arguments")


class TimeFormatError(BackAtError, ValueError):
    """Input matches none of the recognized time or duration layouts."""


class PastDeadlineError(BackAtError):
    """Resolved end time is not after the current time."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{text} is in the past")


class InvalidSessionError(BackAtError, ValueError):
    """Session constructed with a non-positive duration."""


class TerminalError(BackAtError):
    """Failure to initialize or drive the interactive display."""
