"""Widgets for the back-at TUI."""

from backat.tui.widgets.countdown_bar import CountdownBar

__all__ = ["CountdownBar"]
