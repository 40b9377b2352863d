"""back-at: a terminal progress bar that fills up until you are back."""

__version__ = "0.3.0"
