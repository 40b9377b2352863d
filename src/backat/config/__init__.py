"""Configuration management for back-at."""

from __future__ import annotations

from backat.config.paths import BackAtPaths, get_paths, reset_paths
from backat.config.settings import DEFAULT_PREFIX, CountdownConfig, get_log_level

__all__ = [
    "DEFAULT_PREFIX",
    "BackAtPaths",
    "CountdownConfig",
    "get_log_level",
    "get_paths",
    "reset_paths",
]
