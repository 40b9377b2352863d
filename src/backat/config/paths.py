"""Centralized path management for back-at.

Follows XDG Base Directory Specification:
- State: $XDG_STATE_HOME/back-at (default: ~/.local/state/back-at)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

APP_NAME = "back-at"


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class BackAtPaths:
    """Centralized path management following XDG spec."""

    _state_home: Path = field(default_factory=_xdg_state_home)

    @property
    def state_dir(self) -> Path:
        """Per-user state directory for logs."""
        return self._state_home / APP_NAME

    @property
    def debug_log(self) -> Path:
        """Debug log file, overwritten on every run."""
        return self.state_dir / "debug.log"


_paths: BackAtPaths | None = None


def get_paths() -> BackAtPaths:
    """Get the global paths instance."""
    global _paths
    if _paths is None:
        _paths = BackAtPaths()
    return _paths


def reset_paths() -> None:
    """Reset the global paths instance (for testing)."""
    global _paths
    _paths = None
