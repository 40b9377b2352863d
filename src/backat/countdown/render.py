"""Frame rendering for the countdown line."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from backat.config.settings import CountdownConfig
from backat.countdown.state import Phase, Session

FULL_CHAR = "█"
EMPTY_CHAR = "░"
FULL_STYLE = "#7571F9"
EMPTY_STYLE = "#606060"


@dataclass(frozen=True, slots=True)
class Frame:
    """One rendered line, split into its styled parts."""

    prefix: str
    filled: str
    empty: str
    remaining: str | None

    @property
    def plain(self) -> str:
        """The line without styling or trailing newline."""
        line = self.prefix + self.filled + self.empty
        if self.remaining is not None:
            line += " " + self.remaining
        return line

    def to_text(self) -> Text:
        """Styled rich Text for display in the TUI."""
        text = Text(self.prefix)
        text.append(self.filled, style=FULL_STYLE)
        text.append(self.empty, style=EMPTY_STYLE)
        if self.remaining is not None:
            text.append(" " + self.remaining)
        return text


def format_remaining(session: Session) -> str:
    """Remaining time as MM:SS, floored to whole seconds, minutes wrapped at 60."""
    seconds = int(session.remaining.total_seconds())
    return f"{(seconds // 60) % 60:02d}:{seconds % 60:02d}"


def filled_cells(fraction: float, width: int) -> int:
    """Number of filled cells, rounded half up."""
    cells = int(width * fraction + 0.5)
    return max(0, min(cells, width))


def render_frame(session: Session, config: CountdownConfig) -> Frame:
    """Render the current session as a Frame."""
    width = session.bar_width
    remaining = format_remaining(session) if config.show_remaining else None

    if session.phase is Phase.FLASHING and not session.flash.bar_visible:
        return Frame(session.prefix, "", " " * width, remaining)

    filled = filled_cells(session.fraction, width)
    return Frame(
        session.prefix,
        FULL_CHAR * filled,
        EMPTY_CHAR * (width - filled),
        remaining,
    )


def render(session: Session, config: CountdownConfig) -> str:
    """Render the countdown line, newline included."""
    return render_frame(session, config).plain + "\n"
