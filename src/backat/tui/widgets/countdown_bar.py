"""Single-line countdown bar widget."""

from textual.app import RenderResult
from textual.reactive import reactive
from textual.widgets import Static

from backat.countdown.render import Frame


class CountdownBar(Static):
    """Shows the most recent frame produced by the countdown runner."""

    DEFAULT_CSS = """
    CountdownBar {
        height: 1;
        width: 100%;
        background: transparent;
    }
    """

    frame: reactive[Frame | None] = reactive(None, layout=False)

    def render(self) -> RenderResult:
        """Render the current frame, or nothing before the first one."""
        if self.frame is None:
            return ""
        return self.frame.to_text()

    def show(self, frame: Frame) -> None:
        """Display a new frame."""
        self.frame = frame
