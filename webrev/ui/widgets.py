"""Pane widget for the frames viewer."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import RichLog, Static

from ..views import FramePane


class FramePaneView(Container):
    """Displays one side of the frames view with a title bar."""

    DEFAULT_CSS = """
    FramePaneView {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
    }

    FramePaneView .pane-title {
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }

    FramePaneView RichLog {
        height: 1fr;
        scrollbar-size-horizontal: 1;
    }
    """

    def __init__(self, title: str, **kwargs):
        super().__init__(**kwargs)
        self.pane_title = title

    def compose(self) -> ComposeResult:
        yield Static(self.pane_title, classes="pane-title")
        yield RichLog(wrap=False, markup=False, auto_scroll=False)

    def load(self, pane: FramePane) -> None:
        """Replace displayed content with a pane's rows and an EOF marker."""
        log = self.query_one(RichLog)
        log.clear()
        for line in pane.render():
            log.write(line)
        log.write(Text("--- EOF ---", style="bold red"))

    def scroll_to_row(self, row: int) -> None:
        log = self.query_one(RichLog)
        log.scroll_to(y=row, animate=False)
