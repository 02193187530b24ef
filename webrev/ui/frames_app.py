"""Textual application for the synchronized dual-pane (frames) view."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from ..views import Frames
from .widgets import FramePaneView


# Rows kept visible above a hunk when jumping to it
ANCHOR_MARGIN = 2


class FramesApp(App):
    """Old and new file side by side, scrolled together."""

    TITLE = "webrev frames"

    CSS = """
    Screen {
        background: $surface;
    }

    #panes {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("j", "next_diff", "Next Diff"),
        Binding("k", "prev_diff", "Prev Diff"),
        Binding("b", "beginning", "BOF"),
        Binding("e", "end", "EOF"),
        Binding("down", "scroll_lines(1)", "Down", show=False, priority=True),
        Binding("up", "scroll_lines(-1)", "Up", show=False, priority=True),
        Binding("pagedown", "scroll_lines(20)", "Page Down", show=False, priority=True),
        Binding("pageup", "scroll_lines(-20)", "Page Up", show=False, priority=True),
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, frames: Frames, old_name: str, new_name: str):
        """Initialize the frames viewer.

        Args:
            frames: Aligned panes built from the file's minimal hunks.
            old_name: Title of the left (base) pane.
            new_name: Title of the right (head) pane.
        """
        super().__init__()
        self.frames = frames
        self.old_name = old_name
        self.new_name = new_name
        self.position = 0  # BOF, hunk number, or EOF
        self.row_offset = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panes"):
            yield FramePaneView(self.old_name, id="lhs")
            yield FramePaneView(self.new_name, id="rhs")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#lhs", FramePaneView).load(self.frames.left)
        self.query_one("#rhs", FramePaneView).load(self.frames.right)
        self._update_title()

    @property
    def max_offset(self) -> int:
        # The EOF marker is one row past the last pane row
        return len(self.frames.left.rows)

    def _set_offset(self, offset: int) -> None:
        self.row_offset = max(0, min(offset, self.max_offset))
        for pane in self.query(FramePaneView):
            pane.scroll_to_row(self.row_offset)

    def _go_to(self, position: int) -> None:
        self.position = self.frames.clamp(position)
        self._set_offset(self.frames.anchors[self.position] - ANCHOR_MARGIN)
        self._update_title()

    def _update_title(self) -> None:
        label = self.frames.position_label(self.position)
        self.sub_title = f"Diff {label} of {self.frames.hunk_count}"

    def action_next_diff(self) -> None:
        self._go_to(self.position + 1)

    def action_prev_diff(self) -> None:
        self._go_to(self.position - 1)

    def action_beginning(self) -> None:
        self._go_to(0)

    def action_end(self) -> None:
        self._go_to(len(self.frames.anchors) - 1)

    def action_scroll_lines(self, delta: int) -> None:
        self._set_offset(self.row_offset + delta)
