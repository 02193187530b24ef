"""Synchronized dual-pane (frames) view model.

Both panes hold the complete file. Around each minimal hunk the shorter side
is padded with filler rows, so row ``k`` of the left pane always lines up with
row ``k`` of the right pane and a single scroll offset positions both.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich import box
from rich.table import Table
from rich.text import Text

from ..hunks import Hunk, classify
from . import styles


@dataclass
class FrameRow:
    """A file line (``lineno`` set) or a filler row (``lineno`` is None)."""

    lineno: int | None
    text: str = ""
    style: str = ""


@dataclass
class FramePane:
    """One side of the frames view."""

    rows: list[FrameRow] = field(default_factory=list)
    line_count: int = 0

    def render(self) -> list[Text]:
        """Rows as styled lines with a line number gutter."""
        width = len(str(self.line_count))
        rendered = []
        for row in self.rows:
            if row.lineno is None:
                rendered.append(Text(""))
                continue
            text = Text(f"{row.lineno:>{width}} ", style=styles.LINE_NUMBER)
            text.append(row.text, style=row.style)
            rendered.append(text)
        return rendered


@dataclass
class Frames:
    """Both panes plus the row offset of every navigation anchor.

    ``anchors[0]`` is the beginning of file, ``anchors[i]`` the first row of
    hunk ``i`` (1-based) and ``anchors[-1]`` the end of file.
    """

    left: FramePane
    right: FramePane
    anchors: list[int]

    @property
    def hunk_count(self) -> int:
        return len(self.anchors) - 2

    def position_label(self, position: int) -> str:
        """Label for a navigation position: BOF, the hunk number, or EOF."""
        if position <= 0:
            return "BOF"
        if position >= len(self.anchors) - 1:
            return "EOF"
        return str(position)

    def clamp(self, position: int) -> int:
        return max(0, min(position, len(self.anchors) - 1))


def build_frames(
    hunks: Sequence[Hunk],
    base_lines: Sequence[str],
    head_lines: Sequence[str],
) -> Frames:
    """Lay out both files aligned on their minimal hunks.

    Args:
        hunks: Minimal hunks of the file.
        base_lines: Complete old file content.
        head_lines: Complete new file content.
    """
    left = FramePane(line_count=len(base_lines))
    right = FramePane(line_count=len(head_lines))
    anchors = [0]
    old_i = new_i = 0  # next unconsumed line, 0-based

    def copy_unchanged(old_stop: int, new_stop: int) -> None:
        nonlocal old_i, new_i
        while old_i < old_stop or new_i < new_stop:
            if old_i < old_stop:
                left.rows.append(FrameRow(old_i + 1, base_lines[old_i]))
                old_i += 1
            else:
                left.rows.append(FrameRow(None))
            if new_i < new_stop:
                right.rows.append(FrameRow(new_i + 1, head_lines[new_i]))
                new_i += 1
            else:
                right.rows.append(FrameRow(None))

    for hunk in hunks:
        copy_unchanged(min(hunk.source_start - 1, len(base_lines)), min(hunk.dest_start - 1, len(head_lines)))
        anchors.append(len(left.rows))

        kind = classify(hunk)
        removed_style = styles.removed_style(kind)
        added_style = styles.added_style(kind)
        for k in range(max(len(hunk.source_lines), len(hunk.dest_lines))):
            if k < len(hunk.source_lines):
                left.rows.append(FrameRow(old_i + 1, hunk.source_lines[k][1:], removed_style))
                old_i += 1
            else:
                left.rows.append(FrameRow(None))
            if k < len(hunk.dest_lines):
                right.rows.append(FrameRow(new_i + 1, hunk.dest_lines[k][1:], added_style))
                new_i += 1
            else:
                right.rows.append(FrameRow(None))

    copy_unchanged(len(base_lines), len(head_lines))
    anchors.append(len(left.rows))
    return Frames(left=left, right=right, anchors=anchors)


def render_frames(frames: Frames) -> Table:
    """Both panes as a two-column table, for non-interactive output."""
    table = Table(expand=True, box=box.SIMPLE, pad_edge=False, show_header=False)
    table.add_column(ratio=1, overflow="fold")
    table.add_column(ratio=1, overflow="fold")
    for left, right in zip(frames.left.render(), frames.right.render()):
        table.add_row(left, right)
    return table
