"""Side-by-side view."""

from collections.abc import Sequence
from dataclasses import dataclass

from rich import box
from rich.table import Table
from rich.text import Text

from ..hunks import Hunk, LineRole, classify
from . import styles


@dataclass
class SideCell:
    """One numbered line on one side of a side-by-side row."""

    lineno: int
    text: str
    style: str = ""


@dataclass
class SideBySideRow:
    """Aligned pair of cells; ``None`` pads the shorter side of a change."""

    left: SideCell | None
    right: SideCell | None


def sdiff_rows(hunk: Hunk) -> list[SideBySideRow]:
    """Align a hunk's old and new lines into rows.

    Context lines are paired. Each removed run is paired with the added run
    that follows it; the shorter one is padded with empty cells.
    """
    kind = classify(hunk)
    src, dst = hunk.source_lines, hunk.dest_lines
    rows: list[SideBySideRow] = []
    i = j = 0
    while i < len(src) or j < len(dst):
        start = (i, j)

        removed: list[SideCell] = []
        while i < len(src) and src[i].startswith(LineRole.REMOVED.value):
            removed.append(SideCell(hunk.source_start + i, src[i][1:], styles.removed_style(kind)))
            i += 1
        added: list[SideCell] = []
        while j < len(dst) and dst[j].startswith(LineRole.ADDED.value):
            added.append(SideCell(hunk.dest_start + j, dst[j][1:], styles.added_style(kind)))
            j += 1
        for k in range(max(len(removed), len(added))):
            rows.append(
                SideBySideRow(
                    left=removed[k] if k < len(removed) else None,
                    right=added[k] if k < len(added) else None,
                )
            )

        while (
            i < len(src)
            and j < len(dst)
            and src[i].startswith(LineRole.CONTEXT.value)
            and dst[j].startswith(LineRole.CONTEXT.value)
        ):
            rows.append(
                SideBySideRow(
                    left=SideCell(hunk.source_start + i, src[i][1:]),
                    right=SideCell(hunk.dest_start + j, dst[j][1:]),
                )
            )
            i += 1
            j += 1

        if (i, j) == start:
            # Context left on one side only
            if i < len(src):
                rows.append(SideBySideRow(SideCell(hunk.source_start + i, src[i][1:]), None))
                i += 1
            else:
                rows.append(SideBySideRow(None, SideCell(hunk.dest_start + j, dst[j][1:])))
                j += 1
    return rows


def _cell_text(cell: SideCell | None, width: int) -> Text:
    if cell is None:
        return Text("")
    text = Text(f"{cell.lineno:>{width}} ", style=styles.LINE_NUMBER)
    text.append(cell.text, style=cell.style)
    return text


def render_sdiff(hunks: Sequence[Hunk], old_name: str = "old", new_name: str = "new") -> Table:
    """Side-by-side table, one section per hunk."""
    last_line = max((max(h.source_end, h.dest_end) for h in hunks), default=1)
    width = len(str(last_line))

    table = Table(show_lines=False, expand=True, box=box.SIMPLE, pad_edge=False)
    table.add_column(old_name, ratio=1, overflow="fold")
    table.add_column(new_name, ratio=1, overflow="fold")
    for index, hunk in enumerate(hunks):
        if index:
            table.add_section()
        for row in sdiff_rows(hunk):
            table.add_row(_cell_text(row.left, width), _cell_text(row.right, width))
    return table
