"""Line-oriented views: reconstructed patch, unified and context diffs."""

from collections.abc import Iterator, Sequence

from rich.text import Text

from ..hunks import Hunk, HunkKind, LineRole, classify
from ..models import FileChange, FileStatus
from . import styles


def unified_lines(hunk: Hunk) -> Iterator[str]:
    """Yield a hunk's lines in unified diff order.

    Each removed run is followed by its added run, then by the context lines
    shared by both sides.
    """
    src, dst = hunk.source_lines, hunk.dest_lines
    i = j = 0
    while i < len(src) or j < len(dst):
        start = (i, j)
        while i < len(src) and src[i].startswith(LineRole.REMOVED.value):
            yield src[i]
            i += 1
        while j < len(dst) and dst[j].startswith(LineRole.ADDED.value):
            yield dst[j]
            j += 1
        while (
            i < len(src)
            and j < len(dst)
            and src[i].startswith(LineRole.CONTEXT.value)
            and dst[j].startswith(LineRole.CONTEXT.value)
        ):
            yield src[i]
            i += 1
            j += 1
        if (i, j) == start:
            # Context left on one side only; emit it as-is
            if i < len(src):
                yield src[i]
                i += 1
            else:
                yield dst[j]
                j += 1


def render_patch(file: FileChange, hunks: Sequence[Hunk]) -> str:
    """Reconstruct a unified patch for one file from its hunks."""
    old_name = "/dev/null" if file.status is FileStatus.ADDED else f"a/{file.base_filename}"
    new_name = "/dev/null" if file.status is FileStatus.DELETED else f"b/{file.filename}"
    out = [f"--- {old_name}", f"+++ {new_name}"]
    for hunk in hunks:
        out.append(hunk.header())
        out.extend(unified_lines(hunk))
    return "\n".join(out) + "\n"


def render_udiff(hunks: Sequence[Hunk]) -> Text:
    """Unified diff with changed lines styled by hunk kind."""
    text = Text()
    for hunk in hunks:
        text.append(hunk.header() + "\n", style=styles.HEADER)
        kind = classify(hunk)
        for line in unified_lines(hunk):
            if line.startswith(LineRole.REMOVED.value):
                text.append(line + "\n", style=styles.removed_style(kind))
            elif line.startswith(LineRole.ADDED.value):
                text.append(line + "\n", style=styles.added_style(kind))
            else:
                text.append(line + "\n")
    return text


def _cdiff_side(text: Text, lines: Sequence[str], marker: str, style: str) -> None:
    for line in lines:
        if line.startswith(LineRole.CONTEXT.value):
            text.append(" " + line + "\n")
        else:
            text.append(marker + " " + line[1:] + "\n", style=style)


def render_cdiff(hunks: Sequence[Hunk]) -> Text:
    """Context diff: old side then new side of every hunk.

    Lines of modification hunks are marked ``!``; pure additions and
    deletions keep ``+`` and ``-``.
    """
    text = Text()
    for hunk in hunks:
        kind = classify(hunk)
        text.append("***************\n", style=styles.HEADER)

        text.append(f"*** {hunk.source_start},{len(hunk.source_lines)} ****\n", style=styles.HEADER)
        removed_marker = "!" if kind is HunkKind.MODIFICATION else "-"
        _cdiff_side(text, hunk.source_lines, removed_marker, styles.removed_style(kind))

        text.append(f"--- {hunk.dest_start},{len(hunk.dest_lines)} ----\n", style=styles.HEADER)
        added_marker = "!" if kind is HunkKind.MODIFICATION else "+"
        _cdiff_side(text, hunk.dest_lines, added_marker, styles.added_style(kind))
    return text


def render_numbered(lines: Sequence[str]) -> Text:
    """Full file listing with a right-aligned line number gutter."""
    width = len(str(len(lines)))
    text = Text()
    for number, line in enumerate(lines, start=1):
        text.append(f"{number:>{width}} ", style=styles.LINE_NUMBER)
        text.append(line + "\n")
    return text
