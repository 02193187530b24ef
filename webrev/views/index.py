"""Index page: comparison summary and per-file view links."""

from rich.console import Group
from rich.table import Table
from rich.text import Text

from ..models import Comparison, FileStatus, commits_per_file
from . import styles


VIEW_NAMES = ("cdiff", "udiff", "sdiff", "frames", "old", "new", "patch")


def available_views(status: FileStatus) -> list[str]:
    """Views that make sense for a file with the given status."""
    if status is FileStatus.ADDED:
        return ["new", "patch"]
    if status is FileStatus.DELETED:
        return ["old", "patch"]
    if status.is_modified:
        return list(VIEW_NAMES)
    return []


def _file_style(status: FileStatus) -> str:
    if status is FileStatus.ADDED:
        return styles.FILE_ADDED
    if status is FileStatus.DELETED:
        return styles.FILE_DELETED
    return styles.FILE_MODIFIED


def render_index(comparison: Comparison) -> Group:
    """Summary table followed by one entry per file.

    Each entry lists the views available for the file (dashes where a view
    does not apply), the file name, the subjects of the commits touching it
    and its change counters.
    """
    title = comparison.base.full_name or "repository"
    header = Text(f"Code Review for {title}", style="bold underline")

    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="bold", justify="right")
    summary.add_column()
    if comparison.created_at:
        summary.add_row("Generated on:", comparison.created_at.strftime("%a, %d %b %Y %H:%M:%S %Z").strip())
    if comparison.base.html_url:
        summary.add_row("Compare against:", comparison.base.html_url)
    summary.add_row("Compare against version:", comparison.base.sha[:8])
    summary.add_row("Summary of changes:", comparison.summary.format())
    summary.add_row("Diff of changes:", f"{comparison.base.sha[:8]}...{comparison.head.sha[:8]}.diff")
    if comparison.number is not None:
        summary.add_row("Pull request:", str(comparison.number))
    legend = Text()
    legend.append("Modified file", style=styles.FILE_MODIFIED)
    legend.append("  ")
    legend.append("Deleted file", style=styles.FILE_DELETED)
    legend.append("  ")
    legend.append("New file", style=styles.FILE_ADDED)
    summary.add_row("Legend:", legend)

    parts = [header, summary, Text("")]
    per_file = commits_per_file(comparison.commits)
    for index, file in enumerate(comparison.files):
        views = available_views(file.status)
        entry = Text(f"{index:>3} ")
        for name in VIEW_NAMES:
            if name in views:
                entry.append(f"{name:<7}", style="cyan")
            else:
                entry.append("-" * 6 + " ", style="dim")
        entry.append(file.filename, style=_file_style(file.status))
        if file.status in (FileStatus.RENAMED, FileStatus.COPIED) and file.previous_filename:
            entry.append(f" (was {file.previous_filename})", style="italic")
        parts.append(entry)

        for commit in per_file.get(file.filename, []):
            parts.append(Text(f"        {commit.short_sha}: {commit.subject}"))
        stat = Text("        ")
        stat.append(f"{file.changes} lines changed; {file.additions} ins; {file.deletions} del", style="dim")
        parts.append(stat)

    return Group(*parts)
