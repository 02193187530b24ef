"""Rich styles for the diff views."""

from ..hunks import HunkKind


HEADER = "cyan dim"
ADDED = "green"
REMOVED = "red"
MODIFIED = "blue"
LINE_NUMBER = "dim"

FILE_ADDED = "bold green"
FILE_DELETED = "bold red"
FILE_MODIFIED = "bold"


def removed_style(kind: HunkKind) -> str:
    """Style of removed lines in a hunk of the given kind."""
    return REMOVED if kind is HunkKind.PURE_DELETION else MODIFIED


def added_style(kind: HunkKind) -> str:
    """Style of added lines in a hunk of the given kind."""
    return ADDED if kind is HunkKind.PURE_ADDITION else MODIFIED
