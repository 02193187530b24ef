"""Classify hunks as pure additions, pure deletions or modifications."""

from enum import Enum

from .models import Hunk, LineRole


class HunkKind(str, Enum):
    """Semantic category of a hunk, used for styling."""

    PURE_ADDITION = "addition"
    PURE_DELETION = "deletion"
    MODIFICATION = "modification"


def is_pure_addition(hunk: Hunk) -> bool:
    """True when no source line is removed."""
    return not any(line.startswith(LineRole.REMOVED.value) for line in hunk.source_lines)


def is_pure_deletion(hunk: Hunk) -> bool:
    """True when no destination line is added."""
    return not any(line.startswith(LineRole.ADDED.value) for line in hunk.dest_lines)


def classify(hunk: Hunk) -> HunkKind:
    """Return the single kind of a hunk.

    The addition check runs first, so a hunk with no lines at all is a pure
    addition.
    """
    if is_pure_addition(hunk):
        return HunkKind.PURE_ADDITION
    if is_pure_deletion(hunk):
        return HunkKind.PURE_DELETION
    return HunkKind.MODIFICATION
