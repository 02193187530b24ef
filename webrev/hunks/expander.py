"""Re-derive hunks with surrounding context from their minimal form."""

from collections.abc import Sequence
import logging

from .models import Hunk, LineRole


logger = logging.getLogger(__name__)


def should_merge(current: Hunk, following: Hunk, n: int) -> bool:
    """Whether ``following`` falls inside the context window of ``current``.

    Proximity on either side is enough; the gap lines are still pulled for
    each side independently by position.
    """
    return (
        following.source_start <= current.source_end + n
        or following.dest_start <= current.dest_end + n
    )


def group_hunks(hunks: Sequence[Hunk], n: int) -> list[list[Hunk]]:
    """Fold minimal hunks into runs that expand into a single hunk.

    Each hunk is compared with the last hunk absorbed into the growing run,
    so merging is transitive across a chain of nearby hunks.
    """
    groups: list[list[Hunk]] = []
    for hunk in hunks:
        if groups and should_merge(groups[-1][-1], hunk, n):
            groups[-1].append(hunk)
        else:
            groups.append([hunk])
    return groups


def _context(lines: Sequence[str], start: int, count: int) -> list[str]:
    """Prefixed context lines ``start .. start + count - 1`` (1-based)."""
    if count <= 0:
        return []
    return [LineRole.CONTEXT.value + line for line in lines[start - 1 : start - 1 + count]]


def _expand_group(
    group: list[Hunk],
    n: int,
    base_lines: Sequence[str],
    head_lines: Sequence[str],
) -> Hunk:
    first = group[0]
    leading = min(n, first.source_start - 1, first.dest_start - 1)
    source_start = max(1, first.source_start - leading)
    dest_start = max(1, first.dest_start - leading)

    source_lines = _context(base_lines, source_start, leading)
    dest_lines = _context(head_lines, dest_start, leading)

    previous: Hunk | None = None
    for hunk in group:
        if previous is not None:
            source_lines += _context(
                base_lines, previous.source_end, hunk.source_start - previous.source_end
            )
            dest_lines += _context(head_lines, previous.dest_end, hunk.dest_start - previous.dest_end)
        source_lines += hunk.source_lines
        dest_lines += hunk.dest_lines
        previous = hunk

    last = group[-1]
    # Both sides share trailing context; a deletion at end of file leaves none
    trailing = max(
        0,
        min(
            n,
            len(base_lines) - last.source_end + 1,
            len(head_lines) - last.dest_end + 1,
        ),
    )
    source_lines += _context(base_lines, last.source_end, trailing)
    dest_lines += _context(head_lines, last.dest_end, trailing)

    return Hunk(
        source_start=source_start,
        source_lines=tuple(source_lines),
        dest_start=dest_start,
        dest_lines=tuple(dest_lines),
    )


def expand_context(
    hunks: Sequence[Hunk],
    n: int,
    base_lines: Sequence[str],
    head_lines: Sequence[str],
) -> tuple[Hunk, ...]:
    """Add up to ``n`` lines of context around each minimal hunk.

    Hunks that fall within ``n`` lines of each other are merged. Context that
    would run past either end of a file is truncated; no error is raised.

    Args:
        hunks: Minimal hunks, sorted and non-overlapping.
        n: Number of context lines requested around each change.
        base_lines: Complete old file content (an added file passes ``[]``).
        head_lines: Complete new file content (a deleted file passes ``[]``).

    Returns:
        Expanded hunks. ``n == 0`` returns hunks equal to the input.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Context size must be non-negative, got {n}")

    groups = group_hunks(hunks, n)
    expanded = tuple(_expand_group(group, n, base_lines, head_lines) for group in groups)
    logger.debug(f"Expanded {len(hunks)} minimal hunks into {len(expanded)} with context {n}")
    return expanded
