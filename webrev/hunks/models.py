"""Hunk data model shared by the parser, expander and views."""

from dataclasses import dataclass
from enum import Enum

from ..errors import MalformedPatchError


def split_lines(text: str) -> list[str]:
    """Split text on newlines, without a trailing empty entry for a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineRole(str, Enum):
    """Role of a stored line, encoded as its one-character prefix."""

    CONTEXT = " "
    REMOVED = "-"
    ADDED = "+"

    @classmethod
    def of(cls, line: str) -> "LineRole":
        """Recover the role of a prefixed line.

        Raises:
            ValueError: If the line does not start with a role prefix.
        """
        if not line:
            raise ValueError("Empty line has no role prefix")
        return cls(line[0])


@dataclass(frozen=True)
class Hunk:
    """A contiguous region where the two file versions diverge.

    Lines keep their role prefix verbatim. ``source_lines`` holds context and
    removed lines, ``dest_lines`` holds context and added lines. A minimal hunk
    (as produced by the parser) has no context lines at all.
    """

    source_start: int
    source_lines: tuple[str, ...]
    dest_start: int
    dest_lines: tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but store tuples so hunks stay hashable
        if not isinstance(self.source_lines, tuple):
            object.__setattr__(self, "source_lines", tuple(self.source_lines))
        if not isinstance(self.dest_lines, tuple):
            object.__setattr__(self, "dest_lines", tuple(self.dest_lines))

        if self.source_start < 1 or self.dest_start < 1:
            raise ValueError(
                f"Hunk starts must be >= 1 (got -{self.source_start} +{self.dest_start})"
            )
        if any(line.startswith(LineRole.ADDED.value) for line in self.source_lines):
            raise ValueError("Source lines cannot contain added lines")
        if any(line.startswith(LineRole.REMOVED.value) for line in self.dest_lines):
            raise ValueError("Destination lines cannot contain removed lines")

    @property
    def source_end(self) -> int:
        """First old-file line number past this hunk."""
        return self.source_start + len(self.source_lines)

    @property
    def dest_end(self) -> int:
        """First new-file line number past this hunk."""
        return self.dest_start + len(self.dest_lines)

    @property
    def removed(self) -> list[str]:
        return [line for line in self.source_lines if line.startswith(LineRole.REMOVED.value)]

    @property
    def added(self) -> list[str]:
        return [line for line in self.dest_lines if line.startswith(LineRole.ADDED.value)]

    @property
    def change_count(self) -> int:
        """Number of removed plus added lines."""
        return len(self.removed) + len(self.added)

    def header(self) -> str:
        """Unified diff header for this hunk.

        An empty side is written the way diff tools write it, naming the line
        after which the change happens (``-0,0`` for an added file), so the
        header parses back to the same hunk.
        """
        source = _header_range(self.source_start, self.source_lines)
        dest = _header_range(self.dest_start, self.dest_lines)
        return f"@@ -{source} +{dest} @@"


def _header_range(start: int, lines: tuple[str, ...]) -> str:
    if not lines:
        return f"{start - 1},0"
    return f"{start},{len(lines)}"


__all__ = ["Hunk", "LineRole", "MalformedPatchError", "split_lines"]
