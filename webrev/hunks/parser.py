"""Parse unified diff patches into minimal (zero-context) hunks."""

from collections.abc import Iterable, Iterator
from enum import Enum
import logging
import re

from ..errors import MalformedPatchError
from .models import Hunk, LineRole, split_lines


logger = logging.getLogger(__name__)

_HUNK_HEADER_RE = re.compile(r"^@@ (-\d+(?:,\d+)?) (\+\d+(?:,\d+)?) @@")

NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Per-file header lines git emits before the first hunk
_FILE_HEADER_PREFIXES = (
    "diff --git ",
    "index ",
    "--- ",
    "+++ ",
    "new file mode ",
    "deleted file mode ",
    "old mode ",
    "new mode ",
    "similarity index ",
    "dissimilarity index ",
    "rename from ",
    "rename to ",
    "copy from ",
    "copy to ",
    "Binary files ",
)


class ParserState(Enum):
    """Where the parser is relative to the current change run."""

    AWAITING_HEADER = "awaiting_header"
    LEADING_CONTEXT = "leading_context"
    CHANGES = "changes"


def parse_range(token: str) -> tuple[int, int]:
    """Parse one side of a hunk header range.

    Args:
        token: Range such as ``-12,4`` or ``+7`` (a missing count means 1).

    Returns:
        Tuple of (start, count).
    """
    start, _, count = token[1:].partition(",")
    return int(start), int(count) if count else 1


def _header_start(start: int, count: int) -> int:
    # An empty range names the line after which the change happens
    return start + 1 if count == 0 else start


class PatchParser:
    """State machine turning patch lines into minimal hunks.

    Context lines are never buffered: leading context only advances the line
    counters, and the first context line after a change run closes the run.
    Counters keep accumulating until the next header, so one header section
    may yield several minimal hunks.
    """

    def __init__(self):
        self.state = ParserState.AWAITING_HEADER
        self._source_pos = 0
        self._dest_pos = 0
        self._source_lines: list[str] = []
        self._dest_lines: list[str] = []

    def parse(self, lines: Iterable[str]) -> Iterator[Hunk]:
        """Consume patch lines and yield hunks as they complete."""
        for line_number, line in enumerate(lines, start=1):
            hunk = self.feed(line, line_number)
            if hunk is not None:
                yield hunk
        hunk = self.finish()
        if hunk is not None:
            yield hunk

    def feed(self, line: str, line_number: int) -> Hunk | None:
        """Process a single line, returning a hunk if this line closed one.

        Raises:
            MalformedPatchError: If the line is not valid in the current state.
        """
        if line.startswith("@@"):
            return self._on_header(line, line_number)

        if self.state is ParserState.AWAITING_HEADER:
            if line.startswith(_FILE_HEADER_PREFIXES):
                return None
            raise MalformedPatchError(line_number, line)

        if line.startswith(NO_NEWLINE_MARKER):
            return None

        if line.startswith(LineRole.CONTEXT.value):
            return self._on_context()
        if line.startswith(LineRole.REMOVED.value):
            self._source_lines.append(line)
            self.state = ParserState.CHANGES
            return None
        if line.startswith(LineRole.ADDED.value):
            self._dest_lines.append(line)
            self.state = ParserState.CHANGES
            return None

        raise MalformedPatchError(line_number, line)

    def finish(self) -> Hunk | None:
        """Flush the change run still open at end of input."""
        hunk = self._close_run()
        self.state = ParserState.AWAITING_HEADER
        return hunk

    def _on_header(self, line: str, line_number: int) -> Hunk | None:
        match = _HUNK_HEADER_RE.match(line)
        if not match:
            raise MalformedPatchError(line_number, line)

        hunk = self._close_run()

        self._source_pos = _header_start(*parse_range(match.group(1)))
        self._dest_pos = _header_start(*parse_range(match.group(2)))
        if self._source_pos < 1 or self._dest_pos < 1:
            raise MalformedPatchError(line_number, line)

        self.state = ParserState.LEADING_CONTEXT
        return hunk

    def _on_context(self) -> Hunk | None:
        if self.state is ParserState.LEADING_CONTEXT:
            self._source_pos += 1
            self._dest_pos += 1
            return None

        # First context line after a change run ends the run
        hunk = self._close_run()
        self._source_pos += 1
        self._dest_pos += 1
        self.state = ParserState.LEADING_CONTEXT
        return hunk

    def _close_run(self) -> Hunk | None:
        if not self._source_lines and not self._dest_lines:
            return None

        hunk = Hunk(
            source_start=self._source_pos,
            source_lines=tuple(self._source_lines),
            dest_start=self._dest_pos,
            dest_lines=tuple(self._dest_lines),
        )
        self._source_pos += len(self._source_lines)
        self._dest_pos += len(self._dest_lines)
        self._source_lines = []
        self._dest_lines = []
        return hunk


def parse_patch(patch_text: str) -> tuple[Hunk, ...]:
    """Parse a unified diff patch into its minimal hunks.

    Args:
        patch_text: Patch for a single file. It may start directly with an
            ``@@`` header (as in GitHub's per-file ``patch`` field) or with the
            ``diff --git`` file header lines.

    Returns:
        Minimal hunks in file order, containing only removed and added lines.

    Raises:
        MalformedPatchError: If a body line has no recognized prefix.
    """
    hunks = tuple(PatchParser().parse(split_lines(patch_text)))
    logger.debug(f"Parsed {len(hunks)} minimal hunks")
    return hunks
