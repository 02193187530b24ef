"""Per-comparison cache of minimal and expanded hunk sets."""

from collections.abc import Hashable, Sequence
import logging
import threading

from .expander import expand_context
from .models import Hunk
from .parser import parse_patch


logger = logging.getLogger(__name__)


class HunkCache:
    """Owns the minimal hunks of every file in a comparison.

    Minimal hunks are parsed lazily, once per file index. Expanded hunks are
    memoized by ``(file index, context size)``. Each key has its own lock, so
    concurrent callers never compute the same entry twice.
    """

    def __init__(self, patches: Sequence[str | None]):
        """Initialize the cache.

        Args:
            patches: Patch text per file index; ``None`` for files without a
                textual patch (binary files), which have no hunks.
        """
        self._patches = list(patches)
        self._minimal: dict[int, tuple[Hunk, ...]] = {}
        self._expanded: dict[tuple[int, int], tuple[Hunk, ...]] = {}
        self._locks: dict[Hashable, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._patches)

    def _lock_for(self, key: Hashable) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def minimal(self, index: int) -> tuple[Hunk, ...]:
        """Minimal hunks for a file.

        Raises:
            IndexError: If no file has this index.
            MalformedPatchError: If the file's patch cannot be parsed.
        """
        patch = self._patches[index]
        with self._lock_for(("minimal", index)):
            hunks = self._minimal.get(index)
            if hunks is None:
                hunks = parse_patch(patch) if patch else ()
                self._minimal[index] = hunks
                logger.debug(f"Cached {len(hunks)} minimal hunks for file {index}")
            return hunks

    def expanded(
        self,
        index: int,
        n: int,
        base_lines: Sequence[str],
        head_lines: Sequence[str],
    ) -> tuple[Hunk, ...]:
        """Hunks for a file with ``n`` lines of context, memoized per size."""
        if n == 0:
            return self.minimal(index)

        key = (index, n)
        with self._lock_for(key):
            hunks = self._expanded.get(key)
            if hunks is None:
                hunks = expand_context(self.minimal(index), n, base_lines, head_lines)
                self._expanded[key] = hunks
            else:
                logger.debug(f"Expanded hunks cache hit for file {index}, context {n}")
            return hunks

    def clear(self) -> None:
        """Forget every cached hunk set.

        Key locks are kept, so a caller already waiting on one still excludes
        callers that arrive after the clear.
        """
        with self._locks_guard:
            self._minimal.clear()
            self._expanded.clear()
