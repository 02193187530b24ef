"""Review session: one comparison, its hunk cache and its file contents."""

import logging

from rich.console import RenderableType
from rich.text import Text

from ..comparison import ComparisonSource
from ..config import ViewsConfig
from ..errors import ViewNotAvailableError
from ..hunks import Hunk, HunkCache
from ..models import Comparison, FileChange
from .frames import Frames, build_frames, render_frames
from .index import available_views, render_index
from .sdiff import render_sdiff
from .text import render_cdiff, render_numbered, render_patch, render_udiff


logger = logging.getLogger(__name__)


class ReviewSession:
    """Renders the views of every file in a comparison.

    File contents are read from the source on first use and kept for the
    session, so expansion always runs on fully materialized content.
    """

    def __init__(
        self,
        source: ComparisonSource,
        views: ViewsConfig | None = None,
        comparison: Comparison | None = None,
    ):
        self.source = source
        self.views = views or ViewsConfig()
        self.comparison = comparison if comparison is not None else source.load()
        self.cache = HunkCache([f.patch for f in self.comparison.files])
        self._base: dict[int, list[str]] = {}
        self._head: dict[int, list[str]] = {}

    def file(self, index: int) -> FileChange:
        return self.comparison.files[index]

    def base_lines(self, index: int) -> list[str]:
        if index not in self._base:
            self._base[index] = self.source.base_content(self.comparison, self.file(index))
        return self._base[index]

    def head_lines(self, index: int) -> list[str]:
        if index not in self._head:
            self._head[index] = self.source.head_content(self.comparison, self.file(index))
        return self._head[index]

    def context_for(self, view: str, index: int) -> int:
        """Context size a view uses for a file."""
        if view == "patch" and not self.file(index).status.is_modified:
            return 0
        return self.views.context_for(view)

    def hunks(self, index: int, context: int) -> tuple[Hunk, ...]:
        """Hunks of a file with the requested context."""
        if context == 0:
            return self.cache.minimal(index)
        return self.cache.expanded(index, context, self.base_lines(index), self.head_lines(index))

    def frames(self, index: int) -> Frames:
        self._check_view("frames", index)
        return build_frames(self.cache.minimal(index), self.base_lines(index), self.head_lines(index))

    def _check_view(self, view: str, index: int) -> None:
        file = self.file(index)
        if view not in available_views(file.status):
            raise ViewNotAvailableError(
                f"View '{view}' is not available for {file.status.value} file {file.filename}"
            )

    def render(self, view: str, index: int, context: int | None = None) -> RenderableType:
        """Render one view of one file.

        Args:
            view: One of patch, udiff, cdiff, sdiff, frames, old, new.
            index: File index in the comparison.
            context: Context size overriding the configured one.

        Raises:
            ViewNotAvailableError: If the view does not apply to the file.
            MalformedPatchError: If the file's patch cannot be parsed.
        """
        self._check_view(view, index)
        file = self.file(index)
        n = self.context_for(view, index) if context is None else context
        logger.debug(f"Rendering {view} of {file.filename} with context {n}")

        if view == "old":
            return render_numbered(self.base_lines(index))
        if view == "new":
            return render_numbered(self.head_lines(index))
        if view == "patch":
            return Text(render_patch(file, self.hunks(index, n)))
        if view == "udiff":
            return render_udiff(self.hunks(index, n))
        if view == "cdiff":
            return render_cdiff(self.hunks(index, n))
        if view == "sdiff":
            return render_sdiff(self.hunks(index, n), file.base_filename, file.filename)
        if view == "frames":
            return render_frames(self.frames(index))
        raise ViewNotAvailableError(f"Unknown view: {view}")

    def render_index(self) -> RenderableType:
        return render_index(self.comparison)
