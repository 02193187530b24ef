"""Abstract comparison source."""

from abc import ABC, abstractmethod
import logging

from ..errors import ComparisonError
from ..hunks import split_lines
from ..models import Comparison, FileChange


logger = logging.getLogger(__name__)


class ComparisonSource(ABC):
    """Supplies a comparison and the full file contents on each side.

    Subclasses implement loading and raw reads; line splitting and the
    added/deleted special cases live here.
    """

    @abstractmethod
    def load(self) -> Comparison:
        """Load comparison metadata, file list and commits.

        Raises:
            ComparisonError: If the comparison cannot be loaded.
        """

    @abstractmethod
    def read_base(self, comparison: Comparison, file: FileChange) -> str:
        """Raw text of the file at the base revision."""

    @abstractmethod
    def read_head(self, comparison: Comparison, file: FileChange) -> str:
        """Raw text of the file at the head revision."""

    def base_content(self, comparison: Comparison, file: FileChange) -> list[str]:
        """Lines of the file at base; empty for an added file."""
        if not file.status.has_base:
            return []
        logger.debug(f"Reading {file.base_filename} at base {comparison.base.sha[:8]}")
        return split_lines(self.read_base(comparison, file))

    def head_content(self, comparison: Comparison, file: FileChange) -> list[str]:
        """Lines of the file at head; empty for a deleted file."""
        if not file.status.has_head:
            return []
        logger.debug(f"Reading {file.filename} at head {comparison.head.sha[:8]}")
        return split_lines(self.read_head(comparison, file))


__all__ = ["ComparisonError", "ComparisonSource"]
