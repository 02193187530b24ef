"""Hunk model, patch parsing and context expansion."""

from .cache import HunkCache
from .classifier import HunkKind, classify, is_pure_addition, is_pure_deletion
from .expander import expand_context, group_hunks, should_merge
from .models import Hunk, LineRole, MalformedPatchError, split_lines
from .parser import PatchParser, ParserState, parse_patch, parse_range


__all__ = [
    # Model
    "Hunk",
    "LineRole",
    "MalformedPatchError",
    "split_lines",
    # Parsing
    "PatchParser",
    "ParserState",
    "parse_patch",
    "parse_range",
    # Expansion
    "expand_context",
    "group_hunks",
    "should_merge",
    # Classification
    "HunkKind",
    "classify",
    "is_pure_addition",
    "is_pure_deletion",
    # Caching
    "HunkCache",
]
