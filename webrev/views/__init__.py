"""Views rendering hunks of a comparison."""

from .frames import FramePane, FrameRow, Frames, build_frames, render_frames
from .index import VIEW_NAMES, available_views, render_index
from .sdiff import SideBySideRow, SideCell, render_sdiff, sdiff_rows
from .session import ReviewSession
from .text import render_cdiff, render_numbered, render_patch, render_udiff, unified_lines


__all__ = [
    "VIEW_NAMES",
    "available_views",
    "ReviewSession",
    # Line views
    "render_patch",
    "render_udiff",
    "render_cdiff",
    "render_numbered",
    "unified_lines",
    # Side-by-side
    "SideBySideRow",
    "SideCell",
    "render_sdiff",
    "sdiff_rows",
    # Frames
    "FramePane",
    "FrameRow",
    "Frames",
    "build_frames",
    "render_frames",
    # Index
    "render_index",
]
