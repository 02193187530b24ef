"""Interactive terminal UI for webrev."""

from .frames_app import FramesApp
from .widgets import FramePaneView


__all__ = ["FramePaneView", "FramesApp"]
