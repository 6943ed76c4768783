"""Text selection capture and restore."""

from .selection_bridge import CapturedSelection, capture_selection, restore_selection

__all__ = ["CapturedSelection", "capture_selection", "restore_selection"]
