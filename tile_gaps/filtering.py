"""
Window eligibility for snap passes.

Filters out windows the engine must leave alone (non-normal, fullscreen,
minimized, maximized, mid-move) and peers that are not true neighbours
of the triggering window (other workspace or other output).
"""

from typing import Optional

from .models import TileGapsConfig, WindowSnapshot


def is_maximized(window: WindowSnapshot) -> bool:
    """Host flag, or geometry filling the whole work area."""
    return window.maximized or (
        window.screen_area is not None and window.geometry == window.screen_area
    )


def is_ignored_window(window: Optional[WindowSnapshot], config: TileGapsConfig) -> bool:
    """
    Check whether a window must not be gapped.

    Args:
        window: Window snapshot, or None when the host had nothing to hand over
        config: Effective configuration

    Returns:
        True if the window should be skipped
    """
    if window is None:
        return True
    if not window.normal:
        return True
    if window.moving:
        # still undergoing geometry change
        return True
    if window.fullscreen:
        return True
    if window.minimized:
        # hidden, its rect does not lie on any screen
        return True
    if not config.include_maximized and is_maximized(window):
        return True
    return False


def is_ignored_peer(window: WindowSnapshot, other: WindowSnapshot, config: TileGapsConfig) -> bool:
    """
    Check whether ``other`` must not be adjusted relative to ``window``.

    Windows on different workspaces (unless one of them is sticky) or on
    different outputs are never neighbours, whatever their coordinates.
    """
    if is_ignored_window(other, config):
        return True
    if other.id == window.id:
        return True
    if not (other.workspace == window.workspace or other.sticky or window.sticky):
        return True
    return other.output != window.output
