"""
Sway host adapter.

Exposes Sway's floating containers as window snapshots and applies
geometry through IPC commands addressed by ``con_id``.
"""

import logging
from typing import List, Optional

from i3ipc.aio import Con, Connection

from .host import WindowHost
from .models import Region, WindowSnapshot

logger = logging.getLogger(__name__)

SCRATCHPAD_WORKSPACE = "__i3_scratch"


def rect_to_region(rect) -> Region:
    return Region(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


def get_app_id(container: Con) -> Optional[str]:
    """Native Wayland app_id, falling back to the X11 window class."""
    return container.app_id or container.window_class or None


class SwayWindowHost(WindowHost):
    """WindowHost backed by an async i3ipc connection to Sway."""

    def __init__(self, conn: Connection):
        """
        Initialize Sway host.

        Args:
            conn: Connected async i3ipc Connection
        """
        self.conn = conn

    async def list_windows(self) -> List[WindowSnapshot]:
        tree = await self.conn.get_tree()
        windows = []
        for container in tree.descendants():
            if container.type != "floating_con":
                continue
            workspace = container.workspace()
            if workspace is None:
                continue
            windows.append(self._snapshot(container, workspace))
        return windows

    def _snapshot(self, container: Con, workspace: Con) -> WindowSnapshot:
        app_id = get_app_id(container)
        # i3ipc does not expose window_type as a Con attribute
        window_type = container.ipc_data.get("window_type")
        return WindowSnapshot(
            id=container.id,
            app_id=app_id,
            geometry=rect_to_region(container.rect),
            screen_area=rect_to_region(workspace.rect),
            workspace=workspace.name,
            output=workspace.ipc_data.get("output", ""),
            normal=bool(app_id) and window_type in (None, "normal"),
            fullscreen=bool(container.fullscreen_mode),
            minimized=workspace.name == SCRATCHPAD_WORKSPACE,
            sticky=bool(container.sticky),
        )

    async def set_geometry(self, window_id: int, geometry: Region) -> bool:
        command_str = (
            f"[con_id={window_id}] move absolute position {geometry.x} {geometry.y}, "
            f"resize set {geometry.width} {geometry.height}"
        )
        logger.debug(f"Executing geometry command: {command_str}")
        result = await self.conn.command(command_str)

        if not result:
            logger.warning(f"Geometry command for window {window_id} returned empty result")
            return False

        for reply in result:
            if not reply.success:
                logger.debug(f"Geometry command for window {window_id} failed: {getattr(reply, 'error', None)}")
                return False
        return True
