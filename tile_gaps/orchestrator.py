"""
Snap pass orchestration.

Runs grid snapping and neighbour snapping for one triggering window and
writes the results back through the host. Writing geometry re-triggers
the very events that start a pass, so at most one pass is in flight:
triggers arriving meanwhile are dropped, and a later event re-requests
the pass once geometry settles.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .filtering import is_ignored_peer, is_ignored_window
from .grid import build_grid, compute_available_region
from .host import WindowHost
from .models import Region, TileGapsConfig, WindowSnapshot
from .snap import snap_to_grid, snap_to_neighbors

logger = logging.getLogger(__name__)


class PassGuard:
    """Latch allowing a single snap pass at a time."""

    def __init__(self):
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @contextmanager
    def hold(self) -> Iterator[bool]:
        """
        Try to take the latch for the duration of a pass.

        Yields:
            True if the latch was taken, False if another pass holds it.
            The latch is released on every exit path.
        """
        if self._active:
            yield False
            return

        self._active = True
        try:
            yield True
        finally:
            self._active = False


class GapOrchestrator:
    """Binds the geometry engine to a window host."""

    def __init__(self, host: WindowHost, config: Optional[TileGapsConfig] = None):
        """
        Initialize orchestrator.

        Args:
            host: Window host adapter
            config: Initial configuration (defaults when omitted)
        """
        self.host = host
        self.config = config or TileGapsConfig()
        self.guard = PassGuard()

    def update_config(self, config: TileGapsConfig) -> None:
        """Swap configuration; takes effect on the next pass."""
        self.config = config
        logger.info(
            "sizes (t/l/r/b/m): %d %d %d %d %d, maximized: %s",
            config.gaps.gap_top, config.gaps.gap_left, config.gaps.gap_right,
            config.gaps.gap_bottom, config.gaps.gap_mid, config.include_maximized,
        )

    async def apply_gaps(self, window_id: Optional[int]) -> bool:
        """
        Run one snap pass for a window.

        Args:
            window_id: Host id of the triggering window

        Returns:
            True if a pass ran, False if it was dropped or skipped
        """
        if window_id is None:
            return False

        with self.guard.hold() as acquired:
            if not acquired:
                logger.debug(f"Pass in flight, dropping trigger for window {window_id}")
                return False
            return await self._run_pass(window_id)

    async def apply_gaps_all(self) -> int:
        """
        Run one pass per window, after a global layout change.

        Returns:
            Number of passes that ran
        """
        if self.guard.active:
            logger.debug("Pass in flight, dropping global trigger")
            return 0

        windows = await self.host.list_windows()
        count = 0
        for window in windows:
            if await self.apply_gaps(window.id):
                count += 1
        return count

    async def _run_pass(self, window_id: int) -> bool:
        windows = await self.host.list_windows()
        window = next((w for w in windows if w.id == window_id), None)

        if is_ignored_window(window, self.config):
            return False
        if window.screen_area is None:
            logger.debug(f"No screen area for window {window_id}, skipping")
            return False

        logger.debug(f"gaps for {window.app_id} {window.geometry}")
        gaps = self.config.gaps

        grid = build_grid(compute_available_region(window.screen_area, gaps), gaps)
        geometry = snap_to_grid(window.geometry, grid, gaps)

        peers: List[WindowSnapshot] = [
            other for other in windows
            if not is_ignored_peer(window, other, self.config)
        ]
        geometry, peer_geometries = snap_to_neighbors(
            geometry, [peer.geometry for peer in peers], gaps
        )

        await self._write(window, geometry)
        for peer, peer_geometry in zip(peers, peer_geometries):
            await self._write(peer, peer_geometry)
        return True

    async def _write(self, window: WindowSnapshot, geometry: Region) -> None:
        if geometry == window.geometry:
            return

        logger.debug(f"window {window.id}: {window.geometry} -> {geometry}")
        if not await self.host.set_geometry(window.id, geometry):
            logger.debug(f"window {window.id} rejected geometry change, skipping")
