"""
Pytest configuration and fixtures for tile gaps tests.

Shared geometry fixtures (a 1920x1080 screen with 12px gaps) and an
in-memory window host.
"""

from typing import Dict, List, Optional

import pytest

from tile_gaps.grid import build_grid, compute_available_region
from tile_gaps.host import WindowHost
from tile_gaps.models import GapConfig, Region, TileGapsConfig, WindowSnapshot


SCREEN = Region(x=0, y=0, width=1920, height=1080)


@pytest.fixture
def gaps() -> GapConfig:
    """Default gaps: 12px everywhere, no offsets."""
    return GapConfig()


@pytest.fixture
def screen() -> Region:
    return SCREEN


@pytest.fixture
def grid(screen, gaps):
    """Anchor grid for the 1920x1080 screen."""
    return build_grid(compute_available_region(screen, gaps), gaps)


@pytest.fixture
def make_window():
    """Factory for window snapshots on workspace 1 of DP-1."""
    def _make(window_id: int, geometry: Region, **kwargs) -> WindowSnapshot:
        fields = {
            "id": window_id,
            "app_id": f"app-{window_id}",
            "geometry": geometry,
            "screen_area": SCREEN,
            "workspace": "1",
            "output": "DP-1",
        }
        fields.update(kwargs)
        return WindowSnapshot(**fields)
    return _make


class FakeWindowHost(WindowHost):
    """In-memory host recording geometry writes."""

    def __init__(self, windows: List[WindowSnapshot]):
        self.windows: Dict[int, WindowSnapshot] = {w.id: w for w in windows}
        self.set_calls: List[tuple] = []
        self.reject_ids = set()
        self.on_set = None
        self.reentrant_results: List[bool] = []

    async def list_windows(self) -> List[WindowSnapshot]:
        return list(self.windows.values())

    async def set_geometry(self, window_id: int, geometry: Region) -> bool:
        self.set_calls.append((window_id, geometry))
        if window_id in self.reject_ids or window_id not in self.windows:
            return False
        self.windows[window_id] = self.windows[window_id].model_copy(update={"geometry": geometry})
        if self.on_set is not None:
            self.reentrant_results.append(await self.on_set(window_id))
        return True

    def geometry(self, window_id: int) -> Optional[Region]:
        window = self.windows.get(window_id)
        return window.geometry if window else None


@pytest.fixture
def fake_host_factory():
    return FakeWindowHost


@pytest.fixture
def default_config() -> TileGapsConfig:
    return TileGapsConfig()
