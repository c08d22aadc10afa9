"""Host interface the orchestrator talks to.

The geometry engine never depends on a window manager. A host adapter
enumerates windows as snapshots and writes adjusted geometry back.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import Region, WindowSnapshot


class WindowHost(ABC):
    """Window enumeration and mutation provided by the window manager."""

    @abstractmethod
    async def list_windows(self) -> List[WindowSnapshot]:
        """Return the current windows in host order.

        The list is a best-effort snapshot; windows may disappear before
        their geometry is written back.
        """
        pass

    @abstractmethod
    async def set_geometry(self, window_id: int, geometry: Region) -> bool:
        """Write a new geometry for a window.

        Returns:
            True if the host accepted the change, False if the window is
            gone or the request was rejected
        """
        pass
