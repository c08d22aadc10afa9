"""
Pydantic data models for the tile gaps geometry engine.

Regions, gap configuration, snap anchors and the anchor grid, plus the
read-only window snapshot handed over by the host on every pass.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, computed_field


# Enumerations

class Edge(str, Enum):
    """Window or grid edge."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Axis(str, Enum):
    """Axis along which two spans are compared."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Geometry

class Region(BaseModel):
    """Rectangular area: an available screen region or a window geometry.

    Edges are inclusive pixel coordinates and always derived from the
    canonical fields, so ``right == x + width - 1``.
    """

    model_config = {"frozen": True}

    x: int = Field(..., description="Left coordinate (pixels)")
    y: int = Field(..., description="Top coordinate (pixels)")
    width: int = Field(..., description="Width (pixels)")
    height: int = Field(..., description="Height (pixels)")

    @computed_field
    @property
    def left(self) -> int:
        return self.x

    @computed_field
    @property
    def top(self) -> int:
        return self.y

    @computed_field
    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @computed_field
    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def span(self, axis: Axis) -> Tuple[int, int]:
        """Low and high edge on the given axis."""
        if axis == Axis.HORIZONTAL:
            return self.left, self.right
        return self.top, self.bottom

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"


class GapConfig(BaseModel):
    """Gap and offset sizes in pixels.

    Screen-edge gaps, the gap between neighbouring windows, and offsets
    that carve floating panel areas out of the available screen region.
    """

    model_config = {"frozen": True}

    gap_top: int = Field(default=12, ge=0, description="Gap to top screen edge")
    gap_left: int = Field(default=12, ge=0, description="Gap to left screen edge")
    gap_right: int = Field(default=12, ge=0, description="Gap to right screen edge")
    gap_bottom: int = Field(default=12, ge=0, description="Gap to bottom screen edge")
    gap_mid: int = Field(default=12, ge=0, description="Gap between windows")

    offset_top: int = Field(default=0, ge=0, description="Top floating panel offset")
    offset_left: int = Field(default=0, ge=0, description="Left floating panel offset")
    offset_right: int = Field(default=0, ge=0, description="Right floating panel offset")
    offset_bottom: int = Field(default=0, ge=0, description="Bottom floating panel offset")

    def edge_gap(self, edge: Edge) -> int:
        """Screen-edge gap for the given edge."""
        return {
            Edge.LEFT: self.gap_left,
            Edge.RIGHT: self.gap_right,
            Edge.TOP: self.gap_top,
            Edge.BOTTOM: self.gap_bottom,
        }[edge]


class Anchor(BaseModel):
    """Position on one axis before (closed) and after (gapped) gap compensation."""

    model_config = {"frozen": True}

    closed: int
    gapped: int


AnchorRow = Tuple[Tuple[str, Anchor], ...]


class Grid(BaseModel):
    """Snap anchors per edge.

    Each edge is an ordered sequence of ``(name, anchor)`` pairs. The
    order is the scan order of the snap engine, which takes the first
    matching anchor and stops.
    """

    model_config = {"frozen": True}

    left: AnchorRow
    right: AnchorRow
    top: AnchorRow
    bottom: AnchorRow

    def edge(self, edge: Edge) -> AnchorRow:
        return getattr(self, Edge(edge).value)

    def anchor(self, edge: Edge, name: str) -> Anchor:
        """Look up a single named anchor on an edge."""
        for anchor_name, anchor in self.edge(edge):
            if anchor_name == name:
                return anchor
        raise KeyError(f"No anchor {name!r} on {Edge(edge).value} edge")

    def names(self, edge: Edge) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.edge(edge))


# Host entities

class WindowSnapshot(BaseModel):
    """Read-only view of one host window at the start of a pass."""

    model_config = {"frozen": True}

    id: int = Field(..., description="Host container id")
    app_id: Optional[str] = Field(None, description="Application identifier / window class")
    geometry: Region = Field(..., description="Current window geometry")
    screen_area: Optional[Region] = Field(None, description="Work area of the window's screen")
    workspace: Optional[str] = Field(None, description="Workspace (desktop) name")
    output: Optional[str] = Field(None, description="Output (screen) name")
    normal: bool = Field(True, description="Regular application window")
    fullscreen: bool = False
    maximized: bool = False
    minimized: bool = False
    moving: bool = Field(False, description="Interactive move/resize in progress")
    sticky: bool = Field(False, description="Shown on all workspaces")


class TileGapsConfig(BaseModel):
    """Effective daemon configuration."""

    gaps: GapConfig = Field(default_factory=GapConfig)
    include_maximized: bool = Field(False, description="Apply gaps to maximized windows")
    debug_mode: bool = Field(False, description="Log snap decisions at debug level")
