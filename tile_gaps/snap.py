"""
Snap engine.

Two one-shot passes over a window geometry:

1. Edge-to-grid: each edge independently moves to the gapped coordinate
   of the first anchor it is near.
2. Mutual: every neighbour sharing an edge is adjusted together with the
   window so that exactly one mid gap separates them. The difference is
   split with floor on one side and ceiling on the other, so the two
   movements always add up to the full correction.

Neither pass iterates to a fixed point; the host re-triggers a pass on
the next geometry change.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import Anchor, AnchorRow, Edge, GapConfig, Grid, Region
from .proximity import is_near_anchor, is_near_edge, overlaps_horizontally, overlaps_vertically

logger = logging.getLogger(__name__)


def half_floor(value: int) -> int:
    return value // 2


def half_ceil(value: int) -> int:
    return -(-value // 2)


def _first_match(actual: int, anchors: AnchorRow, gap: int) -> Optional[Tuple[str, Anchor]]:
    for name, anchor in anchors:
        if is_near_anchor(actual, anchor, gap):
            return name, anchor
    return None


def snap_to_grid(geometry: Region, grid: Grid, gaps: GapConfig) -> Region:
    """
    Move each window edge near a grid anchor onto its gapped coordinate.

    Args:
        geometry: Current window geometry
        grid: Anchor grid of the window's available region
        gaps: Gap configuration for this pass

    Returns:
        Adjusted geometry (the input itself when no edge matched)
    """
    x, y, width, height = geometry.x, geometry.y, geometry.width, geometry.height

    match = _first_match(x, grid.left, gaps.edge_gap(Edge.LEFT))
    if match:
        name, anchor = match
        logger.debug(f"gap to left tile edge {name}")
        diff = anchor.gapped - x
        width -= diff
        x += diff

    match = _first_match(x + width - 1, grid.right, gaps.edge_gap(Edge.RIGHT))
    if match:
        name, anchor = match
        logger.debug(f"gap to right tile edge {name}")
        diff = (x + width - 1) - anchor.gapped
        width -= diff

    match = _first_match(y, grid.top, gaps.edge_gap(Edge.TOP))
    if match:
        name, anchor = match
        logger.debug(f"gap to top tile edge {name}")
        diff = anchor.gapped - y
        height -= diff
        y += diff

    match = _first_match(y + height - 1, grid.bottom, gaps.edge_gap(Edge.BOTTOM))
    if match:
        name, anchor = match
        logger.debug(f"gap to bottom tile edge {name}")
        diff = (y + height - 1) - anchor.gapped
        height -= diff

    if (x, y, width, height) == (geometry.x, geometry.y, geometry.width, geometry.height):
        return geometry
    return Region(x=x, y=y, width=width, height=height)


def snap_pair(this: Region, other: Region, gap_mid: int) -> Tuple[Region, Region]:
    """
    Adjust the shared edge of two windows to exactly ``gap_mid``.

    All four adjacency cases are tested in order (other on the left,
    right, top, bottom); each case sees the result of the previous one.

    Returns:
        Tuple of (this, other) geometries after adjustment
    """
    gap_floor, gap_ceil = half_floor(gap_mid), half_ceil(gap_mid)

    # other window on the left
    if is_near_edge(this.left, other.right, gap_mid) and overlaps_vertically(this, other, gap_mid):
        logger.debug("gap to left window")
        diff = this.left - other.right
        this = this.model_copy(update={
            "x": this.x - half_floor(diff) + gap_ceil,
            "width": this.width + half_floor(diff) - gap_ceil,
        })
        other = other.model_copy(update={"width": other.width + half_ceil(diff) - gap_floor})

    # other window on the right
    if is_near_edge(other.left, this.right, gap_mid) and overlaps_vertically(this, other, gap_mid):
        logger.debug("gap to right window")
        diff = other.left - this.right
        this = this.model_copy(update={"width": this.width + half_ceil(diff) - gap_floor})
        other = other.model_copy(update={
            "x": other.x - half_floor(diff) + gap_ceil,
            "width": other.width + half_floor(diff) - gap_ceil,
        })

    # other window above
    if is_near_edge(this.top, other.bottom, gap_mid) and overlaps_horizontally(this, other, gap_mid):
        logger.debug("gap to top window")
        diff = this.top - other.bottom
        this = this.model_copy(update={
            "y": this.y - half_floor(diff) + gap_ceil,
            "height": this.height + half_floor(diff) - gap_ceil,
        })
        other = other.model_copy(update={"height": other.height + half_ceil(diff) - gap_floor})

    # other window below
    if is_near_edge(other.top, this.bottom, gap_mid) and overlaps_horizontally(this, other, gap_mid):
        logger.debug("gap to bottom window")
        diff = other.top - this.bottom
        this = this.model_copy(update={"height": this.height + half_ceil(diff) - gap_floor})
        other = other.model_copy(update={
            "y": other.y - half_floor(diff) + gap_ceil,
            "height": other.height + half_floor(diff) - gap_ceil,
        })

    return this, other


def snap_to_neighbors(
    geometry: Region,
    peers: Sequence[Region],
    gaps: GapConfig,
) -> Tuple[Region, List[Region]]:
    """
    Pairwise mid-gap correction between a window and its eligible peers.

    Peers are processed in order and corrections accumulate on the
    window; there is no global relaxation step.

    Args:
        geometry: Geometry of the triggering window (usually grid-snapped)
        peers: Geometries of the already-filtered neighbouring windows
        gaps: Gap configuration for this pass

    Returns:
        Tuple of the window's geometry and one geometry per peer, in order
    """
    adjusted: List[Region] = []
    for peer in peers:
        geometry, peer = snap_pair(geometry, peer, gaps.gap_mid)
        adjusted.append(peer)
    return geometry, adjusted
