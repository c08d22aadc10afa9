"""
Snap anchor grid.

Computes the available screen region and, from it, the quarter / half /
full anchors per edge with and without gaps applied. Interior anchors
carry half of the mid gap on each side of the shared tile boundary; the
``gap_near - gap_far`` term re-centres them when the outer gaps differ.
"""

import logging
import math

from .models import Anchor, GapConfig, Grid, Region

logger = logging.getLogger(__name__)

HORIZONTAL_NAMES = ("full-left", "quarter-left", "half", "quarter-right", "full-right")
VERTICAL_NAMES = ("full-top", "quarter-top", "half", "quarter-bottom", "full-bottom")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude if value >= 0 else -magnitude)


def compute_available_region(screen_area: Region, gaps: GapConfig) -> Region:
    """
    Subtract the panel offsets from the host-reported work area.

    Offsets are trusted as configured; the result may have non-positive
    dimensions.
    """
    return Region(
        x=screen_area.x + gaps.offset_left,
        y=screen_area.y + gaps.offset_top,
        width=screen_area.width - gaps.offset_left - gaps.offset_right,
        height=screen_area.height - gaps.offset_top - gaps.offset_bottom,
    )


def _axis_anchors(start, end, span, gap_near, gap_far, gap_mid, names):
    """Anchors for the near (left/top) and far (right/bottom) edge of one axis."""
    full_near, quarter_near, half, quarter_far, full_far = names
    gapped_span = span + gap_near - gap_far + gap_mid
    r = round_half_away

    near = (
        (full_near, Anchor(closed=r(start), gapped=r(start + gap_near))),
        (quarter_near, Anchor(closed=r(start + 1 * (span / 4)),
                              gapped=r(start + 1 * gapped_span / 4))),
        (half, Anchor(closed=r(start + span / 2),
                      gapped=r(start + gapped_span / 2))),
        (quarter_far, Anchor(closed=r(start + 3 * (span / 4)),
                             gapped=r(start + 3 * gapped_span / 4))),
    )
    far = (
        (quarter_near, Anchor(closed=r(end - 3 * (span / 4)),
                              gapped=r(end - 3 * gapped_span / 4))),
        (half, Anchor(closed=r(end - span / 2),
                      gapped=r(end - gapped_span / 2))),
        (quarter_far, Anchor(closed=r(end - 1 * (span / 4)),
                             gapped=r(end - 1 * gapped_span / 4))),
        (full_far, Anchor(closed=r(end), gapped=r(end - gap_far))),
    )
    return near, far


def build_grid(region: Region, gaps: GapConfig) -> Grid:
    """
    Build the snap anchor grid for a region.

    Args:
        region: Available screen region (offsets already applied)
        gaps: Gap configuration for this pass

    Returns:
        Grid with ordered anchors per edge
    """
    left, right = _axis_anchors(
        region.left, region.right, region.width,
        gaps.gap_left, gaps.gap_right, gaps.gap_mid,
        HORIZONTAL_NAMES,
    )
    top, bottom = _axis_anchors(
        region.top, region.bottom, region.height,
        gaps.gap_top, gaps.gap_bottom, gaps.gap_mid,
        VERTICAL_NAMES,
    )
    grid = Grid(left=left, right=right, top=top, bottom=bottom)
    logger.debug(f"Grid for {region}: left={[a.gapped for _, a in left]} right={[a.gapped for _, a in right]}")
    return grid
