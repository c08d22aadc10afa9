"""
Proximity checks deciding when an edge counts as aligned.

A coordinate is close to a target iff the difference is within the
tolerance margin (twice the gap) but not already the desired geometry.
"""

from .models import Anchor, Axis, Region


def tolerance(gap: int) -> int:
    return 2 * gap


def is_near_anchor(actual: int, anchor: Anchor, gap: int) -> bool:
    """True if ``actual`` is near the closed or gapped anchor but not exactly gapped."""
    margin = tolerance(gap)
    return (abs(actual - anchor.closed) <= margin
            or abs(actual - anchor.gapped) <= margin) \
        and actual != anchor.gapped


def is_near_edge(edge1: int, edge2: int, gap: int) -> bool:
    """True if two window edges are within tolerance but not exactly one gap apart."""
    return abs(edge1 - edge2) <= tolerance(gap) and edge1 - edge2 != gap


def overlaps_on_axis(region_a: Region, region_b: Region, gap_mid: int, axis: Axis) -> bool:
    """
    Check whether two regions' spans overlap on an axis.

    Either region may come first; the overlap is tested in both orderings
    with ``2 * gap_mid`` of slack.
    """
    margin = tolerance(gap_mid)
    a_lo, a_hi = region_a.span(axis)
    b_lo, b_hi = region_b.span(axis)
    return (a_lo <= b_lo + margin and a_hi > b_lo + margin) \
        or (b_lo <= a_lo + margin and b_hi + margin > a_lo)


def overlaps_horizontally(region_a: Region, region_b: Region, gap_mid: int) -> bool:
    return overlaps_on_axis(region_a, region_b, gap_mid, Axis.HORIZONTAL)


def overlaps_vertically(region_a: Region, region_b: Region, gap_mid: int) -> bool:
    return overlaps_on_axis(region_a, region_b, gap_mid, Axis.VERTICAL)
