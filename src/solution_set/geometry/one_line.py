"""Single-line sectioning: the two regions one line cuts the grid into."""

from __future__ import annotations

import enum
import logging
from typing import Sequence

from ..core.point import Point
from ..core.shapes import Polygon, Rect
from .polygon import normalize_sections

logger = logging.getLogger(__name__)


class BoundaryTopology(enum.Enum):
    """Which pair of rectangle features a clipped line touches.

    The corner-adjacent variants name the corner cut off by the line,
    e.g. ``MAX_RIGHT_MAX_TOP`` for a line meeting the right edge
    (x = domain.max) and the top edge (y = range.max).
    ``PARALLEL_VERTICAL`` means the points sit on the left and right
    edges; ``PARALLEL_HORIZONTAL`` on the bottom and top edges.
    """

    MAX_RIGHT_MAX_TOP = "max-right/max-top"
    MIN_LEFT_MAX_TOP = "min-left/max-top"
    MIN_LEFT_MIN_BOTTOM = "min-left/min-bottom"
    MAX_RIGHT_MIN_BOTTOM = "max-right/min-bottom"
    PARALLEL_VERTICAL = "parallel-vertical"
    PARALLEL_HORIZONTAL = "parallel-horizontal"
    UNCLASSIFIED = "unclassified"


def _touches(p: Point, q: Point, x: float, y: float) -> bool:
    # one point on the vertical edge x, the other on the horizontal edge y
    return (p.x == x and q.y == y) or (q.x == x and p.y == y)


def classify_topology(p: Point, q: Point, rect: Rect) -> BoundaryTopology:
    """Classify two boundary points by exact coordinate matches.

    Checks run in a fixed order; a point sitting on a corner can match
    more than one pattern and the first match wins.
    """
    d, r = rect.domain, rect.range
    if _touches(p, q, d.max, r.max):
        return BoundaryTopology.MAX_RIGHT_MAX_TOP
    if _touches(p, q, d.min, r.max):
        return BoundaryTopology.MIN_LEFT_MAX_TOP
    if _touches(p, q, d.min, r.min):
        return BoundaryTopology.MIN_LEFT_MIN_BOTTOM
    if _touches(p, q, d.max, r.min):
        return BoundaryTopology.MAX_RIGHT_MIN_BOTTOM
    if {p.x, q.x} == {d.min, d.max}:
        return BoundaryTopology.PARALLEL_VERTICAL
    if {p.y, q.y} == {r.min, r.max}:
        return BoundaryTopology.PARALLEL_HORIZONTAL
    return BoundaryTopology.UNCLASSIFIED


def topology_corners(
    topology: BoundaryTopology, rect: Rect,
) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
    """Corners closing each of the two sides of the line."""
    d, r = rect.domain, rect.range
    top_left = Point(d.min, r.max)
    top_right = Point(d.max, r.max)
    bottom_left = Point(d.min, r.min)
    bottom_right = Point(d.max, r.min)

    corners = {
        BoundaryTopology.MAX_RIGHT_MAX_TOP: (
            (top_right,), (top_left, bottom_left, bottom_right)),
        BoundaryTopology.MIN_LEFT_MAX_TOP: (
            (top_left,), (top_right, bottom_right, bottom_left)),
        BoundaryTopology.MIN_LEFT_MIN_BOTTOM: (
            (bottom_left,), (bottom_right, top_right, top_left)),
        BoundaryTopology.MAX_RIGHT_MIN_BOTTOM: (
            (bottom_right,), (bottom_left, top_left, top_right)),
        BoundaryTopology.PARALLEL_VERTICAL: (
            (top_left, top_right), (bottom_left, bottom_right)),
        BoundaryTopology.PARALLEL_HORIZONTAL: (
            (bottom_left, top_left), (bottom_right, top_right)),
        BoundaryTopology.UNCLASSIFIED: ((), ()),
    }
    return corners[topology]


def section_one_line(boundary_points: Sequence[Point], rect: Rect) -> list[Polygon]:
    """Split the rectangle along one clipped line.

    ``boundary_points`` are the (deduplicated) points where the line
    crosses the boundary. Returns two normalized polygons, fewer when a
    side collapses (a line along an edge leaves one), and an empty list
    when the line does not cross the rectangle at two distinct points.
    """
    if len(boundary_points) < 2:
        logger.debug(
            "Line touches the grid at %d point(s); no sections", len(boundary_points),
        )
        return []
    p, q = boundary_points[0], boundary_points[1]
    topology = classify_topology(p, q, rect)
    first, second = topology_corners(topology, rect)
    logger.debug("One-line topology for %s, %s: %s", p, q, topology.name)
    return normalize_sections([(p, q, *first), (p, q, *second)])
