"""Line-rectangle clipping: where an infinite line crosses the grid boundary."""

from __future__ import annotations

import logging

from ..config import COORDINATE_DECIMALS
from ..core.point import Point
from ..core.shapes import Line, Rect
from .polygon import dedup_points

logger = logging.getLogger(__name__)


def line_intersect(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float,
) -> Point | None:
    """Intersection of the infinite lines (x1,y1)-(x2,y2) and (x3,y3)-(x4,y4).

    Returns None when the lines are parallel (exact zero denominator).
    Coordinates are rounded to ``COORDINATE_DECIMALS`` places.
    """
    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denominator == 0:
        return None
    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    return Point(
        round(x1 + ua * (x2 - x1), COORDINATE_DECIMALS),
        round(y1 + ua * (y2 - y1), COORDINATE_DECIMALS),
    )


def intersect_lines(a: Line, b: Line) -> Point | None:
    """Intersection of the infinite extensions of two lines."""
    return line_intersect(
        a.from_.x, a.from_.y, a.to.x, a.to.y,
        b.from_.x, b.from_.y, b.to.x, b.to.y,
    )


def rectangle_edges(rect: Rect) -> tuple[tuple[Point, Point], ...]:
    """Edges in clipping order: right, left, top, bottom."""
    d, r = rect.domain, rect.range
    return (
        (Point(d.max, r.max), Point(d.max, r.min)),
        (Point(d.min, r.max), Point(d.min, r.min)),
        (Point(d.min, r.max), Point(d.max, r.max)),
        (Point(d.min, r.min), Point(d.max, r.min)),
    )


def clip_line_to_rectangle(line: Line, rect: Rect) -> tuple[Point, ...]:
    """Points where the infinite line crosses the rectangle boundary.

    Returns 0, 1 or 2 distinct points, each on the boundary. A line
    through a corner meets two edges at the same point; that point is
    reported once.
    """
    hits = []
    for start, end in rectangle_edges(rect):
        p = line_intersect(
            line.from_.x, line.from_.y, line.to.x, line.to.y,
            start.x, start.y, end.x, end.y,
        )
        if p is not None and rect.contains(p):
            hits.append(p)
    points = dedup_points(hits)
    logger.debug("Clipped %s to %d boundary point(s): %s", line, len(points), points)
    return points
