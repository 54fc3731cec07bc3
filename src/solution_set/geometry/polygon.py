"""Polygon normalization and hit testing for sections."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from ..config import BOUNDARY_TOLERANCE
from ..core.point import Point, distance
from ..core.shapes import Polygon


def dedup_points(points: Iterable[Point]) -> Polygon:
    """Drop points equal in both coordinates to an earlier point."""
    seen: set[Point] = set()
    unique = []
    for p in points:
        if p not in seen:
            seen.add(p)
            unique.append(p)
    return tuple(unique)


def discard_degenerate(polygons: Iterable[Sequence[Point]]) -> list[Polygon]:
    """Drop polygons with two or fewer vertices."""
    return [tuple(p) for p in polygons if len(p) > 2]


def sorted_clockwise(points: Sequence[Point]) -> Polygon:
    """Return the points in clockwise order, starting at the rightmost one.

    The center is the midpoint of the y extent and of the x extent (not
    the true centroid). Points are first ordered right to left (ties
    bottom to top), and the first of them fixes the reference angle:
    every other point whose angle from the center is smaller gets a full
    turn added. The points are then sorted by angle, reversed, and the
    reference point moved back to the front.

    The result does not depend on the input order, so applying it twice
    gives the same tuple as applying it once.
    """
    if not points:
        return ()
    by_y = sorted(points, key=lambda p: p.y)
    cy = (by_y[0].y + by_y[-1].y) / 2
    ordered = sorted(by_y, key=lambda p: p.x, reverse=True)
    cx = (ordered[0].x + ordered[-1].x) / 2

    xs = np.array([p.x for p in ordered], dtype=np.float64)
    ys = np.array([p.y for p in ordered], dtype=np.float64)
    angles = np.arctan2(ys - cy, xs - cx)

    start = None
    for i, angle in enumerate(angles):
        # A reference angle of exactly 0 is replaced by the next point's.
        if not start:
            start = angle
        elif angle < start:
            angles[i] = angle + 2 * math.pi

    by_angle = [ordered[i] for i in np.argsort(angles, kind="stable")]
    by_angle.reverse()
    return tuple(by_angle[-1:] + by_angle[:-1])


def normalize_sections(sections: Iterable[Sequence[Point]]) -> list[Polygon]:
    """Deduplicate vertices, drop degenerate polygons, sort clockwise."""
    return [
        sorted_clockwise(p)
        for p in discard_degenerate(dedup_points(s) for s in sections)
    ]


def signed_area(polygon: Sequence[Point]) -> float:
    """Shoelace area; negative for clockwise winding in y-up coordinates."""
    if len(polygon) < 3:
        return 0.0
    xs = np.array([p.x for p in polygon], dtype=np.float64)
    ys = np.array([p.y for p in polygon], dtype=np.float64)
    return float(0.5 * (np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))))


def polygon_area(polygon: Sequence[Point]) -> float:
    return abs(signed_area(polygon))


def _edges(polygon: Sequence[Point]):
    n = len(polygon)
    for i in range(n):
        yield polygon[i], polygon[(i + 1) % n]


def _near_segment(p: Point, a: Point, b: Point, tolerance: float) -> bool:
    dx, dy = b.x - a.x, b.y - a.y
    length_sq = dx * dx + dy * dy
    t = 0.0 if length_sq == 0 else ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(p.x - (a.x + t * dx), p.y - (a.y + t * dy)) <= tolerance


def point_on_boundary(
    point: Point, polygon: Sequence[Point], tolerance: float = BOUNDARY_TOLERANCE,
) -> bool:
    """True if the point is within ``tolerance`` of an edge or a vertex.

    Section vertices are rounded to ``COORDINATE_DECIMALS`` places, so a
    point on the exact dividing line can sit slightly off the rounded
    edge; the tolerance covers that offset.
    """
    return any(_near_segment(point, a, b, tolerance) for a, b in _edges(polygon))


def point_on_polygon_edge(point: Point, polygon: Sequence[Point]) -> bool:
    """True if the point lies on an edge, judged on rounded distances.

    An edge a-b holds the point when |a,point| + |point,b| == |a,b| with
    every distance rounded to three decimals, so points within rounding
    noise of an edge count as on it.
    """
    return any(
        distance(a, point) + distance(point, b) == distance(a, b)
        for a, b in _edges(polygon)
    )


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting; points on the boundary are outside.

    Sections that share a dividing line therefore never both claim a
    point on that line, and neither does any single section. "On the
    boundary" means within ``BOUNDARY_TOLERANCE`` of an edge (see
    ``point_on_boundary``), so clicks closer than that to a line select
    nothing.
    """
    if len(polygon) < 3:
        return False
    if point_on_boundary(point, polygon):
        return False
    inside = False
    for a, b in _edges(polygon):
        if (a.y > point.y) != (b.y > point.y):
            x_cross = (b.x - a.x) * (point.y - a.y) / (b.y - a.y) + a.x
            if point.x < x_cross:
                inside = not inside
    return inside
