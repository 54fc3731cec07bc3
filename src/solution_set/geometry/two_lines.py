"""Two-line sectioning: the three or four regions two lines cut the grid into."""

from __future__ import annotations

import logging
from typing import Sequence

from ..config import ANGLE_TOLERANCE
from ..core.point import Point, angle_between
from ..core.shapes import Line, Polygon, Rect
from .clip import clip_line_to_rectangle, intersect_lines
from .one_line import section_one_line
from .polygon import normalize_sections, point_on_boundary

logger = logging.getLogger(__name__)


def point_in_angle(
    vertex: Point,
    ray_a: Point,
    ray_b: Point,
    test: Point,
    tolerance: float = ANGLE_TOLERANCE,
) -> bool:
    """True if ``test`` lies in the cone at ``vertex`` spanned by two rays.

    The cone is the one of at most pi radians between the rays towards
    ``ray_a`` and ``ray_b``; a point is inside when its angles to both
    rays add up to the cone's opening angle.
    """
    v1 = ray_a - vertex
    v2 = ray_b - vertex
    t = test - vertex
    angle_sum = angle_between(v1, t) + angle_between(v2, t)
    return abs(angle_sum - angle_between(v1, v2)) < tolerance


def _fan_sections(
    crossing: Point,
    points_a: Sequence[Point],
    points_b: Sequence[Point],
    rect: Rect,
) -> list[tuple[Point, ...]]:
    """One candidate per (A, B) boundary-point pair, corners claimed once."""
    pool = rect.corners
    candidates = []
    for a in points_a:
        for b in points_b:
            claimed = tuple(c for c in pool if point_in_angle(crossing, a, b, c))
            pool = tuple(c for c in pool if c not in claimed)
            candidates.append((crossing, a, b, *claimed))
    if pool:
        logger.warning(
            "Corners %s fell outside every cone around %s; they are left out "
            "of all sections", pool, crossing,
        )
    return candidates


def _splits(section: Polygon, other_points: Sequence[Point]) -> bool:
    # the other line runs through this section, so it is subdivided further
    return all(point_on_boundary(p, section) for p in other_points)


def _band_sections(
    points_a: Sequence[Point],
    points_b: Sequence[Point],
    rect: Rect,
) -> list[tuple[Point, ...]]:
    """Outer sections of each line plus the middle region between them."""
    kept = [
        s for s in section_one_line(points_a, rect) if not _splits(s, points_b)
    ] + [
        s for s in section_one_line(points_b, rect) if not _splits(s, points_a)
    ]
    used = {v for s in kept for v in s}
    free_corners = tuple(c for c in rect.corners if c not in used)
    middle = (*free_corners, *points_a, *points_b)
    return [*kept, middle]


def section_two_lines(line_a: Line, line_b: Line, rect: Rect) -> list[Polygon]:
    """Split the rectangle along two lines.

    When the infinite lines cross strictly inside the rectangle the
    result is a fan of four sections around the crossing. Otherwise
    (parallel, coincident, or crossing on or beyond the boundary) each
    line is sectioned on its own, the sections the other line runs
    through are dropped, and the remaining area forms one middle
    section. Returns an empty list when either line fails to cross the
    rectangle at two distinct points.
    """
    points_a = clip_line_to_rectangle(line_a, rect)
    points_b = clip_line_to_rectangle(line_b, rect)
    if len(points_a) < 2 or len(points_b) < 2:
        logger.debug(
            "Degenerate clip (%d, %d boundary points); no sections",
            len(points_a), len(points_b),
        )
        return []

    crossing = intersect_lines(line_a, line_b)
    if crossing is not None and rect.contains_strictly(crossing):
        logger.debug("Lines cross inside the grid at %s", crossing)
        candidates = _fan_sections(crossing, points_a, points_b, rect)
    else:
        logger.debug("Lines do not cross inside the grid (crossing=%s)", crossing)
        candidates = _band_sections(points_a, points_b, rect)
    return normalize_sections(candidates)
