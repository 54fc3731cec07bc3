"""Equality rules for comparing a student's marks with the correct ones."""

from __future__ import annotations

import math
from typing import Sequence

from ..config import PROPORTION_DECIMALS
from ..core.marks import LineMark, Mark, PointMark, PolygonMark
from ..core.point import Point, round_half_up
from ..core.shapes import Line


def equal_segment(s1: Line, s2: Line) -> bool:
    """Same endpoints, in either direction."""
    return (s1.from_ == s2.from_ and s1.to == s2.to) or (
        s1.to == s2.from_ and s1.from_ == s2.to
    )


def line_coefficients(line: Line) -> tuple[float, float, float]:
    """(a, b, c) of the line equation a*x + b*y + c = 0 through both points."""
    xa, ya = line.from_.x, line.from_.y
    xb, yb = line.to.x, line.to.y
    return yb - ya, xa - xb, xb * ya - xa * yb


def equal_line(l1: LineMark, l2: LineMark) -> bool:
    """True if both marks lie on the same infinite line with the same fill.

    Two lines are equal when a1/a2 = b1/b2 = c1/c2; a zero coefficient
    on the second line must be matched by a zero on the first.
    """
    proportions = set()
    for k1, k2 in zip(line_coefficients(l1), line_coefficients(l2)):
        if k2 != 0:
            proportions.add(round_half_up(k1 / k2, PROPORTION_DECIMALS))
        elif k1 != k2:
            return False
    return len(proportions) == 1 and l1.fill == l2.fill


def polygon_segments(points: Sequence[Point]) -> list[Line]:
    """A, B, C, D -> AB, BC, CD, DA."""
    n = len(points)
    return [Line(points[i], points[(i + 1) % n]) for i in range(n)]


def _unique_segments(segments: list[Line]) -> list[Line]:
    unique: list[Line] = []
    for s in segments:
        if s.from_ == s.to:
            continue
        if not any(equal_segment(s, u) for u in unique):
            unique.append(s)
    return unique


def equal_polygon(p1: PolygonMark, p2: PolygonMark) -> bool:
    """Same set of undirected edges, ignoring zero-length edges.

    The starting vertex and the winding direction do not matter.
    """
    edges1 = _unique_segments(polygon_segments(p1.points))
    edges2 = _unique_segments(polygon_segments(p2.points))
    only1 = [s for s in edges1 if not any(equal_segment(s, o) for o in edges2)]
    only2 = [s for s in edges2 if not any(equal_segment(s, o) for o in edges1)]
    return not only1 and not only2


EQUAL_MARKS = {
    "line": equal_line,
    "polygon": equal_polygon,
}


def compare_marks(m1: Mark | None, m2: Mark | None) -> bool:
    """Marks of different type, or of a type without a rule, never match."""
    if m1 is None or m2 is None or m1.type != m2.type:
        return False
    rule = EQUAL_MARKS.get(m1.type)
    return bool(rule and rule(m1, m2))


def _finite(p: Point) -> bool:
    return math.isfinite(p.x) and math.isfinite(p.y)


def is_complete(mark: Mark) -> bool:
    """True if every coordinate of the mark is a finite number."""
    if isinstance(mark, PointMark):
        return math.isfinite(mark.x) and math.isfinite(mark.y)
    if isinstance(mark, LineMark):
        return _finite(mark.from_) and _finite(mark.to)
    if isinstance(mark, PolygonMark):
        return bool(mark.points) and all(_finite(p) for p in mark.points)
    return False


def remove_invalid_answers(marks: Sequence[Mark] | None) -> list[Mark]:
    """Drop incomplete marks, e.g. left behind by an undo."""
    return [m for m in marks or [] if is_complete(m)]
