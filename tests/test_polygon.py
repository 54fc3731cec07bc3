"""Tests for polygon normalization and hit testing."""

import pytest

from solution_set.core.point import Point
from solution_set.core.shapes import Line
from solution_set.geometry.clip import clip_line_to_rectangle
from solution_set.geometry.one_line import section_one_line
from solution_set.geometry.polygon import (
    dedup_points,
    discard_degenerate,
    normalize_sections,
    point_in_polygon,
    point_on_boundary,
    point_on_polygon_edge,
    polygon_area,
    signed_area,
    sorted_clockwise,
)


def _pts(*coords):
    return tuple(Point(x, y) for x, y in coords)


SQUARE = _pts((5, 5), (5, -5), (-5, -5), (-5, 5))
UPPER_LEFT = _pts((5, 5), (-5, -5), (-5, 5))
LOWER_RIGHT = _pts((5, -5), (-5, -5), (5, 5))


class TestDedupAndDiscard:
    def test_dedup_keeps_first_occurrence(self):
        pts = _pts((1, 1), (2, 2), (1, 1), (3, 3), (2, 2))
        assert dedup_points(pts) == _pts((1, 1), (2, 2), (3, 3))

    def test_dedup_treats_negative_zero_as_zero(self):
        assert dedup_points(_pts((0.0, 1), (-0.0, 1))) == _pts((0.0, 1))

    def test_discard_degenerate(self):
        polys = [_pts((0, 0), (1, 1)), _pts((0, 0), (1, 0), (0, 1)), ()]
        assert discard_degenerate(polys) == [_pts((0, 0), (1, 0), (0, 1))]

    def test_normalize_drops_collapsed_polygon(self):
        # three vertices, but only two distinct
        sections = [_pts((5, 5), (5, -5), (5, 5)), UPPER_LEFT]
        assert normalize_sections(sections) == [sorted_clockwise(UPPER_LEFT)]


class TestSortedClockwise:
    def test_top_half(self):
        pts = _pts((-5, 0), (5, 0), (5, 5), (-5, 5))
        assert sorted_clockwise(pts) == _pts((5, 0), (-5, 0), (-5, 5), (5, 5))

    def test_triangles(self):
        assert sorted_clockwise(_pts((-5, -5), (5, 5), (-5, 5))) == UPPER_LEFT
        assert sorted_clockwise(_pts((-5, -5), (5, 5), (5, -5))) == LOWER_RIGHT

    def test_winding_is_clockwise(self):
        for poly in (UPPER_LEFT, LOWER_RIGHT, sorted_clockwise(SQUARE)):
            assert signed_area(poly) < 0

    def test_input_order_does_not_matter(self):
        pts = _pts((-5, 0), (5, 0), (5, 5), (-5, 5))
        assert sorted_clockwise(pts) == sorted_clockwise(tuple(reversed(pts)))

    def test_idempotent(self):
        once = sorted_clockwise(_pts((0, 5), (3, -2), (-4, -1), (5, 5)))
        assert sorted_clockwise(once) == once

    def test_zero_reference_angle_defers_to_next_point(self):
        # the rightmost point sits level with the center, at angle 0
        result = sorted_clockwise(_pts((5, 0), (-5, 5), (-5, -5)))
        assert result == _pts((-5, -5), (-5, 5), (5, 0))
        assert signed_area(result) < 0

    def test_does_not_mutate_input(self):
        pts = [Point(-5, 0), Point(5, 0), Point(5, 5)]
        sorted_clockwise(pts)
        assert pts == [Point(-5, 0), Point(5, 0), Point(5, 5)]

    def test_empty(self):
        assert sorted_clockwise(()) == ()


class TestArea:
    def test_square(self):
        assert polygon_area(SQUARE) == pytest.approx(100.0)

    def test_triangle(self):
        assert polygon_area(UPPER_LEFT) == pytest.approx(50.0)

    def test_degenerate(self):
        assert polygon_area(_pts((0, 0), (1, 1))) == 0.0


class TestPointInPolygon:
    def test_inside(self):
        assert point_in_polygon(Point(0, 0), SQUARE)
        assert point_in_polygon(Point(-3, 3), UPPER_LEFT)

    def test_outside(self):
        assert not point_in_polygon(Point(6, 0), SQUARE)
        assert not point_in_polygon(Point(3, -3), UPPER_LEFT)

    def test_edges_and_vertices_are_outside(self):
        assert not point_in_polygon(Point(5, 0), SQUARE)
        assert not point_in_polygon(Point(5, 5), SQUARE)
        assert not point_in_polygon(Point(0, -5), SQUARE)

    def test_point_on_dividing_line_belongs_to_neither_side(self):
        assert not point_in_polygon(Point(0, 0), UPPER_LEFT)
        assert not point_in_polygon(Point(0, 0), LOWER_RIGHT)

    def test_degenerate_polygon(self):
        assert not point_in_polygon(Point(0, 0), _pts((-1, 0), (1, 0)))

    def test_point_on_line_with_rounded_clip_points(self, square):
        # the line y = x / 3 meets the grid at (5, 1.667) and (-5, -1.667)
        line = Line.from_coords(0, 0, 3, 1)
        sections = section_one_line(clip_line_to_rectangle(line, square), square)
        assert len(sections) == 2
        assert not any(point_in_polygon(Point(3, 1), s) for s in sections)
        assert sum(point_in_polygon(Point(3, 1.01), s) for s in sections) == 1


class TestPointOnPolygonEdge:
    def test_on_edge(self):
        assert point_on_polygon_edge(Point(5, 0), SQUARE)
        assert point_on_polygon_edge(Point(0, 0), UPPER_LEFT)

    def test_vertex(self):
        assert point_on_polygon_edge(Point(-5, -5), SQUARE)

    def test_interior_is_not_on_edge(self):
        assert not point_on_polygon_edge(Point(0, 0), SQUARE)

    def test_within_rounding_noise(self):
        # distances are compared after rounding to three decimals
        assert point_on_polygon_edge(Point(5, 0.0001), SQUARE)
        assert not point_on_polygon_edge(Point(4.9, 0), SQUARE)


class TestPointOnBoundary:
    def test_exact_edge_and_vertex(self):
        assert point_on_boundary(Point(5, 0), SQUARE)
        assert point_on_boundary(Point(-5, -5), SQUARE)

    def test_non_lattice_point_on_axis_aligned_edge(self):
        # 2.295 + 1.167 != 3.462 in floating point; the edge test is not distance based
        top = _pts((1.538, 6), (-3.846, -4), (5, -4), (5, 6))
        assert point_on_boundary(Point(3.833, 6), top)
        assert point_on_boundary(Point(3, -4), top)

    def test_within_tolerance(self):
        assert point_on_boundary(Point(5.0005, 0), SQUARE)
        assert not point_on_boundary(Point(4.99, 0), SQUARE)
        assert not point_on_boundary(Point(4.99, 0), SQUARE, tolerance=1e-3)
        assert point_on_boundary(Point(4.99, 0), SQUARE, tolerance=0.02)

    def test_interior(self):
        assert not point_on_boundary(Point(0, 0), SQUARE)
