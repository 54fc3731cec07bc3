"""Tests for two-line sectioning."""

import logging

import numpy as np
import pytest

from solution_set.core.point import Point
from solution_set.core.shapes import Line, Rect
from solution_set.geometry.polygon import point_in_polygon, polygon_area
from solution_set.geometry.two_lines import point_in_angle, section_two_lines


def _areas(sections):
    return sorted(polygon_area(s) for s in sections)


def _off_line_grid(rect):
    # interior samples more than BOUNDARY_TOLERANCE away from every dividing line used below
    xs = np.linspace(rect.domain.min + 0.11, rect.domain.max - 0.11, 9)
    ys = np.linspace(rect.range.min + 0.37, rect.range.max - 0.37, 8)
    return [Point(float(x), float(y)) for x in xs for y in ys]


class TestPointInAngle:
    def test_inside_and_outside(self):
        o = Point(0, 0)
        assert point_in_angle(o, Point(1, 0), Point(0, 1), Point(1, 1))
        assert not point_in_angle(o, Point(1, 0), Point(0, 1), Point(-1, -1))
        assert not point_in_angle(o, Point(1, 0), Point(0, 1), Point(-1, 1))

    def test_points_on_rays_are_inside(self):
        o = Point(0, 0)
        assert point_in_angle(o, Point(1, 0), Point(0, 1), Point(3, 0))
        assert point_in_angle(o, Point(1, 0), Point(0, 1), Point(0, 3))

    def test_vertex_other_than_origin(self):
        v = Point(2, 3)
        assert point_in_angle(v, Point(4, 3), Point(2, 5), Point(3, 4))
        assert not point_in_angle(v, Point(4, 3), Point(2, 5), Point(1, 2))

    def test_tolerance_boundary(self):
        o = Point(0, 0)
        a, b = Point(1, 0), Point(0, 1)
        just_outside = Point(1, -4e-5)
        assert point_in_angle(o, a, b, just_outside)
        assert not point_in_angle(o, a, b, just_outside, tolerance=1e-5)
        assert not point_in_angle(o, a, b, Point(1, -6e-5))


class TestCrossingInside:
    def test_crossing_diagonals(self, square, diagonal, anti_diagonal):
        sections = section_two_lines(diagonal, anti_diagonal, square)
        assert len(sections) == 4
        assert _areas(sections) == pytest.approx([25.0] * 4)
        for s in sections:
            assert len(s) == 3
            assert Point(0, 0) in s

    def test_each_corner_bounds_two_triangles(self, square, diagonal, anti_diagonal):
        sections = section_two_lines(diagonal, anti_diagonal, square)
        for corner in square.corners:
            assert sum(corner in s for s in sections) == 2

    def test_no_warning_when_every_corner_is_claimed(
        self, square, diagonal, anti_diagonal, caplog,
    ):
        with caplog.at_level(logging.WARNING, logger="solution_set"):
            section_two_lines(diagonal, anti_diagonal, square)
        assert not caplog.records

    def test_off_center_crossing(self, square, horizontal):
        vertical = Line.from_coords(1, -5, 1, 5)
        sections = section_two_lines(horizontal, vertical, square)
        assert _areas(sections) == pytest.approx([20.0, 20.0, 30.0, 30.0])
        assert all(Point(1, 0) in s for s in sections)

    def test_order_of_lines_does_not_change_the_partition(
        self, square, diagonal, anti_diagonal,
    ):
        forward = section_two_lines(diagonal, anti_diagonal, square)
        backward = section_two_lines(anti_diagonal, diagonal, square)
        assert set(forward) == set(backward)


class TestNoCrossingInside:
    def test_parallel_bands(self, square):
        low, high = Line.from_coords(-5, -2, 5, -2), Line.from_coords(-5, 2, 5, 2)
        sections = section_two_lines(low, high, square)
        assert len(sections) == 3
        assert _areas(sections) == pytest.approx([30.0, 30.0, 40.0])

    def test_crossing_outside_the_grid(self, square, horizontal):
        other = Line.from_coords(10, 0, 0, 5)
        sections = section_two_lines(horizontal, other, square)
        assert _areas(sections) == pytest.approx([6.25, 43.75, 50.0])
        middle = max(sections, key=len)
        assert middle == (
            Point(5, 0), Point(-5, 0), Point(-5, 5), Point(0, 5), Point(5, 2.5),
        )

    def test_coincident_lines_leave_one_section(self, square, horizontal):
        sections = section_two_lines(horizontal, Line.from_coords(-2, 0, 3, 0), square)
        assert len(sections) == 1
        assert polygon_area(sections[0]) == pytest.approx(100.0)

    def test_line_touching_a_corner_only(self, square, horizontal):
        corner_only = Line.from_coords(0, 10, 10, 0)
        assert section_two_lines(horizontal, corner_only, square) == []
        assert section_two_lines(corner_only, horizontal, square) == []

    def test_line_missing_the_grid(self, square, horizontal):
        outside = Line.from_coords(-5, 20, 5, 20)
        assert section_two_lines(horizontal, outside, square) == []


class TestPartitionProperty:
    SQUARE = Rect.from_bounds(-5, 5, -5, 5)
    TALL = Rect.from_bounds(-5, 5, -4, 6)

    CASES = [
        (SQUARE, Line.from_coords(-5, -5, 5, 5), Line.from_coords(-5, 5, 5, -5)),
        (SQUARE, Line.from_coords(-5, 0, 5, 0), Line.from_coords(1, -5, 1, 5)),
        (SQUARE, Line.from_coords(-5, -2, 5, -2), Line.from_coords(-5, 2, 5, 2)),
        # boundary points off the lattice, lines crossing outside the grid
        (TALL, Line.from_coords(-6, -8, 1, 5), Line.from_coords(4, 8, 3, -4)),
        (TALL, Line.from_coords(-3, -2, 2, 1), Line.from_coords(2, -8, 7, 3)),
    ]

    @pytest.mark.parametrize("rect, a, b", CASES)
    def test_areas_add_up(self, rect, a, b):
        sections = section_two_lines(a, b, rect)
        assert sum(polygon_area(s) for s in sections) == pytest.approx(rect.area)

    @pytest.mark.parametrize("rect, a, b", CASES)
    def test_every_interior_point_in_exactly_one_section(self, rect, a, b):
        sections = section_two_lines(a, b, rect)
        for p in _off_line_grid(rect):
            assert sum(point_in_polygon(p, s) for s in sections) == 1, p


class TestOffLatticeBands:
    @pytest.fixture
    def tall(self):
        return Rect.from_bounds(-5, 5, -4, 6)

    def test_section_crossed_by_other_line_is_dropped(self, tall):
        a = Line.from_coords(-6, -8, 1, 5)
        b = Line.from_coords(4, 8, 3, -4)
        sections = section_two_lines(a, b, tall)
        assert _areas(sections) == pytest.approx([15.835, 38.46, 45.705])

    def test_click_near_top_edge_resolves_once(self, tall):
        a = Line.from_coords(-6, -8, 1, 5)
        b = Line.from_coords(4, 8, 3, -4)
        sections = section_two_lines(a, b, tall)
        assert sum(point_in_polygon(Point(4, 5.9), s) for s in sections) == 1

    def test_corner_triangle_and_middle(self, tall):
        a = Line.from_coords(-3, -2, 2, 1)
        b = Line.from_coords(2, -8, 7, 3)
        sections = section_two_lines(a, b, tall)
        assert len(sections) == 3
        assert _areas(sections) == pytest.approx([1.5366, 36.4634, 62.0], abs=1e-6)
