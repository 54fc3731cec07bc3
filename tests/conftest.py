"""Shared test fixtures for solution-set-geometry."""

import pytest

from solution_set.core.shapes import Line, Rect


@pytest.fixture
def square():
    """The -5..5 x -5..5 grid used by most scenarios."""
    return Rect.from_bounds(-5, 5, -5, 5)


@pytest.fixture
def diagonal():
    return Line.from_coords(-5, -5, 5, 5)


@pytest.fixture
def anti_diagonal():
    return Line.from_coords(-5, 5, 5, -5)


@pytest.fixture
def horizontal():
    return Line.from_coords(-5, 0, 5, 0)
