"""Entry points used by the authoring and delivery views."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.marks import Mark, PolygonMark
from ..core.point import Point
from ..core.shapes import Line, LineSet, Polygon, Rect
from .clip import clip_line_to_rectangle
from .one_line import section_one_line
from .polygon import point_in_polygon
from .two_lines import section_two_lines

logger = logging.getLogger(__name__)


def lines_are_added(number_of_lines: int, lines: Sequence[Line]) -> bool:
    """True once the expected number of lines is drawn and committed.

    In two-line mode only the second line's ``building`` flag matters:
    the first line is necessarily finished before the second one starts.
    """
    if number_of_lines == 1:
        return len(lines) == 1 and not lines[0].building
    return len(lines) == 2 and not lines[1].building


def compute_sections(line_set: LineSet, rect: Rect) -> list[Polygon]:
    """Partition the rectangle by the committed line(s) of a line set.

    ``line_set`` is anything with ``number_of_lines`` and ``lines``
    attributes. Returns an empty list while lines are missing or still
    being drawn, or when they do not span the rectangle.
    """
    lines = tuple(line_set.lines)
    n = line_set.number_of_lines
    if len(lines) < n or any(line.building for line in lines[:n]):
        logger.debug("Line set not ready (%d of %d lines); no sections", len(lines), n)
        return []
    if n == 1:
        sections = section_one_line(clip_line_to_rectangle(lines[0], rect), rect)
    else:
        sections = section_two_lines(lines[0], lines[1], rect)
    logger.debug("Computed %d section(s) for %d line(s)", len(sections), n)
    return sections


def unclaimed_corners(sections: Sequence[Polygon], rect: Rect) -> tuple[Point, ...]:
    """Rectangle corners that are not a vertex of any section."""
    used = {v for s in sections for v in s}
    return tuple(c for c in rect.corners if c not in used)


def find_section(point: Point, sections: Sequence[Polygon]) -> Polygon | None:
    """The first section strictly containing the point, if any."""
    for section in sections:
        if point_in_polygon(point, section):
            return section
    return None


def select_section(
    point: Point, sections: Sequence[Polygon], marks: Sequence[Mark],
) -> list[Mark]:
    """Record the clicked section as the solution-set polygon.

    Any earlier polygon mark is replaced. Marks are returned unchanged
    when the click falls outside every section or on a dividing line.
    """
    section = find_section(point, sections)
    if section is None:
        return list(marks)
    kept = [m for m in marks if m.type != "polygon"]
    return [*kept, PolygonMark(points=section, is_solution=True)]
