"""solution-set-geometry: partition a graph grid by one or two lines into selectable sections."""

from ._version import __version__
from .core.marks import LineMark, PointMark, PolygonMark, mark_from_dict
from .core.point import Point
from .core.shapes import Axis, Line, LineSet, Rect
from .geometry import (
    BoundaryTopology,
    clip_line_to_rectangle,
    compute_sections,
    find_section,
    lines_are_added,
    point_in_polygon,
    point_on_polygon_edge,
    section_one_line,
    section_two_lines,
    select_section,
    sorted_clockwise,
    unclaimed_corners,
)


def sections_for(lines, rect):
    """Sections for a list of one or two committed lines.

    Parameters
    ----------
    lines : sequence of Line
        The dividing lines; their count selects one- or two-line mode.
    rect : Rect
        The grid rectangle.
    """
    lines = tuple(lines)
    return compute_sections(LineSet(len(lines), lines), rect)


__all__ = [
    "__version__",
    "Axis",
    "BoundaryTopology",
    "Line",
    "LineMark",
    "LineSet",
    "Point",
    "PointMark",
    "PolygonMark",
    "Rect",
    "clip_line_to_rectangle",
    "compute_sections",
    "find_section",
    "lines_are_added",
    "mark_from_dict",
    "point_in_polygon",
    "point_on_polygon_edge",
    "section_one_line",
    "section_two_lines",
    "sections_for",
    "select_section",
    "sorted_clockwise",
    "unclaimed_corners",
]
