"""Planar sectioning of the grid rectangle by one or two lines."""

from .clip import clip_line_to_rectangle, intersect_lines, line_intersect
from .one_line import BoundaryTopology, classify_topology, section_one_line
from .polygon import (
    dedup_points,
    discard_degenerate,
    normalize_sections,
    point_in_polygon,
    point_on_boundary,
    point_on_polygon_edge,
    polygon_area,
    sorted_clockwise,
)
from .sections import (
    compute_sections,
    find_section,
    lines_are_added,
    select_section,
    unclaimed_corners,
)
from .two_lines import point_in_angle, section_two_lines

__all__ = [
    "BoundaryTopology",
    "classify_topology",
    "clip_line_to_rectangle",
    "compute_sections",
    "dedup_points",
    "discard_degenerate",
    "find_section",
    "intersect_lines",
    "line_intersect",
    "lines_are_added",
    "normalize_sections",
    "point_in_angle",
    "point_in_polygon",
    "point_on_boundary",
    "point_on_polygon_edge",
    "polygon_area",
    "section_one_line",
    "section_two_lines",
    "select_section",
    "sorted_clockwise",
    "unclaimed_corners",
]
