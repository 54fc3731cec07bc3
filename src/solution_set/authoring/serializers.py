"""Serializers: sections and line sets to and from the stored question model."""

from __future__ import annotations

import json
from typing import Sequence

from ..core.point import Point
from ..core.shapes import Polygon
from .state import LineSetState


def sections_to_list(sections: Sequence[Polygon]) -> list[list[dict]]:
    """Sections as nested lists of ``{"x", "y"}`` dicts."""
    return [[p.to_dict() for p in section] for section in sections]


def sections_from_list(data: Sequence[Sequence[dict]] | None) -> list[Polygon]:
    """Inverse of ``sections_to_list``; validates every point."""
    if data is None:
        return []
    if not isinstance(data, (list, tuple)):
        raise TypeError(f"Sections must be a list, got {type(data).__name__}.")
    return [tuple(Point.from_dict(p) for p in section) for section in data]


def serialize_sections(sections: Sequence[Polygon]) -> str:
    """Serialize sections as a JSON string."""
    return json.dumps(sections_to_list(sections))


def serialize_line_set(state: LineSetState) -> dict:
    """The ``gssLineData`` part of the question model plus the answer marks."""
    marks = [m.to_dict() for m in state.line_marks]
    if state.solution is not None:
        marks.append(state.solution.to_dict())
    return {
        "gssLineData": {
            "numberOfLines": state.number_of_lines,
            "sections": sections_to_list(state.sections),
        },
        "marks": marks,
    }
