"""LineSetState: reactive line set whose sections follow its lines."""

from __future__ import annotations

import logging

import param

from ..core.marks import LineMark, PolygonMark
from ..core.point import Point
from ..core.shapes import Line, Polygon, Rect
from ..core.validation import validate_number_of_lines
from ..geometry.sections import compute_sections, find_section, lines_are_added

logger = logging.getLogger(__name__)


class LineSetState(param.Parameterized):
    """The author's one or two lines, the grid, and the derived sections.

    ``sections`` is recomputed whenever the lines, the number of lines
    or the grid rectangle change, and stays empty while a line is still
    being drawn. Every change to ``sections`` bumps ``sections_version``;
    a caller holding an older version knows its sections are stale.
    A chosen ``solution`` that no longer matches a section is cleared.
    """

    number_of_lines = param.Selector(default=1, objects=[1, 2])
    lines = param.List(default=[], item_type=Line)
    rect = param.ClassSelector(class_=Rect, default=None, allow_None=True)

    # --- Derived ---
    sections = param.List(default=[])
    sections_version = param.Integer(default=0)
    solution = param.ClassSelector(class_=PolygonMark, default=None, allow_None=True)

    @param.depends("number_of_lines", "lines", "rect", watch=True, on_init=True)
    def _recompute(self) -> None:
        if self.rect is None or not lines_are_added(self.number_of_lines, self.lines):
            sections = []
        else:
            sections = compute_sections(self, self.rect)
        if sections != self.sections:
            logger.debug(
                "Sections changed (%d -> %d), version %d",
                len(self.sections), len(sections), self.sections_version + 1,
            )
            self.sections = sections
            self.sections_version += 1
        if self.solution is not None and self.solution.points not in sections:
            logger.debug("Clearing solution set that no longer matches a section")
            self.solution = None

    def is_current(self, version: int) -> bool:
        """True if sections have not changed since ``version`` was read."""
        return version == self.sections_version

    def set_number_of_lines(self, number_of_lines: int) -> None:
        """Switch between one and two lines, dropping a surplus line."""
        number_of_lines = validate_number_of_lines(number_of_lines)
        self.param.update(
            number_of_lines=number_of_lines,
            lines=list(self.lines[:number_of_lines]),
        )

    def set_line(self, index: int, line: Line) -> None:
        """Replace (or append) the line at ``index``."""
        if not 0 <= index < self.number_of_lines:
            raise IndexError(
                f"Line index {index} out of range for {self.number_of_lines} line(s)."
            )
        lines = list(self.lines)
        if index < len(lines):
            lines[index] = line
        elif index == len(lines):
            lines.append(line)
        else:
            raise IndexError(f"Line {index - 1} must be drawn before line {index}.")
        self.lines = lines

    def select(self, point: Point) -> PolygonMark | None:
        """Choose the section under ``point`` as the solution set.

        Returns the new solution, or None (keeping the old one) when the
        point is outside every section or on a dividing line.
        """
        section = find_section(point, self.sections)
        if section is None:
            return None
        self.solution = PolygonMark(points=section, is_solution=True)
        return self.solution

    @property
    def line_marks(self) -> list[LineMark]:
        return [
            line if isinstance(line, LineMark)
            else LineMark(line.from_, line.to, line.building)
            for line in self.lines
        ]

    @property
    def solution_section(self) -> Polygon | None:
        return None if self.solution is None else self.solution.points
