"""Drop marks that no longer sit on the grid after an axis change."""

from __future__ import annotations

from ..core.marks import LineMark, Mark, PointMark, PolygonMark
from ..core.shapes import Rect
from .ticks import tick_values


def filter_plotable_marks(
    rect: Rect,
    answers: dict[str, list[Mark]],
) -> dict[str, list[Mark]]:
    """Keep, per answer, only the marks whose points are tick intersections.

    A polygon needs every vertex on the grid; a line needs both
    endpoints, or just ``from_`` while it is still being built.
    """
    xs = set(tick_values(rect.domain))
    ys = set(tick_values(rect.range))

    def plotable(x: float, y: float) -> bool:
        return x in xs and y in ys

    def keep(mark: Mark) -> bool:
        if isinstance(mark, PointMark):
            return plotable(mark.x, mark.y)
        if isinstance(mark, PolygonMark):
            return all(plotable(p.x, p.y) for p in mark.points)
        if isinstance(mark, LineMark):
            start = plotable(mark.from_.x, mark.from_.y)
            if mark.building:
                return start
            return start and plotable(mark.to.x, mark.to.y)
        return False

    return {key: [m for m in marks if keep(m)] for key, marks in (answers or {}).items()}
