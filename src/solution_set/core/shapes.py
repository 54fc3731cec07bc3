"""Grid rectangle, lines and line sets in grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

from .point import Point
from .validation import validate_axis, validate_number_of_lines

# A closed region as an ordered tuple of vertices (clockwise once normalized).
Polygon = tuple[Point, ...]


@dataclass(frozen=True)
class Axis:
    """Bounds of one grid axis, plus its tick and label steps."""

    min: float
    max: float
    step: float = 1
    label_step: float = 1

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "step": self.step,
            "labelStep": self.label_step,
        }

    @classmethod
    def from_dict(cls, data: dict, axis_name: str = "axis") -> Axis:
        data = validate_axis(data, axis_name)
        return cls(
            min=data["min"],
            max=data["max"],
            step=data.get("step", 1),
            label_step=data.get("labelStep", data.get("step", 1)),
        )


@dataclass(frozen=True)
class Rect:
    """The grid rectangle: domain (horizontal) x range (vertical)."""

    domain: Axis
    range: Axis

    @classmethod
    def from_bounds(
        cls, x_min: float, x_max: float, y_min: float, y_max: float,
    ) -> Rect:
        return cls(Axis(x_min, x_max), Axis(y_min, y_max))

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners as (min,min), (min,max), (max,min), (max,max)."""
        d, r = self.domain, self.range
        return (
            Point(d.min, r.min),
            Point(d.min, r.max),
            Point(d.max, r.min),
            Point(d.max, r.max),
        )

    @property
    def area(self) -> float:
        return (self.domain.max - self.domain.min) * (self.range.max - self.range.min)

    def contains(self, point: Point) -> bool:
        """True if the point is on or inside the boundary."""
        d, r = self.domain, self.range
        return d.min <= point.x <= d.max and r.min <= point.y <= r.max

    def contains_strictly(self, point: Point) -> bool:
        """True if the point is inside, not touching the boundary."""
        d, r = self.domain, self.range
        return d.min < point.x < d.max and r.min < point.y < r.max

    def to_dict(self) -> dict:
        return {"domain": self.domain.to_dict(), "range": self.range.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        if not isinstance(data, dict):
            raise TypeError(
                f"Rect must be a dict with 'domain' and 'range', "
                f"got {type(data).__name__}."
            )
        return cls(
            domain=Axis.from_dict(data.get("domain"), "domain"),
            range=Axis.from_dict(data.get("range"), "range"),
        )


@dataclass(frozen=True)
class Line:
    """Two points whose infinite extension divides the grid.

    ``building`` is set while an endpoint is still being dragged; such a
    line is not an input to sectioning.
    """

    from_: Point
    to: Point
    building: bool = False

    @classmethod
    def from_coords(
        cls, x1: float, y1: float, x2: float, y2: float, building: bool = False,
    ) -> Line:
        return cls(Point(x1, y1), Point(x2, y2), building=building)


@dataclass(frozen=True)
class LineSet:
    """One or two committed lines."""

    number_of_lines: int
    lines: tuple[Line, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_number_of_lines(self.number_of_lines)
        object.__setattr__(self, "lines", tuple(self.lines))
