"""Marks: the stored objects an author or student places on the graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .point import Point
from .shapes import Line, Polygon
from .validation import validate_mark


@dataclass(frozen=True)
class PointMark:
    x: float
    y: float

    type = "point"

    def to_dict(self) -> dict:
        return {"type": self.type, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class LineMark(Line):
    """A line mark; ``fill`` is its stroke style ("Solid", "Dashed")."""

    fill: str | None = None

    type = "line"

    def to_dict(self) -> dict:
        d = {
            "type": self.type,
            "from": self.from_.to_dict(),
            "to": self.to.to_dict(),
            "building": self.building,
        }
        if self.fill is not None:
            d["fill"] = self.fill
        return d


@dataclass(frozen=True)
class PolygonMark:
    """A polygon mark. Solution-set answers have ``is_solution=True``."""

    points: Polygon = field(default_factory=tuple)
    closed: bool = True
    building: bool = False
    is_solution: bool = False

    type = "polygon"

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "points": [p.to_dict() for p in self.points],
            "closed": self.closed,
            "building": self.building,
            "isSolution": self.is_solution,
        }


Mark = Union[PointMark, LineMark, PolygonMark]


def mark_from_dict(data: dict) -> Mark:
    """Build a mark from its stored dict, dispatching on ``type``."""
    data = validate_mark(data)
    mark_type = data["type"]
    if mark_type == "point":
        p = Point.from_dict(data)
        return PointMark(p.x, p.y)
    if mark_type == "line":
        return LineMark(
            from_=Point.from_dict(data["from"]),
            to=Point.from_dict(data["to"]),
            building=bool(data.get("building", False)),
            fill=data.get("fill"),
        )
    return PolygonMark(
        points=tuple(Point.from_dict(p) for p in data["points"]),
        closed=bool(data.get("closed", True)),
        building=bool(data.get("building", False)),
        is_solution=bool(data.get("isSolution", False)),
    )


def marks_from_dicts(items: list[dict] | None) -> list[Mark]:
    return [mark_from_dict(d) for d in items or []]
