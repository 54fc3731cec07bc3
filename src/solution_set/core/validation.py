"""Input validation with clear error messages for stored question models."""

from __future__ import annotations

import math
from typing import Any

MARK_TYPES = ("point", "line", "polygon")


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"{field} must be a number, got {type(value).__name__}."
        )
    if not math.isfinite(value):
        raise ValueError(f"{field} must be finite, got {value!r}.")
    return value


def validate_point(data: Any, field: str = "point") -> tuple[float, float]:
    """Validate a ``{"x": ..., "y": ...}`` mapping.

    Returns the (x, y) pair.
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"{field} must be a dict with 'x' and 'y', got {type(data).__name__}."
        )
    missing = [k for k in ("x", "y") if k not in data]
    if missing:
        raise ValueError(f"{field} is missing keys: {missing}")
    return _number(data["x"], f"{field}.x"), _number(data["y"], f"{field}.y")


def validate_axis(data: Any, axis_name: str) -> dict:
    """Validate an axis mapping with ``min < max`` and positive steps.

    Parameters
    ----------
    data : mapping with 'min', 'max' and optional 'step', 'labelStep'
    axis_name : 'domain' or 'range' for error messages
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"{axis_name} must be a dict with 'min' and 'max', "
            f"got {type(data).__name__}."
        )
    missing = [k for k in ("min", "max") if k not in data]
    if missing:
        raise ValueError(f"{axis_name} is missing keys: {missing}")
    lo = _number(data["min"], f"{axis_name}.min")
    hi = _number(data["max"], f"{axis_name}.max")
    if lo >= hi:
        raise ValueError(
            f"{axis_name}.min must be smaller than {axis_name}.max, "
            f"got min={lo!r}, max={hi!r}."
        )
    for key in ("step", "labelStep"):
        if key in data:
            step = _number(data[key], f"{axis_name}.{key}")
            if step <= 0:
                raise ValueError(
                    f"{axis_name}.{key} must be positive, got {step!r}."
                )
    return data


def validate_number_of_lines(value: Any) -> int:
    if value not in (1, 2) or isinstance(value, bool):
        raise ValueError(f"number_of_lines must be 1 or 2, got {value!r}.")
    return int(value)


def validate_mark(data: Any) -> dict:
    """Validate the common shape of a stored mark and return it unchanged."""
    if not isinstance(data, dict):
        raise TypeError(f"Mark must be a dict, got {type(data).__name__}.")
    mark_type = data.get("type")
    if mark_type not in MARK_TYPES:
        raise ValueError(
            f"Unknown mark type {mark_type!r}. Expected one of {list(MARK_TYPES)}."
        )
    if mark_type == "line":
        for key in ("from", "to"):
            if key not in data:
                raise ValueError(f"line mark is missing '{key}'.")
    if mark_type == "polygon":
        points = data.get("points")
        if not isinstance(points, list):
            raise TypeError(
                f"polygon mark 'points' must be a list, got {type(points).__name__}."
            )
    return data
