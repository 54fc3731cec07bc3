"""Grid step constraints and tick generation for the graph axes."""

from __future__ import annotations

from dataclasses import replace

from ..config import (
    PREFERRED_GRID_VALUES,
    TICK_DECIMALS,
    VALID_GRID_VALUES,
    VALID_LABEL_VALUES,
)
from ..core.point import round_half_up
from ..core.shapes import Axis


def grid_values(axis: Axis, size: float, preferred: bool = False) -> list[float]:
    """Grid steps usable for an axis drawn ``size`` pixels long.

    A step must give between one line every 100 px and one every 10 px
    (relative to the axis span). ``preferred`` restricts the candidates
    to the rounder values.
    """
    min_value = 10 * (axis.max - axis.min) / size
    max_value = min_value * 10
    values = PREFERRED_GRID_VALUES if preferred else VALID_GRID_VALUES
    return [v for v in values if min_value <= v <= max_value]


def label_values(step: float) -> list[float]:
    """Label steps allowed for a grid step (empty for unknown steps)."""
    return list(VALID_LABEL_VALUES.get(step, ()))


def apply_constraints(
    axis: Axis,
    size: float,
    old_grid_values: list[float],
    old_label_values: list[float],
) -> tuple[Axis, list[float], list[float]]:
    """Re-fit an axis' step and label step after its span or size changed.

    Returns ``(axis, grid_values, label_values)`` where ``axis`` is a new
    Axis whenever a step had to change.

    If the allowed grid steps changed and no longer include the current
    step, the lowest preferred step is taken (1 if there is none) and the
    label step is reset to it unless still allowed. Otherwise, if only
    the allowed label steps changed and exclude the current label step,
    the label step falls back to the grid step.
    """
    grid = grid_values(axis, size)
    labels = label_values(axis.step)
    if list(old_grid_values) != grid and axis.step not in grid:
        preferred = grid_values(axis, size, preferred=True)
        lowest = preferred[0] if preferred else 1
        labels = label_values(lowest)
        label_step = axis.label_step if axis.label_step in labels else lowest
        return replace(axis, step=lowest, label_step=label_step), grid, labels
    if list(old_label_values) != labels and axis.label_step not in labels:
        axis = replace(axis, label_step=axis.step)
    return axis, grid, labels


def tick_values(axis: Axis) -> list[float]:
    """Multiples of ``axis.step`` inside ``[axis.min, axis.max]``.

    Ticks are generated outwards from 0, first downwards then upwards,
    and rounded to ``TICK_DECIMALS`` places at every step so that
    accumulated error does not drift off the grid.
    """
    if axis.step <= 0:
        raise ValueError(f"Axis step must be positive, got {axis.step!r}.")
    ticks: list[float] = []
    value = 0
    while value >= axis.min and value not in ticks:
        ticks.append(value)
        value = round_half_up(value - axis.step, TICK_DECIMALS)
    value = round_half_up(axis.step, TICK_DECIMALS)
    while value <= axis.max and value not in ticks:
        ticks.append(value)
        value = round_half_up(value + axis.step, TICK_DECIMALS)
    return [t for t in ticks if axis.min <= t <= axis.max]
