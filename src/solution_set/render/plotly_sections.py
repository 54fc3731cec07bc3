"""Preview figure for a partitioned grid: sections, dividing lines, solution."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from ..core.point import Point
from ..core.shapes import Line, Polygon, Rect
from ..geometry.clip import clip_line_to_rectangle

# Color constants
COLOR_SECTION = "rgba(180, 180, 180, 0.25)"
COLOR_SECTION_LINE = "rgba(140, 140, 140, 0.8)"
COLOR_SELECTED = "rgba(31, 119, 180, 0.45)"
COLOR_SELECTED_LINE = "rgba(31, 119, 180, 1.0)"
COLOR_DIVIDER = "rgba(20, 20, 20, 1.0)"

_LAYOUT_DEFAULTS = dict(
    template="plotly_white",
    margin=dict(l=40, r=20, t=30, b=40),
    height=400,
    width=400,
    font=dict(family="Inter, -apple-system, BlinkMacSystemFont, Segoe UI, sans-serif", size=11),
    showlegend=False,
)


def _closed(points: Sequence[Point]) -> tuple[list[float], list[float]]:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return xs + xs[:1], ys + ys[:1]


def build_sections_figure(
    rect: Rect,
    sections: Sequence[Polygon],
    lines: Sequence[Line] = (),
    selected: Polygon | None = None,
    title: str = "",
) -> go.Figure:
    """One filled trace per section, then the dividing lines on top.

    The ``selected`` section, if it is among ``sections``, is highlighted.
    Lines are drawn across the whole grid, not just between endpoints.
    """
    fig = go.Figure()

    for i, section in enumerate(sections):
        is_selected = selected is not None and tuple(section) == tuple(selected)
        xs, ys = _closed(section)
        fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", fill="toself",
            name=f"Section {i + 1}",
            fillcolor=COLOR_SELECTED if is_selected else COLOR_SECTION,
            line=dict(
                color=COLOR_SELECTED_LINE if is_selected else COLOR_SECTION_LINE,
                width=1,
            ),
            hoverinfo="name",
        ))

    for i, line in enumerate(lines):
        ends = clip_line_to_rectangle(line, rect)
        if len(ends) < 2:
            continue
        dashed = getattr(line, "fill", None) == "Dashed"
        fig.add_trace(go.Scatter(
            x=[p.x for p in ends], y=[p.y for p in ends], mode="lines",
            name=f"Line {'AB'[i] if i < 2 else i + 1}",
            line=dict(color=COLOR_DIVIDER, width=2, dash="dash" if dashed else "solid"),
        ))

    fig.update_layout(**_LAYOUT_DEFAULTS, title=title)
    fig.update_xaxes(range=[rect.domain.min, rect.domain.max], zeroline=True)
    fig.update_yaxes(
        range=[rect.range.min, rect.range.max], zeroline=True,
        scaleanchor="x", scaleratio=1,
    )
    return fig
