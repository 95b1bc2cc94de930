"""Plotly render adapter and the supporting chart builders."""

from __future__ import annotations

import html
import math

import pandas as pd
import plotly.graph_objects as go
from plotly.colors import find_intermediate_color, hex_to_rgb, label_rgb

from scorewheel.config import COLOR_BG
from scorewheel.engine import Wheel
from scorewheel.interaction import TooltipController
from scorewheel.orientation import clock_degrees
from scorewheel.paths import polar, sector_outline, to_path
from scorewheel.primitives import (
    Circle, CurvedText, Gradient, Label, Sector, Shape, Text,
)
from scorewheel.surface import paint

TRANSPARENT = "rgba(0,0,0,0)"
CHAR_WIDTH  = 0.6   # average glyph advance, in font sizes


def _blend(gradient: Gradient) -> str:
    """Plotly shapes cannot carry gradients; use the midpoint colour."""
    lo, hi = gradient.start_color, gradient.end_color
    if not (lo.startswith("#") and hi.startswith("#")):
        return hi
    mid = find_intermediate_color(hex_to_rgb(lo), hex_to_rgb(hi), 0.5, colortype="tuple")
    return label_rgb(tuple(round(c) for c in mid))


def _text_width(content: str, size: float, spacing: float = 0.0) -> float:
    return len(content) * (size * CHAR_WIDTH + spacing)


# ── Wheel surface ─────────────────────────────────────────────────────────────

class PlotlySurface:
    """
    Paints primitives onto a go.Figure. Primitive coordinates have y pointing
    down; the figure's y axis points up, so every y is negated here.
    """

    def __init__(self, size: float = 800.0, background: str = COLOR_BG) -> None:
        self.size = size
        self.background = background
        self.clear()

    def clear(self) -> None:
        self.fig = go.Figure()
        self._gradients: dict[str, str] = {}

    def _paint(self, value: str | None) -> str:
        if not value:
            return TRANSPARENT
        if value.startswith("url(#"):
            return self._gradients.get(value[5:-1], TRANSPARENT)
        return value

    def add_gradient(self, gradient: Gradient) -> None:
        self._gradients[gradient.ref_id] = _blend(gradient)

    def add_shape(self, shape: Shape) -> None:
        line = dict(
            color=self._paint(shape.stroke),
            width=shape.stroke_width if shape.stroke else 0,
        )
        if isinstance(shape, Circle):
            r = shape.radius
            self.fig.add_shape(
                type="circle", xref="x", yref="y",
                x0=-r, y0=-r, x1=r, y1=r,
                fillcolor=self._paint(shape.fill), line=line,
            )
            return
        self.fig.add_shape(
            type="path",
            path=to_path(sector_outline(shape), closed=not shape.is_arc, flip_y=True),
            fillcolor=self._paint(shape.fill) if not shape.is_arc else TRANSPARENT,
            line=line,
        )

    def add_text(self, text: Label) -> None:
        if isinstance(text, CurvedText):
            self._add_curved_text(text)
            return
        # Plotly anchors the rotated bounding box, so place the text by its centre
        theta = math.radians(text.rotation)
        half = _text_width(text.content, text.size, text.letter_spacing) / 2
        shift = {"start": half, "end": -half}.get(text.anchor, 0.0)
        x = text.x + shift * math.cos(theta)
        y = text.y + shift * math.sin(theta)
        self._annotate(x, y, text.content, text.rotation, text.size, text.weight, text.fill)

    def _add_curved_text(self, text: CurvedText) -> None:
        step = (text.size * CHAR_WIDTH + text.letter_spacing) / text.radius
        mid = (text.start_angle + text.end_angle) / 2
        direction = -1.0 if text.reversed else 1.0
        first = mid - direction * step * (len(text.content) - 1) / 2
        for k, ch in enumerate(text.content):
            angle = first + direction * step * k
            x, y = polar(angle, text.radius)
            rotation = clock_degrees(angle) + (180.0 if text.reversed else 0.0)
            self._annotate(x, y, ch, rotation % 360.0, text.size, text.weight, text.fill)

    def _annotate(self, x: float, y: float, content: str, rotation: float,
                  size: float, weight: int, color: str) -> None:
        label = html.escape(content)
        if weight >= 600:
            label = f"<b>{label}</b>"
        self.fig.add_annotation(
            x=x, y=-y, text=label,
            textangle=rotation,
            xanchor="center", yanchor="middle",
            showarrow=False,
            font=dict(size=size, color=color),
        )

    def figure(self) -> go.Figure:
        half = self.size / 2
        self.fig.update_layout(
            xaxis=dict(range=[-half, half], visible=False),
            yaxis=dict(range=[-half, half], visible=False, scaleanchor="x", scaleratio=1),
            showlegend=False,
            margin=dict(t=10, b=10, l=10, r=10),
            height=int(self.size),
            paper_bgcolor=self.background,
            plot_bgcolor=self.background,
        )
        return self.fig


def add_hover_layer(fig: go.Figure, wheel: Wheel) -> go.Figure:
    """Invisible markers over wedges and labels carrying the tooltip content."""
    tooltips = TooltipController(wheel.chart)
    xs, ys, texts = [], [], []
    for prim in wheel.primitives:
        if isinstance(prim, Sector) and prim.role == "wedge":
            r = (prim.inner_radius + prim.outer_radius) / 2
            x, y = polar((prim.start_angle + prim.end_angle) / 2, r)
        elif isinstance(prim, Text) and prim.role == "label":
            x, y = prim.x, prim.y
        else:
            continue
        xs.append(x)
        ys.append(-y)
        texts.append(tooltips.content_for(prim.target).html())

    fig.add_trace(go.Scatter(
        x=xs, y=ys,
        mode="markers",
        marker=dict(size=22, color=TRANSPARENT),
        hovertext=texts,
        hoverinfo="text",
        hoverlabel=dict(bgcolor="rgba(0,0,0,0.75)", font_color="#fff"),
    ))
    return fig


def make_wheel_figure(wheel: Wheel, size: float = 800.0) -> go.Figure:
    surface = PlotlySurface(size)
    paint(wheel.primitives, surface)
    return add_hover_layer(surface.figure(), wheel)


# ── Category averages ─────────────────────────────────────────────────────────

def make_category_bars(summary_df: pd.DataFrame, max_score: float) -> go.Figure:
    fig = go.Figure()
    if summary_df.empty:
        return fig
    fig.add_trace(go.Bar(
        x=summary_df["mean_score"],
        y=summary_df["category"],
        orientation="h",
        marker_color=summary_df["color"],
        text=[f"{v:.1f}" for v in summary_df["mean_score"]],
        textposition="outside",
        hovertemplate="%{y}: %{x:.2f}<extra></extra>",
    ))
    fig.update_layout(
        xaxis=dict(range=[0, max_score], title="Mean score", gridcolor="#2a2a3a"),
        yaxis=dict(autorange="reversed"),
        margin=dict(t=20, b=40, l=40, r=20),
        height=60 + 40 * len(summary_df),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig
