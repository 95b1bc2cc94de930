"""
Geometry builder: chart -> ordered primitive batch.

Order matters to every adapter (later primitives paint over earlier ones):
gradients, grid rings, category ring, wedges, scores, labels, titles, center.
"""

from __future__ import annotations

import re

from scorewheel.config import (
    COLOR_CAPTION, COLOR_CENTER_EDGE, COLOR_CENTER_FILL, COLOR_GRID,
    COLOR_GRID_FAINT, COLOR_LABEL, COLOR_SCORE, COLOR_SEPARATOR, COLOR_TITLE,
    COLOR_WEDGE_EDGE, TITLE_CURVED, LayoutConfig,
)
from scorewheel.layout import RadialScale, clamp_score
from scorewheel.metrics import format_score
from scorewheel.models import Category, Chart
from scorewheel.orientation import is_inverted, clock_degrees, resolve_orientation
from scorewheel.paths import polar
from scorewheel.primitives import (
    Circle, CurvedText, Gradient, Primitive, Sector, Text,
)


def gradient_id(index: int, category: Category) -> str:
    """Paint reference for the category at ``index``; unique even when names slug alike."""
    slug = re.sub(r"[^a-z0-9]", "", category.name, flags=re.IGNORECASE)
    return f"grad_{index}_{slug}"


def _inset(a0: float, a1: float, inset: float) -> tuple[float, float]:
    """Trim both ends of a span, never by more than a quarter of it."""
    gap = min(inset, (a1 - a0) / 4)
    return a0 + gap, a1 - gap


def build_gradients(chart: Chart) -> list[Gradient]:
    return [
        Gradient(gradient_id(i, rng.category), rng.category.colors[0], rng.category.colors[1])
        for i, rng in enumerate(chart.ranges)
    ]


def build_grid(config: LayoutConfig) -> list[Primitive]:
    return [
        Circle(config.grid_radius, stroke=COLOR_GRID, stroke_width=1, role="grid"),
        Circle(config.wedge_outer_max, stroke=COLOR_GRID_FAINT, stroke_width=1, role="grid"),
    ]


def build_category_ring(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    r = config.category_ring_radius
    prims: list[Primitive] = []
    for rng in chart.ranges:
        a0, a1 = _inset(rng.a0, rng.a1, config.ring_inset)
        prims.append(Sector(
            r, r, a0, a1,
            stroke=rng.category.primary_color,
            stroke_width=config.ring_stroke_width,
            linecap="round",
            role="ring",
        ))
    # dark band just inside the ring for breathing room
    prims.append(Circle(
        r - config.ring_gap / 2,
        stroke=COLOR_SEPARATOR,
        stroke_width=config.ring_gap,
        role="separator",
    ))
    return prims


def build_wedges(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    scale = RadialScale(config.wedge_inner, config.wedge_outer_max, config.max_score)
    paints = {rng.category.name: gradient_id(i, rng.category) for i, rng in enumerate(chart.ranges)}
    prims: list[Primitive] = []
    for seg in chart.segments:
        a0, a1 = _inset(seg.a0, seg.a1, config.wedge_inset)
        prims.append(Sector(
            config.wedge_inner, scale(seg.score), a0, a1,
            corner_radius=config.corner_radius,
            fill=f"url(#{paints[seg.category.name]})",
            stroke=COLOR_WEDGE_EDGE,
            stroke_width=2,
            role="wedge",
            target=seg.index,
        ))
    return prims


def build_score_labels(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    prims: list[Primitive] = []
    for seg in chart.segments:
        x, y = polar(seg.am, config.score_ring_radius)
        rotation, anchor = resolve_orientation(seg.am, "middle")
        prims.append(Text(
            x, y, format_score(clamp_score(seg.score, config.max_score)),
            rotation=rotation, anchor=anchor,
            size=config.score_font_size, weight=600, fill=COLOR_SCORE,
            role="score", target=seg.index,
        ))
    return prims


def build_dimension_labels(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    prims: list[Primitive] = []
    for seg in chart.segments:
        x, y = polar(seg.am, config.label_ring_radius)
        rotation, anchor = resolve_orientation(seg.am, "start")
        prims.append(Text(
            x, y, seg.label,
            rotation=rotation, anchor=anchor,
            size=config.label_font_size, weight=600, fill=COLOR_LABEL,
            role="label", target=seg.index,
        ))
    return prims


def build_titles(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    prims: list[Primitive] = []
    for i, rng in enumerate(chart.ranges):
        title = rng.category.display_title
        if config.title_mode == TITLE_CURVED:
            a0, a1 = _inset(rng.a0, rng.a1, config.ring_inset)
            prims.append(CurvedText(
                f"title_arc_{i}", config.title_radius, a0, a1, title,
                reversed=is_inverted(clock_degrees(rng.am)),
                size=config.title_font_size, weight=700, fill=COLOR_TITLE,
                letter_spacing=2, role="title",
            ))
        else:
            x, y = polar(rng.am, config.title_radius)
            rotation, anchor = resolve_orientation(rng.am, "middle")
            prims.append(Text(
                x, y, title,
                rotation=rotation, anchor=anchor,
                size=config.title_font_size, weight=700, fill=COLOR_TITLE,
                letter_spacing=2, role="title",
            ))
    return prims


def build_center(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    return [
        Circle(config.inner_radius, fill=COLOR_CENTER_FILL,
               stroke=COLOR_CENTER_EDGE, stroke_width=1, role="center"),
        Text(0.0, -6.0, format_score(chart.aggregate),
             size=config.center_font_size, weight=800, fill="#ffffff",
             stroke=COLOR_WEDGE_EDGE, stroke_width=4, role="aggregate"),
        Text(0.0, 44.0, config.center_caption,
             size=config.caption_font_size, weight=600, fill=COLOR_CAPTION,
             letter_spacing=4, role="caption"),
    ]


def build_primitives(chart: Chart, config: LayoutConfig) -> list[Primitive]:
    return [
        *build_gradients(chart),
        *build_grid(config),
        *build_category_ring(chart, config),
        *build_wedges(chart, config),
        *build_score_labels(chart, config),
        *build_dimension_labels(chart, config),
        *build_titles(chart, config),
        *build_center(chart, config),
    ]
