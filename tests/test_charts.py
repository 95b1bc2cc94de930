from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from conftest import make_category
from scorewheel.charts import PlotlySurface, make_category_bars, make_wheel_figure
from scorewheel.config import TITLE_CURVED, LayoutConfig
from scorewheel.data import category_summary
from scorewheel.engine import layout_wheel, render_wheel
from scorewheel.primitives import Circle, Gradient, Sector, Text


def test_wheel_figure_shapes_and_annotations(scorecard) -> None:
    wheel = layout_wheel(scorecard)
    fig = make_wheel_figure(wheel)

    assert isinstance(fig, go.Figure)
    # 2 grid + 4 ring + 1 separator + 23 wedges + center
    assert len(fig.layout.shapes) == 31
    texts = [a.text for a in fig.layout.annotations]
    # 23 scores + 23 labels + 4 titles + aggregate + caption
    assert len(texts) == 52
    assert "<b>3.0</b>" in texts
    assert "<b>DE&amp;I Plan</b>" in texts


def test_hover_layer_carries_tooltips(scorecard) -> None:
    fig = make_wheel_figure(layout_wheel(scorecard))
    hover = fig.data[-1]
    assert hover.hoverinfo == "text"
    assert len(hover.hovertext) == 46
    assert hover.hovertext[0] == "<b>TA Strategy</b><br>Operating Model: <b>2.5</b> / 5"


def test_gradient_fill_resolves_to_midpoint_colour() -> None:
    surface = PlotlySurface()
    surface.add_gradient(Gradient("g", "#000000", "#ffffff"))
    surface.add_shape(Sector(10.0, 20.0, 0.0, 1.0, fill="url(#g)"))
    assert surface.fig.layout.shapes[0].fillcolor == "rgb(128, 128, 128)"


def test_y_axis_is_flipped() -> None:
    surface = PlotlySurface()
    surface.add_text(Text(0.0, 50.0, "below center"))
    assert surface.fig.layout.annotations[0].y == -50.0


def test_anchor_shifts_text_centre() -> None:
    surface = PlotlySurface()
    surface.add_text(Text(10.0, 0.0, "abcd", anchor="start", size=10.0))
    surface.add_text(Text(10.0, 0.0, "abcd", anchor="end", size=10.0))
    start, end = surface.fig.layout.annotations
    assert start.x > 10.0 > end.x


def test_curved_titles_are_laid_out_per_character(scorecard) -> None:
    wheel = layout_wheel(scorecard, LayoutConfig(title_mode=TITLE_CURVED))
    fig = make_wheel_figure(wheel)
    chars = sum(len(r.category.display_title) for r in wheel.chart.ranges)
    assert len(fig.layout.annotations) == 23 + 23 + chars + 2


def test_clear_starts_a_fresh_figure() -> None:
    surface = PlotlySurface()
    surface.add_shape(Circle(10.0, stroke="#fff"))
    surface.clear()
    assert len(surface.fig.layout.shapes) == 0


def test_render_into_plotly_surface(scorecard) -> None:
    surface = PlotlySurface(600.0)
    wheel = render_wheel(scorecard, surface)
    fig = surface.figure()
    assert wheel is not None
    assert fig.layout.height == 600
    assert list(fig.layout.xaxis.range) == [-300.0, 300.0]


def test_category_bars(scorecard) -> None:
    wheel = layout_wheel(scorecard)
    fig = make_category_bars(category_summary(wheel.chart), 5.0)
    assert list(fig.data[0].y) == ["Operating Model", "Brand & Experience", "Data", "Cost"]
    assert make_category_bars(pd.DataFrame(), 5.0).data == ()


def test_categories_whose_names_slug_alike_keep_their_own_colour() -> None:
    cats = [
        make_category("R&D", 1.0, 2.0, colors=("#ff0000", "#ff0000")),
        make_category("RD", 3.0, 4.0, colors=("#0000ff", "#0000ff")),
    ]
    fig = make_wheel_figure(layout_wheel(cats))
    red, blue = "rgb(255, 0, 0)", "rgb(0, 0, 255)"
    fills = [s.fillcolor for s in fig.layout.shapes if s.fillcolor in (red, blue)]
    assert fills == [red, red, blue, blue]
