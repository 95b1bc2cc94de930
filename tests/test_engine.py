from __future__ import annotations

import logging

import pytest

from conftest import make_category
from scorewheel.config import PARTITION_PER_CATEGORY, LayoutConfig
from scorewheel.engine import layout_wheel, render_wheel, require_renderer
from scorewheel.errors import (
    DependencyMissing, InvalidScorecard, ScoreOutOfRange, SegmentCountMismatch,
)
from scorewheel.primitives import CurvedText, Gradient, Text


class RecordingSurface:
    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def clear(self) -> None:
        self.calls.append(("clear", None))

    def add_gradient(self, gradient) -> None:
        self.calls.append(("gradient", gradient))

    def add_shape(self, shape) -> None:
        self.calls.append(("shape", shape))

    def add_text(self, text) -> None:
        self.calls.append(("text", text))


def test_layout_is_idempotent(scorecard) -> None:
    first = layout_wheel(scorecard)
    second = layout_wheel(scorecard)
    assert first == second
    assert first.primitives == second.primitives


def test_layout_does_not_mutate_input(scorecard) -> None:
    before = list(scorecard)
    layout_wheel(scorecard, LayoutConfig(partition=PARTITION_PER_CATEGORY))
    assert scorecard == before


def test_count_mismatch_aborts_with_message() -> None:
    cats = [make_category("Cost", 1, 2, 3)]
    with pytest.raises(SegmentCountMismatch, match="Cost got 3 want 4"):
        layout_wheel(cats, expected_counts={"Cost": 4})


def test_render_reports_once_and_draws_nothing() -> None:
    cats = [make_category("Cost", 1, 2, 3)]
    surface = RecordingSurface()
    messages: list[str] = []

    result = render_wheel(cats, surface, expected_counts={"Cost": 4}, sink=messages.append)

    assert result is None
    assert surface.calls == []
    assert len(messages) == 1
    assert "Cost got 3 want 4" in messages[0]


def test_render_without_surface_reports_missing_surface(scorecard) -> None:
    messages: list[str] = []
    assert render_wheel(scorecard, None, sink=messages.append) is None
    assert messages == ["No drawing surface to render the wheel on."]


def test_render_paints_whole_batch_in_order(scorecard) -> None:
    surface = RecordingSurface()
    wheel = render_wheel(scorecard, surface)

    assert wheel is not None
    assert surface.calls[0] == ("clear", None)
    painted = [prim for _, prim in surface.calls[1:]]
    assert painted == list(wheel.primitives)
    for kind, prim in surface.calls[1:]:
        if kind == "gradient":
            assert isinstance(prim, Gradient)
        elif kind == "text":
            assert isinstance(prim, (Text, CurvedText))


def test_out_of_range_scores_are_clamped_with_warning(caplog) -> None:
    cats = [make_category("A", -2.0, 9.0)]
    with caplog.at_level(logging.WARNING, logger="scorewheel.engine"):
        wheel = layout_wheel(cats)
    assert wheel.chart.aggregate == 2.5
    assert "Clamping A / A 1 = 9.0" in caplog.text


def test_strict_mode_rejects_out_of_range_scores() -> None:
    cats = [make_category("A", 1.0, 9.0)]
    with pytest.raises(ScoreOutOfRange, match=r"A / A 1 = 9.0"):
        layout_wheel(cats, LayoutConfig(strict_scores=True))


def test_strict_mode_render_draws_nothing() -> None:
    surface = RecordingSurface()
    messages: list[str] = []
    cats = [make_category("A", 1.0, 9.0)]
    assert render_wheel(cats, surface, LayoutConfig(strict_scores=True), sink=messages.append) is None
    assert surface.calls == []
    assert messages and "outside [0, 5]" in messages[0]


def test_structural_errors_abort(small_scorecard) -> None:
    with pytest.raises(InvalidScorecard):
        layout_wheel(small_scorecard + [make_category("A", 1.0)])


def test_aggregate_matches_center_text(scorecard) -> None:
    wheel = layout_wheel(scorecard)
    assert wheel.chart.aggregate == pytest.approx(69.1 / 23)
    center = [p for p in wheel.primitives if getattr(p, "role", "") == "aggregate"]
    assert center[0].content == "3.0"


def test_require_renderer() -> None:
    require_renderer("math")
    with pytest.raises(DependencyMissing, match="did not load"):
        require_renderer("surely_not_an_installed_renderer")
