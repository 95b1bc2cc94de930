from __future__ import annotations

import math

import pandas as pd
import pytest

from scorewheel.config import COLOR_FALLBACK, DEFAULT_SCORECARD
from scorewheel.data import (
    categories_from_frame, category_summary, parse_scorecard, scorecard_frame,
    segments_frame,
)
from scorewheel.engine import layout_wheel
from scorewheel.errors import InvalidScorecard
from scorewheel.models import Category, Dimension


def test_parse_default_scorecard(scorecard) -> None:
    assert [c.name for c in scorecard] == ["Operating Model", "Brand & Experience", "Data", "Cost"]
    assert [len(c.dimensions) for c in scorecard] == [8, 6, 5, 4]
    assert scorecard[0].colors == ("#b0ff00", "#00f88f")
    assert scorecard[0].display_title == "OPERATING MODEL"


def test_parse_coerces_and_defaults() -> None:
    cats = parse_scorecard([{"name": "X", "dims": [{"label": "a", "score": "3.5"}, {"label": "b"}]}])
    assert cats[0].dimensions[0].score == 3.5
    assert math.isnan(cats[0].dimensions[1].score)
    assert cats[0].colors == ("#ffffff", "#ffffff")
    assert cats[0].display_title == "X"


def test_frame_round_trip_keeps_order_and_colours(scorecard) -> None:
    df = scorecard_frame(scorecard)
    assert len(df) == 23
    rebuilt = categories_from_frame(df, scorecard)
    assert rebuilt == scorecard


def test_edited_frame_regroups_rows() -> None:
    template = parse_scorecard(DEFAULT_SCORECARD)
    df = pd.DataFrame([
        {"category": "Cost", "dimension": "ROI", "score": 4.0},
        {"category": "New", "dimension": "Fresh", "score": 1.0},
        {"category": "Cost", "dimension": "Governance", "score": 2.0},
        {"category": None, "dimension": "orphan", "score": 1.0},
    ])
    cats = categories_from_frame(df, template)
    assert [c.name for c in cats] == ["Cost", "New"]
    assert [d.label for d in cats[0].dimensions] == ["ROI", "Governance"]
    assert cats[0].colors == ("#5599e9", "#00ddff")
    assert cats[1].colors == ("#ffffff", "#ffffff")


def test_segments_frame(scorecard) -> None:
    seg_df = segments_frame(layout_wheel(scorecard).chart)
    assert len(seg_df) == 23
    assert seg_df["span_deg"].sum() == pytest.approx(360.0)
    assert seg_df.iloc[0]["start_deg"] == pytest.approx(-90.0)


def test_category_summary(scorecard) -> None:
    summary = category_summary(layout_wheel(scorecard).chart)
    assert list(summary["category"]) == ["Operating Model", "Brand & Experience", "Data", "Cost"]
    assert list(summary["dimensions"]) == [8, 6, 5, 4]
    assert summary.loc[3, "mean_score"] == pytest.approx(11.0 / 4)
    assert summary["span_deg"].sum() == pytest.approx(360.0)
    assert summary.loc[3, "color"] == "#00ddff"


@pytest.mark.parametrize("raw, message", [
    ([{"dims": []}], "record 1 is missing 'name'"),
    ([{"name": "X", "dims": [{"score": 1}]}], "record 1 is missing 'label'"),
    ([{"name": "X"}, "oops"], "record 2 is malformed"),
    ({"name": "X"}, "must be a list"),
])
def test_parse_rejects_malformed_records(raw, message) -> None:
    with pytest.raises(InvalidScorecard, match=message):
        parse_scorecard(raw)


def test_category_default_colours_are_the_fallback_pair() -> None:
    assert Category("X", (Dimension("a", 1.0),)).colors == COLOR_FALLBACK
