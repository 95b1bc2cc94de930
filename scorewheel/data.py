"""Scorecard records <-> pandas frames, plus the per-category breakdown."""

from __future__ import annotations

import math
from typing import Any, Sequence

import pandas as pd

from scorewheel.config import COLOR_FALLBACK
from scorewheel.errors import InvalidScorecard
from scorewheel.layout import clamp_score
from scorewheel.models import Category, Chart, Dimension


def _num(value: Any) -> float:
    """Coerce to float; anything unparseable becomes NaN and fails validation later."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_scorecard(raw: Sequence[dict]) -> list[Category]:
    """
    Build categories from plain records:
    ``{"name", "title"?, "colors": [secondary, primary], "dims": [{"label", "score"}]}``.
    """
    if not isinstance(raw, (list, tuple)):
        raise InvalidScorecard("Scorecard must be a list of category records.")
    categories = []
    for n, entry in enumerate(raw, start=1):
        try:
            categories.append(_parse_category(entry))
        except KeyError as exc:
            raise InvalidScorecard(f"Category record {n} is missing {exc}.") from None
        except (TypeError, AttributeError, IndexError):
            raise InvalidScorecard(f"Category record {n} is malformed.") from None
    return categories


def _parse_category(entry: dict) -> Category:
    colors = entry.get("colors") or COLOR_FALLBACK
    return Category(
        name=str(entry["name"]),
        dimensions=tuple(
            Dimension(str(d["label"]), _num(d.get("score")))
            for d in entry.get("dims", [])
        ),
        colors=(str(colors[0]), str(colors[-1])),
        title=entry.get("title"),
    )


def scorecard_frame(categories: Sequence[Category]) -> pd.DataFrame:
    rows = []
    for cat in categories:
        for dim in cat.dimensions:
            rows.append({
                "category":  cat.name,
                "dimension": dim.label,
                "score":     dim.score,
            })
    return pd.DataFrame(rows, columns=["category", "dimension", "score"])


def categories_from_frame(df: pd.DataFrame, template: Sequence[Category]) -> list[Category]:
    """
    Regroup an edited score table into categories, keeping first-appearance
    order. Colours and titles come from ``template`` by category name.
    """
    known = {c.name: c for c in template}
    df = df.dropna(subset=["category", "dimension"])
    categories = []
    for name, group in df.groupby("category", sort=False):
        base = known.get(name)
        categories.append(Category(
            name=str(name),
            dimensions=tuple(
                Dimension(str(row.dimension), _num(row.score))
                for row in group.itertuples(index=False)
            ),
            colors=base.colors if base else COLOR_FALLBACK,
            title=base.title if base else None,
        ))
    return categories


def segments_frame(chart: Chart) -> pd.DataFrame:
    rows = []
    for seg in chart.segments:
        rows.append({
            "category":  seg.category.name,
            "dimension": seg.label,
            "score":     clamp_score(seg.score, chart.max_score),
            "start_deg": math.degrees(seg.a0),
            "end_deg":   math.degrees(seg.a1),
            "span_deg":  math.degrees(seg.a1 - seg.a0),
        })
    return pd.DataFrame(rows)


def category_summary(chart: Chart) -> pd.DataFrame:
    seg_df = segments_frame(chart)
    summary = (
        seg_df.groupby("category", sort=False)
        .agg(dimensions=("dimension", "count"), mean_score=("score", "mean"))
        .reset_index()
    )
    spans = {rng.category.name: math.degrees(rng.span) for rng in chart.ranges}
    colors = {rng.category.name: rng.category.primary_color for rng in chart.ranges}
    summary["span_deg"] = summary["category"].map(spans)
    summary["color"] = summary["category"].map(colors)
    return summary
