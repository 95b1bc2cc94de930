"""Aggregate score shown at the center of the wheel."""

from __future__ import annotations

from typing import Iterable


def aggregate_score(scores: Iterable[float]) -> float:
    """Unweighted mean over every leaf, regardless of category size."""
    values = list(scores)
    if not values:
        return 0.0
    return sum(values) / len(values)


def format_score(value: float) -> str:
    return f"{value:.1f}"
