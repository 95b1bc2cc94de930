"""
Schema checks run before any layout work.

``validate_schema`` is the pure expected-count check; ``check_structure``
rejects scorecards the partitioner cannot lay out at all.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from scorewheel.errors import InvalidScorecard
from scorewheel.models import Category


@dataclass(frozen=True)
class Mismatch:
    category: str
    actual: int
    expected: int

    def __str__(self) -> str:
        return f"{self.category} got {self.actual} want {self.expected}"


def _count(name: str, value: object) -> int:
    """Coerce one expected count; JSON input may carry "4" or 4.0, never "four"."""
    count = math.nan
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            count = float(value)
        except (ValueError, OverflowError):
            pass
    if not count.is_integer() or count < 0:
        raise InvalidScorecard(f"Expected count for {name} is not a whole number: {value!r}")
    return int(count)


def validate_schema(
    categories: Sequence[Category],
    expected_counts: Optional[Mapping[str, int]] = None,
) -> list[Mismatch]:
    """Return one Mismatch per category whose dimension count is not the expected one."""
    if not expected_counts:
        return []
    if not isinstance(expected_counts, Mapping):
        raise InvalidScorecard("Expected counts must map category name to dimension count.")
    mismatches = []
    for cat in categories:
        if cat.name not in expected_counts:
            continue
        expected = _count(cat.name, expected_counts[cat.name])
        actual = len(cat.dimensions)
        if actual != expected:
            mismatches.append(Mismatch(cat.name, actual, expected))
    return mismatches


def check_structure(categories: Sequence[Category]) -> None:
    if not categories:
        raise InvalidScorecard("Scorecard has no categories.")

    dupes = [name for name, n in Counter(c.name for c in categories).items() if n > 1]
    if dupes:
        raise InvalidScorecard(f"Duplicate category names: {', '.join(dupes)}")

    for cat in categories:
        if not cat.dimensions:
            raise InvalidScorecard(f"{cat.name} has no dimensions.")
        for dim in cat.dimensions:
            if not math.isfinite(dim.score):
                raise InvalidScorecard(f"{cat.name} / {dim.label} has a non-numeric score.")


def scores_out_of_range(
    categories: Sequence[Category], max_score: float
) -> list[tuple[str, str, float]]:
    return [
        (cat.name, dim.label, dim.score)
        for cat in categories
        for dim in cat.dimensions
        if not 0.0 <= dim.score <= max_score
    ]
