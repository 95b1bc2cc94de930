from __future__ import annotations

import pytest

from scorewheel.metrics import aggregate_score, format_score

SCORES = [
    2.5, 3.0, 1.0, 4.2, 2.2, 3.8, 2.9, 4.6,
    3.2, 2.4, 4.8, 1.9, 2.7, 3.6,
    4.1, 2.0, 3.3, 1.2, 4.7,
    3.5, 2.0, 4.0, 1.5,
]


def test_aggregate_is_unweighted_mean() -> None:
    assert len(SCORES) == 23
    assert aggregate_score(SCORES) == pytest.approx(69.1 / 23)
    assert format_score(aggregate_score(SCORES)) == "3.0"


def test_aggregate_ignores_category_sizes() -> None:
    # one big category of low scores, one tiny category of a high score
    assert aggregate_score([1.0, 1.0, 1.0, 5.0]) == 2.0


def test_aggregate_of_nothing_is_zero() -> None:
    assert aggregate_score([]) == 0.0


def test_aggregate_accepts_generators() -> None:
    assert aggregate_score(s for s in (2.0, 4.0)) == 3.0


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0.0"), (2.94, "2.9"), (2.96, "3.0"), (5, "5.0"), (4.25, "4.2")],
)
def test_format_score(value, expected) -> None:
    assert format_score(value) == expected
