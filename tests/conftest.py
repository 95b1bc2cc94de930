from __future__ import annotations

import pytest

from scorewheel.config import DEFAULT_SCORECARD
from scorewheel.data import parse_scorecard
from scorewheel.models import Category, Dimension


@pytest.fixture
def scorecard() -> list[Category]:
    return parse_scorecard(DEFAULT_SCORECARD)


def make_category(name: str, *scores: float, colors=("#000000", "#ffffff")) -> Category:
    return Category(
        name=name,
        dimensions=tuple(Dimension(f"{name} {i}", s) for i, s in enumerate(scores)),
        colors=colors,
    )


@pytest.fixture
def small_scorecard() -> list[Category]:
    return [
        make_category("A", 1.0, 2.0),
        make_category("B", 3.0),
        make_category("C", 4.0, 5.0, 0.0),
    ]
