"""
Angular partitioning and radial scaling.

  - Partitioner: two interchangeable policies, chosen by name
  - Radial Scale: clamped linear score -> radius map
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from scorewheel.config import MAX_SCORE, PARTITION_PER_CATEGORY, PARTITION_PER_LEAF
from scorewheel.models import Category, CategoryRange, Segment

TAU = 2 * math.pi

Partition = tuple[list[Segment], list[CategoryRange]]


# ── Partitioner ───────────────────────────────────────────────────────────────

def _boundaries(a0: float, a1: float, n: int) -> list[float]:
    """n + 1 evenly spaced edges; the last one is exactly a1."""
    width = a1 - a0
    return [a0 + width * k / n for k in range(n)] + [a1]


def partition_per_leaf(categories: Sequence[Category], origin: float) -> Partition:
    """
    Every leaf gets 2π / total leaf count; a category occupies as many leaf
    widths as it has dimensions.
    """
    total = sum(len(c.dimensions) for c in categories)
    edges = _boundaries(origin, origin + TAU, total)

    segments: list[Segment] = []
    ranges: list[CategoryRange] = []
    i = 0
    for cat in categories:
        first = i
        for dim in cat.dimensions:
            segments.append(Segment(cat, dim.label, dim.score, i, edges[i], edges[i + 1]))
            i += 1
        ranges.append(CategoryRange(cat, edges[first], edges[i]))
    return segments, ranges


def partition_per_category(categories: Sequence[Category], origin: float) -> Partition:
    """
    Every category gets 2π / category count; its leaves split that slot evenly.
    """
    slots = _boundaries(origin, origin + TAU, len(categories))

    segments: list[Segment] = []
    ranges: list[CategoryRange] = []
    i = 0
    for c, cat in enumerate(categories):
        c0, c1 = slots[c], slots[c + 1]
        edges = _boundaries(c0, c1, len(cat.dimensions))
        for k, dim in enumerate(cat.dimensions):
            segments.append(Segment(cat, dim.label, dim.score, i, edges[k], edges[k + 1]))
            i += 1
        ranges.append(CategoryRange(cat, c0, c1))
    return segments, ranges


PARTITIONERS: dict[str, Callable[[Sequence[Category], float], Partition]] = {
    PARTITION_PER_LEAF:     partition_per_leaf,
    PARTITION_PER_CATEGORY: partition_per_category,
}


def partition(categories: Sequence[Category], policy: str, origin: float) -> Partition:
    try:
        partitioner = PARTITIONERS[policy]
    except KeyError:
        raise ValueError(f"Unknown partition policy '{policy}'") from None
    return partitioner(categories, origin)


# ── Radial scale ──────────────────────────────────────────────────────────────

def clamp_score(score: float, max_score: float = MAX_SCORE) -> float:
    return min(max(score, 0.0), max_score)


@dataclass(frozen=True)
class RadialScale:
    inner: float
    outer: float
    max_score: float = MAX_SCORE

    def __post_init__(self) -> None:
        if self.outer < self.inner:
            raise ValueError(f"outer band {self.outer} is inside inner band {self.inner}")
        if self.max_score <= 0:
            raise ValueError(f"max_score must be positive, got {self.max_score}")

    def __call__(self, score: float) -> float:
        t = clamp_score(score, self.max_score) / self.max_score
        if t >= 1.0:
            return self.outer
        return min(self.inner + (self.outer - self.inner) * t, self.outer)
