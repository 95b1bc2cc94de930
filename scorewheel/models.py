"""Scorecard input records and the derived chart entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scorewheel.config import COLOR_FALLBACK


@dataclass(frozen=True)
class Dimension:
    label: str
    score: float


@dataclass(frozen=True)
class Category:
    """
    A named group of dimensions. ``colors`` is the (secondary, primary) stop
    pair; the layout never interprets it, only passes it on to paint.
    """

    name: str
    dimensions: tuple[Dimension, ...]
    colors: tuple[str, str] = COLOR_FALLBACK
    title: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title if self.title is not None else self.name.upper()

    @property
    def primary_color(self) -> str:
        return self.colors[1]


@dataclass(frozen=True)
class Segment:
    category: Category
    label: str
    score: float
    index: int
    a0: float
    a1: float

    @property
    def am(self) -> float:
        return (self.a0 + self.a1) / 2


@dataclass(frozen=True)
class CategoryRange:
    category: Category
    a0: float
    a1: float

    @property
    def am(self) -> float:
        return (self.a0 + self.a1) / 2

    @property
    def span(self) -> float:
        return self.a1 - self.a0


@dataclass(frozen=True)
class Chart:
    segments: tuple[Segment, ...]
    ranges: tuple[CategoryRange, ...]
    aggregate: float
    max_score: float

    def segments_of(self, category_name: str) -> list[Segment]:
        return [s for s in self.segments if s.category.name == category_name]
