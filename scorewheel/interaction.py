"""Hover target -> tooltip content, independent of any presentation surface."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

from scorewheel.layout import clamp_score
from scorewheel.metrics import format_score
from scorewheel.models import Chart, Segment

TOOLTIP_OFFSET = 12.0


@dataclass(frozen=True)
class TooltipContent:
    category_name: str
    dimension_label: str
    score_formatted: str
    max_score_formatted: str

    def text(self) -> str:
        return (
            f"{self.dimension_label}\n"
            f"{self.category_name}: {self.score_formatted} / {self.max_score_formatted}"
        )

    def html(self) -> str:
        return (
            f"<b>{html.escape(self.dimension_label)}</b><br>"
            f"{html.escape(self.category_name)}: <b>{self.score_formatted}</b>"
            f" / {self.max_score_formatted}"
        )


@dataclass(frozen=True)
class TooltipShow:
    content: TooltipContent
    x: float
    y: float


@dataclass(frozen=True)
class TooltipHide:
    pass


class TooltipController:
    """Tracks the segment under the pointer; holds no other state."""

    def __init__(self, chart: Chart, offset: float = TOOLTIP_OFFSET) -> None:
        self.chart = chart
        self.offset = offset
        self.target: Optional[Segment] = None

    def content(self, segment: Segment) -> TooltipContent:
        return TooltipContent(
            category_name=segment.category.name,
            dimension_label=segment.label,
            score_formatted=format_score(clamp_score(segment.score, self.chart.max_score)),
            max_score_formatted=f"{self.chart.max_score:g}",
        )

    def content_for(self, index: int) -> TooltipContent:
        return self.content(self.chart.segments[index])

    def hover_in(self, segment: Segment, pointer: tuple[float, float]) -> TooltipShow:
        self.target = segment
        x, y = pointer
        return TooltipShow(self.content(segment), x + self.offset, y + self.offset)

    def hover_out(self) -> TooltipHide:
        self.target = None
        return TooltipHide()
