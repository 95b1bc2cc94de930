"""
The layout pass: validate, partition, scale, build primitives.

``layout_wheel`` raises on any failure; ``render_wheel`` turns a failure into
one diagnostic message and leaves the surface untouched.
"""

from __future__ import annotations

import importlib.util
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

from scorewheel.config import LayoutConfig
from scorewheel.errors import (
    DependencyMissing, MissingSurface, ScoreOutOfRange, SegmentCountMismatch,
    WheelError,
)
from scorewheel.geometry import build_primitives
from scorewheel.layout import clamp_score, partition
from scorewheel.metrics import aggregate_score
from scorewheel.models import Category, Chart
from scorewheel.primitives import Primitive
from scorewheel.surface import DrawingSurface, paint
from scorewheel.validation import check_structure, scores_out_of_range, validate_schema

log = logging.getLogger(__name__)

DiagnosticsSink = Callable[[str], None]


@dataclass(frozen=True)
class Wheel:
    chart: Chart
    primitives: tuple[Primitive, ...]


def require_renderer(module: str = "plotly") -> None:
    if importlib.util.find_spec(module) is None:
        raise DependencyMissing(
            f"{module} did not load. Install it with `pip install {module}`."
        )


def build_chart(categories: Sequence[Category], config: LayoutConfig) -> Chart:
    segments, ranges = partition(categories, config.partition, config.origin_angle)
    aggregate = aggregate_score(clamp_score(s.score, config.max_score) for s in segments)
    return Chart(tuple(segments), tuple(ranges), aggregate, config.max_score)


def layout_wheel(
    categories: Sequence[Category],
    config: Optional[LayoutConfig] = None,
    expected_counts: Optional[Mapping[str, int]] = None,
) -> Wheel:
    config = config or LayoutConfig()

    check_structure(categories)
    mismatches = validate_schema(categories, expected_counts)
    if mismatches:
        raise SegmentCountMismatch(mismatches)

    offenders = scores_out_of_range(categories, config.max_score)
    if offenders:
        if config.strict_scores:
            raise ScoreOutOfRange(offenders, config.max_score)
        for cat, label, score in offenders:
            log.warning(f"Clamping {cat} / {label} = {score} into [0, {config.max_score:g}]")

    chart = build_chart(categories, config)
    primitives = tuple(build_primitives(chart, config))
    log.info(
        f"Laid out {len(chart.segments)} segments in {len(chart.ranges)} categories "
        f"({config.partition}, {config.title_mode} titles) -> {len(primitives)} primitives"
    )
    return Wheel(chart, primitives)


def render_wheel(
    categories: Sequence[Category],
    surface: Optional[DrawingSurface],
    config: Optional[LayoutConfig] = None,
    expected_counts: Optional[Mapping[str, int]] = None,
    sink: Optional[DiagnosticsSink] = None,
) -> Optional[Wheel]:
    """Lay out and paint in one batch; on failure report once and paint nothing."""
    try:
        if surface is None:
            raise MissingSurface("No drawing surface to render the wheel on.")
        wheel = layout_wheel(categories, config, expected_counts)
    except WheelError as exc:
        log.error(f"Wheel not rendered: {exc}")
        if sink is not None:
            sink(str(exc))
        return None

    paint(wheel.primitives, surface)
    return wheel
