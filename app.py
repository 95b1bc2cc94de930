"""
Diagnostic Wheel: thin orchestrator
"""

from __future__ import annotations

import logging

import streamlit as st

st.set_page_config(
    page_title="Diagnostic Wheel",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

from scorewheel.engine import require_renderer
from scorewheel.errors import DependencyMissing

try:
    require_renderer("plotly")
except DependencyMissing as exc:
    st.error(str(exc))
    st.stop()

from scorewheel.config import DEFAULT_EXPECTED_COUNTS, DEFAULT_SCORECARD, LayoutConfig
from scorewheel.data import parse_scorecard
from scorewheel.sections.breakdown import render_breakdown
from scorewheel.sections.editor import render_score_editor
from scorewheel.sections.sidebar import render_sidebar
from scorewheel.sections.wheel import render_wheel_section


def main() -> None:
    partition, title_mode, strict_scores, check_counts = render_sidebar()

    config = LayoutConfig(
        partition=partition,
        title_mode=title_mode,
        strict_scores=strict_scores,
    )
    expected = DEFAULT_EXPECTED_COUNTS if check_counts else None

    st.title("🎯 Talent Acquisition Diagnostic")
    st.caption("Scores 0–5 per dimension · center shows the unweighted mean of all dimensions")

    categories = render_score_editor(parse_scorecard(DEFAULT_SCORECARD))

    wheel = render_wheel_section(categories, config, expected)
    if wheel is not None:
        render_breakdown(wheel)


if __name__ == "__main__":
    main()
