"""Sidebar controls: partition policy, title placement, validation."""

from __future__ import annotations

import streamlit as st

from scorewheel.config import (
    PARTITION_PER_CATEGORY, PARTITION_PER_LEAF, TITLE_CURVED, TITLE_STRAIGHT,
)

PARTITION_LABELS = {
    PARTITION_PER_LEAF:     "Equal width per dimension",
    PARTITION_PER_CATEGORY: "Equal width per category",
}
TITLE_LABELS = {
    TITLE_STRAIGHT: "Straight, rotated",
    TITLE_CURVED:   "Curved along the ring",
}


def render_sidebar() -> tuple[str, str, bool, bool]:
    """
    Render the sidebar and return:
        partition      – partition policy name
        title_mode     – category title placement
        strict_scores  – reject out-of-range scores instead of clamping
        check_counts   – validate dimension counts against the defaults
    """
    with st.sidebar:
        st.markdown("## ⚙️ Layout")

        partition = st.radio(
            "Angular partition",
            list(PARTITION_LABELS),
            format_func=PARTITION_LABELS.get,
            key="partition",
        )
        title_mode = st.radio(
            "Category titles",
            list(TITLE_LABELS),
            format_func=TITLE_LABELS.get,
            key="title_mode",
        )

        st.markdown("---")
        st.markdown("### Validation")
        strict_scores = st.toggle(
            "Reject out-of-range scores",
            value=False,
            help="Off: scores outside 0–5 are clamped. On: the wheel is not drawn.",
        )
        check_counts = st.toggle(
            "Check dimension counts",
            value=True,
            help="Abort when a category's dimension count differs from the default scorecard.",
        )

    return partition, title_mode, strict_scores, check_counts
