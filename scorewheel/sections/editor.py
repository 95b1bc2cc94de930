"""Editable score table."""

from __future__ import annotations

import streamlit as st

from scorewheel.config import MAX_SCORE
from scorewheel.data import categories_from_frame, scorecard_frame
from scorewheel.models import Category


def render_score_editor(categories: list[Category]) -> list[Category]:
    with st.expander("✏️ Edit scores", expanded=False):
        edited = st.data_editor(
            scorecard_frame(categories),
            num_rows="dynamic",
            use_container_width=True,
            hide_index=True,
            column_config={
                "category":  st.column_config.TextColumn("Category"),
                "dimension": st.column_config.TextColumn("Dimension"),
                "score":     st.column_config.NumberColumn(
                    "Score", min_value=0.0, max_value=MAX_SCORE, step=0.1, format="%.1f",
                ),
            },
            key="score_editor",
        )
    return categories_from_frame(edited, categories)
