"""Per-category and per-dimension breakdown tables."""

from __future__ import annotations

import streamlit as st

from scorewheel.charts import make_category_bars
from scorewheel.data import category_summary, segments_frame
from scorewheel.engine import Wheel


def render_breakdown(wheel: Wheel) -> None:
    st.markdown("---")
    st.markdown("## 📊 Breakdown")

    summary = category_summary(wheel.chart)
    st.plotly_chart(
        make_category_bars(summary, wheel.chart.max_score),
        use_container_width=True,
        key="category_bars",
    )

    display = summary[["category", "dimensions", "mean_score", "span_deg"]].copy()
    display.index = range(1, len(display) + 1)
    display.columns = ["Category", "Dimensions", "Mean", "Span °"]
    st.dataframe(
        display.style
        .background_gradient(subset=["Mean"], cmap="YlOrRd")
        .format({"Mean": "{:.2f}", "Span °": "{:.1f}"}),
        use_container_width=True,
    )

    with st.expander("All dimensions", expanded=False):
        seg_df = segments_frame(wheel.chart)
        seg_df.index = range(1, len(seg_df) + 1)
        seg_df.columns = ["Category", "Dimension", "Score", "Start °", "End °", "Span °"]
        st.dataframe(
            seg_df.style
            .background_gradient(subset=["Score"], cmap="Blues")
            .format({"Score": "{:.1f}", "Start °": "{:.1f}", "End °": "{:.1f}", "Span °": "{:.1f}"}),
            use_container_width=True,
            height=500,
        )
