"""The wheel itself, plus the SVG download."""

from __future__ import annotations

from typing import Mapping, Optional

import streamlit as st

from scorewheel.charts import PlotlySurface, add_hover_layer
from scorewheel.config import LayoutConfig
from scorewheel.engine import Wheel, render_wheel
from scorewheel.models import Category
from scorewheel.svg import render_svg


def render_wheel_section(
    categories: list[Category],
    config: LayoutConfig,
    expected_counts: Optional[Mapping[str, int]],
) -> Optional[Wheel]:
    st.markdown("## 🎯 Diagnostic Wheel")

    surface = PlotlySurface(config.size)
    wheel = render_wheel(categories, surface, config, expected_counts, sink=st.error)
    if wheel is None:
        return None

    st.plotly_chart(
        add_hover_layer(surface.figure(), wheel),
        use_container_width=True,
        key="wheel",
    )
    st.download_button(
        "⬇️ Download SVG",
        data=render_svg(wheel, config.size),
        file_name="diagnostic_wheel.svg",
        mime="image/svg+xml",
    )
    return wheel
