"""Shared constants: colours, default scorecard, layout configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from scorewheel.errors import LayoutOrderError

MAX_SCORE    = 5.0
ORIGIN_ANGLE = -math.pi / 2   # 12 o'clock, y axis points down

PARTITION_PER_LEAF     = "per_leaf"
PARTITION_PER_CATEGORY = "per_category"
PARTITION_POLICIES     = (PARTITION_PER_LEAF, PARTITION_PER_CATEGORY)

TITLE_STRAIGHT = "straight"
TITLE_CURVED   = "curved"
TITLE_MODES    = (TITLE_STRAIGHT, TITLE_CURVED)

COLOR_BG          = "#0b0f17"
COLOR_GRID        = "rgba(255,255,255,0.10)"
COLOR_GRID_FAINT  = "rgba(255,255,255,0.07)"
COLOR_SEPARATOR   = "rgba(0,0,0,0.65)"
COLOR_WEDGE_EDGE  = "rgba(0,0,0,0.55)"
COLOR_SCORE       = "rgba(255,255,255,0.90)"
COLOR_LABEL       = "rgba(255,255,255,0.96)"
COLOR_TITLE       = "rgba(255,255,255,0.92)"
COLOR_CENTER_FILL = "rgba(233,238,245,0.05)"
COLOR_CENTER_EDGE = "rgba(233,238,245,0.12)"
COLOR_CAPTION     = "rgba(255,255,255,0.72)"
COLOR_FALLBACK    = ("#ffffff", "#ffffff")

CENTER_CAPTION = "OVERALL"

DEFAULT_SCORECARD = [
    {
        "name": "Operating Model",
        "title": "OPERATING MODEL",
        "colors": ["#b0ff00", "#00f88f"],   # secondary -> primary
        "dims": [
            {"label": "TA Strategy",               "score": 2.5},
            {"label": "Team Capability",           "score": 3.0},
            {"label": "Hiring Manager Capability", "score": 1.0},
            {"label": "Investment",                "score": 4.2},
            {"label": "Quality of Hire",           "score": 2.2},
            {"label": "Workforce Planning",        "score": 3.8},
            {"label": "Agility",                   "score": 2.9},
            {"label": "Sourcing",                  "score": 4.6},
        ],
    },
    {
        "name": "Brand & Experience",
        "title": "BRAND & EXPERIENCE",
        "colors": ["#ffb500", "#ffdb00"],
        "dims": [
            {"label": "EVP",                  "score": 3.2},
            {"label": "Attraction",           "score": 2.4},
            {"label": "Employer Brand",       "score": 4.8},
            {"label": "Candidate Experience", "score": 1.9},
            {"label": "DE&I Plan",            "score": 2.7},
            {"label": "Internal Experience",  "score": 3.6},
        ],
    },
    {
        "name": "Data",
        "title": "DATA",
        "colors": ["#ff4d3f", "#ff6600"],
        "dims": [
            {"label": "Data",            "score": 4.1},
            {"label": "Market Insights", "score": 2.0},
            {"label": "Processes",       "score": 3.3},
            {"label": "Compliance",      "score": 1.2},
            {"label": "Selection",       "score": 4.7},
        ],
    },
    {
        "name": "Cost",
        "title": "COST",
        "colors": ["#5599e9", "#00ddff"],
        "dims": [
            {"label": "Cost Transparency", "score": 3.5},
            {"label": "Cost Efficiency",   "score": 2.0},
            {"label": "Governance",        "score": 4.0},
            {"label": "ROI",               "score": 1.5},
        ],
    },
]

DEFAULT_EXPECTED_COUNTS = {
    "Operating Model":    8,
    "Brand & Experience": 6,
    "Data":               5,
    "Cost":               4,
}


@dataclass(frozen=True)
class LayoutConfig:
    """
    Everything the layout pass needs besides the scorecard itself.

    Radii are in drawing units around a center at (0, 0); angles in radians.
    The radial bands must nest from the center outwards, which is checked on
    construction.
    """

    max_score: float = MAX_SCORE
    origin_angle: float = ORIGIN_ANGLE
    partition: str = PARTITION_PER_LEAF
    title_mode: str = TITLE_STRAIGHT
    strict_scores: bool = False

    size: float = 800.0
    inner_radius: float = 105.0
    category_ring_radius: float = 123.0
    wedge_inner: float = 141.0
    wedge_outer_max: float = 215.0
    score_ring_radius: float = 250.0
    label_ring_radius: float = 298.0
    grid_radius: float = 272.0
    title_radius: float = 145.0

    ring_stroke_width: float = 7.0
    ring_gap: float = 10.0
    ring_inset: float = 0.02
    wedge_inset: float = 0.012
    corner_radius: float = 7.0

    score_font_size: float = 12.0
    label_font_size: float = 12.0
    title_font_size: float = 11.0
    center_font_size: float = 84.0
    caption_font_size: float = 12.0
    center_caption: str = CENTER_CAPTION

    def __post_init__(self) -> None:
        if self.partition not in PARTITION_POLICIES:
            raise LayoutOrderError(
                f"Unknown partition policy '{self.partition}' "
                f"(expected one of {', '.join(PARTITION_POLICIES)})"
            )
        if self.title_mode not in TITLE_MODES:
            raise LayoutOrderError(
                f"Unknown title mode '{self.title_mode}' "
                f"(expected one of {', '.join(TITLE_MODES)})"
            )
        if not self.max_score > 0:
            raise LayoutOrderError(f"max_score must be positive, got {self.max_score}")
        bands = [
            ("inner_radius",         self.inner_radius),
            ("category_ring_radius", self.category_ring_radius),
            ("wedge_inner",          self.wedge_inner),
            ("wedge_outer_max",      self.wedge_outer_max),
            ("score_ring_radius",    self.score_ring_radius),
            ("label_ring_radius",    self.label_ring_radius),
        ]
        for (lo_name, lo), (hi_name, hi) in zip(bands, bands[1:]):
            if not lo < hi:
                raise LayoutOrderError(
                    f"Radii must increase outwards: {lo_name}={lo} >= {hi_name}={hi}"
                )
        if self.inner_radius <= 0:
            raise LayoutOrderError(f"inner_radius must be positive, got {self.inner_radius}")
