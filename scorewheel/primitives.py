"""
Draw primitives handed to a render adapter.

Coordinates are relative to the wheel center with the y axis pointing down;
angles are screen radians (0 = 3 o'clock, clockwise). A ``fill`` or
``stroke`` of the form ``url(#id)`` refers to a Gradient in the same batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Gradient:
    ref_id: str
    start_color: str
    end_color: str

    @property
    def paint(self) -> str:
        return f"url(#{self.ref_id})"


@dataclass(frozen=True)
class Circle:
    radius: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    role: str = ""


@dataclass(frozen=True)
class Sector:
    """Donut sector; ``inner_radius == outer_radius`` is a stroked arc."""

    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    corner_radius: float = 0.0
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    linecap: str = "butt"
    role: str = ""
    target: Optional[int] = None

    @property
    def is_arc(self) -> bool:
        return self.inner_radius == self.outer_radius


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    rotation: float = 0.0
    anchor: str = "middle"
    size: float = 12.0
    weight: int = 400
    fill: str = "#ffffff"
    letter_spacing: float = 0.0
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    role: str = ""
    target: Optional[int] = None


@dataclass(frozen=True)
class CurvedText:
    """Text laid along an arc; ``reversed`` runs the path counter-clockwise."""

    path_id: str
    radius: float
    start_angle: float
    end_angle: float
    content: str
    reversed: bool = False
    size: float = 12.0
    weight: int = 400
    fill: str = "#ffffff"
    letter_spacing: float = 0.0
    role: str = ""


Shape = Union[Circle, Sector]
Label = Union[Text, CurvedText]
Primitive = Union[Gradient, Circle, Sector, Text, CurvedText]
