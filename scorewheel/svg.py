"""Standalone SVG render adapter (used for file export and downloads)."""

from __future__ import annotations

import html
from typing import Mapping, Optional

from scorewheel.config import COLOR_BG
from scorewheel.engine import Wheel
from scorewheel.interaction import TooltipController
from scorewheel.paths import arc_points, sector_outline, to_path
from scorewheel.primitives import Circle, CurvedText, Gradient, Label, Shape
from scorewheel.surface import paint


def _esc(text: object) -> str:
    return html.escape(str(text), quote=True)


def _fill(value: Optional[str]) -> str:
    return _esc(value) if value else "none"


class SvgSurface:
    def __init__(
        self,
        size: float = 800.0,
        background: Optional[str] = COLOR_BG,
        titles: Optional[Mapping[int, str]] = None,
    ) -> None:
        self.size = size
        self.background = background
        self.titles = dict(titles or {})
        self.clear()

    def clear(self) -> None:
        self.defs: list[str] = []
        self.parts: list[str] = []

    def add_gradient(self, gradient: Gradient) -> None:
        self.defs.append(
            f'<linearGradient id="{_esc(gradient.ref_id)}" x1="0%" y1="0%" x2="100%" y2="0%">'
            f'<stop offset="0%" stop-color="{_esc(gradient.start_color)}"/>'
            f'<stop offset="100%" stop-color="{_esc(gradient.end_color)}"/>'
            "</linearGradient>"
        )

    def add_shape(self, shape: Shape) -> None:
        stroke = (
            f' stroke="{_esc(shape.stroke)}" stroke-width="{shape.stroke_width:g}"'
            if shape.stroke else ""
        )
        if isinstance(shape, Circle):
            self.parts.append(
                f'<circle r="{shape.radius:.2f}" fill="{_fill(shape.fill)}"{stroke}/>'
            )
            return

        d = to_path(sector_outline(shape), closed=not shape.is_arc)
        fill = "none" if shape.is_arc else _fill(shape.fill)
        cap = f' stroke-linecap="{shape.linecap}"' if shape.linecap != "butt" else ""
        title = self.titles.get(shape.target) if shape.target is not None else None
        if title is None:
            self.parts.append(f'<path d="{d}" fill="{fill}"{stroke}{cap}/>')
        else:
            self.parts.append(
                f'<path d="{d}" fill="{fill}"{stroke}{cap}><title>{_esc(title)}</title></path>'
            )

    def add_text(self, text: Label) -> None:
        spacing = f' letter-spacing="{text.letter_spacing:g}"' if text.letter_spacing else ""
        font = (
            f'font-size="{text.size:g}" font-weight="{text.weight}"'
            f' fill="{_esc(text.fill)}"{spacing}'
        )
        if isinstance(text, CurvedText):
            a0, a1 = text.start_angle, text.end_angle
            if text.reversed:
                a0, a1 = a1, a0
            self.defs.append(
                f'<path id="{_esc(text.path_id)}"'
                f' d="{to_path(arc_points(a0, a1, text.radius), closed=False)}"/>'
            )
            self.parts.append(
                f'<text {font} dominant-baseline="middle">'
                f'<textPath href="#{_esc(text.path_id)}" startOffset="50%" text-anchor="middle">'
                f"{_esc(text.content)}</textPath></text>"
            )
            return

        stroke = (
            f' stroke="{_esc(text.stroke)}" stroke-width="{text.stroke_width:g}"'
            ' paint-order="stroke"'
            if text.stroke else ""
        )
        self.parts.append(
            f'<text {font}{stroke} text-anchor="{text.anchor}" dominant-baseline="middle"'
            f' transform="translate({text.x:.2f},{text.y:.2f}) rotate({text.rotation:g})">'
            f"{_esc(text.content)}</text>"
        )

    def to_svg(self) -> str:
        half = self.size / 2
        size = f"{self.size:g}"
        lines = [
            f'<svg viewBox="0 0 {size} {size}" width="{size}" height="{size}"'
            ' xmlns="http://www.w3.org/2000/svg"'
            ' font-family="system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial">',
        ]
        if self.background:
            lines.append(f'<rect width="100%" height="100%" fill="{_esc(self.background)}"/>')
        lines.append("<defs>" + "".join(self.defs) + "</defs>")
        lines.append(f'<g transform="translate({half:g},{half:g})">')
        lines.extend(self.parts)
        lines.append("</g>")
        lines.append("</svg>")
        return "\n".join(lines)


def render_svg(wheel: Wheel, size: float = 800.0, background: Optional[str] = COLOR_BG) -> str:
    """Paint an already laid-out wheel to an SVG document, wedges carrying tooltips."""
    tooltips = TooltipController(wheel.chart)
    titles = {seg.index: tooltips.content(seg).text() for seg in wheel.chart.segments}
    surface = SvgSurface(size, background, titles)
    paint(wheel.primitives, surface)
    return surface.to_svg()
