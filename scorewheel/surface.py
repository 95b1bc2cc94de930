"""Drawing-capability interface and the batch dispatcher."""

from __future__ import annotations

from typing import Iterable, Protocol

from scorewheel.primitives import (
    Circle, CurvedText, Gradient, Label, Primitive, Sector, Shape, Text,
)


class DrawingSurface(Protocol):
    def clear(self) -> None: ...

    def add_gradient(self, gradient: Gradient) -> None: ...

    def add_shape(self, shape: Shape) -> None: ...

    def add_text(self, text: Label) -> None: ...


def paint(primitives: Iterable[Primitive], surface: DrawingSurface) -> int:
    """Clear ``surface`` and hand it every primitive in order. Returns the count."""
    surface.clear()
    count = 0
    for prim in primitives:
        if isinstance(prim, Gradient):
            surface.add_gradient(prim)
        elif isinstance(prim, (Circle, Sector)):
            surface.add_shape(prim)
        elif isinstance(prim, (Text, CurvedText)):
            surface.add_text(prim)
        else:
            raise TypeError(f"Unsupported primitive: {type(prim).__name__}")
        count += 1
    return count
