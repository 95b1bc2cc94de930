"""Keep rotated text upright around the wheel."""

from __future__ import annotations

import math

# Rounded before comparing so 90° / 270° stay on the non-flipped side
# regardless of float noise from the partitioner.
ROTATION_PRECISION = 9

FLIPPED_ANCHOR = {"start": "end", "end": "start", "middle": "middle"}


def _normalize(degrees: float) -> float:
    return round(degrees % 360.0, ROTATION_PRECISION) % 360.0


def clock_degrees(mid_angle: float) -> float:
    """Screen angle in radians -> degrees from 12 o'clock, clockwise."""
    return _normalize(math.degrees(mid_angle) + 90.0)


def is_inverted(rotation: float) -> bool:
    return 90.0 < rotation < 270.0


def resolve_orientation(mid_angle: float, anchor: str = "start") -> tuple[float, str]:
    """
    Rotation (degrees) and text anchor for a label centred on ``mid_angle``.

    Text runs along the tangent of the circle; on the lower half, where it would read
    upside down, it is turned by 180° and anchored at the opposite end so it
    keeps growing in the same direction. Exactly 90° and 270° do not flip.
    """
    rotation = clock_degrees(mid_angle)
    if is_inverted(rotation):
        return _normalize(rotation + 180.0), FLIPPED_ANCHOR[anchor]
    return rotation, anchor
