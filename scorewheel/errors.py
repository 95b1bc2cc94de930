"""
Error taxonomy for the layout pass.

Every failure is raised before any primitive is produced; ``str(exc)`` is the
single human-readable message handed to the diagnostics sink.
"""

from __future__ import annotations


class WheelError(Exception):
    """Base class for everything that aborts a layout or render."""


class SegmentCountMismatch(WheelError):
    def __init__(self, mismatches: list) -> None:
        self.mismatches = list(mismatches)
        detail = "; ".join(str(m) for m in self.mismatches)
        super().__init__(f"Segment count mismatch: {detail}")


class ScoreOutOfRange(WheelError):
    def __init__(self, offenders: list[tuple[str, str, float]], max_score: float) -> None:
        self.offenders = list(offenders)
        self.max_score = max_score
        detail = "; ".join(f"{cat} / {label} = {score}" for cat, label, score in self.offenders)
        super().__init__(f"Scores outside [0, {max_score:g}]: {detail}")


class InvalidScorecard(WheelError):
    """Structure the partitioner cannot lay out (empty, duplicate, non-finite)."""


class DependencyMissing(WheelError):
    pass


class MissingSurface(WheelError):
    pass


class LayoutOrderError(WheelError, ValueError):
    """Raised by LayoutConfig when its constants would overlap visually."""
