from __future__ import annotations

import math

import pytest

from scorewheel.orientation import clock_degrees, is_inverted, resolve_orientation


def test_top_of_circle_is_zero_degrees() -> None:
    assert clock_degrees(-math.pi / 2) == 0.0
    assert resolve_orientation(-math.pi / 2) == (0.0, "start")


def test_boundary_at_90_does_not_flip() -> None:
    # 3 o'clock: screen angle 0
    assert resolve_orientation(0.0) == (90.0, "start")


def test_boundary_at_270_does_not_flip() -> None:
    # 9 o'clock: screen angle pi
    assert resolve_orientation(math.pi) == (270.0, "start")


def test_just_past_90_flips() -> None:
    rotation, anchor = resolve_orientation(math.radians(1.0))
    assert rotation == pytest.approx(271.0)
    assert anchor == "end"


def test_just_before_270_flips() -> None:
    rotation, anchor = resolve_orientation(math.radians(179.0))
    assert rotation == pytest.approx(89.0)
    assert anchor == "end"


def test_bottom_reads_upright() -> None:
    rotation, anchor = resolve_orientation(math.pi / 2, "end")
    assert rotation == 0.0
    assert anchor == "start"


@pytest.mark.parametrize("anchor", ["start", "end", "middle"])
def test_middle_anchor_never_changes_but_others_swap(anchor) -> None:
    _, flipped = resolve_orientation(math.pi / 2, anchor)
    assert flipped == {"start": "end", "end": "start", "middle": "middle"}[anchor]


def test_rotation_is_normalised() -> None:
    for k in range(-720, 721, 7):
        rotation, _ = resolve_orientation(math.radians(k))
        assert 0.0 <= rotation < 360.0
        assert not is_inverted(rotation)


def test_full_turn_gives_same_result() -> None:
    a = 0.3
    assert resolve_orientation(a) == resolve_orientation(a + 2 * math.pi)
