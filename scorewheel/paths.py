"""Sampled outlines for sectors and arcs, shared by the render adapters."""

from __future__ import annotations

import math

import numpy as np

from scorewheel.primitives import Sector

ARC_SAMPLES    = 24
CORNER_SAMPLES = 6


def polar(angle: float, radius: float) -> tuple[float, float]:
    return math.cos(angle) * radius, math.sin(angle) * radius


def arc_points(a0: float, a1: float, r: float, n: int = ARC_SAMPLES) -> np.ndarray:
    angles = np.linspace(a0, a1, n)
    return np.column_stack([np.cos(angles) * r, np.sin(angles) * r])


def _corner(center: tuple[float, float], p_from: tuple[float, float],
            p_to: tuple[float, float], rc: float) -> np.ndarray:
    """Short arc of radius rc around ``center`` from p_from to p_to."""
    cx, cy = center
    t0 = math.atan2(p_from[1] - cy, p_from[0] - cx)
    t1 = math.atan2(p_to[1] - cy, p_to[0] - cx)
    delta = (t1 - t0 + math.pi) % (2 * math.pi) - math.pi
    ts = np.linspace(t0, t0 + delta, CORNER_SAMPLES)
    return np.column_stack([cx + np.cos(ts) * rc, cy + np.sin(ts) * rc])


def effective_corner_radius(sector: Sector) -> float:
    """Largest corner radius (up to the requested one) that still fits the sector."""
    r, R = sector.inner_radius, sector.outer_radius
    rc = min(sector.corner_radius, (R - r) / 2)
    if rc <= 0:
        return 0.0
    s = math.sin(abs(sector.end_angle - sector.start_angle) / 2)
    if s < 1:
        rc = min(rc, r * s / (1 - s))
    rc = min(rc, R * s / (1 + s))
    return max(rc, 0.0)


def sector_outline(sector: Sector) -> np.ndarray:
    """Closed outline (k, 2) of a donut sector, corners rounded when requested."""
    a0, a1 = sector.start_angle, sector.end_angle
    r, R = sector.inner_radius, sector.outer_radius
    if sector.is_arc:
        return arc_points(a0, a1, R)

    rc = effective_corner_radius(sector)
    if rc == 0.0:
        return np.vstack([arc_points(a0, a1, R), arc_points(a1, a0, r)])

    do = math.asin(rc / (R - rc))
    di = math.asin(rc / (r + rc))
    edge_o = math.sqrt((R - rc) ** 2 - rc ** 2)
    edge_i = math.sqrt((r + rc) ** 2 - rc ** 2)

    return np.vstack([
        arc_points(a0 + do, a1 - do, R),
        _corner(polar(a1 - do, R - rc), polar(a1 - do, R), polar(a1, edge_o), rc),
        _corner(polar(a1 - di, r + rc), polar(a1, edge_i), polar(a1 - di, r), rc),
        arc_points(a1 - di, a0 + di, r),
        _corner(polar(a0 + di, r + rc), polar(a0 + di, r), polar(a0, edge_i), rc),
        _corner(polar(a0 + do, R - rc), polar(a0, edge_o), polar(a0 + do, R), rc),
    ])


def to_path(points: np.ndarray, closed: bool = True, dx: float = 0.0,
            dy: float = 0.0, flip_y: bool = False) -> str:
    """SVG-style path string (M/L/Z only, which Plotly shapes also accept)."""
    sy = -1.0 if flip_y else 1.0
    coords = [f"{x + dx:.2f},{sy * y + dy:.2f}" for x, y in points]
    path = "M " + " L ".join(coords)
    return path + " Z" if closed else path
