"""Chaikin corner-cutting subdivision of polylines and polygons."""

from __future__ import annotations

from typing import Sequence

Point = tuple[float, float]


def lerp(v0: float, v1: float, d: float) -> float:
    """Interpolate from ``v0`` to ``v1`` with ``d`` clamped to [0, 1]."""
    return v0 + (v1 - v0) * min(max(d, 0.0), 1.0)


def chaikin_cut(a: Point, b: Point, ratio: float) -> tuple[Point, Point]:
    """Two points cutting segment ``a``-``b`` at ``ratio`` from either end."""
    if ratio > 0.5:
        ratio = 1.0 - ratio
    near_a = (lerp(a[0], b[0], ratio), lerp(a[1], b[1], ratio))
    near_b = (lerp(b[0], a[0], ratio), lerp(b[1], a[1], ratio))
    return near_a, near_b


def chaikin(shape: Sequence[Point], ratio: float, iterations: int, close: bool) -> list[Point]:
    """Apply ``iterations`` rounds of corner cutting.

    Open shapes keep their first and last points; closed shapes cut every edge.
    """
    current = [(float(x), float(y)) for x, y in shape]
    for _ in range(iterations):
        if not close and not current:
            raise ValueError("an open shape needs at least one point")
        num_corners = len(current) if close else len(current) - 1
        nxt: list[Point] = []
        for i in range(num_corners):
            a = current[i]
            b = current[(i + 1) % len(current)]
            near_a, near_b = chaikin_cut(a, b, ratio)
            if not close and i == 0:
                nxt.extend((a, near_b))
            elif not close and i == num_corners - 1:
                nxt.extend((near_a, b))
            else:
                nxt.extend((near_a, near_b))
        current = nxt
    return current


def chaikin_open(points: Sequence[Point], ratio: float, iterations: int) -> list[Point]:
    return chaikin(points, ratio, iterations, False)


def chaikin_close(points: Sequence[Point], ratio: float, iterations: int) -> list[Point]:
    return chaikin(points, ratio, iterations, True)