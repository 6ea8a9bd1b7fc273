"""Watercolour-style polygons by recursive random midpoint displacement."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

Point = tuple[float, float]


def rpoly(radius: float, n_points: int) -> list[Point]:
    """Regular polygon of ``n_points`` vertices on a circle, starting at angle 0."""
    if n_points < 0:
        raise ValueError("n_points must not be negative")
    return [
        (
            radius * math.cos(math.tau * i / n_points),
            radius * math.sin(math.tau * i / n_points),
        )
        for i in range(n_points)
    ]


def _sub_divide(
    out: list[Point],
    a: Point,
    b: Point,
    depth: int,
    variance: float,
    vdiv: float,
    rng: random.Random,
) -> None:
    if depth < 0:
        return
    mid = (
        (a[0] + b[0]) / 2.0 + rng.uniform(-0.5, 0.5) * variance,
        (a[1] + b[1]) / 2.0 + rng.uniform(-0.5, 0.5) * variance,
    )
    _sub_divide(out, a, mid, depth - 1, variance / vdiv, vdiv, rng)
    out.append(mid)
    _sub_divide(out, mid, b, depth - 1, variance / vdiv, vdiv, rng)


def deform(
    points: Sequence[Point],
    depth: int,
    variance: float,
    vdiv: float,
    rng: Optional[random.Random] = None,
) -> list[Point]:
    """Subdivide every edge of the closed polygon with displaced midpoints.

    Each level halves an edge and moves the midpoint by up to half of
    ``variance`` on each axis; the variance is divided by ``vdiv`` per level.
    """
    rng = rng if rng is not None else random.Random()
    pts = [(float(x), float(y)) for x, y in points]
    out: list[Point] = []
    for a, b in zip(pts, pts[1:] + pts[:1]):
        out.append(a)
        _sub_divide(out, a, b, depth, variance, vdiv, rng)
    return out


def create_base_poly(
    radius: float, nsides: int, rng: Optional[random.Random] = None
) -> list[Point]:
    """A strongly deformed regular polygon."""
    return deform(rpoly(radius, nsides), 5, radius / 2.0, 2.0, rng)


def polystack(
    radius: float, nsides: int, rng: Optional[random.Random] = None
) -> list[list[Point]]:
    """Five variations of one deformed base polygon, for layering."""
    rng = rng if rng is not None else random.Random()
    base = deform(rpoly(radius, nsides), 5, radius / 10.0, 2.0, rng)
    return [
        deform(base, 5, rng.uniform(radius / 15.0, radius / 5.0), 4.0, rng)
        for _ in range(5)
    ]