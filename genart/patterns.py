"""Point-link, line and grid patterns for simple generative sketches."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

Point = tuple[float, float]
Segment = tuple[Point, Point]
HSV = tuple[float, float, float]


class Link(NamedTuple):
    """A line between two points with a stroke weight."""

    start: Point
    end: Point
    weight: float


@dataclass(frozen=True)
class Dot:
    """A coloured dot of diameter ``size``."""

    x: float
    y: float
    size: float
    hsv: HSV


def neighbour_links(
    points: Sequence[Point],
    mouse: Point,
    link_range: float = 80.0,
    max_dist: float = 300.0,
) -> list[Link]:
    """Links between nearby point pairs; the reach grows closer to ``mouse``.

    A pair is linked when its distance is below
    ``min(max_dist, link_range**2 / distance(mouse, midpoint))``. Thinner
    lines mean the pair is near that limit. The last point is never used as
    the second end of a link.
    """
    pts = [(float(x), float(y)) for x, y in points]
    links: list[Link] = []
    for i, p0 in enumerate(pts):
        for p1 in pts[i + 1 : len(pts) - 1]:
            dist = math.dist(p0, p1)
            mid = ((p0[0] + p1[0]) / 2.0, (p0[1] + p1[1]) / 2.0)
            to_mouse = math.dist(mouse, mid)
            limit = max_dist if to_mouse == 0.0 else min(max_dist, link_range**2 / to_mouse)
            if dist < limit:
                links.append(Link(p0, p1, 2.0 * (1.0 - dist / limit)))
    return links


def diagonal_pattern(w: float, h: float, spacing: float = 5.0) -> list[Segment]:
    """Two families of 45-degree lines, rising then falling, ``spacing`` apart."""
    if spacing <= 0:
        raise ValueError("spacing must be positive")
    lines: list[Segment] = []
    i = -w
    while i < h + w:
        lines.append(((i, 0.0), (i + h, h)))
        i += spacing
    i = h + w
    while i >= -w:
        lines.append(((i, 0.0), (i - h, h)))
        i -= spacing
    return lines


def square_grid(
    width: float, height: float, time: float, max_distance: float = 500.0
) -> list[tuple[float, float, float]]:
    """Grid of ``(x, y, size)`` squares sized by distance to a circling point.

    The point moves on a circle of radius 250 around the origin; squares
    grow with their distance to it.
    """
    if max_distance == 0:
        raise ValueError("max_distance must not be zero")
    step_x = width / 25.0
    step_y = height / 25.0
    w_sep = int(step_x)
    h_sep = int(step_y)
    cx, cy = 250.0 * math.cos(time), 250.0 * math.sin(time)
    grid = []
    for i in range(-w_sep, w_sep):
        xoff = i * step_x
        for j in range(-h_sep, h_sep):
            yoff = j * step_y
            diameter = math.dist((cx, cy), (xoff, yoff)) / max_distance * 40.0
            grid.append((xoff, yoff, diameter))
    return grid


def periodic_dots(
    width: float, height: float, frac: int = 2, rng: Optional[random.Random] = None
) -> list[Dot]:
    """One random dot in each of ``(2 * frac) ** 2`` tiles of size ``width/frac`` x ``height/frac``."""
    if frac <= 0:
        raise ValueError("frac must be positive")
    rng = rng if rng is not None else random.Random()
    w = width / frac
    h = height / frac
    dots: list[Dot] = []
    for i in range(-frac, frac):
        xoff = i * w
        for j in range(-frac, frac):
            yoff = j * h
            rnum = rng.random()
            x = rng.uniform(-0.5, 0.5) * w + xoff
            y = rng.uniform(-0.5, 0.5) * h + yoff
            size = rnum * 30.0 / frac
            dots.append(Dot(x, y, size, (0.9, rng.random(), 0.53)))
    return dots