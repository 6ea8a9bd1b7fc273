"""Cohen-Sutherland line clipping and hatch fills built on it."""

from __future__ import annotations

import math
from enum import IntFlag
from typing import Optional

Point = tuple[float, float]
Segment = tuple[Point, Point]


class OutCode(IntFlag):
    """Region of a point relative to a clip window."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def encode_endpoint(
    x: float, y: float, clipx: float, clipy: float, clipw: float, cliph: float
) -> OutCode:
    """Out-code of ``(x, y)`` for the window at ``(clipx, clipy)`` of size ``clipw`` x ``cliph``."""
    code = OutCode.INSIDE
    if x < clipx:
        code |= OutCode.LEFT
    elif x > clipx + clipw:
        code |= OutCode.RIGHT
    if y < clipy:
        code |= OutCode.BOTTOM
    elif y > clipy + cliph:
        code |= OutCode.TOP
    return code


def clip_line(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    clipx: float,
    clipy: float,
    clipw: float,
    cliph: float,
) -> Optional[Segment]:
    """Clip a segment to the window; ``None`` when nothing of it lies inside."""
    xmin, xmax = clipx, clipx + clipw
    ymin, ymax = clipy, clipy + cliph

    while True:
        e0 = encode_endpoint(x0, y0, clipx, clipy, clipw, cliph)
        e1 = encode_endpoint(x1, y1, clipx, clipy, clipw, cliph)

        if not e0 and not e1:
            return (x0, y0), (x1, y1)
        if e0 & e1:
            return None

        code = e0 if e0 else e1
        newx = newy = 0.0
        if code & OutCode.LEFT:
            newx = xmin
            newy = (y1 - y0) / (x1 - x0) * (newx - x0) + y0
        elif code & OutCode.RIGHT:
            newx = xmax
            newy = (y1 - y0) / (x1 - x0) * (newx - x0) + y0
        elif code & OutCode.TOP:
            newy = ymax
            newx = (x1 - x0) / (y1 - y0) * (newy - y0) + x0
        elif code & OutCode.BOTTOM:
            newy = ymin
            newx = (x1 - x0) / (y1 - y0) * (newy - y0) + x0

        if code == e0:
            x0, y0 = newx, newy
        else:
            x1, y1 = newx, newy


def hatch_square(x: float, y: float, w: float, step: float, angle: float) -> list[Segment]:
    """Parallel hatch lines at ``angle`` spaced ``step`` apart, clipped to a square.

    Lines are generated outwards from the square's centre, one above and one
    below per round, until both fall outside the square.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    xstart = x + w / 2.0
    ystart = y + w / 2.0
    slope = math.tan(angle)
    c = ystart - slope * xstart
    offset = step / math.cos(angle)

    lx0 = x - w / 2.0
    lx1 = x + w + w / 2.0
    segments: list[Segment] = []
    i = 0
    up_accept = down_accept = True
    while up_accept or down_accept:
        up = clip_line(
            lx0, slope * lx0 + c + i * offset, lx1, slope * lx1 + c + i * offset, x, y, w, w
        )
        down = clip_line(
            lx0, slope * lx0 + c - i * offset, lx1, slope * lx1 + c - i * offset, x, y, w, w
        )
        up_accept = up is not None
        down_accept = down is not None
        segments.extend(s for s in (up, down) if s is not None)
        i += 1
    return segments


def _sample(segment: Segment, num_points: int) -> list[Point]:
    (sx, sy), (ex, ey) = segment
    last = num_points - 1
    return [(sx + (ex - sx) * i / last, sy + (ey - sy) * i / last) for i in range(num_points)]


def quad_fill(
    x: float,
    y: float,
    width: float,
    height: float,
    step: float,
    angle: float,
    num_points: int = 1000,
) -> list[list[Point]]:
    """Fill a rectangle centred on ``(x, y)`` with sampled parallel lines.

    Each line runs at ``angle`` and is clipped to the rectangle, then sampled
    at ``num_points`` evenly spaced points. Lines are offset by ``step`` on
    both sides of the centre line.
    """
    if num_points < 2:
        raise ValueError("num_points must be at least 2")
    length = math.hypot(width, height)
    num_steps = int(length / (2.0 * step))

    rot = angle + math.tau / 4.0
    nx, ny = math.cos(rot), math.sin(rot)
    x0 = x + length / 2.0 * math.cos(angle)
    x1 = x - length / 2.0 * math.cos(angle)
    y0 = y + length / 2.0 * math.sin(angle)
    y1 = y - length / 2.0 * math.sin(angle)
    left, bottom = x - width / 2.0, y - height / 2.0

    lines: list[list[Point]] = []

    def add(ax: float, ay: float, bx: float, by: float) -> None:
        clipped = clip_line(ax, ay, bx, by, left, bottom, width, height)
        if clipped is not None:
            lines.append(_sample(clipped, num_points))

    add(x0, y0, x1, y1)
    for _ in range(num_steps):
        x0 += step * nx
        x1 += step * nx
        y0 += step * ny
        y1 += step * ny
        add(x0, y0, x1, y1)
        add(2.0 * x - x0, 2.0 * y - y0, 2.0 * x - x1, 2.0 * y - y1)
    return lines