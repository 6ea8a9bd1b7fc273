"""Collatz sequences and the branching paths drawn from them."""

from __future__ import annotations

import numbers
from typing import Iterator

Point = tuple[float, float]
Segment = tuple[Point, Point]


def collatz(start: int) -> Iterator[int]:
    """Yield the shortcut Collatz sequence after ``start`` down to 1.

    Even values are halved; odd values go to ``(3n + 1) / 2``.
    """
    if not isinstance(start, numbers.Integral) or isinstance(start, bool):
        raise TypeError("start must be an integer")
    count = int(start)
    while count > 1:
        if count % 2 == 0:
            count //= 2
        else:
            count = (3 * count + 1) // 2
        yield count


def collatz_path(
    start: int, step: float = 20.0, scale: float = 8.0, start_y: float = 0.0
) -> list[Segment]:
    """Line segments tracing the sequence of ``start`` backwards from 1.

    Each segment rises by ``scale`` times the relative change between
    consecutive values and turns left for even values, right for odd ones.
    """
    series = list(collatz(start))[::-1]
    x, y = 0.0, float(start_y)
    segments: list[Segment] = []
    for prev, cur in zip(series, series[1:]):
        div = abs(prev - cur) / prev
        nx = x - step if cur % 2 == 0 else x + step
        ny = y + scale * div
        segments.append(((x, y), (nx, ny)))
        x, y = nx, ny
    return segments