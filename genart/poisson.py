"""Poisson-disk sampling on an integer pixel grid."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Optional

from genart.mathutil import map_range

Point = tuple[int, int]


class Cell(Enum):
    """State of a pixel in the sampling domain."""

    EMPTY = 0
    DEAD = 1
    ACTIVE = 2


class PoissonDisk:
    """Incremental Poisson-disk sampler (Bridson's algorithm).

    Each call to :meth:`tick` grows the sample set around one active point.
    """

    def __init__(
        self,
        width: int,
        height: int,
        radius: int,
        num_samples: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if radius <= 0:
            raise ValueError("radius must be positive")
        if num_samples < 0:
            raise ValueError("num_samples must not be negative")
        self.width = int(width)
        self.height = int(height)
        self.radius = int(radius)
        self.num_samples = int(num_samples)
        self._rng = rng if rng is not None else random.Random()
        # At most one point can fall in a cell of this size.
        self.cell_size = self.radius / math.sqrt(2.0)
        self.cell_width = math.ceil(self.width / self.cell_size) + 1
        self.cell_height = math.ceil(self.height / self.cell_size) + 1
        self.cells: list[Cell] = []
        self._grid: list[Optional[Point]] = []
        self._active: list[Point] = []
        self._samples: list[Point] = []
        self.reset()

    @property
    def samples(self) -> tuple[Point, ...]:
        return tuple(self._samples)

    @property
    def active(self) -> tuple[Point, ...]:
        return tuple(self._active)

    def num_points(self) -> int:
        return len(self._samples)

    def point_at(self, index: int) -> Point:
        return self._samples[index]

    def reset(self) -> None:
        """Discard all samples and start again from a random seed point."""
        self.cells = [Cell.EMPTY] * (self.width * self.height)
        self._grid = [None] * (self.cell_width * self.cell_height)
        self._active = []
        self._samples = []
        point = (self._rng.randrange(self.width), self._rng.randrange(self.height))
        self._insert_point(point)
        self._active.append(point)

    def tick(self) -> bool:
        """Try to grow around one active point; ``False`` once none remain."""
        if not self._active:
            return False
        idx = int(self._rng.random() * (len(self._active) - 1))
        point = self._active[idx]

        found = False
        for _ in range(self.num_samples):
            candidate = self._new_point(point)
            if self._is_valid(candidate):
                self._insert_point(candidate)
                self._active.append(candidate)
                self._samples.append(candidate)
                found = True

        if not found:
            del self._active[idx]
            self.cells[point[1] * self.width + point[0]] = Cell.DEAD
        return True

    def _is_valid(self, point: Point) -> bool:
        xidx = math.floor(point[0] / self.cell_size)
        yidx = math.floor(point[1] / self.cell_size)
        start_x = max(xidx - 2, 0)
        end_x = min(xidx + 2, self.cell_width - 1)
        start_y = max(yidx - 2, 0)
        end_y = min(yidx + 2, self.cell_height - 1)
        for x in range(start_x, end_x):
            for y in range(start_y, end_y):
                other = self._grid[y * self.cell_width + x]
                if other is not None and math.dist(point, other) <= self.radius:
                    return False
        return True

    def _insert_point(self, point: Point) -> None:
        cell_x = math.floor(point[0] / self.cell_size)
        cell_y = math.floor(point[1] / self.cell_size)
        self.cells[point[1] * self.width + point[0]] = Cell.ACTIVE
        self._grid[cell_y * self.cell_width + cell_x] = point

    def _new_point(self, point: Point) -> Point:
        theta = math.tau * self._rng.random()
        # Random distance between r and 2r.
        distance = self.radius * (self._rng.random() + 1.0)
        new_x = point[0] + distance * math.cos(theta)
        new_y = point[1] + distance * math.sin(theta)
        return (
            int(min(max(new_x, 0.0), self.width - 1.0)),
            int(min(max(new_y, 0.0), self.height - 1.0)),
        )


def dot_size(brightness: float) -> float:
    """Dot diameter for a pixel brightness in [0, 255]; darker means larger."""
    fraction = 1.0 - brightness / 255.0
    return map_range(fraction, 0.0, 1.0, 1.5, 2.9)