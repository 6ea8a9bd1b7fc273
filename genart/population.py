"""Cells bouncing inside a disc and replicating on contact."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

Vec = tuple[float, float]

RADIUS = 300.0


def _normalize(v: Vec) -> Vec:
    length = math.hypot(*v)
    if length == 0.0:
        return (math.nan, math.nan)
    return (v[0] / length, v[1] / length)


@dataclass
class Cell:
    """A moving disc."""

    pos: Vec
    vel: Vec
    r: float = 5.0

    @classmethod
    def spawn(cls, x: float, y: float, rng: Optional[random.Random] = None) -> Cell:
        """A cell at ``(x, y)`` drifting right and down at a random speed."""
        rng = rng if rng is not None else random.Random()
        offx = rng.random()
        offy = rng.random()
        return cls((float(x), float(y)), (1.1 * offx, -1.1 * offy), 5.0)

    def collides(self, other: Cell) -> bool:
        dist = (other.pos[0] - self.pos[0]) ** 2 + (other.pos[1] - self.pos[1]) ** 2
        return dist <= (self.r + other.r) ** 2

    def bounces(self) -> bool:
        """Whether the cell reaches past the boundary circle."""
        return math.hypot(*self.pos) + self.r > RADIUS

    def replicate(self, rng: Optional[random.Random] = None) -> Cell:
        """A copy placed at the velocity vector offset by ``r`` in a random direction."""
        rng = rng if rng is not None else random.Random()
        off = _normalize((2.0 * rng.random() - 1.0, 2.0 * rng.random() - 1.0))
        return Cell(
            (self.vel[0] + off[0] * self.r, self.vel[1] + off[1] * self.r),
            self.vel,
            self.r,
        )

    def advance(self) -> None:
        self.pos = (self.pos[0] + self.vel[0], self.pos[1] + self.vel[1])


class Population:
    """Two starting cells that move, bounce and replicate each step."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cells: list[Cell] = [
            Cell.spawn(-20.0, 0.0, self._rng),
            Cell.spawn(20.0, 0.0, self._rng),
        ]

    def step(self) -> None:
        """Move every cell, reflect those at the wall, then add replicas."""
        for cell in self.cells:
            nx, ny = _normalize(cell.pos)
            toward_centre = cell.vel[0] * -nx + cell.vel[1] * -ny
            speed = math.hypot(*cell.vel)
            cell.advance()
            if cell.bounces():
                scaled = (cell.vel[0] * toward_centre, cell.vel[1] * toward_centre)
                ux, uy = _normalize(scaled)
                cell.vel = (ux * speed, uy * speed)

        born = [
            other.replicate(self._rng)
            for cell in self.cells
            for other in self.cells
            if cell.collides(other)
        ]
        self.cells.extend(born)