"""Random circle packing inside a disc, shrinking the radius as space runs out."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Optional

HSV = tuple[float, float, float]

BOUNDARY_RADIUS = 300.0
MARGIN = 0.0
SEED_RADIUS = 20.0


@dataclass(frozen=True)
class Circle:
    """A circle with an HSV colour."""

    x: float
    y: float
    r: float
    col: HSV = field(default=(1.0, 1.0, 1.0), compare=False)

    def collides(self, other: Circle) -> bool:
        """Whether the two circles overlap or touch."""
        dist = (other.x - self.x) ** 2 + (other.y - self.y) ** 2
        return dist <= (self.r + other.r + MARGIN) ** 2

    def __repr__(self) -> str:
        return f"({self.x}, {self.y}, {self.r})"


class CirclePacker:
    """Places random circles inside a disc of radius 300 around the origin.

    Candidates are drawn uniformly over a ``width`` x ``height`` window centred
    on the origin. After more than ``failure_budget // int(radius)`` failed
    candidates the radius is divided by ``shrink_factor``.

    With ``nearest_only`` a candidate is checked only against the circle whose
    centre is nearest, and an undrawn seed circle starts the index.
    """

    def __init__(
        self,
        width: float = 720.0,
        height: float = 720.0,
        radius: float = 40.0,
        failure_budget: int = 32 * 1024,
        shrink_factor: float = 2.0,
        tries_per_step: int = 1,
        nearest_only: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if radius <= 0:
            raise ValueError("radius must be positive")
        if shrink_factor <= 0:
            raise ValueError("shrink_factor must be positive")
        if tries_per_step < 0:
            raise ValueError("tries_per_step must not be negative")
        self.width = float(width)
        self.height = float(height)
        self.current_radius = float(radius)
        self.failure_budget = int(failure_budget)
        self.shrink_factor = float(shrink_factor)
        self.tries_per_step = int(tries_per_step)
        self.nearest_only = nearest_only
        self.failed_tries = 0
        self.circles: list[Circle] = []
        self._rng = rng if rng is not None else random.Random()
        self.seed: Optional[Circle] = None
        self._index: list[Circle] = []
        if nearest_only:
            self.seed = self._candidate(SEED_RADIUS)
            self._index.append(self.seed)

    def _candidate(self, radius: float) -> Circle:
        rng = self._rng
        return Circle(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
            radius,
            (358.0 / 360.0, rng.uniform(0.4, 1.0), 0.76),
        )

    def valid(self, circle: Circle) -> bool:
        """Whether ``circle`` lies in the boundary disc and overlaps nothing."""
        if math.hypot(circle.x, circle.y) > BOUNDARY_RADIUS:
            return False
        if self.nearest_only:
            nearest = min(
                self._index,
                key=lambda o: (o.x - circle.x) ** 2 + (o.y - circle.y) ** 2,
            )
            return not circle.collides(nearest)
        return not any(circle.collides(other) for other in self.circles)

    def step(self) -> list[Circle]:
        """Try ``tries_per_step`` candidates and return those that were placed."""
        placed: list[Circle] = []
        for _ in range(self.tries_per_step):
            candidate = self._candidate(self.current_radius)
            if self.valid(candidate):
                self.circles.append(candidate)
                if self.nearest_only:
                    self._index.append(candidate)
                placed.append(candidate)
                continue
            self.failed_tries += 1
            whole_radius = int(self.current_radius)
            if whole_radius == 0:
                raise RuntimeError("radius has shrunk below 1")
            if self.failed_tries > self.failure_budget // whole_radius:
                self.current_radius /= self.shrink_factor
                self.failed_tries = 0
        return placed