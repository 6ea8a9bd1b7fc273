"""A chain of pendulum arms rotating in alternating directions, tracing paths."""

from __future__ import annotations

import math

Point = tuple[float, float]
RGBA = tuple[float, float, float, float]

SPEED_RELATION = 2.0


def rotate(point: Point, angle: float) -> Point:
    """Rotate ``point`` about the origin by ``angle`` radians."""
    x, y = point
    c, s = math.cos(angle), math.sin(angle)
    return (x * c - y * s, x * s + y * c)


class Pendulum:
    """Joints whose arms shorten along the chain; each step records the joint positions."""

    def __init__(self, joints: int = 5, length: float = 100.0) -> None:
        if joints < 1:
            raise ValueError("joints must be at least 1")
        self._initial_joints = int(joints)
        self.length = float(length)
        self.refresh()

    def refresh(self) -> None:
        """Reset the angle, speed and traced paths."""
        self.joints = self._initial_joints
        self.speed = 8.0 / 1.75 ** (self.joints - 1) / 2.0 ** (SPEED_RELATION - 1.0)
        self.angle = 0.0
        self.paths: list[list[tuple[Point, RGBA]]] = [[] for _ in range(self.joints)]

    def step(self) -> list[Point]:
        """Advance one frame and return the joint positions just recorded."""
        pos = (0.0, 0.0)
        positions = []
        for i in range(self.joints):
            a = -self.angle
            if i % 2 == 1:
                a = -a
            frac = (self.joints - i) / self.joints
            arm = frac * self.length / math.sqrt(2.0)
            rx, ry = rotate((arm, arm), a)
            pos = (rx + pos[0], ry + pos[1])
            self.paths[i].append((pos, (frac * 0.5, 0.0, 1.0 - frac, 1.0)))
            positions.append(pos)

        self.angle += self.speed * 0.01
        if self.angle > math.tau / 2.0:
            self.refresh()
        return positions