"""Perspective camera that maps world points into clip space."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence

from genart.vec3d import Vec3d

Matrix = tuple[tuple[float, float, float, float], ...]


class CamMode(Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Right-handed perspective matrix (row-major) mapping depth to [-1, 1]."""
    if not 0.0 < fovy < math.pi:
        raise ValueError("fovy must lie in (0, pi)")
    if aspect <= 0.0:
        raise ValueError("aspect must be positive")
    if near <= 0.0 or far <= 0.0:
        raise ValueError("near and far must be positive")
    if near == far:
        raise ValueError("near and far must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    return (
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, f, 0.0, 0.0),
        (0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far)),
        (0.0, 0.0, -1.0, 0.0),
    )


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> Matrix:
    """Right-handed view matrix (row-major) looking from ``eye`` at ``center``."""
    eye_v = Vec3d.from_sequence(eye)
    f = (Vec3d.from_sequence(center) - eye_v).normalized()
    s = f.cross(Vec3d.from_sequence(up)).normalized()
    u = s.cross(f)
    return (
        (s.x, s.y, s.z, -eye_v.dot(s)),
        (u.x, u.y, u.z, -eye_v.dot(u)),
        (-f.x, -f.y, -f.z, eye_v.dot(f)),
        (0.0, 0.0, 0.0, 1.0),
    )


def _mat_mul(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def _mat_vec(m: Matrix, v: Sequence[float]) -> tuple[float, float, float, float]:
    return tuple(sum(x * y for x, y in zip(row, v)) for row in m)


class Camera:
    """Fixed perspective camera looking at the origin."""

    def __init__(self, window_size: tuple[float, float]) -> None:
        self.mode = CamMode.PERSPECTIVE
        self.z_min = 0.01
        self.z_max = 1000.0
        self.screen_distance = 300.0
        self.window_size = (float(window_size[0]), float(window_size[1]))

    def projection(self, position: Sequence[float]) -> tuple[float, float, float, float]:
        """Transform a world position into homogeneous clip coordinates."""
        w, h = self.window_size
        proj = perspective(math.pi / 2.0, w / h, self.z_min, self.z_max)
        view = look_at((0.3, 0.3, 1.0), (0.0, 0.0, 0.0), (0.0, -1.0, 0.0))
        x, y, z = Vec3d.from_sequence(position)
        return _mat_vec(_mat_mul(proj, view), (x, y, z, 1.0))

    @property
    def window_w(self) -> float:
        return self.window_size[0]

    @property
    def window_h(self) -> float:
        return self.window_size[1]