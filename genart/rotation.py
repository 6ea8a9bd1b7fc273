"""Rotation of 3D points about a pivot, angles in degrees."""

from __future__ import annotations

import math
from typing import Sequence, Union

from genart.vec3d import Vec3d

PointLike = Union[Vec3d, Sequence[float]]


def _vec(value: PointLike) -> Vec3d:
    return value if isinstance(value, Vec3d) else Vec3d.from_sequence(value)


def rotate_x(point: PointLike, degree: float, orientation: PointLike) -> Vec3d:
    """Rotate ``point`` about the x axis through ``orientation``."""
    p, o = _vec(point), _vec(orientation)
    c, s = math.cos(math.radians(degree)), math.sin(math.radians(degree))
    y = (p.y - o.y) * c - (p.z - o.z) * s + o.y
    z = (p.y - o.y) * s + (p.z - o.z) * c + o.z
    return Vec3d(p.x, y, z)


def rotate_y(point: PointLike, degree: float, orientation: PointLike) -> Vec3d:
    """Rotate ``point`` about the y axis through ``orientation``."""
    p, o = _vec(point), _vec(orientation)
    c, s = math.cos(math.radians(degree)), math.sin(math.radians(degree))
    x = (p.x - o.x) * c + (p.z - o.z) * s + o.x
    z = -(p.x - o.x) * s + (p.z - o.z) * c + o.z
    return Vec3d(x, p.y, z)


def rotate_z(point: PointLike, degree: float, orientation: PointLike) -> Vec3d:
    """Rotate ``point`` about the z axis through ``orientation``."""
    p, o = _vec(point), _vec(orientation)
    c, s = math.cos(math.radians(degree)), math.sin(math.radians(degree))
    x = (p.x - o.x) * c - (p.y - o.y) * s + o.x
    y = (p.x - o.x) * s + (p.y - o.y) * c + o.y
    return Vec3d(x, y, p.z)


def rotate(point: PointLike, degrees: PointLike, orientation: PointLike) -> Vec3d:
    """Rotate about x, then y, then z by the three angles in ``degrees``."""
    d = _vec(degrees)
    rotated = rotate_x(point, d.x, orientation)
    rotated = rotate_y(rotated, d.y, orientation)
    return rotate_z(rotated, d.z, orientation)