"""A small immutable three-dimensional vector of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Union

VectorLike = Union["Vec3d", Sequence[float]]


@dataclass(frozen=True)
class Vec3d:
    """Immutable 3D vector with arithmetic operators."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def zero(cls) -> Vec3d:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3d:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Vec3d:
        """Build a vector from two (z = 0) or three components."""
        items = tuple(values)
        if len(items) == 2:
            return cls(items[0], items[1], 0.0)
        if len(items) == 3:
            return cls(*items)
        raise ValueError(f"expected 2 or 3 components, got {len(items)}")

    @classmethod
    def from_angles(cls, theta: float, phi: float) -> Vec3d:
        """Unit vector from polar angle ``theta`` and azimuth ``phi``."""
        return cls(
            math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta),
        )

    def x_comp(self) -> Vec3d:
        return Vec3d(self.x, 0.0, 0.0)

    def y_comp(self) -> Vec3d:
        return Vec3d(0.0, self.y, 0.0)

    def z_comp(self) -> Vec3d:
        return Vec3d(0.0, 0.0, self.z)

    def length(self) -> float:
        return eucl(self.x, self.y, self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def scale(self, scalar: float) -> Vec3d:
        return Vec3d(self.x * scalar, self.y * scalar, self.z * scalar)

    def clamp(self, low: float, high: float) -> Vec3d:
        """Clamp every component into ``[low, high]``."""
        return Vec3d(*(min(max(c, low), high) for c in self))

    def distance(self, other: VectorLike) -> float:
        other = _coerce(other)
        return eucl(self.x - other.x, self.y - other.y, self.z - other.z)

    def normalized(self) -> Vec3d:
        return self.normalized_by(1.0)

    def normalized_by(self, frac: float) -> Vec3d:
        """Vector in the same direction with length ``frac``."""
        return self.scale(frac / self.length())

    def dot(self, other: VectorLike) -> float:
        other = _coerce(other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: VectorLike) -> Vec3d:
        other = _coerce(other)
        return Vec3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle2d(self) -> float:
        return math.atan2(self.y, self.x)

    def angle(self) -> tuple[float, float]:
        return math.atan2(self.y, self.x), math.cos(self.z)

    def recip(self) -> Vec3d:
        return Vec3d(1.0 / self.x, 1.0 / self.y, 1.0 / self.z)

    def min(self, other: VectorLike) -> Vec3d:
        other = _coerce(other)
        return Vec3d(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: VectorLike) -> Vec3d:
        other = _coerce(other)
        return Vec3d(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def as_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index in (0, 1, 2):
            return self.as_tuple()[index]
        raise IndexError("Vec3d index out of range")

    def __add__(self, other):
        if isinstance(other, Vec3d):
            return Vec3d(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vec3d(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3d):
            return Vec3d(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vec3d(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec3d):
            return self.dot(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec3d):
            return Vec3d(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vec3d(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> Vec3d:
        return Vec3d(-self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


def _coerce(value: VectorLike) -> Vec3d:
    if isinstance(value, Vec3d):
        return value
    return Vec3d.from_sequence(value)


def lerp(a: Vec3d, b: Vec3d, d: float) -> Vec3d:
    """Linear interpolation from ``a`` to ``b`` with ``d`` clamped to [0, 1]."""
    return a + (b - a) * min(max(d, 0.0), 1.0)


def eucl(x: float, y: float, z: float) -> float:
    """Euclidean norm of the three components."""
    x, y, z = float(x), float(y), float(z)
    return math.sqrt(x * x + y * y + z * z)