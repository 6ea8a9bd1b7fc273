"""Numeric helpers for laying out sketches."""

from __future__ import annotations


def linspace(start: float, stop: float, nstep: int) -> list[float]:
    """``nstep`` evenly spaced values from ``start`` to ``stop`` inclusive."""
    if nstep < 2:
        raise ValueError("nstep must be at least 2")
    delta = (stop - start) / (nstep - 1)
    return [start + i * delta for i in range(nstep)]


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map ``value`` from one range onto another."""
    return (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min