"""Sampling neutron speeds and free paths across a thin layer."""

from __future__ import annotations

import argparse
import itertools
import math
import random
from typing import Iterator, Optional, Sequence

R_L = 0.1
N = 100


def vel_dist(u: float) -> float:
    """Map a uniform sample ``u`` in [0, 1) to a speed: ``sqrt(-ln(1 - u))``."""
    if not 0.0 <= u < 1.0:
        raise ValueError("u must lie in [0, 1)")
    return math.sqrt(-math.log(1.0 - u))


def gen_dist(rng: Optional[random.Random] = None) -> Iterator[float]:
    """Endless stream of sampled speeds."""
    rng = rng if rng is not None else random.Random()
    while True:
        yield vel_dist(rng.random())


def free_path_positions(dx: float, n: int = N, x0: float = 0.0) -> list[float]:
    """Positions ``x0 + dx * i`` for ``i`` in ``range(n)``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [x0 + dx * i for i in range(n)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sample neutron speeds and free paths.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("-n", type=int, default=N, help="number of path positions")
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error("-n must not be negative")

    rng = random.Random(args.seed)
    vx = vel_dist(rng.random())
    vy = vel_dist(rng.random())
    dx = R_L * (vx / vy)

    print(free_path_positions(dx, args.n))
    print(vel_dist(rng.random()))
    print(f"{vx} {vy}")
    print(list(itertools.islice(gen_dist(rng), 10)))
    return 0