import itertools
import math
import random

import pytest

from genart.poisson import Cell, PoissonDisk, dot_size


def _run(disk, limit=200_000):
    for _ in range(limit):
        if not disk.tick():
            return
    raise AssertionError("sampler did not finish")


@pytest.fixture
def finished():
    disk = PoissonDisk(60, 60, 5, 30, rng=random.Random(7))
    _run(disk)
    return disk


def test_samples_stay_in_bounds(finished):
    assert finished.num_points() > 0
    for x, y in finished.samples:
        assert 0 <= x < 60
        assert 0 <= y < 60


def test_samples_are_spread_apart(finished):
    min_dist = min(
        math.dist(a, b) for a, b in itertools.combinations(finished.samples, 2)
    )
    assert min_dist > finished.radius / math.sqrt(2.0)


def test_finished_sampler_has_no_active_points(finished):
    assert finished.active == ()
    assert finished.tick() is False


def test_finished_sample_cells_are_dead(finished):
    for x, y in finished.samples:
        assert finished.cells[y * finished.width + x] is Cell.DEAD


def test_point_at_matches_samples(finished):
    assert [finished.point_at(i) for i in range(finished.num_points())] == list(
        finished.samples
    )
    with pytest.raises(IndexError):
        finished.point_at(finished.num_points())


def test_same_seed_gives_same_samples():
    a = PoissonDisk(40, 30, 4, 20, rng=random.Random(3))
    b = PoissonDisk(40, 30, 4, 20, rng=random.Random(3))
    _run(a)
    _run(b)
    assert a.samples == b.samples


def test_new_sampler_has_one_active_seed():
    disk = PoissonDisk(20, 20, 3, 10, rng=random.Random(1))
    assert disk.num_points() == 0
    assert len(disk.active) == 1
    x, y = disk.active[0]
    assert disk.cells[y * 20 + x] is Cell.ACTIVE


def test_zero_samples_retires_seed():
    disk = PoissonDisk(20, 20, 3, 0, rng=random.Random(1))
    assert disk.tick() is True
    assert disk.num_points() == 0
    assert disk.tick() is False


def test_reset_clears_samples():
    disk = PoissonDisk(30, 30, 3, 20, rng=random.Random(5))
    for _ in range(20):
        disk.tick()
    assert disk.num_points() > 0
    disk.reset()
    assert disk.num_points() == 0
    assert len(disk.active) == 1
    assert sum(cell is Cell.ACTIVE for cell in disk.cells) == 1
    assert disk.tick() is True


@pytest.mark.parametrize(
    "args", [(0, 10, 3, 5), (10, 0, 3, 5), (10, 10, 0, 5), (10, 10, 3, -1)]
)
def test_invalid_arguments_raise(args):
    with pytest.raises(ValueError):
        PoissonDisk(*args)


def test_dot_size_limits():
    assert dot_size(255) == pytest.approx(1.5)
    assert dot_size(0) == pytest.approx(2.9)


def test_dot_size_darker_is_larger():
    sizes = [dot_size(b) for b in range(0, 256, 15)]
    assert sizes == sorted(sizes, reverse=True)