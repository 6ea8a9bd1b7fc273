import math
import random

import pytest

from genart.population import RADIUS, Cell, Population


def test_spawn_velocity_ranges():
    rng = random.Random(3)
    for _ in range(50):
        cell = Cell.spawn(1.0, 2.0, rng)
        assert cell.pos == (1.0, 2.0)
        assert 0.0 <= cell.vel[0] < 1.1
        assert -1.1 < cell.vel[1] <= 0.0
        assert cell.r == 5.0


def test_touching_cells_collide():
    a = Cell((0.0, 0.0), (0.0, 0.0))
    assert a.collides(Cell((10.0, 0.0), (0.0, 0.0)))
    assert not a.collides(Cell((10.5, 0.0), (0.0, 0.0)))


def test_bounces_near_wall():
    assert Cell((RADIUS - 4.0, 0.0), (0.0, 0.0)).bounces()
    assert not Cell((RADIUS - 6.0, 0.0), (0.0, 0.0)).bounces()


def test_advance_adds_velocity():
    cell = Cell((1.0, 2.0), (0.5, -1.5))
    cell.advance()
    assert cell.pos == pytest.approx((1.5, 0.5))


def test_replicate_offsets_from_velocity():
    parent = Cell((100.0, 100.0), (1.0, 2.0), 5.0)
    child = parent.replicate(random.Random(8))
    assert child.vel == parent.vel
    assert child.r == parent.r
    assert math.dist(child.pos, parent.vel) == pytest.approx(parent.r)


def test_population_starts_with_two_cells():
    pop = Population(random.Random(1))
    assert [c.pos for c in pop.cells] == [(-20.0, 0.0), (20.0, 0.0)]


def test_first_step_each_cell_replicates_itself():
    pop = Population(random.Random(1))
    pop.step()
    assert len(pop.cells) == 4


def test_bounce_reverses_velocity():
    pop = Population(random.Random(1))
    pop.cells = [Cell((RADIUS - 3.0, 0.0), (1.0, 0.0), 5.0)]
    pop.step()
    assert pop.cells[0].vel == pytest.approx((-1.0, 0.0))
    assert pop.cells[0].pos == pytest.approx((RADIUS - 2.0, 0.0))


def test_bounce_preserves_speed():
    pop = Population(random.Random(1))
    pop.cells = [Cell((0.0, RADIUS - 3.0), (0.3, 0.4), 5.0)]
    pop.step()
    assert math.hypot(*pop.cells[0].vel) == pytest.approx(0.5)