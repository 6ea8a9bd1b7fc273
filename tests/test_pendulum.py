import math

import pytest

from genart.pendulum import Pendulum, rotate


def test_rotate_quarter_turn():
    x, y = rotate((1.0, 0.0), math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_rotate_preserves_length():
    p = (3.0, -4.0)
    assert math.hypot(*rotate(p, 1.234)) == pytest.approx(5.0)


def test_arm_lengths_shrink_along_chain():
    pend = Pendulum(joints=5, length=100.0)
    for _ in range(7):
        positions = pend.step()
    prev = (0.0, 0.0)
    for i, pos in enumerate(positions):
        frac = (5 - i) / 5
        assert math.dist(prev, pos) == pytest.approx(frac * 100.0)
        prev = pos


def test_paths_grow_and_colours():
    pend = Pendulum(joints=3)
    pend.step()
    pend.step()
    assert [len(p) for p in pend.paths] == [2, 2, 2]
    for path in pend.paths:
        for _, (r, g, b, a) in path:
            assert g == 0.0
            assert a == 1.0
            assert 0.0 <= r <= 0.5
            assert 0.0 <= b < 1.0


def test_angle_advances_then_resets():
    pend = Pendulum()
    start_speed = pend.speed
    pend.step()
    assert pend.angle == pytest.approx(start_speed * 0.01)
    steps = 0
    while pend.angle != 0.0:
        pend.step()
        steps += 1
        assert steps < 100000
    assert all(p == [] for p in pend.paths)
    assert pend.speed == start_speed


def test_rejects_no_joints():
    with pytest.raises(ValueError):
        Pendulum(joints=0)