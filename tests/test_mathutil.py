import pytest
from hypothesis import given
from hypothesis import strategies as st

from genart.mathutil import linspace, map_range

num = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False)


@given(num, num, st.integers(min_value=2, max_value=200))
def test_linspace_endpoints_and_spacing(start, stop, n):
    values = linspace(start, stop, n)
    assert len(values) == n
    assert values[0] == start
    assert values[-1] == pytest.approx(stop, abs=1e-6)
    gaps = [b - a for a, b in zip(values, values[1:])]
    assert max(gaps) - min(gaps) == pytest.approx(0.0, abs=1e-6)


def test_linspace_sketch_grid():
    values = linspace(-512.0, 512.0, 50)
    assert values[0] == -512.0
    assert values[-1] == pytest.approx(512.0)


@pytest.mark.parametrize("n", [0, 1, -3])
def test_linspace_rejects_small_counts(n):
    with pytest.raises(ValueError):
        linspace(0.0, 1.0, n)


@given(num, num, num, num)
def test_map_range_endpoints(in_min, in_max, out_min, out_max):
    if abs(in_max - in_min) < 1e-3:
        return_value = None
    else:
        return_value = map_range(in_min, in_min, in_max, out_min, out_max)
    assert return_value is None or return_value == pytest.approx(out_min)


def test_map_range_upper_and_middle():
    assert map_range(1.0, 0.0, 1.0, 1.5, 2.9) == pytest.approx(2.9)
    assert map_range(5.0, 0.0, 10.0, -4.0, 4.0) == pytest.approx(0.0)


def test_map_range_empty_input_range():
    with pytest.raises(ZeroDivisionError):
        map_range(1.0, 2.0, 2.0, 0.0, 1.0)