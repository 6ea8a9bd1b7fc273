import math

import pytest

from genart.camera import CamMode, Camera, look_at, perspective


def mat_vec(m, v):
    return tuple(sum(a * b for a, b in zip(row, v)) for row in m)


def test_camera_defaults_and_window():
    cam = Camera((800, 600))
    assert cam.mode is CamMode.PERSPECTIVE
    assert (cam.window_w, cam.window_h) == (800.0, 600.0)


def test_origin_projects_to_screen_center():
    clip = Camera((800, 600)).projection((0, 0, 0))
    assert clip[0] == pytest.approx(0.0, abs=1e-9)
    assert clip[1] == pytest.approx(0.0, abs=1e-9)
    assert clip[3] > 0


def test_projection_accepts_two_components():
    cam = Camera((640, 480))
    assert cam.projection((1, 2)) == cam.projection((1, 2, 0))


def test_look_at_maps_eye_to_origin():
    eye = (0.3, 0.3, 1.0)
    view = look_at(eye, (0, 0, 0), (0, -1, 0))
    assert mat_vec(view, (*eye, 1.0)) == pytest.approx((0, 0, 0, 1), abs=1e-12)


def test_look_at_center_lies_on_negative_z():
    eye = (0.3, 0.3, 1.0)
    view = look_at(eye, (0, 0, 0), (0, -1, 0))
    x, y, z, w = mat_vec(view, (0, 0, 0, 1))
    assert (x, y) == pytest.approx((0, 0), abs=1e-12)
    assert z == pytest.approx(-math.dist(eye, (0, 0, 0)))


def test_look_at_rotation_is_orthonormal():
    view = look_at((1, 2, 3), (0, 0, 0), (0, 1, 0))
    rows = [r[:3] for r in view[:3]]
    for i, a in enumerate(rows):
        for j, b in enumerate(rows):
            expected = 1.0 if i == j else 0.0
            assert sum(p * q for p, q in zip(a, b)) == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("near,far", [(0.01, 1000.0), (1.0, 50.0)])
def test_perspective_depth_range(near, far):
    m = perspective(math.pi / 2, 1.5, near, far)
    zn = mat_vec(m, (0, 0, -near, 1))
    zf = mat_vec(m, (0, 0, -far, 1))
    assert zn[2] / zn[3] == pytest.approx(-1.0)
    assert zf[2] / zf[3] == pytest.approx(1.0)


@pytest.mark.parametrize(
    "args",
    [(0.0, 1.0, 0.1, 10.0), (math.pi, 1.0, 0.1, 10.0), (1.0, 0.0, 0.1, 10.0),
     (1.0, 1.0, 0.0, 10.0), (1.0, 1.0, 5.0, 5.0)],
)
def test_perspective_rejects_bad_parameters(args):
    with pytest.raises(ValueError):
        perspective(*args)