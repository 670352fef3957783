from math import atan2, pi, sqrt

import numpy as np
import pytest

from gesture_orbit import CameraTransform, OrbitControls
from gesture_orbit.camera import POLAR_EPS
from gesture_orbit.config import CameraConfig


def test_initial_position():
    controls = OrbitControls()

    assert controls.distance == pytest.approx(sqrt(236))
    assert controls.azimuth == pytest.approx(pi / 4)
    assert controls.polar == pytest.approx(atan2(sqrt(200), 6))
    assert controls.position == pytest.approx(np.array([10.0, 6.0, 10.0]))
    assert not controls.auto_rotate


@pytest.mark.parametrize("position", [(1.0, 2.0, 3.0), (-4.0, 0.5, -2.0), (0.0, -3.0, 7.0)])
def test_transform_position_round_trip(position):
    transform = CameraTransform.from_position(position)

    assert transform.position == pytest.approx(np.array(position))
    assert transform.view_direction == pytest.approx(-np.array(position) / np.linalg.norm(position))


def test_distance_is_clamped_on_update():
    controls = OrbitControls()

    controls.set_position(np.array([0.0, 0.0, 2.0]))
    controls.update()
    assert controls.distance == pytest.approx(4.0)

    controls.set_position(np.array([0.0, 0.0, 50.0]))
    controls.update()
    assert controls.distance == pytest.approx(30.0)


def test_polar_never_reaches_the_poles():
    controls = OrbitControls()

    controls.rotate_polar(-10.0)
    controls.update()
    assert controls.polar == pytest.approx(POLAR_EPS)

    controls.rotate_polar(10.0)
    controls.update()
    assert controls.polar == pytest.approx(pi - POLAR_EPS)


def test_polar_range_can_be_restricted():
    controls = OrbitControls(min_polar=pi / 4, max_polar=pi / 2)

    controls.rotate_polar(1.0)
    controls.update()

    assert controls.polar == pytest.approx(pi / 2)


def test_auto_rotate():
    controls = OrbitControls(CameraConfig(auto_rotate_speed=2.0))
    azimuth = controls.azimuth

    controls.auto_rotate = True
    for _ in range(60):
        controls.update()

    # One turn in 30 seconds at 60 updates per second
    assert controls.azimuth == pytest.approx(azimuth - 2 * pi / 30)


def test_rotation_applied_at_once_without_damping():
    controls = OrbitControls()
    azimuth = controls.azimuth

    controls.rotate_azimuth(0.1)
    controls.update()
    controls.update()

    assert controls.azimuth == pytest.approx(azimuth + 0.1)


def test_damping_spreads_rotation():
    controls = OrbitControls(CameraConfig(enable_damping=True, damping_factor=0.1))
    azimuth = controls.azimuth

    controls.rotate_azimuth(0.1)
    controls.update()
    assert controls.azimuth == pytest.approx(azimuth + 0.01)

    for _ in range(200):
        controls.update()
    assert controls.azimuth == pytest.approx(azimuth + 0.1, abs=1e-6)
