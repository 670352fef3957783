from math import pi

import pytest

from gesture_orbit import CameraMapper, GestureMode, GestureSample, OrbitControls
from gesture_orbit.config import CameraConfig


def make_mapper(distance: float | None = None) -> CameraMapper:
    config = CameraConfig() if distance is None else CameraConfig(initial_position=(0.0, 0.0, distance))
    return CameraMapper(OrbitControls(config))


def zoom(factor: float) -> GestureSample:
    return GestureSample(mode=GestureMode.ZOOM, zoom_factor=factor, is_hand_detected=True)


def rotate(delta_x: float, delta_y: float) -> GestureSample:
    return GestureSample(mode=GestureMode.ROTATE, delta_x=delta_x, delta_y=delta_y, is_hand_detected=True)


def test_rotate_is_inverted_and_scaled():
    mapper = make_mapper()
    azimuth, polar, distance = mapper.transform.azimuth, mapper.transform.polar, mapper.transform.distance

    mapper.tick(rotate(0.1, 0.04))

    assert mapper.transform.azimuth == pytest.approx(azimuth - 0.1 * 2.5 * 0.001)
    assert mapper.transform.polar == pytest.approx(polar - 0.04 * 2.5 * 0.001)
    assert mapper.transform.distance == pytest.approx(distance)
    assert not mapper.controls.auto_rotate


def test_rotate_relies_on_controls_for_polar_limit():
    mapper = make_mapper()

    for _ in range(10):
        mapper.tick(rotate(0.0, 1000.0))

    assert 0 < mapper.transform.polar < pi


def test_zoom_in_moves_closer():
    mapper = make_mapper(10.0)

    mapper.tick(zoom(0.5))

    assert mapper.transform.distance == pytest.approx(10.0 - 0.5 * 0.02)
    assert mapper.transform.polar == pytest.approx(pi / 2)
    assert mapper.transform.azimuth == pytest.approx(0.0)


def test_zoom_out_moves_away():
    mapper = make_mapper(10.0)

    mapper.tick(zoom(-1.0))

    assert mapper.transform.distance == pytest.approx(10.02)


def test_zoom_keeps_direction_from_any_position():
    mapper = make_mapper()
    azimuth, polar, distance = mapper.transform.azimuth, mapper.transform.polar, mapper.transform.distance

    mapper.tick(zoom(10.0))

    assert mapper.transform.distance == pytest.approx(distance - 0.2)
    assert mapper.transform.azimuth == pytest.approx(azimuth)
    assert mapper.transform.polar == pytest.approx(polar)


def test_inner_guard_blocks_only_zooming_in():
    mapper = make_mapper(5.0)

    mapper.tick(zoom(1.0))
    assert mapper.transform.distance == pytest.approx(5.0)

    mapper.tick(zoom(-1.0))
    assert mapper.transform.distance == pytest.approx(5.02)


def test_outer_guard_blocks_only_zooming_out():
    mapper = make_mapper(25.0)

    mapper.tick(zoom(-1.0))
    assert mapper.transform.distance == pytest.approx(25.0)

    mapper.tick(zoom(1.0))
    assert mapper.transform.distance == pytest.approx(24.98)


@pytest.mark.parametrize("factor", [1.0, 30.0, 500.0, 10_000.0])
def test_zoom_in_never_goes_under_min_distance(factor):
    mapper = make_mapper(5.01)

    for _ in range(20):
        mapper.tick(zoom(factor))
        assert mapper.transform.distance >= 4.0 - 1e-9


@pytest.mark.parametrize("factor", [-1.0, -30.0, -500.0])
def test_zoom_out_never_goes_over_outer_guard(factor):
    mapper = make_mapper(24.99)

    for _ in range(20):
        mapper.tick(zoom(factor))
        assert mapper.transform.distance <= 25.0 + 1e-9


def test_no_hand_auto_rotates():
    mapper = make_mapper()
    azimuth = mapper.transform.azimuth

    mapper.tick(GestureSample.none())

    assert mapper.controls.auto_rotate
    assert mapper.transform.azimuth == pytest.approx(azimuth - 2 * pi / 3600 * 0.5)


def test_idle_pauses_the_camera():
    mapper = make_mapper()
    mapper.tick(GestureSample.none())
    before = (mapper.transform.azimuth, mapper.transform.polar, mapper.transform.distance)

    for _ in range(5):
        mapper.tick(GestureSample(mode=GestureMode.IDLE, is_hand_detected=True))

    assert not mapper.controls.auto_rotate
    assert (mapper.transform.azimuth, mapper.transform.polar, mapper.transform.distance) == before


def test_deltas_ignored_outside_rotate():
    mapper = make_mapper()
    before = (mapper.transform.azimuth, mapper.transform.polar)

    mapper.tick(GestureSample(mode=GestureMode.ZOOM, delta_x=1.0, delta_y=1.0, is_hand_detected=True))

    assert (mapper.transform.azimuth, mapper.transform.polar) == pytest.approx(before)
