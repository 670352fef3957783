from types import SimpleNamespace

import pytest

from gesture_orbit.models import HandLandmark, LandmarkPoint, Point2D, to_landmark_frame


def test_from_mediapipe():
    landmark = SimpleNamespace(x=0.2, y=0.7, z=-0.05)

    assert LandmarkPoint.from_mediapipe(landmark) == LandmarkPoint(0.2, 0.7, -0.05)
    assert LandmarkPoint.from_mediapipe(landmark, mirroring=True) == pytest.approx((0.8, 0.7, -0.05))


def test_distance_ignores_depth():
    a = LandmarkPoint(0.1, 0.1, 0.9)
    b = LandmarkPoint(0.4, 0.5, -0.9)

    assert a.distance_2d(b) == pytest.approx(0.5)
    assert a.distance_2d(Point2D(0.1, 0.1)) == 0.0


def test_frame_from_various_points():
    points = [SimpleNamespace(x=i / 100, y=0.5, z=None) for i in range(10)]
    points += [(0.5, 0.5)] * 5 + [(0.5, 0.5, 0.1)] * 5 + [LandmarkPoint(0.9, 0.9)]

    frame = to_landmark_frame(points)

    assert frame is not None
    assert len(frame) == 21
    assert frame[HandLandmark.WRIST] == LandmarkPoint(0.0, 0.5, 0.0)
    assert frame[HandLandmark.PINKY_TIP] == LandmarkPoint(0.9, 0.9, 0.0)
    assert all(isinstance(point, LandmarkPoint) for point in frame)


def test_no_frame():
    assert to_landmark_frame(None) is None
    assert to_landmark_frame([(0.5, float("inf"))] * 21) is None


def test_landmark_indices():
    assert [
        HandLandmark.WRIST,
        HandLandmark.THUMB_TIP,
        HandLandmark.INDEX_FINGER_TIP,
        HandLandmark.MIDDLE_FINGER_TIP,
        HandLandmark.RING_FINGER_TIP,
        HandLandmark.PINKY_TIP,
    ] == [0, 4, 8, 12, 16, 20]
