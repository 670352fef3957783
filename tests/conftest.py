from __future__ import annotations

from gesture_orbit.models import NB_LANDMARKS, HandLandmark, LandmarkPoint


def make_hand(
    wrist: tuple[float, float],
    thumb: tuple[float, float],
    index: tuple[float, float],
    middle: tuple[float, float],
    ring: tuple[float, float],
    pinky: tuple[float, float],
) -> list[LandmarkPoint]:
    """Build 21 landmarks, tips given as offsets from the wrist, other joints on the wrist."""
    wx, wy = wrist
    points = [LandmarkPoint(wx, wy, 0.0)] * NB_LANDMARKS
    for landmark, (dx, dy) in (
        (HandLandmark.THUMB_TIP, thumb),
        (HandLandmark.INDEX_FINGER_TIP, index),
        (HandLandmark.MIDDLE_FINGER_TIP, middle),
        (HandLandmark.RING_FINGER_TIP, ring),
        (HandLandmark.PINKY_TIP, pinky),
    ):
        points[landmark] = LandmarkPoint(wx + dx, wy + dy, 0.0)
    return points


def open_hand(wrist: tuple[float, float] = (0.5, 0.8)) -> list[LandmarkPoint]:
    """Fingers extended, thumb away from the index."""
    return make_hand(wrist, (-0.2, -0.15), (-0.05, -0.4), (0.0, -0.42), (0.05, -0.4), (0.1, -0.33))


def fist_hand(wrist: tuple[float, float] = (0.5, 0.5), pinch: float = 0.3) -> list[LandmarkPoint]:
    """Fingertips close to the wrist, thumb tip `pinch` away from the index tip."""
    return make_hand(wrist, (pinch, -0.1), (0.0, -0.1), (0.03, -0.1), (0.06, -0.09), (0.08, -0.08))


def pinch_hand(wrist: tuple[float, float] = (0.5, 0.8), pinch: float = 0.03) -> list[LandmarkPoint]:
    """Thumb and index tips together, other fingers extended."""
    return make_hand(wrist, (pinch, -0.3), (0.0, -0.3), (0.05, -0.42), (0.1, -0.4), (0.15, -0.33))
