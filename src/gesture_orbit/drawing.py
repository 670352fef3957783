from math import degrees
from typing import TypeAlias

import cv2  # type: ignore[import-untyped]

from .camera import CameraTransform
from .gestures import GestureMode
from .models import FIST_TIPS, GestureSample, HandLandmark, LandmarkFrame

OpenCVImage: TypeAlias = cv2.typing.MatLike  # Type alias for images (numpy arrays)

# Colors for the gesture status (BGR format for OpenCV)
MODE_COLORS: dict[GestureMode, tuple[int, int, int]] = {
    GestureMode.NONE: (128, 128, 128),  # Gray
    GestureMode.IDLE: (212, 182, 6),  # Cyan
    GestureMode.ROTATE: (0, 215, 255),  # Yellow
    GestureMode.ZOOM: (0, 200, 0),  # Green
}

# Pairs of landmarks linked when drawing the hand
HAND_CONNECTIONS: list[tuple[int, int]] = [
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (5, 9), (9, 10), (10, 11), (11, 12),
    (9, 13), (13, 14), (14, 15), (15, 16),
    (13, 17), (0, 17), (17, 18), (18, 19), (19, 20),
]  # fmt: skip


def draw_landmarks(landmarks: LandmarkFrame, mode: GestureMode, image: OpenCVImage) -> OpenCVImage:
    """Draw the hand skeleton, highlighting the points used by the gesture detection."""
    if landmarks is None:
        return image

    height, width = image.shape[:2]
    points = [(int(round(point.x * width)), int(round(point.y * height))) for point in landmarks]

    for start, end in HAND_CONNECTIONS:
        cv2.line(image, points[start], points[end], (200, 200, 200), 1)

    color = MODE_COLORS[mode]
    for index, point in enumerate(points):
        if index in (HandLandmark.WRIST, HandLandmark.THUMB_TIP, *FIST_TIPS):
            cv2.circle(image, point, 5, color, -1)
        else:
            cv2.circle(image, point, 2, (255, 255, 255), -1)

    return image


def draw_status(sample: GestureSample, transform: CameraTransform, image: OpenCVImage) -> OpenCVImage:
    """Draw a header with the gesture status and the camera state."""
    frame_width = image.shape[1]
    header_height = 50
    padding = 10

    overlay = image.copy()
    cv2.rectangle(overlay, (0, 0), (frame_width, header_height), (0, 0, 0), -1)
    image = cv2.addWeighted(overlay, 0.7, image, 0.3, 0)

    cv2.putText(
        image,
        sample.mode.label,
        (padding, 20),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.5,
        MODE_COLORS[sample.mode],
        1,
        cv2.LINE_AA,
    )
    cv2.putText(
        image,
        format_camera(transform),
        (padding, 40),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.4,
        (255, 255, 255),
        1,
        cv2.LINE_AA,
    )
    return image


def format_camera(transform: CameraTransform) -> str:
    return (
        f"Azimuth: {degrees(transform.azimuth):.1f}deg | Polar: {degrees(transform.polar):.1f}deg "
        f"| Distance: {transform.distance:.2f}"
    )


def draw_hud(
    sample: GestureSample, transform: CameraTransform, landmarks: LandmarkFrame, image: OpenCVImage
) -> OpenCVImage:
    image = draw_landmarks(landmarks, sample.mode, image)
    return draw_status(sample, transform, image)
