from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from math import hypot, isfinite
from typing import TYPE_CHECKING, Any, NamedTuple, Optional, TypeAlias

if TYPE_CHECKING:
    from ..mediapipe import NormalizedLandmark

NB_LANDMARKS = 21


class HandLandmark(IntEnum):
    """MediaPipe hand landmark indices."""

    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


# Fingertips that must all be close to the wrist for a fist (thumb excluded)
FIST_TIPS: tuple[HandLandmark, ...] = (
    HandLandmark.INDEX_FINGER_TIP,
    HandLandmark.MIDDLE_FINGER_TIP,
    HandLandmark.RING_FINGER_TIP,
    HandLandmark.PINKY_TIP,
)


class Point2D(NamedTuple):
    x: float
    y: float


class LandmarkPoint(NamedTuple):
    """A landmark in normalized image coordinates.

    Attributes:
        x: X coordinate (0 to 1, origin on the left)
        y: Y coordinate (0 to 1, origin on the top)
        z: Depth relative to the wrist, not used for gestures
    """

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_mediapipe(cls, landmark: NormalizedLandmark, mirroring: bool = False) -> LandmarkPoint:
        """Create a point from a MediaPipe normalized landmark, mirroring the X coordinate if asked."""
        return cls(
            x=landmark.x if not mirroring else 1 - landmark.x,
            y=landmark.y,
            z=landmark.z,
        )

    @property
    def xy(self) -> Point2D:
        return Point2D(self.x, self.y)

    def distance_2d(self, other: LandmarkPoint | Point2D) -> float:
        """Euclidean distance in the x-y plane."""
        return hypot(self.x - other.x, self.y - other.y)


# None when no hand is visible, otherwise exactly NB_LANDMARKS points
LandmarkFrame: TypeAlias = Optional[tuple[LandmarkPoint, ...]]


def to_landmark_frame(points: Sequence[Any] | None) -> LandmarkFrame:
    """Validate raw points into a landmark frame.

    Each point may be a `LandmarkPoint`, an object with `x`, `y` (and optional `z`)
    attributes, or a 2 or 3 items sequence. Anything that does not give exactly
    21 finite points is treated as "no hand" instead of raising.
    """
    if not isinstance(points, Sequence) or len(points) != NB_LANDMARKS:
        return None

    frame: list[LandmarkPoint] = []
    for point in points:
        try:
            if isinstance(point, LandmarkPoint):
                landmark = point
            elif hasattr(point, "x") and hasattr(point, "y"):
                landmark = LandmarkPoint(float(point.x), float(point.y), float(getattr(point, "z", 0.0) or 0.0))
            else:
                landmark = LandmarkPoint(*(float(value) for value in point))
        except (TypeError, ValueError, OverflowError):
            return None
        if not all(isfinite(value) for value in landmark):
            return None
        frame.append(landmark)

    return tuple(frame)
