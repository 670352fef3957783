from __future__ import annotations

from enum import Enum


class GestureMode(str, Enum):
    NONE = "NONE"  # No hand in the frame
    IDLE = "IDLE"  # Hand detected but no recognized pose
    ROTATE = "ROTATE"  # Closed fist
    ZOOM = "ZOOM"  # Pinch (thumb and index tips together)

    @property
    def label(self) -> str:
        """Human readable status, as shown in the HUD."""
        return GESTURE_LABELS[self]


class Pose(Enum):
    """Result of the pose classification step, before it is turned into a mode."""

    PINCH = "pinch"
    FIST = "fist"
    NEITHER = "neither"


GESTURE_LABELS: dict[GestureMode, str] = {
    GestureMode.NONE: "NO HAND DETECTED",
    GestureMode.IDLE: "HAND DETECTED",
    GestureMode.ROTATE: "ROTATING (Fist + Move)",
    GestureMode.ZOOM: "ZOOMING (Pinch + Up/Down)",
}

POSE_MODES: dict[Pose, GestureMode] = {
    Pose.PINCH: GestureMode.ZOOM,
    Pose.FIST: GestureMode.ROTATE,
    Pose.NEITHER: GestureMode.IDLE,
}
