from __future__ import annotations

from dataclasses import dataclass

from ..gestures import GestureMode
from .landmarks import Point2D


@dataclass(frozen=True)
class TrackState:
    """Memory kept between frames while a hand stays continuously visible."""

    previous_hand_position: Point2D | None = None
    # Recorded on pinch frames but not used by the zoom computation (which uses the wrist motion)
    previous_pinch_distance: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.previous_hand_position is None and self.previous_pinch_distance is None


@dataclass(frozen=True)
class GestureSample:
    """Gesture detected for a single frame.

    `delta_x` and `delta_y` are only set in `ROTATE` mode and `zoom_factor` only
    in `ZOOM` mode, they are 0 otherwise.
    """

    mode: GestureMode = GestureMode.NONE
    delta_x: float = 0.0
    delta_y: float = 0.0
    zoom_factor: float = 0.0
    is_hand_detected: bool = False

    @classmethod
    def none(cls) -> GestureSample:
        """Sample for a frame without any hand."""
        return cls()
