"""Turn a frame of hand landmarks into a gesture mode and motion deltas."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .config import GesturesConfig
from .gestures import POSE_MODES, GestureMode, Pose
from .models import (
    FIST_TIPS,
    GestureSample,
    HandLandmark,
    LandmarkFrame,
    LandmarkPoint,
    TrackState,
    to_landmark_frame,
)


def pinch_distance(frame: tuple[LandmarkPoint, ...]) -> float:
    """Distance between the thumb tip and the index tip, in the x-y plane."""
    return frame[HandLandmark.THUMB_TIP].distance_2d(frame[HandLandmark.INDEX_FINGER_TIP])


def is_fist(frame: tuple[LandmarkPoint, ...], radius: float) -> bool:
    """All four non-thumb fingertips are close to the wrist."""
    wrist = frame[HandLandmark.WRIST]
    return all(frame[tip].distance_2d(wrist) < radius for tip in FIST_TIPS)


def classify_pose(frame: tuple[LandmarkPoint, ...], config: GesturesConfig) -> tuple[Pose, float]:
    """Get the pose of the hand, pinch first, then fist. Also return the pinch distance."""
    distance = pinch_distance(frame)
    if distance < config.pinch_threshold:
        return Pose.PINCH, distance
    if is_fist(frame, config.fist_radius):
        return Pose.FIST, distance
    return Pose.NEITHER, distance


def classify(
    frame: LandmarkFrame,
    state: TrackState,
    config: GesturesConfig | None = None,
) -> tuple[GestureSample, TrackState]:
    """Classify one frame given the memory of the previous ones.

    Returns the sample for this frame and the new memory. The memory is fully
    cleared when there is no hand, so the first frame of a new hand never
    produces motion.
    """
    if frame is None:
        return GestureSample.none(), TrackState()

    if config is None:
        config = GesturesConfig()

    pose, distance = classify_pose(frame, config)
    mode = POSE_MODES[pose]
    wrist = frame[HandLandmark.WRIST].xy
    previous = state.previous_hand_position

    delta_x = delta_y = zoom_factor = 0.0
    previous_pinch_distance = state.previous_pinch_distance

    if mode is GestureMode.ZOOM:
        # Only a previous wrist position is needed, not a previous pinch frame: a hand
        # that was open on the previous frame already zooms on its first pinch frame
        if previous is not None:
            # Moving the hand up (lower y) zooms in
            zoom_factor = (previous.y - wrist.y) * config.zoom_gain
        previous_pinch_distance = distance
    elif mode is GestureMode.ROTATE:
        if previous is not None:
            delta_x = wrist.x - previous.x
            delta_y = wrist.y - previous.y

    sample = GestureSample(
        mode=mode,
        delta_x=delta_x,
        delta_y=delta_y,
        zoom_factor=zoom_factor,
        is_hand_detected=True,
    )
    return sample, TrackState(previous_hand_position=wrist, previous_pinch_distance=previous_pinch_distance)


class GestureClassifier:
    """Owner of the tracking memory, feeding it to `classify` frame after frame."""

    def __init__(self, config: GesturesConfig | None = None) -> None:
        self.config = config or GesturesConfig()
        self.state = TrackState()

    def reset(self) -> None:
        self.state = TrackState()

    def update(self, landmarks: Sequence[Any] | None) -> GestureSample:
        """Classify the given landmarks (malformed ones count as no hand) and keep the new memory."""
        sample, self.state = classify(to_landmark_frame(landmarks), self.state, self.config)
        return sample
