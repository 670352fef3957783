from .gesture import GestureSample, TrackState
from .landmarks import (
    FIST_TIPS,
    NB_LANDMARKS,
    HandLandmark,
    LandmarkFrame,
    LandmarkPoint,
    Point2D,
    to_landmark_frame,
)

__all__ = [
    "GestureSample",
    "TrackState",
    "HandLandmark",
    "LandmarkFrame",
    "LandmarkPoint",
    "Point2D",
    "FIST_TIPS",
    "NB_LANDMARKS",
    "to_landmark_frame",
]
