"""Orbit camera control with hand gestures, using MediaPipe hand landmarks."""

from .camera import CameraTransform, OrbitControls
from .classifier import GestureClassifier, classify, classify_pose
from .config import Config
from .errors import CaptureError, DetectorInitError, GestureOrbitError
from .gestures import GestureMode, Pose
from .mapper import CameraMapper
from .models import GestureSample, HandLandmark, LandmarkFrame, LandmarkPoint, TrackState
from .pipeline import GesturePipeline, LatestValue
from .smoothing import DeltaSmoother

__all__ = [
    # Core classes
    "GestureClassifier",
    "DeltaSmoother",
    "CameraMapper",
    "OrbitControls",
    "GesturePipeline",
    "LatestValue",
    "classify",
    "classify_pose",
    # Models
    "CameraTransform",
    "GestureMode",
    "GestureSample",
    "HandLandmark",
    "LandmarkFrame",
    "LandmarkPoint",
    "Pose",
    "TrackState",
    # Errors
    "GestureOrbitError",
    "DetectorInitError",
    "CaptureError",
    # Configuration
    "Config",
]
