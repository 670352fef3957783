from __future__ import annotations

import logging
import os
import urllib.request
from typing import ClassVar, TypeAlias

import cv2

from .errors import DetectorInitError
from .mediapipe import (
    BaseOptions,
    HandLandmarker,
    HandLandmarkerOptions,
    HandLandmarkerResult,
    RunningMode,
    mp,
)
from .models import LandmarkFrame, LandmarkPoint, to_landmark_frame

OpenCVImage: TypeAlias = cv2.typing.MatLike  # Type alias for images (numpy arrays)

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PATH = "hand_landmarker.task"


class LandmarkSource:
    """Hand landmark detector: gives the landmarks of the most confident hand of a frame, if any."""

    model_url: ClassVar[str] = (
        "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/1/hand_landmarker.task"
    )

    def __init__(self, model_path: str = DEFAULT_MODEL_PATH, use_gpu: bool = False, mirroring: bool = False) -> None:
        self.mirroring = mirroring
        self.last_timestamp_ms = -1

        self.check_model(model_path)

        try:
            self.landmarker: HandLandmarker | None = HandLandmarker.create_from_options(
                HandLandmarkerOptions(
                    base_options=BaseOptions(
                        model_asset_path=model_path,
                        delegate=BaseOptions.Delegate.GPU if use_gpu else BaseOptions.Delegate.CPU,
                    ),
                    running_mode=RunningMode.VIDEO,
                    num_hands=1,
                    min_hand_detection_confidence=0.5,
                    min_hand_presence_confidence=0.5,
                    min_tracking_confidence=0.5,
                )
            )
        except Exception as exc:
            raise DetectorInitError(f"Failed to load gesture recognition model '{model_path}': {exc}") from exc

    def check_model(self, model_path: str) -> None:
        if os.path.exists(model_path):
            return
        logger.info("Model file '%s' not found. Downloading...", model_path)
        try:
            urllib.request.urlretrieve(self.model_url, model_path)
        except Exception as exc:
            raise DetectorInitError(f"Could not download model from {self.model_url}: {exc}") from exc
        logger.info("Successfully downloaded model to '%s'", model_path)

    @staticmethod
    def convert_image_from_opencv(frame: OpenCVImage) -> mp.Image:
        # Convert frame to RGB (opencv BGR not supported by MediaPipe)
        rgb_frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb_frame)

    def detect_from_opencv(self, frame: OpenCVImage, timestamp: float) -> LandmarkFrame:
        return self.detect(self.convert_image_from_opencv(frame), timestamp)

    def detect(self, image: mp.Image, timestamp: float) -> LandmarkFrame:
        """Detect the hand of the image, `timestamp` being in seconds.

        Errors are logged and reported as "no hand": a bad frame must not stop the stream.
        """
        if self.landmarker is None:
            return None

        # MediaPipe wants strictly increasing integer milliseconds
        timestamp_ms = max(int(timestamp * 1000), self.last_timestamp_ms + 1)
        self.last_timestamp_ms = timestamp_ms

        try:
            result = self.landmarker.detect_for_video(image, timestamp_ms)
        except Exception:
            logger.exception("Hand detection failed for frame at %dms", timestamp_ms)
            return None

        return self.convert_result(result)

    def convert_result(self, result: HandLandmarkerResult) -> LandmarkFrame:
        if not result.hand_landmarks:
            return None
        return to_landmark_frame(
            [LandmarkPoint.from_mediapipe(landmark, self.mirroring) for landmark in result.hand_landmarks[0]]
        )

    def close(self) -> None:
        """Close the detector and release resources."""
        if self.landmarker:
            self.landmarker.close()
            self.landmarker = None

    def __enter__(self) -> LandmarkSource:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: object) -> None:
        self.close()
