from __future__ import annotations

import logging

import numpy as np

from .camera import CameraTransform, OrbitControls
from .config import CameraConfig
from .gestures import GestureMode
from .models import GestureSample

logger = logging.getLogger(__name__)


class CameraMapper:
    """Applies a smoothed gesture sample to the orbit camera, once per render tick."""

    def __init__(self, controls: OrbitControls | None = None, config: CameraConfig | None = None) -> None:
        self.config = config or (controls.config if controls is not None else CameraConfig())
        self.controls = controls or OrbitControls(self.config)

    @property
    def transform(self) -> CameraTransform:
        return self.controls.transform

    def tick(self, sample: GestureSample) -> CameraTransform:
        """Update the camera for this render tick and return its new transform."""
        # The automatic orbit only runs when no hand is visible, IDLE pauses everything
        self.controls.auto_rotate = sample.mode is GestureMode.NONE

        if sample.mode is GestureMode.ROTATE:
            self.rotate(sample.delta_x, sample.delta_y)
        elif sample.mode is GestureMode.ZOOM:
            self.zoom(sample.zoom_factor)

        self.controls.update()
        return self.transform

    def rotate(self, delta_x: float, delta_y: float) -> None:
        # Inverted drag: moving the hand to the right turns the view the other way
        scale = self.config.rotate_sensitivity * self.config.rotate_scale
        self.controls.rotate_azimuth(-delta_x * scale)
        self.controls.rotate_polar(-delta_y * scale)

    def can_zoom(self, distance: float, zoom_factor: float) -> bool:
        """Zooming in is refused close to the target and zooming out far from it.

        Each guard only blocks its own direction, so the camera can always move
        back from a guard.
        """
        config = self.config
        return (distance > config.inner_guard or zoom_factor < 0) and (
            distance < config.outer_guard or zoom_factor > 0
        )

    def zoom(self, zoom_factor: float) -> None:
        """Move the camera along its view direction, positive factors moving it closer."""
        if zoom_factor == 0:
            return

        distance = self.controls.distance
        if not self.can_zoom(distance, zoom_factor):
            logger.debug("Zoom refused at distance %.2f (factor %.3f)", distance, zoom_factor)
            return

        position = self.controls.position
        direction = self.transform.view_direction
        new_position = position + direction * (zoom_factor * self.config.zoom_sensitivity)

        # Never cross the hard minimum inward nor the outer guard outward in a single step
        new_distance = float(np.linalg.norm(new_position))
        if zoom_factor > 0:
            target_distance = max(new_distance, self.config.min_distance)
            if float(np.dot(new_position, position)) <= 0:
                # Overshot through the target
                target_distance = self.config.min_distance
        else:
            target_distance = min(new_distance, self.config.outer_guard)

        if target_distance != new_distance:
            new_position = position / np.linalg.norm(position) * target_distance

        self.controls.set_position(new_position)
