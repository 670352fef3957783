"""Orbit camera around the origin, with the same conventions as three.js `OrbitControls`.

The camera position is stored as spherical coordinates around the target:
the azimuth is the angle around the vertical (y) axis, measured from +z
toward +x, and the polar angle is measured from +y.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, atan2, pi, sqrt

import numpy as np

from .config import CameraConfig

# Keeps the polar angle away from the poles so the view never flips
POLAR_EPS = 1e-6


@dataclass
class CameraTransform:
    azimuth: float
    polar: float
    distance: float

    @classmethod
    def from_position(cls, position: np.ndarray | tuple[float, float, float]) -> CameraTransform:
        x, y, z = (float(value) for value in position)
        distance = sqrt(x * x + y * y + z * z)
        if distance == 0:
            return cls(azimuth=0.0, polar=0.0, distance=0.0)
        return cls(
            azimuth=atan2(x, z),
            polar=acos(min(max(y / distance, -1.0), 1.0)),
            distance=distance,
        )

    @property
    def position(self) -> np.ndarray:
        sin_polar = np.sin(self.polar)
        return self.distance * np.array(
            [sin_polar * np.sin(self.azimuth), np.cos(self.polar), sin_polar * np.cos(self.azimuth)]
        )

    @property
    def view_direction(self) -> np.ndarray:
        """Unit vector from the camera toward the target."""
        position = self.position
        norm = np.linalg.norm(position)
        if norm == 0:
            return np.zeros(3)
        return -position / norm


class OrbitControls:
    """Camera control surface: angles and distance, with hard limits applied on every update.

    Angular changes requested through `rotate_azimuth` and `rotate_polar` are
    applied by `update`, all at once or, with damping enabled, a fraction of
    what remains at each update.
    """

    def __init__(
        self,
        config: CameraConfig | None = None,
        min_polar: float = 0.0,
        max_polar: float = pi,
    ) -> None:
        self.config = config or CameraConfig()
        self.min_polar = min_polar
        self.max_polar = max_polar
        self.auto_rotate = False
        self.transform = CameraTransform.from_position(self.config.initial_position)
        self._pending_azimuth = 0.0
        self._pending_polar = 0.0
        self.update()

    @property
    def min_distance(self) -> float:
        return self.config.min_distance

    @property
    def max_distance(self) -> float:
        return self.config.max_distance

    @property
    def azimuth(self) -> float:
        return self.transform.azimuth

    @property
    def polar(self) -> float:
        return self.transform.polar

    @property
    def distance(self) -> float:
        return self.transform.distance

    @property
    def position(self) -> np.ndarray:
        return self.transform.position

    def set_position(self, position: np.ndarray) -> None:
        """Move the camera directly, the limits are applied on the next update."""
        self.transform = CameraTransform.from_position(position)

    def rotate_azimuth(self, angle: float) -> None:
        self._pending_azimuth += angle

    def rotate_polar(self, angle: float) -> None:
        self._pending_polar += angle

    @property
    def auto_rotation_angle(self) -> float:
        """Angle of the automatic orbit for one update, 60 updates per second assumed."""
        return 2 * pi / 60 / 60 * self.config.auto_rotate_speed

    def update(self) -> None:
        if self.auto_rotate:
            self.rotate_azimuth(-self.auto_rotation_angle)

        factor = self.config.damping_factor if self.config.enable_damping else 1.0
        transform = self.transform
        transform.azimuth += self._pending_azimuth * factor
        transform.polar += self._pending_polar * factor

        transform.polar = min(max(transform.polar, self.min_polar), self.max_polar)
        transform.polar = min(max(transform.polar, POLAR_EPS), pi - POLAR_EPS)
        transform.distance = min(max(transform.distance, self.min_distance), self.max_distance)

        if self.config.enable_damping:
            self._pending_azimuth *= 1 - factor
            self._pending_polar *= 1 - factor
        else:
            self._pending_azimuth = self._pending_polar = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(azimuth={self.azimuth:.3f}, polar={self.polar:.3f}, "
            f"distance={self.distance:.2f}, auto_rotate={self.auto_rotate})"
        )
