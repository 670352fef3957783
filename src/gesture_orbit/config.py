import logging
from pathlib import Path

import platformdirs
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

APP_NAME = "gesture-orbit"


class GesturesConfig(BaseModel):
    pinch_threshold: float = Field(
        0.05, description="Max thumb tip to index tip distance (normalized) for a pinch"
    )
    fist_radius: float = Field(
        0.2, description="Max fingertip to wrist distance (normalized) for every finger of a fist"
    )
    zoom_gain: float = Field(2.0, description="Multiplier applied to the wrist vertical motion while pinching")


class SmoothingConfig(BaseModel):
    delta_weight: float = Field(
        0.5, description="Weight of the new rotation delta when blended with the previous emitted one (0-1)"
    )


class CameraConfig(BaseModel):
    rotate_sensitivity: float = Field(2.5, description="Rotation sensitivity applied to hand deltas")
    rotate_scale: float = Field(0.001, description="Scale from normalized hand deltas to radians")
    zoom_sensitivity: float = Field(0.02, description="Distance travelled per unit of zoom factor")
    inner_guard: float = Field(5.0, description="Distance under which zooming in is refused")
    outer_guard: float = Field(25.0, description="Distance over which zooming out is refused")
    min_distance: float = Field(4.0, description="Hard minimum distance enforced by the orbit controls")
    max_distance: float = Field(30.0, description="Hard maximum distance enforced by the orbit controls")
    auto_rotate_speed: float = Field(
        0.5, description="Automatic orbit speed when no hand is visible (2.0 is one turn in 30s at 60fps)"
    )
    enable_damping: bool = Field(False, description="Spread angular changes over several render ticks")
    damping_factor: float = Field(0.1, description="Fraction of the pending angular change applied per tick")
    initial_position: tuple[float, float, float] = Field(
        (10.0, 6.0, 10.0), description="Initial camera position, looking at the origin"
    )


class CLIConfig(BaseModel):
    """Configuration for CLI settings."""

    camera: str | None = Field(None, description="Camera name filter for auto-selection")
    mirror: bool = Field(True, description="Mirror the video output and the hand horizontally")
    size: int = Field(640, description="Maximum dimension for camera capture resolution")
    render_fps: float = Field(60.0, description="Rate of the camera render ticks")
    model_path: str | None = Field(None, description="Path of the hand landmarker model file")


class Config(BaseModel):
    gestures: GesturesConfig = Field(
        default_factory=lambda: GesturesConfig(), description="Gesture classification thresholds"
    )
    smoothing: SmoothingConfig = Field(
        default_factory=lambda: SmoothingConfig(), description="Smoothing of the rotation deltas"
    )
    camera: CameraConfig = Field(default_factory=lambda: CameraConfig(), description="Orbit camera configuration")
    cli: CLIConfig = Field(default_factory=lambda: CLIConfig(), description="CLI configuration")

    @classmethod
    def get_user_path(cls) -> Path:
        config_dir = Path(platformdirs.user_config_dir(APP_NAME))
        return config_dir / "config.json"

    @classmethod
    def validate_path(cls, path: Path | str | None) -> Path:
        if path is None:
            path = cls.get_user_path()
        elif isinstance(path, str):
            path = Path(path)

        return path.resolve()

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        path = cls.validate_path(path)

        if not path.exists():
            logger.info("Config file %s does not exist, using default config", path)
            return cls()

        if not path.is_file():
            raise ValueError(f"Path {path} exists and is not a file.")

        try:
            return cls.model_validate_json(path.read_text())
        except Exception as e:
            logger.error("Error loading config from %s: %s", path, e)
            logger.error("Using default config")
            return cls()

    def save(self, path: Path | str | None = None) -> Path:
        path = self.validate_path(path)

        if path.exists() and not path.is_file():
            raise ValueError(f"Path {path} exists and is not a file.")

        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.write_text(self.model_dump_json(indent=2))
        except OSError as e:
            logger.error("Error saving config to %s: %s", path, e)
            raise
        return path
