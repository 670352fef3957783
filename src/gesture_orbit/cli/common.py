from __future__ import annotations

import logging
import os
import sys

import cv2  # type: ignore[import-untyped]
import typer

from ..cameras import CameraInfo, list_cameras
from ..config import Config
from ..errors import CaptureError
from ..recognizer import DEFAULT_MODEL_PATH

app = typer.Typer()

DEFAULT_USER_CONFIG_PATH = Config.get_user_path()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send the `gesture_orbit` logs to stderr."""
    logger = logging.getLogger("gesture_orbit")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Configure handler if logger doesn't have one
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False  # Don't propagate to root logger


def pick_camera(filter_name: str | None = None) -> CameraInfo | None:
    """List cameras and let user pick one. Returns selected CameraInfo or None.

    Args:
        filter_name: Optional string to filter cameras by name (case insensitive)
    """
    cameras = list_cameras(filter_name)

    if not cameras:
        if filter_name:
            print(f"No cameras found matching '{filter_name}'", file=sys.stderr)
        else:
            print("No cameras found!", file=sys.stderr)
        return None

    if len(cameras) == 1:
        selected = cameras[0]
        print(f"Auto-selected camera: {selected}")
        return selected

    print(f"Cameras matching '{filter_name}':" if filter_name else "Available cameras:")
    cam_dict = {}
    for cam in cameras:
        print(f"  {cam}")
        cam_dict[cam.device_index] = cam

    valid_indices = ", ".join(map(str, sorted(cam_dict)))

    while True:
        choice = input(f"\nSelect camera ({valid_indices} or q to quit): ")
        if choice.lower() == "q":
            return None
        try:
            return cam_dict[int(choice)]
        except (ValueError, KeyError):
            print(f"Invalid choice. Please enter one of: {valid_indices} or 'q'", file=sys.stderr)


def init_camera_capture(camera_info: CameraInfo, desired_size: int) -> cv2.VideoCapture:
    """Open the camera with its largest dimension close to `desired_size`.

    Raises:
        CaptureError: If the camera cannot be opened (missing permission, used by another process...)
    """
    cap = cv2.VideoCapture(camera_info.device_index)

    if not cap.isOpened():
        raise CaptureError(f"Camera permission denied or unavailable: {camera_info}")

    # Calculate dimensions based on desired_size while maintaining aspect ratio
    aspect_ratio = camera_info.width / camera_info.height
    if camera_info.width > camera_info.height:
        width = desired_size
        height = int(desired_size / aspect_ratio)
    else:
        height = desired_size
        width = int(desired_size * aspect_ratio)

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
    cap.set(cv2.CAP_PROP_FPS, 30)

    cap_fps = cap.get(cv2.CAP_PROP_FPS)
    height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
    width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))

    print(f"Camera {camera_info.name} opened successfully at {width}x{height} with FPS: {cap_fps:.2f}")

    return cap


def determine_mirror_mode(mirror: bool | None, config: Config) -> bool:
    """Determine whether to use mirror mode.

    Priority order:
    1. CLI arguments (--mirror / --no-mirror)
    2. Environment variable (GESTURE_ORBIT_MIRROR)
    3. Config file (config.cli.mirror)
    """
    if mirror is not None:
        use_mirror = mirror
    else:
        env_mirror = os.getenv("GESTURE_ORBIT_MIRROR", "").strip().lower()
        if env_mirror in ("false", "0", "no"):
            use_mirror = False
        elif env_mirror in ("true", "1", "yes"):
            use_mirror = True
        else:
            use_mirror = config.cli.mirror

    if use_mirror:
        print("Mirror mode enabled (video output will be horizontally flipped)")
    else:
        print("Mirror mode disabled")

    return use_mirror


def determine_model_path(config: Config) -> str:
    """Model path from the GESTURE_ORBIT_MODEL_PATH environment variable, then the config."""
    return os.getenv("GESTURE_ORBIT_MODEL_PATH", "").strip() or config.cli.model_path or DEFAULT_MODEL_PATH
