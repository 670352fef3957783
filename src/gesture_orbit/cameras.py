from __future__ import annotations

import glob
import logging
import re
from typing import NamedTuple

from linuxpy.video.device import (  # type: ignore[import-untyped]
    BufferType,
    Device,
    PixelFormat,
)

logger = logging.getLogger(__name__)


class CameraInfo(NamedTuple):
    device_index: int
    name: str
    height: int
    width: int
    format: PixelFormat

    def __str__(self) -> str:
        return f"[{self.device_index}] {self.name} - {self.width}x{self.height} @ {self.format.name}"

    def matches(self, filter_name: str | None) -> bool:
        """Case insensitive match of the camera name."""
        return not filter_name or filter_name.lower() in self.name.lower()


def inspect_camera(device_path: str) -> CameraInfo | None:
    """Get the info of a video capture device, None if it is not a usable color camera."""
    match = re.search(r"/dev/video(\d+)", device_path)
    if match is None:
        return None

    device = Device(device_path)
    device.open()
    try:
        if not any(f.type == BufferType.VIDEO_CAPTURE for f in device.info.formats):
            return None

        current_format = device.get_format(BufferType.VIDEO_CAPTURE)
        # Infrared cameras are useless for hand detection
        if current_format.pixel_format == PixelFormat.GREY:
            return None

        return CameraInfo(
            device_index=int(match.group(1)),
            name=device.info.card,
            height=current_format.height,
            width=current_format.width,
            format=current_format.pixel_format,
        )
    finally:
        device.close()


def list_cameras(filter_name: str | None = None) -> list[CameraInfo]:
    """List the available color cameras, optionally only the ones whose name contains `filter_name`."""
    cameras = []
    for device_path in sorted(glob.glob("/dev/video*")):
        try:
            camera = inspect_camera(device_path)
        except Exception as exc:
            logger.debug("Skipping %s: %s", device_path, exc)
            continue
        if camera is not None and camera.matches(filter_name):
            cameras.append(camera)
    return cameras
