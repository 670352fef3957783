from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import Any

import cv2  # type: ignore[import-untyped]
import typer

from ..camera import CameraTransform
from ..cameras import CameraInfo
from ..config import Config
from ..drawing import draw_hud, format_camera
from ..errors import GestureOrbitError
from ..gestures import GestureMode
from ..models import GestureSample, LandmarkFrame
from ..pipeline import GesturePipeline
from ..recognizer import LandmarkSource
from .common import (
    DEFAULT_USER_CONFIG_PATH,
    app,
    determine_mirror_mode,
    determine_model_path,
    init_camera_capture,
    pick_camera,
    setup_logging,
)

WINDOW_NAME = "gesture-orbit"


def print_gesture_info(sample: GestureSample, transform: CameraTransform) -> None:
    """Print the gesture and the camera state on a single console line."""
    line = f"{sample.mode.label:<26} | {format_camera(transform)}"
    if sample.mode is GestureMode.ROTATE:
        line += f" | dx={sample.delta_x:+.3f} dy={sample.delta_y:+.3f}"
    elif sample.mode is GestureMode.ZOOM:
        line += f" | zoom={sample.zoom_factor:+.3f}"
    print(f"\r{line:<120}", end="")


class PreviewSession:
    """Keeps the last camera frame and landmarks between the inference and render ticks."""

    def __init__(self, cap: cv2.VideoCapture, source: LandmarkSource, mirror: bool, show_preview: bool) -> None:
        self.cap = cap
        self.source = source
        self.mirror = mirror
        self.show_preview = show_preview
        self.start_time = time.perf_counter()
        self.frame: Any = None
        self.landmarks: LandmarkFrame = None

    async def read_frame(self) -> tuple[Any, float] | None:
        ret, frame = await asyncio.to_thread(self.cap.read)
        if not ret:
            return None
        # Frames of a live capture may not have a usable position, fall back to the elapsed time
        timestamp = self.cap.get(cv2.CAP_PROP_POS_MSEC) / 1000 or time.perf_counter() - self.start_time
        return frame, timestamp

    def detect(self, frame: Any, timestamp: float) -> LandmarkFrame:
        if self.mirror:
            frame = cv2.flip(frame, 1)
        self.frame = frame
        # The frame is already flipped, the landmarks must not be mirrored again
        self.landmarks = self.source.detect_from_opencv(frame, timestamp)
        return self.landmarks

    def on_render(self, sample: GestureSample, transform: CameraTransform) -> bool:
        if not self.show_preview:
            print_gesture_info(sample, transform)
            return True

        if self.frame is not None:
            cv2.imshow(WINDOW_NAME, draw_hud(sample, transform, self.landmarks, self.frame.copy()))

        key = cv2.waitKey(1) & 0xFF
        if key == ord("q") or key == 27:  # 'q' or ESC
            return False
        try:
            if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                return False
        except cv2.error:
            # Window was closed
            return False
        return True


def run_gestures(camera_info: CameraInfo, show_preview: bool, config: Config, mirror: bool, desired_size: int) -> None:
    """Control the orbit camera with the hand seen by the selected camera."""
    cap = init_camera_capture(camera_info, desired_size)

    try:
        print("Loading hand landmark model...")
        with LandmarkSource(determine_model_path(config)) as source:
            print("Hand landmark model loaded successfully")
            if show_preview:
                cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
                print("Press 'q' or ESC to quit")

            session = PreviewSession(cap, source, mirror, show_preview)
            pipeline = GesturePipeline(config)
            asyncio.run(pipeline.run(session.read_frame, session.detect, on_render=session.on_render))
    finally:
        cap.release()
        if show_preview:
            cv2.destroyAllWindows()


@app.callback(invoke_without_command=True)
def run_gestures_cmd(
    ctx: typer.Context,
    camera: str | None = typer.Option(None, "--camera", "--cam", help="Camera name filter (case insensitive)"),
    preview: bool = typer.Option(True, "--preview/--no-preview", help="Show visual preview window"),
    mirror: bool | None = typer.Option(None, "--mirror/--no-mirror", help="Mirror the video and the hand"),
    size: int | None = typer.Option(None, "--size", "-s", help="Maximum dimension of the camera capture"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help=f"Path to config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Rotate (fist) and zoom (pinch) an orbit camera with your hand.

    The default config location is platform-specific and will be shown if the config file is not found.
    """
    setup_logging(verbose)

    # If a subcommand is being invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    config = Config.load(config_path)

    # Use config values as defaults, but CLI options take precedence
    final_camera = camera if camera is not None else config.cli.camera
    final_mirror = determine_mirror_mode(mirror, config)
    final_size = size if size is not None else config.cli.size

    selected = pick_camera(final_camera)
    if not selected:
        print("\nNo camera selected.")
        raise typer.Exit(1)

    print(f"\nSelected: {selected}")
    try:
        run_gestures(selected, show_preview=preview, config=config, mirror=final_mirror, desired_size=final_size)
    except GestureOrbitError as e:
        print(f"\nError: {e}", file=sys.stderr)
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        print("\nInterrupted")
