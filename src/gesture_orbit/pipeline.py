"""Glue between the detector, the gesture classification and the camera.

Two ticks run on the same event loop without being synchronized: the
inference tick handles each new video frame (detector, classifier, smoother)
and the render tick moves the camera at a fixed rate from the most recent
gesture. They only share a `LatestValue` slot: the render tick reads whatever
was written last, possibly several times, and samples it did not see are
simply lost.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, TypeAlias, TypeVar

from .camera import CameraTransform, OrbitControls
from .classifier import GestureClassifier
from .config import Config
from .mapper import CameraMapper
from .models import GestureSample
from .smoothing import DeltaSmoother, Smoother

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Gives the landmarks of the current frame (None or malformed when there is no hand)
DetectFunction: TypeAlias = Callable[[], Sequence[Any] | None]
# Gives the next (frame, capture timestamp in seconds), or None when the stream is over
ReadFrameFunction: TypeAlias = Callable[[], Awaitable[tuple[Any, float] | None]]
# Called after each render tick, returning False stops the pipeline
RenderCallback: TypeAlias = Callable[[GestureSample, CameraTransform], bool | None]


class LatestValue(Generic[T]):
    """Single-slot channel: writing replaces the value, reading never consumes nor waits."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self.version = 0

    def set(self, value: T) -> None:
        self._value = value
        self.version += 1

    def get(self) -> T:
        return self._value


class GesturePipeline:
    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.classifier = GestureClassifier(self.config.gestures)
        self.smoother: Smoother[GestureSample] = DeltaSmoother(self.config.smoothing.delta_weight)
        self.controls = OrbitControls(self.config.camera)
        self.mapper = CameraMapper(self.controls, self.config.camera)
        self.latest = LatestValue(GestureSample.none())
        self.last_frame_timestamp: float | None = None

    def reset(self) -> None:
        """Back to the hand-absent baseline, as for a new session. The camera is kept."""
        self.classifier.reset()
        self.smoother.reset()
        self.latest.set(GestureSample.none())
        self.last_frame_timestamp = None

    def is_new_frame(self, timestamp: float) -> bool:
        return timestamp != self.last_frame_timestamp

    def inference_tick(self, timestamp: float, detect: DetectFunction) -> GestureSample | None:
        """Classify the frame captured at `timestamp`, unless it was already processed.

        Returns the smoothed sample, or None if the frame was skipped. Any error
        while detecting or classifying counts as a frame without hand.
        """
        if not self.is_new_frame(timestamp):
            return None
        self.last_frame_timestamp = timestamp

        try:
            raw = self.classifier.update(detect())
        except Exception:
            logger.exception("Gesture detection failed, considering no hand")
            self.classifier.reset()
            raw = GestureSample.none()

        sample = self.smoother.update(raw)
        self.latest.set(sample)
        return sample

    def render_tick(self) -> tuple[GestureSample, CameraTransform]:
        """Move the camera according to the most recent gesture."""
        sample = self.latest.get()
        return sample, self.mapper.tick(sample)

    async def run_inference(
        self,
        read_frame: ReadFrameFunction,
        detect: Callable[[Any, float], Sequence[Any] | None],
        stop: asyncio.Event,
    ) -> None:
        """Handle frames until the stream ends or `stop` is set."""
        try:
            while not stop.is_set():
                item = await read_frame()
                if item is None:
                    logger.info("End of video stream")
                    break
                frame, timestamp = item
                self.inference_tick(timestamp, lambda: detect(frame, timestamp))
                # Let the render tick run between frames
                await asyncio.sleep(0)
        finally:
            stop.set()

    async def run_render(self, fps: float, stop: asyncio.Event, on_render: RenderCallback | None = None) -> None:
        """Run render ticks at `fps` until `stop` is set. Late ticks are not caught up."""
        loop = asyncio.get_running_loop()
        interval = 1 / fps
        next_tick = loop.time()
        try:
            while not stop.is_set():
                sample, transform = self.render_tick()
                if on_render is not None and on_render(sample, transform) is False:
                    break
                next_tick = max(next_tick + interval, loop.time())
                await asyncio.sleep(next_tick - loop.time())
        finally:
            stop.set()

    async def run(
        self,
        read_frame: ReadFrameFunction,
        detect: Callable[[Any, float], Sequence[Any] | None],
        fps: float | None = None,
        on_render: RenderCallback | None = None,
    ) -> None:
        """Run both ticks until one of them stops, then cancel the other one."""
        stop = asyncio.Event()
        tasks = [
            asyncio.create_task(self.run_inference(read_frame, detect, stop), name="inference"),
            asyncio.create_task(self.run_render(fps or self.config.cli.render_fps, stop, on_render), name="render"),
        ]
        try:
            await stop.wait()
        finally:
            for task in tasks:
                task.cancel()
            results = await asyncio.gather(*tasks, return_exceptions=True)
        for task, result in zip(tasks, results, strict=True):
            if isinstance(result, Exception):
                logger.error("Task %s failed: %s", task.get_name(), result)
                raise result
