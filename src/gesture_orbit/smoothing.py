"""Smoothing utilities for gesture deltas."""

from dataclasses import replace
from typing import Protocol, TypeVar

from .models import GestureSample

# Weight of the new value when blended with the previous emitted one
SMOOTHING_BLEND_WEIGHT = 0.5

T = TypeVar("T")


class Smoother(Protocol[T]):
    """Protocol for smoother classes."""

    def update(self, value: T) -> T:
        """Update with new value and return smoothed result."""
        ...

    def reset(self) -> None:
        """Forget the previous values."""
        ...

    @property
    def raw(self) -> T | None:
        """Get the last raw value."""
        ...


class BlendSmoother:
    """Single pole low-pass filter: blends each new value with the previously emitted one.

    With the default weight of 0.5 the result is the mean of the new value and
    the previous result. The previous result starts at `default_value`, so the
    first result is already damped.
    """

    def __init__(self, weight: float = SMOOTHING_BLEND_WEIGHT, default_value: float = 0.0):
        if not 0.0 < weight <= 1.0:
            raise ValueError(f"Blend weight must be in (0, 1], got {weight}")
        self.weight = weight
        self.default_value = default_value
        self.value = default_value
        self._last_raw: float | None = None

    def update(self, value: float) -> float:
        """Update with new value and return smoothed result."""
        self._last_raw = value
        self.value = self.weight * value + (1 - self.weight) * self.value
        return self.value

    def reset(self) -> None:
        self.value = self.default_value
        self._last_raw = None

    @property
    def raw(self) -> float | None:
        """Get the last raw (unsmoothed) value."""
        return self._last_raw


class DeltaSmoother:
    """Smooths the rotation deltas of gesture samples.

    Only `delta_x` and `delta_y` are smoothed, the zoom factor, the mode and the
    hand detection flag are passed through so zooming reacts immediately.
    """

    def __init__(self, weight: float = SMOOTHING_BLEND_WEIGHT):
        self.smoothers: tuple[Smoother[float], Smoother[float]] = (BlendSmoother(weight), BlendSmoother(weight))
        self._last_raw: GestureSample | None = None

    def update(self, sample: GestureSample) -> GestureSample:
        """Update with new sample and return smoothed result."""
        self._last_raw = sample
        smoother_x, smoother_y = self.smoothers
        return replace(
            sample,
            delta_x=smoother_x.update(sample.delta_x),
            delta_y=smoother_y.update(sample.delta_y),
        )

    def reset(self) -> None:
        """Forget the previous emitted deltas, as for a new session."""
        for smoother in self.smoothers:
            smoother.reset()
        self._last_raw = None

    @property
    def raw(self) -> GestureSample | None:
        """Get the last raw (unsmoothed) sample."""
        return self._last_raw
