"""Errors that end a session.

Nothing on the per-frame path raises: missing or malformed hands degrade to
the ``NONE`` gesture instead.
"""


class GestureOrbitError(Exception):
    """Base class for all errors raised by gesture-orbit."""


class DetectorInitError(GestureOrbitError):
    """The hand landmark model could not be downloaded or loaded."""


class CaptureError(GestureOrbitError):
    """The video capture device could not be opened."""
