"""Toolkit-independent input events consumed by the camera controller.

The event set is closed: every value handed to
:meth:`flycam.camera.controller.CameraController.process_event` is
one of :class:`KeyEvent`, :class:`MouseMotion`, :class:`MouseWheel` or
:class:`OtherEvent`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class MoveAction(enum.Enum):
    """The six logical movement keys of the free-fly camera."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release.

    Attributes:
        keycode: Physical key code, or ``None`` when the windowing layer
            could not resolve one.
        pressed: ``True`` for press, ``False`` for release.
    """

    keycode: int | None
    pressed: bool


@dataclass(frozen=True)
class MouseMotion:
    """Raw relative mouse motion in device units."""

    dx: float
    dy: float


@dataclass(frozen=True)
class LineDelta:
    """Wheel scroll measured in lines (notched wheels)."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Wheel scroll measured in pixels (touchpads, smooth scrolling)."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseWheel:
    """A mouse wheel event carrying either a line or a pixel delta."""

    delta: LineDelta | PixelDelta


@dataclass(frozen=True)
class OtherEvent:
    """Any event the camera has no use for.

    Attributes:
        kind: Name of the originating event type, for logging.
    """

    kind: str = "unknown"


InputEvent = Union[KeyEvent, MouseMotion, MouseWheel, OtherEvent]
