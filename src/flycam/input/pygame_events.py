"""Translate ``pygame`` events into :mod:`flycam.input.events` values.

Keeps the camera controller free of any pygame dependency; the frame
loop runs every pygame event through :func:`translate_event` before
handing it to the controller.
"""

from __future__ import annotations

import logging

import pygame

from flycam.input.events import (
    InputEvent,
    KeyEvent,
    LineDelta,
    MouseMotion,
    MouseWheel,
    OtherEvent,
    PixelDelta,
)

logger = logging.getLogger(__name__)


def _keycode(event: pygame.event.Event) -> int | None:
    key = getattr(event, "key", None)
    if key is None or key == pygame.K_UNKNOWN:
        return None
    return int(key)


def _wheel_delta(event: pygame.event.Event) -> LineDelta | PixelDelta:
    x = float(getattr(event, "precise_x", getattr(event, "x", 0.0)))
    y = float(getattr(event, "precise_y", getattr(event, "y", 0.0)))
    if getattr(event, "flipped", False):
        x, y = -x, -y
    if getattr(event, "touch", False):
        return PixelDelta(x, y)
    return LineDelta(x, y)


def translate_event(event: pygame.event.Event) -> InputEvent:
    """Convert one pygame event into a camera input event.

    Args:
        event: Event as returned by ``pygame.event.get()``.

    Returns:
        The matching :data:`~flycam.input.events.InputEvent`. Events
        the camera does not use become :class:`OtherEvent`.
    """
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        keycode = _keycode(event)
        if keycode is None:
            logger.debug("Key event without key code: %s", event)
        return KeyEvent(keycode, event.type == pygame.KEYDOWN)
    if event.type == pygame.MOUSEMOTION:
        dx, dy = event.rel
        return MouseMotion(float(dx), float(dy))
    if event.type == pygame.MOUSEWHEEL:
        return MouseWheel(_wheel_delta(event))
    return OtherEvent(pygame.event.event_name(event.type))
