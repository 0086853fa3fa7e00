"""Keyboard / mouse free-fly camera controller.

Input events are folded into held-key flags and motion accumulators
as they arrive; :meth:`CameraController.update_camera` applies them to
a :class:`~flycam.camera.camera.Camera` once per frame and drains the
accumulators.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING, Mapping

import numpy as np

from flycam.camera.camera import Camera
from flycam.input.events import (
    InputEvent,
    KeyEvent,
    LineDelta,
    MouseMotion,
    MouseWheel,
    MoveAction,
)
from flycam.math_utils.transforms import clamp, wrap_angle

if TYPE_CHECKING:
    from flycam.config.schema import ControllerConfig

logger = logging.getLogger(__name__)

PITCH_LIMIT = math.radians(89.0)
FOVY_MIN = math.radians(1.0)
FOVY_MAX = math.radians(120.0)

# Below this length the horizontal move vector is left unnormalized.
_MIN_MOVE_LENGTH = 0.001


class CameraController:
    """Free-fly controller: WASD to move, Space / Left-Ctrl to rise and
    sink, mouse to look, wheel to zoom.

    Movement is applied per call to :meth:`update_camera`, not per
    second, so call it exactly once per fixed-rate frame.

    Args:
        move_speed: World units moved per frame while a key is held.
        mouse_sensitivity: Radians of rotation per unit of mouse motion.
        zoom_sensitivity: Radians of field of view per wheel line.
        key_bindings: Key code to action mapping. Defaults to the
            pygame WASD layout from
            :func:`flycam.input.keymap.default_key_bindings`.
    """

    def __init__(
        self,
        move_speed: float,
        mouse_sensitivity: float,
        zoom_sensitivity: float,
        key_bindings: Mapping[int, MoveAction] | None = None,
    ) -> None:
        if key_bindings is None:
            from flycam.input.keymap import default_key_bindings

            key_bindings = default_key_bindings()

        self.move_speed = move_speed
        self.mouse_sensitivity = mouse_sensitivity
        self.zoom_sensitivity = zoom_sensitivity
        self.key_bindings: dict[int, MoveAction] = dict(key_bindings)

        self.is_forward_pressed: bool = False
        self.is_backward_pressed: bool = False
        self.is_left_pressed: bool = False
        self.is_right_pressed: bool = False
        self.is_up_pressed: bool = False
        self.is_down_pressed: bool = False

        self.mouse_delta: tuple[float, float] = (0.0, 0.0)
        self.mouse_scroll_delta: float = 0.0

        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: ControllerConfig,
        key_bindings: Mapping[int, MoveAction] | None = None,
    ) -> CameraController:
        """Build a controller from the ``controller`` config section."""
        return cls(
            move_speed=config.move_speed,
            mouse_sensitivity=config.mouse_sensitivity,
            zoom_sensitivity=config.zoom_sensitivity,
            key_bindings=key_bindings,
        )

    # ---------------------------------------------------------------- input

    def process_event(self, event: InputEvent) -> bool:
        """Fold one input event into the controller state.

        Args:
            event: Any :data:`~flycam.input.events.InputEvent`.

        Returns:
            ``True`` if the event was consumed, ``False`` if it is not
            a camera input (unbound or unresolved key, pixel-delta
            wheel, any other event).
        """
        with self._lock:
            if isinstance(event, KeyEvent):
                return self._process_key(event)
            if isinstance(event, MouseMotion):
                dx, dy = self.mouse_delta
                self.mouse_delta = (dx + event.dx, dy + event.dy)
                return True
            if isinstance(event, MouseWheel):
                if isinstance(event.delta, LineDelta):
                    self.mouse_scroll_delta += event.delta.y
                    return True
                return False
            return False

    def _process_key(self, event: KeyEvent) -> bool:
        if event.keycode is None:
            logger.debug("Ignoring key event without a key code")
            return False
        action = self.key_bindings.get(event.keycode)
        if action is None:
            return False
        self._set_action(action, event.pressed)
        return True

    def _set_action(self, action: MoveAction, pressed: bool) -> None:
        if action is MoveAction.FORWARD:
            self.is_forward_pressed = pressed
        elif action is MoveAction.BACKWARD:
            self.is_backward_pressed = pressed
        elif action is MoveAction.LEFT:
            self.is_left_pressed = pressed
        elif action is MoveAction.RIGHT:
            self.is_right_pressed = pressed
        elif action is MoveAction.UP:
            self.is_up_pressed = pressed
        elif action is MoveAction.DOWN:
            self.is_down_pressed = pressed

    def pressed_actions(self) -> frozenset[MoveAction]:
        """Movement actions whose key is currently held."""
        flags = {
            MoveAction.FORWARD: self.is_forward_pressed,
            MoveAction.BACKWARD: self.is_backward_pressed,
            MoveAction.LEFT: self.is_left_pressed,
            MoveAction.RIGHT: self.is_right_pressed,
            MoveAction.UP: self.is_up_pressed,
            MoveAction.DOWN: self.is_down_pressed,
        }
        return frozenset(a for a, held in flags.items() if held)

    # ---------------------------------------------------------------- update

    def update_camera(self, camera: Camera) -> None:
        """Apply this frame's input to *camera* and reset accumulators.

        Args:
            camera: The camera to move, turn and zoom in place.
        """
        with self._lock:
            self._translate(camera)
            self._rotate(camera)
            self._zoom(camera)

    def _translate(self, camera: Camera) -> None:
        forward = camera.get_front()
        up = camera.world_up
        right = np.cross(forward, up)

        move = np.zeros(3)
        if self.is_forward_pressed:
            move += forward
        if self.is_backward_pressed:
            move -= forward
        if self.is_right_pressed:
            move += right
        if self.is_left_pressed:
            move -= right

        length = np.linalg.norm(move)
        if length > _MIN_MOVE_LENGTH:
            move /= length

        # Vertical motion is added after normalization and is not capped.
        if self.is_up_pressed:
            move += up
        if self.is_down_pressed:
            move -= up

        camera.position = camera.position + self.move_speed * move

    def _rotate(self, camera: Camera) -> None:
        dx, dy = self.mouse_delta
        camera.yaw = wrap_angle(camera.yaw + self.mouse_sensitivity * dx)
        # Screen Y grows downward: moving the mouse up pitches up.
        camera.pitch = clamp(
            camera.pitch - self.mouse_sensitivity * dy,
            -PITCH_LIMIT, PITCH_LIMIT,
        )
        self.mouse_delta = (0.0, 0.0)

    def _zoom(self, camera: Camera) -> None:
        camera.fovy = clamp(
            camera.fovy + self.zoom_sensitivity * self.mouse_scroll_delta,
            FOVY_MIN, FOVY_MAX,
        )
        self.mouse_scroll_delta = 0.0
