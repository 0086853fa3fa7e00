"""Interactive free-fly camera session.

Opens a pygame window, feeds every input event to a
:class:`~flycam.camera.controller.CameraController`, integrates the
camera once per frame and hands the resulting view-projection matrix
to a renderer callback. Drawing is left to that callback.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

import numpy as np

from flycam.camera.camera import Camera
from flycam.camera.controller import CameraController
from flycam.config.schema import FlyCamConfig
from flycam.input.pygame_events import translate_event
from flycam.session.base import FrameLoop

logger = logging.getLogger(__name__)

Renderer = Callable[[Camera, np.ndarray], None]


class FreeFlySession(FrameLoop):
    """Keyboard and mouse driven camera in a pygame window.

    Args:
        config: Full configuration dataclass.
        renderer: Called once per frame with the camera and its
            view-projection matrix. Defaults to showing the camera
            pose in the window title.
    """

    def __init__(
        self,
        config: FlyCamConfig | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        if config is None:
            config = FlyCamConfig()
        self.config = config
        self.camera = Camera.from_config(config.camera)
        self.controller = CameraController.from_config(config.controller)
        self.renderer: Renderer = renderer or self._show_pose
        self.frame_count = 0

    def setup(self) -> None:
        """Create the window and grab the mouse."""
        from flycam.display.window import setup_pygame_window

        disp = self.config.display
        setup_pygame_window(
            disp.width, disp.height,
            caption=disp.caption,
            grab_mouse=disp.grab_mouse,
            opengl=disp.opengl,
        )
        logger.info("FreeFlySession ready: %r", self.camera)

    def handle_event(self, event: object) -> bool:
        """Translate a pygame event and feed it to the controller."""
        return self.controller.process_event(translate_event(event))

    def integrate(self) -> None:
        """Move the camera by this frame's accumulated input."""
        self.controller.update_camera(self.camera)
        self.frame_count += 1
        logger.debug("frame %d: %r", self.frame_count, self.camera)

    def render(self) -> None:
        """Pass the current view-projection matrix to the renderer."""
        self.renderer(self.camera, self.camera.get_view_projection_matrix())

    def teardown(self) -> None:
        """Release the mouse and close the window."""
        from flycam.display.window import release_pygame_window

        logger.info("FreeFlySession.teardown() at %r", self.camera)
        release_pygame_window()

    def _show_pose(self, camera: Camera, view_projection: np.ndarray) -> None:
        import pygame

        caption = self.config.display.caption
        pygame.display.set_caption(f"{caption} | {camera!r}")

    def run(self, target_fps: int | None = None) -> None:
        """Run at the configured frame rate unless *target_fps* is given."""
        if target_fps is None:
            target_fps = self.config.display.target_fps
        super().run(target_fps)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the interactive free-fly camera."""
    from flycam.config.loader import load_config

    parser = argparse.ArgumentParser(
        prog="flycam",
        description="Fly a camera with WASD, Space / Left-Ctrl, mouse "
                    "look and wheel zoom. Escape quits.",
    )
    parser.add_argument(
        "config", nargs="?", default=None,
        help="YAML configuration file (defaults are used if omitted)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    session = FreeFlySession(config=config)
    session.run()
