"""Pygame window creation for the free-fly camera."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def setup_pygame_window(
    width: int,
    height: int,
    caption: str = "flycam",
    grab_mouse: bool = True,
    opengl: bool = False,
) -> object:
    """Create a pygame display window for mouse-look camera control.

    With *grab_mouse* the cursor is hidden and confined to the window,
    which makes SDL report unbounded relative motion in
    ``MOUSEMOTION.rel``.

    Args:
        width: Window width in pixels.
        height: Window height in pixels.
        caption: Window title.
        grab_mouse: If True, hide and grab the cursor.
        opengl: If True, request an OpenGL-capable surface for an
            external renderer.

    Returns:
        The ``pygame.Surface`` returned by ``pygame.display.set_mode``.
    """
    import pygame
    from pygame.locals import DOUBLEBUF, OPENGL

    flags = 0
    if opengl:
        flags |= DOUBLEBUF | OPENGL

    if not pygame.get_init():
        pygame.init()

    screen = pygame.display.set_mode((width, height), flags)
    pygame.display.set_caption(caption)
    pygame.mouse.set_visible(not grab_mouse)
    pygame.event.set_grab(grab_mouse)
    logger.info(
        "Created %dx%d window [gl=%s, grab=%s]",
        width, height, opengl, grab_mouse,
    )
    return screen


def release_pygame_window() -> None:
    """Give the cursor back and close the pygame display."""
    import pygame

    if pygame.get_init():
        pygame.event.set_grab(False)
        pygame.mouse.set_visible(True)
    pygame.quit()
    logger.info("Closed window")
