"""Fixed physical-key layout for the six camera movement actions."""

from __future__ import annotations

from flycam.input.events import MoveAction


def default_key_bindings() -> dict[int, MoveAction]:
    """Return the WASD + Space / Left-Ctrl layout as pygame key codes.

    Returns:
        Mapping from pygame key constant to :class:`MoveAction`.
    """
    import pygame

    return {
        pygame.K_w: MoveAction.FORWARD,
        pygame.K_s: MoveAction.BACKWARD,
        pygame.K_a: MoveAction.LEFT,
        pygame.K_d: MoveAction.RIGHT,
        pygame.K_SPACE: MoveAction.UP,
        pygame.K_LCTRL: MoveAction.DOWN,
    }
