"""Shared test fixtures for the flycam test suite."""

from __future__ import annotations

import math

import numpy as np
import pytest

from flycam.camera.camera import Camera
from flycam.config.schema import FlyCamConfig
from flycam.input.events import MoveAction


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Auto-skip tests marked ``display`` by default."""
    skip_display = pytest.mark.skip(reason="requires a real display")
    for item in items:
        if "display" in item.keywords:
            item.add_marker(skip_display)


@pytest.fixture
def default_config() -> FlyCamConfig:
    """Return a FlyCamConfig with default values."""
    return FlyCamConfig()


@pytest.fixture
def key_bindings() -> dict[int, MoveAction]:
    """Toolkit-free key codes for the six movement actions."""
    return {
        10: MoveAction.FORWARD,
        11: MoveAction.BACKWARD,
        12: MoveAction.LEFT,
        13: MoveAction.RIGHT,
        14: MoveAction.UP,
        15: MoveAction.DOWN,
    }


@pytest.fixture
def camera_facing_x() -> Camera:
    """Camera at the origin looking down +X with +Y up."""
    return Camera(
        position=np.array([0.0, 0.0, 0.0]),
        world_up=np.array([0.0, 1.0, 0.0]),
        target=np.array([1.0, 0.0, 0.0]),
        aspect=1.0,
        fovy=math.radians(45.0),
        znear=0.1,
        zfar=100.0,
    )
