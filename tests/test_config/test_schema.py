"""Tests for flycam.config.schema."""

from __future__ import annotations

import dataclasses

from flycam.config.schema import (
    CameraConfig,
    ControllerConfig,
    DisplayConfig,
    FlyCamConfig,
)


class TestCameraConfig:
    """Tests for CameraConfig."""

    def test_defaults(self) -> None:
        cfg = CameraConfig()
        assert cfg.world_up == (0.0, 1.0, 0.0)
        assert cfg.fovy_deg == 45.0
        assert cfg.znear == 0.1
        assert cfg.zfar == 100.0

    def test_target_differs_from_position(self) -> None:
        cfg = CameraConfig()
        assert cfg.target != cfg.position


class TestControllerConfig:
    """Tests for ControllerConfig."""

    def test_defaults(self) -> None:
        cfg = ControllerConfig()
        assert cfg.move_speed > 0
        assert cfg.mouse_sensitivity > 0
        assert cfg.zoom_sensitivity > 0


class TestDisplayConfig:
    """Tests for DisplayConfig."""

    def test_defaults(self) -> None:
        cfg = DisplayConfig()
        assert (cfg.width, cfg.height) == (1280, 720)
        assert cfg.target_fps == 60
        assert cfg.grab_mouse is True
        assert cfg.opengl is False


class TestFlyCamConfig:
    """Tests for the top-level FlyCamConfig."""

    def test_sections(self, default_config: FlyCamConfig) -> None:
        names = [f.name for f in dataclasses.fields(default_config)]
        assert names == ["camera", "controller", "display"]

    def test_sections_not_shared(self) -> None:
        a = FlyCamConfig()
        b = FlyCamConfig()
        a.controller.move_speed = 9.0
        assert b.controller.move_speed != 9.0
