"""Tests for flycam.session.free_fly.

Opening the real window needs a display; those tests are marked
``@pytest.mark.display``. Event handling and rendering hooks run
headless.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pygame
import pytest
import yaml

from flycam.camera.camera import Camera
from flycam.config.schema import FlyCamConfig
from flycam.session import free_fly
from flycam.session.free_fly import FreeFlySession


def _key(key: int, down: bool = True) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN if down else pygame.KEYUP, key=key)


class TestFreeFlySession:
    """Tests for FreeFlySession."""

    def test_default_config(self) -> None:
        s = FreeFlySession()
        assert isinstance(s.config, FlyCamConfig)
        assert isinstance(s.camera, Camera)

    def test_custom_config(self) -> None:
        cfg = FlyCamConfig()
        cfg.controller.move_speed = 3.0
        s = FreeFlySession(config=cfg)
        assert s.config is cfg
        assert s.controller.move_speed == 3.0

    def test_not_running_initially(self) -> None:
        assert FreeFlySession().running is False

    def test_step_moves_forward(self) -> None:
        s = FreeFlySession()
        start = s.camera.position.copy()
        front = s.camera.get_front()
        s.step([_key(pygame.K_w)])
        np.testing.assert_array_almost_equal(
            s.camera.position,
            start + s.config.controller.move_speed * front,
        )
        assert s.frame_count == 1

    def test_held_key_keeps_moving(self) -> None:
        s = FreeFlySession()
        s.step([_key(pygame.K_w)])
        after_one = s.camera.position.copy()
        s.step([])
        assert not np.allclose(s.camera.position, after_one)

    def test_press_release_same_frame_is_still(self) -> None:
        s = FreeFlySession()
        start = s.camera.position.copy()
        s.step([_key(pygame.K_w), _key(pygame.K_w, down=False)])
        np.testing.assert_array_equal(s.camera.position, start)

    def test_mouse_and_unrelated_events(self) -> None:
        s = FreeFlySession()
        yaw = s.camera.yaw
        consumed = s.step([
            pygame.event.Event(
                pygame.MOUSEMOTION, pos=(0, 0), rel=(10, 0), buttons=(0, 0, 0),
            ),
            pygame.event.Event(pygame.KEYDOWN),
            pygame.event.Event(pygame.QUIT),
        ])
        assert consumed == 1
        assert s.camera.yaw != yaw
        assert s.controller.mouse_delta == (0.0, 0.0)

    def test_render_calls_renderer(self) -> None:
        calls = []
        s = FreeFlySession(renderer=lambda cam, vp: calls.append((cam, vp)))
        s.render()
        assert len(calls) == 1
        cam, vp = calls[0]
        assert cam is s.camera
        np.testing.assert_array_equal(
            vp, s.camera.get_view_projection_matrix(),
        )

    @pytest.mark.display
    def test_lifecycle(self) -> None:
        s = FreeFlySession()
        s.setup()
        s.step([])
        s.render()
        s.teardown()


class TestMain:
    """Tests for the CLI entry point."""

    def test_loads_config_and_runs(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        ran = []
        monkeypatch.setattr(
            free_fly.FreeFlySession, "run", lambda self: ran.append(self),
        )
        path = tmp_path / "cfg.yaml"
        path.write_text(yaml.dump({"controller": {"move_speed": 0.5}}))

        free_fly.main([str(path), "--log-level", "WARNING"])

        assert len(ran) == 1
        assert ran[0].controller.move_speed == 0.5

    def test_defaults_without_config(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        ran = []
        monkeypatch.setattr(
            free_fly.FreeFlySession, "run", lambda self: ran.append(self),
        )
        free_fly.main([])
        assert ran[0].config == FlyCamConfig()

    def test_missing_config_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            free_fly.main(["/nonexistent/flycam.yaml"])
