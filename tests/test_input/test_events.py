"""Tests for flycam.input.events."""

from __future__ import annotations

import dataclasses

import pytest

from flycam.input.events import (
    KeyEvent,
    LineDelta,
    MouseMotion,
    MouseWheel,
    MoveAction,
    OtherEvent,
    PixelDelta,
)


class TestMoveAction:
    """Tests for MoveAction."""

    def test_six_actions(self) -> None:
        assert len(MoveAction) == 6


class TestEventValues:
    """Event dataclasses are immutable values."""

    @pytest.mark.parametrize("event", [
        KeyEvent(1, True),
        MouseMotion(1.0, 2.0),
        MouseWheel(LineDelta(0.0, 1.0)),
        OtherEvent("Quit"),
    ])
    def test_frozen(self, event) -> None:
        field = dataclasses.fields(event)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(event, field, None)

    def test_line_and_pixel_deltas_differ(self) -> None:
        assert MouseWheel(LineDelta(0, 1)) != MouseWheel(PixelDelta(0, 1))

    def test_other_event_default_kind(self) -> None:
        assert OtherEvent().kind == "unknown"
