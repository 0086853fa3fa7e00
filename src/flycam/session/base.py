"""Fixed-rate frame loop with per-frame input integration.

A frame is always processed in the same order::

    for event in pending_events:
        loop.handle_event(event)
    loop.integrate()          # exactly once
    loop.render()

Frame rate is fixed by a clock rather than measured, so subclasses
integrate with per-frame quantities and never see a time step.
"""

from __future__ import annotations

import abc
import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class FrameLoop(abc.ABC):
    """Abstract frame loop.

    Subclasses implement :meth:`setup`, :meth:`handle_event`,
    :meth:`integrate`, :meth:`render` and :meth:`teardown`;
    :meth:`step` and :meth:`run` fix the order they are called in.
    """

    _running: bool = False

    @abc.abstractmethod
    def setup(self) -> None:
        """Open the window and allocate resources."""

    @abc.abstractmethod
    def handle_event(self, event: object) -> bool:
        """Accept one input event; return True if it was used."""

    @abc.abstractmethod
    def integrate(self) -> None:
        """Apply everything handled since the previous frame."""

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the current frame."""

    @abc.abstractmethod
    def teardown(self) -> None:
        """Release resources and close windows."""

    @property
    def running(self) -> bool:
        """True between the start of :meth:`run` and :meth:`stop`."""
        return self._running

    def stop(self) -> None:
        """Finish the current frame and leave :meth:`run`."""
        self._running = False

    def step(self, events: Iterable[object]) -> int:
        """Deliver one frame's events, then integrate once.

        Args:
            events: Every event received since the previous frame.

        Returns:
            Number of events :meth:`handle_event` used.
        """
        consumed = sum(1 for event in events if self.handle_event(event))
        self.integrate()
        return consumed

    def run(self, target_fps: int = 60) -> None:
        """Run frames until the window closes, Escape is hit or
        :meth:`stop` is called.

        Args:
            target_fps: Fixed frame rate for the clock tick.
        """
        import pygame

        self.setup()
        clock = pygame.time.Clock()
        self._running = True
        frames = 0
        try:
            while self._running:
                events = pygame.event.get()
                if any(_is_quit(event) for event in events):
                    self.stop()
                    break
                self.step(events)
                self.render()
                pygame.display.flip()
                clock.tick(target_fps)
                frames += 1
        finally:
            self._running = False
            logger.info("Frame loop stopped after %d frames", frames)
            self.teardown()


def _is_quit(event: object) -> bool:
    import pygame

    if event.type == pygame.QUIT:
        return True
    return (
        event.type == pygame.KEYDOWN
        and getattr(event, "key", None) == pygame.K_ESCAPE
    )
