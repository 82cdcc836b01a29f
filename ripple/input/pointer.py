# ripple/input/pointer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from ripple.types import Vector2

FRAME_INTERVAL = 1.0 / 60.0


@dataclass(frozen=True, slots=True)
class InputState:
    """Pointer snapshot handed to the wave scheduler once per tick."""

    cursor: Vector2
    activating: bool


class PointerTracker:
    """
    Turns mouse and touch motion into a canvas-space cursor plus an
    "activating" flag that stays on while motion keeps arriving and
    drops one frame after the last motion event.
    """

    def __init__(self, debounce: float = FRAME_INTERVAL):
        self.debounce = debounce

        self._width = 0
        self._height = 0
        self._pixel_ratio = 1.0

        self._position = Vector2.zero()
        self._last_motion: Optional[float] = None

    def resize(self, width: int, height: int, pixel_ratio: float = 1.0) -> None:
        self._width = width
        self._height = height
        self._pixel_ratio = pixel_ratio

    def move(self, x: float, y: float, now: float) -> bool:
        """
        Record a pointer position in window coordinates (top-left origin).
        Points outside the canvas are ignored; returns whether it was kept.
        """
        if not (0.0 < x < self._width and 0.0 < y < self._height):
            return False

        self._position = Vector2(x * self._pixel_ratio, y * self._pixel_ratio)
        self._last_motion = now
        return True

    def process_event(self, event: pygame.event.Event, now: float) -> None:
        """Feed Pygame events here to update state."""
        if event.type == pygame.MOUSEMOTION:
            self.move(event.pos[0], event.pos[1], now)

        elif event.type == pygame.FINGERMOTION:
            # Touch coordinates arrive normalized to 0-1
            self.move(event.x * self._width, event.y * self._height, now)

    def sample(self, now: float) -> InputState:
        activating = (
            self._last_motion is not None
            and now - self._last_motion < self.debounce
        )
        return InputState(cursor=self._position, activating=activating)

    @property
    def position(self) -> Vector2:
        return self._position

    def reset(self) -> None:
        """Forget the pointer; no activation survives a reset."""
        self._position = Vector2.zero()
        self._last_motion = None
