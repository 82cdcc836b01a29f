# ripple/waves/scheduler.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ripple.types import Vector2

TAU = math.pi * 2.0

POOL_SIZE = 64

ALPHA_FLOOR = 0.002
TRIGGER_ALPHA = 0.192
TRIGGER_SCALE = 0.256

ROTATION_STEP = 0.02
SCALE_DECAY = 0.982
SCALE_GROWTH = 0.108
ALPHA_DECAY = 0.96


@dataclass(slots=True)
class WavePlane:
    """One recycled slot of the wave pool."""

    rotation: float = 0.0
    translation: Tuple[float, float] = (0.0, 0.0)
    scale: float = TRIGGER_SCALE
    alpha: float = ALPHA_FLOOR
    active: bool = False

    def trigger(self, rotation: float) -> None:
        self.rotation = rotation
        self.scale = TRIGGER_SCALE
        self.alpha = TRIGGER_ALPHA
        self.active = True

    def decay(self) -> None:
        self.rotation += ROTATION_STEP
        # Converges towards SCALE_GROWTH / (1 - SCALE_DECAY) = 6.0
        self.scale = self.scale * SCALE_DECAY + SCALE_GROWTH
        self.alpha = max(self.alpha * ALPHA_DECAY, ALPHA_FLOOR)

        if self.alpha <= ALPHA_FLOOR:
            self.active = False


@dataclass(frozen=True, slots=True)
class WaveInstance:
    """Per-draw uniforms of a visible wave plane."""

    index: int
    translation: Tuple[float, float]
    rotation: float
    scale: float
    alpha: float


class WaveScheduler:
    """
    Fixed pool of wave planes cycled through trigger and decay.

    Each tick with pointer activity re-triggers the next slot of the ring,
    the newest plane follows the pointer while older ones stay where they
    were triggered and fade out, leaving a trail.
    """

    def __init__(
        self,
        capacity: int = POOL_SIZE,
        rng: Optional[np.random.Generator] = None,
    ):
        if capacity <= 0:
            raise ValueError(f"Wave pool needs at least one plane, got {capacity}")

        self._rng = rng if rng is not None else np.random.default_rng()
        self._planes: List[WavePlane] = [
            WavePlane(rotation=self._random_angle()) for _ in range(capacity)
        ]
        # The first trigger advances onto slot 0.
        self._cursor = capacity - 1

    @property
    def capacity(self) -> int:
        return len(self._planes)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def planes(self) -> Sequence[WavePlane]:
        return tuple(self._planes)

    @property
    def active_count(self) -> int:
        return sum(1 for plane in self._planes if plane.active)

    def tick(self, cursor: Vector2, activating: bool) -> List[WaveInstance]:
        """
        Advance every plane by one frame and return the ones to draw,
        in pool order. Any amount of pointer motion within a tick triggers
        at most one plane.
        """
        if activating:
            self.trigger()
        return self.advance(cursor)

    def trigger(self) -> WavePlane:
        """Move to the next slot of the ring and restart its plane."""
        self._cursor = (self._cursor + 1) % len(self._planes)
        plane = self._planes[self._cursor]
        plane.trigger(self._random_angle())
        return plane

    def advance(self, cursor: Vector2) -> List[WaveInstance]:
        """Decay every active plane once; dormant planes are skipped."""
        instances: List[WaveInstance] = []

        for index, plane in enumerate(self._planes):
            if not plane.active:
                continue

            # Only the newest plane tracks the live pointer
            if index == self._cursor:
                plane.translation = (cursor.x, cursor.y)

            plane.decay()

            instances.append(
                WaveInstance(
                    index=index,
                    translation=plane.translation,
                    rotation=plane.rotation,
                    scale=plane.scale,
                    alpha=plane.alpha,
                )
            )

        return instances

    def reset(self) -> None:
        """Return every plane to dormant."""
        for plane in self._planes:
            plane.alpha = ALPHA_FLOOR
            plane.scale = TRIGGER_SCALE
            plane.active = False
        self._cursor = len(self._planes) - 1

    def _random_angle(self) -> float:
        return float(self._rng.uniform(0.0, TAU))
