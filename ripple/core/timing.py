import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class FixedStep:
    target_fps: int
    max_frame_time: float = 0.25
    max_steps_per_frame: int = 4
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False)

    _dt: float = 0.0
    _last_time: float = 0.0
    _accum: float = 0.0

    def __post_init__(self):
        if self.target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {self.target_fps}")
        self._dt = 1.0 / self.target_fps

    def start(self) -> None:
        """Call this right before the main loop starts."""
        self._last_time = self.clock()
        self._accum = 0.0

    def advance(self) -> int:
        """
        Advances the timer and returns how many wave ticks
        should be run this frame.
        """
        now = self.clock()
        frame_time = now - self._last_time
        self._last_time = now

        # A stalled window (dragging, minimizing) must not replay a burst of ticks
        if frame_time > self.max_frame_time:
            frame_time = self.max_frame_time

        self._accum += frame_time

        steps = 0
        while self._accum >= self._dt and steps < self.max_steps_per_frame:
            self._accum -= self._dt
            steps += 1

        if steps >= self.max_steps_per_frame:
            self._accum = 0.0

        return steps

    @property
    def now(self) -> float:
        """Time of the last `advance()` call."""
        return self._last_time

    @property
    def dt(self) -> float:
        """The fixed delta time (e.g., 0.0166 for 60fps)."""
        return self._dt
