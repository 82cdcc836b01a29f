from ripple.waves.scheduler import (
    ALPHA_FLOOR,
    POOL_SIZE,
    TRIGGER_ALPHA,
    TRIGGER_SCALE,
    WaveInstance,
    WavePlane,
    WaveScheduler,
)

__all__ = [
    "ALPHA_FLOOR",
    "POOL_SIZE",
    "TRIGGER_ALPHA",
    "TRIGGER_SCALE",
    "WaveInstance",
    "WavePlane",
    "WaveScheduler",
]
