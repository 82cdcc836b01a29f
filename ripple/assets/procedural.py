# ripple/assets/procedural.py
import numpy as np

from ripple.assets.types import TextureData


def generate_distortion_mask(size: int = 256, rings: float = 3.0) -> TextureData:
    """
    Build a radial ripple used to displace the background.

    RG hold the displacement direction remapped to 0-1 (0.5 is no offset),
    alpha holds the ripple strength which fades towards the plane edge.
    """
    if size < 2:
        raise ValueError(f"Distortion mask size must be at least 2, got {size}")

    coords = (np.arange(size, dtype=np.float32) + 0.5) / size * 2.0 - 1.0
    x, y = np.meshgrid(coords, coords)

    dist = np.sqrt(x * x + y * y)
    with np.errstate(divide="ignore", invalid="ignore"):
        dir_x = np.where(dist > 0.0, x / dist, 0.0)
        dir_y = np.where(dist > 0.0, y / dist, 0.0)

    falloff = np.clip(1.0 - dist, 0.0, 1.0)
    wave = np.sin(dist * rings * np.pi * 2.0) * falloff

    rgba = np.empty((size, size, 4), dtype=np.float32)
    rgba[..., 0] = 0.5 + 0.5 * dir_x * wave
    rgba[..., 1] = 0.5 + 0.5 * dir_y * wave
    rgba[..., 2] = 0.5
    rgba[..., 3] = falloff * falloff

    data = (np.clip(rgba, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
    return TextureData(data=data.tobytes(), width=size, height=size, components=4)
