# ripple/assets/__init__.py
from ripple.assets.loader import AssetLoader
from ripple.assets.procedural import generate_distortion_mask
from ripple.assets.types import FontData, TextureData

__all__ = [
    "AssetLoader",
    "generate_distortion_mask",
    "FontData",
    "TextureData",
]
