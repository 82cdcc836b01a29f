# ripple/graphics/passes/__init__.py
from ripple.graphics.passes.composite import CompositePass
from ripple.graphics.passes.text import TextPass, text_transform
from ripple.graphics.passes.waves import WavePass, wave_plane_vertices

__all__ = [
    "CompositePass",
    "TextPass",
    "WavePass",
    "text_transform",
    "wave_plane_vertices",
]
