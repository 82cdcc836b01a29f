from ripple.text.font import FontAtlas, Glyph, KerningTable
from ripple.text.layout import (
    GLYPH_FLOATS,
    GlyphLayoutEngine,
    TextLayoutResult,
    layout,
)
from ripple.text.metrics import Metrics, compute_metrics, font_size_for_canvas

__all__ = [
    "FontAtlas",
    "Glyph",
    "KerningTable",
    "GLYPH_FLOATS",
    "GlyphLayoutEngine",
    "TextLayoutResult",
    "layout",
    "Metrics",
    "compute_metrics",
    "font_size_for_canvas",
]
