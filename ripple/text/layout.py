# ripple/text/layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from ripple.text.font import FALLBACK_CHARACTER, FontAtlas, Glyph, KerningTable
from ripple.text.metrics import Metrics
from ripple.types import Rectangle, Vector2

# Per vertex: position x, position y, atlas u, atlas v, glyph scale.
VERTEX_FLOATS = 5
# Two triangles per glyph.
GLYPH_VERTICES = 6
GLYPH_FLOATS = VERTEX_FLOATS * GLYPH_VERTICES

DEFAULT_CAPACITY = 300_000

VERTEX_FORMAT = "2f 2f 1f"
VERTEX_ATTRIBUTES = ("in_position", "in_uv", "in_scale")


@dataclass(frozen=True)
class TextLayoutResult:
    """
    Glyph quads for one string, ready for upload as a single vertex buffer.

    `box` is (x, y, width, height) with `y` the top edge; `pen` is where the
    next glyph would have been placed.
    """

    text: str
    metrics: Metrics
    origin: Vector2
    vertices: NDArray[np.float32]
    box: Rectangle
    pen: Vector2

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // VERTEX_FLOATS

    @property
    def glyph_count(self) -> int:
        return len(self.vertices) // GLYPH_FLOATS

    def quads(self) -> NDArray[np.float32]:
        """View the vertex data as (glyph, vertex, attribute)."""
        return self.vertices.reshape(-1, GLYPH_VERTICES, VERTEX_FLOATS)


def glyph_quad(
    pen: Vector2, metrics: Metrics, atlas: FontAtlas, glyph: Glyph, kern: float = 0.0
) -> Tuple[Tuple[float, ...], float]:
    """Return the 30 vertex floats of one glyph and the pen x advance."""
    x0, y0, x1, y1 = glyph.rect

    # Lowercase glyphs carry their own x-height snapped scale
    scale = metrics.low_scale if glyph.is_lowercase else metrics.up_scale
    scale_ratio = atlas.aspect * scale

    b = (pen.y - metrics.ascent_scale) - (atlas.descent + atlas.iy) * scale
    l = (glyph.bearing_x + kern - atlas.ix) * scale_ratio + pen.x

    r = (x1 - x0) * scale_ratio + l
    t = atlas.row_height * scale + b

    advance = (glyph.advance_x + kern) * scale_ratio

    return (
        l, t, x0, y0, scale,
        r, t, x1, y0, scale,
        l, b, x0, y1, scale,

        l, b, x0, y1, scale,
        r, t, x1, y0, scale,
        r, b, x1, y1, scale,
    ), advance  # fmt: skip


class GlyphLayoutEngine:
    """
    Converts strings into kerned, pixel-snapped SDF glyph quads.

    Layout runs in two steps: `compute_raw` walks the text once from a given
    origin to find its extent, `recenter` walks it again from an origin that
    puts the text's middle at (0, 0). Output never exceeds `capacity` floats;
    text that does not fit is cut off.
    """

    def __init__(
        self,
        atlas: FontAtlas,
        kerning: Optional[KerningTable] = None,
        capacity: int = DEFAULT_CAPACITY,
    ):
        self.atlas = atlas
        self.kerning = kerning
        self.capacity = max(0, int(capacity))

    def compute_raw(
        self, text: str, origin: Vector2, metrics: Metrics
    ) -> TextLayoutResult:
        atlas = self.atlas
        capacity = self.capacity

        out = np.zeros(min(capacity, GLYPH_FLOATS * len(text)), dtype=np.float32)
        written = 0

        pen = origin
        previous = " "
        max_width = 0.0

        for character in text:
            if capacity - written < GLYPH_FLOATS:
                break

            if character == "\n":
                max_width = max(max_width, pen.x)
                pen = Vector2(origin.x, pen.y - metrics.line_height)
                previous = " "
                continue

            if character == " ":
                pen = Vector2(pen.x + atlas.space_advance * metrics.up_scale, pen.y)
                previous = " "
                continue

            glyph = atlas.glyph(character)
            if glyph is None:
                glyph = atlas.fallback
                character = FALLBACK_CHARACTER

            kern = 0.0
            if self.kerning is not None:
                kern = self.kerning.adjustment(previous, character)

            floats, advance = glyph_quad(pen, metrics, atlas, glyph, kern)
            out[written : written + GLYPH_FLOATS] = floats
            written += GLYPH_FLOATS

            pen = Vector2(pen.x + advance, pen.y)
            previous = character

        # The last line counts towards the width too
        max_width = max(max_width, pen.x)

        box = Rectangle(
            x=origin.x,
            y=origin.y,
            width=max_width - origin.x,
            height=origin.y - pen.y + metrics.line_height,
        )

        return TextLayoutResult(
            text=text,
            metrics=metrics,
            origin=origin,
            vertices=out[:written].copy(),
            box=box,
            pen=pen,
        )

    def recenter(self, raw: TextLayoutResult) -> TextLayoutResult:
        """Lay the same text out again, centered on the last line's width."""
        origin = Vector2(raw.pen.x * -0.5, raw.box.height * 0.5)
        return self.compute_raw(raw.text, origin, raw.metrics)

    def layout(
        self, text: str, metrics: Metrics, origin: Vector2 = Vector2(0.0, 0.0)
    ) -> TextLayoutResult:
        return self.recenter(self.compute_raw(text, origin, metrics))


def layout(
    text: str,
    origin: Vector2,
    metrics: Metrics,
    atlas: FontAtlas,
    kerning: Optional[KerningTable] = None,
    capacity: int = DEFAULT_CAPACITY,
) -> TextLayoutResult:
    """Centered layout of `text`; see `GlyphLayoutEngine`."""
    return GlyphLayoutEngine(atlas, kerning, capacity).layout(text, metrics, origin)
