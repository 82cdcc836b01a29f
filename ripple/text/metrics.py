# ripple/text/metrics.py
from __future__ import annotations

import math
from dataclasses import dataclass

from ripple.text.font import FontAtlas


def round_half_up(value: float) -> int:
    """Round .5 away from -inf like the browser does, not to even."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class Metrics:
    up_scale: float
    low_scale: float
    ascent_scale: int
    line_height: int
    size: float


def compute_metrics(atlas: FontAtlas, size: float, line_gap: float = 0.0) -> Metrics:
    """
    Derive pixel-snapped layout constants for a font size in pixels.

    Uppercase glyphs scale so that cap height equals `size`. Lowercase glyphs
    get their own scale, snapped so the x-height covers a whole number of
    pixels. Line height and ascent are integers so the baseline sits on a
    pixel boundary and the SDF does not shimmer when resampled.
    """
    up_scale = size / atlas.cap_height
    low_scale = round_half_up(atlas.x_height * up_scale) / atlas.x_height

    line_height = round_half_up(
        (atlas.ascent + atlas.descent + atlas.line_gap) * up_scale + line_gap
    )
    ascent_scale = round_half_up(atlas.ascent * up_scale)

    return Metrics(
        up_scale=up_scale,
        low_scale=low_scale,
        ascent_scale=ascent_scale,
        line_height=line_height,
        size=size,
    )


def font_size_for_canvas(canvas_width: int) -> int:
    """Text is sized relative to the canvas width."""
    return round_half_up(canvas_width * 0.02 / 0.3)
