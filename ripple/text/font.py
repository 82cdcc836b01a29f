# ripple/text/font.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ripple.errors import FontAtlasError

FALLBACK_CHARACTER = "?"
LOWERCASE_FLAG = 1

_REQUIRED_METRICS = (
    "cap_height",
    "x_height",
    "ascent",
    "descent",
    "line_gap",
    "space_advance",
    "aspect",
    "ix",
    "iy",
    "row_height",
)


@dataclass(frozen=True, slots=True)
class Glyph:
    """Placement data for one character packed into the SDF atlas."""

    rect: Tuple[float, float, float, float]  # x0, y0, x1, y1 in atlas pixels
    bearing_x: float
    advance_x: float
    flags: int = 0

    @property
    def is_lowercase(self) -> bool:
        return bool(self.flags & LOWERCASE_FLAG)

    @property
    def width(self) -> float:
        return self.rect[2] - self.rect[0]


@dataclass(frozen=True)
class FontAtlas:
    cap_height: float
    x_height: float
    ascent: float
    descent: float
    line_gap: float
    space_advance: float
    aspect: float
    ix: float
    iy: float
    row_height: float
    chars: Mapping[str, Glyph] = field(default_factory=dict)

    def __post_init__(self):
        if FALLBACK_CHARACTER not in self.chars:
            raise FontAtlasError(
                f"Font atlas has no '{FALLBACK_CHARACTER}' fallback glyph."
            )
        object.__setattr__(self, "chars", MappingProxyType(dict(self.chars)))

    def glyph(self, char: str) -> Optional[Glyph]:
        return self.chars.get(char)

    @property
    def fallback(self) -> Glyph:
        return self.chars[FALLBACK_CHARACTER]

    def __contains__(self, char: str) -> bool:
        return char in self.chars

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FontAtlas:
        """
        Build an atlas from the JSON layout produced by the SDF font baker:

            {"cap_height": ..., ..., "chars": {"A": {"rect": [x0, y0, x1, y1],
             "bearing_x": ..., "advance_x": ..., "flags": 0}}}
        """
        missing = [key for key in _REQUIRED_METRICS if key not in data]
        if missing:
            raise FontAtlasError(
                f"Font atlas is missing metrics: {', '.join(missing)}"
            )

        raw_chars = data.get("chars")
        if not isinstance(raw_chars, Mapping):
            raise FontAtlasError("Font atlas has no 'chars' table.")

        chars = {}
        for char, record in raw_chars.items():
            chars[char] = _parse_glyph(char, record)

        try:
            metrics = {key: float(data[key]) for key in _REQUIRED_METRICS}
        except (TypeError, ValueError) as e:
            raise FontAtlasError(f"Font atlas metric is not a number: {e}") from e

        # Both heights divide the requested font size
        for key in ("cap_height", "x_height"):
            if metrics[key] <= 0:
                raise FontAtlasError(
                    f"Font atlas {key} must be positive, got {metrics[key]}"
                )

        return cls(chars=chars, **metrics)


def _parse_glyph(char: str, record: Any) -> Glyph:
    try:
        rect = tuple(float(v) for v in record["rect"])
        bearing_x = float(record["bearing_x"])
        advance_x = float(record["advance_x"])
        flags = int(record.get("flags", 0))
    except (KeyError, TypeError, ValueError) as e:
        raise FontAtlasError(f"Malformed glyph record for {char!r}: {e}") from e

    if len(rect) != 4:
        raise FontAtlasError(
            f"Glyph {char!r} rect needs 4 coordinates, got {len(rect)}"
        )

    return Glyph(rect=rect, bearing_x=bearing_x, advance_x=advance_x, flags=flags)


class KerningTable:
    """
    Pair adjustments keyed by two-character strings, e.g. {"AV": -1.5}.
    Absent pairs adjust by zero.
    """

    def __init__(self, pairs: Mapping[str, float] | None = None):
        self._pairs = {key: float(value) for key, value in (pairs or {}).items()}

    def adjustment(self, previous: str, current: str) -> float:
        return self._pairs.get(previous + current, 0.0)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: str) -> bool:
        return pair in self._pairs

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KerningTable:
        """Read the optional "kern" table of an atlas JSON document."""
        pairs = data.get("kern") or {}
        if not isinstance(pairs, Mapping):
            raise FontAtlasError("Font atlas 'kern' entry must be a mapping.")

        try:
            return cls({key: float(value) for key, value in pairs.items()})
        except (TypeError, ValueError) as e:
            raise FontAtlasError(f"Malformed kerning value: {e}") from e
