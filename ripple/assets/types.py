# ripple/assets/types.py
from dataclasses import dataclass

from ripple.text.font import FontAtlas, KerningTable


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 1 (luminance) or 4 (RGBA)


@dataclass(frozen=True)
class FontData:
    """Glyph metrics and kerning of an SDF font atlas."""

    atlas: FontAtlas
    kerning: KerningTable
    path: str
