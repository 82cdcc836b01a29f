# ripple/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from ripple.assets.importers.base import AssetImporter
from ripple.assets.types import TextureData


class TextureImporter(AssetImporter):
    """
    Load images as RGBA, or single channel when `grayscale` is set
    (SDF font atlases only need one channel).
    """

    def __init__(self, grayscale: bool = False):
        self.grayscale = grayscale

    def import_file(self, path: Path) -> TextureData:
        mode, components = ("L", 1) if self.grayscale else ("RGBA", 4)

        with Image.open(path) as img:
            converted = img.convert(mode)
            width, height = converted.size
            data = converted.tobytes()

        return TextureData(
            data=data, width=width, height=height, components=components
        )
