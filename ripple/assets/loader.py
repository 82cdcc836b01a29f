# ripple/assets/loader.py
import logging
from pathlib import Path
from typing import Any, Dict

from ripple.assets.importers.base import AssetImporter
from ripple.assets.importers.font import FontAtlasImporter
from ripple.assets.importers.texture import TextureImporter
from ripple.assets.types import FontData, TextureData

logger = logging.getLogger(__name__)


class AssetLoader:
    """
    Loads assets relative to a root directory, picking an importer by
    file extension. Loading is synchronous since every asset is needed
    before the first frame.
    """

    def __init__(self, asset_root: Path) -> None:
        self.root = asset_root
        self._cache: Dict[str, Any] = {}

        self._importers: Dict[str, AssetImporter] = {
            ".png": TextureImporter(),
            ".jpg": TextureImporter(),
            ".jpeg": TextureImporter(),
            ".json": FontAtlasImporter(),
        }

    def register(self, extension: str, importer: AssetImporter) -> None:
        self._importers[extension.lower()] = importer

    def load(self, path: str, importer: AssetImporter | None = None) -> Any:
        """Import `path` (cached per path and importer choice)."""
        key = f"{path}|{type(importer).__name__}" if importer else path
        if key in self._cache:
            return self._cache[key]

        full_path = self.root / path
        if importer is None:
            ext = full_path.suffix.lower()
            importer = self._importers.get(ext)
            if importer is None:
                raise ValueError(f"No importer for {ext}")

        if not full_path.is_file():
            raise FileNotFoundError(f"Asset not found: {full_path}")

        data = importer.import_file(full_path)
        logger.info("Loaded %s", full_path)

        self._cache[key] = data
        return data

    def texture(self, path: str) -> TextureData:
        return self.load(path)

    def font_texture(self, path: str) -> TextureData:
        return self.load(path, TextureImporter(grayscale=True))

    def font(self, path: str) -> FontData:
        return self.load(path)
