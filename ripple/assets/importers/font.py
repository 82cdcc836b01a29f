# ripple/assets/importers/font.py
import json
from pathlib import Path

from ripple.assets.importers.base import AssetImporter
from ripple.assets.types import FontData
from ripple.errors import FontAtlasError
from ripple.text.font import FontAtlas, KerningTable


class FontAtlasImporter(AssetImporter):
    """Reads the JSON metrics that accompany an SDF font texture."""

    def import_file(self, path: Path) -> FontData:
        with open(path, "r", encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise FontAtlasError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise FontAtlasError(f"{path} must contain a JSON object.")

        return FontData(
            atlas=FontAtlas.from_dict(document),
            kerning=KerningTable.from_dict(document),
            path=str(path),
        )
