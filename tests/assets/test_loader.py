import json

import pytest
from PIL import Image

from ripple.assets.importers.texture import TextureImporter
from ripple.assets.loader import AssetLoader


@pytest.fixture
def asset_root(tmp_path, atlas_data):
    Image.new("RGB", (2, 2), color="blue").save(tmp_path / "ocean.png")
    Image.new("L", (2, 2), color=200).save(tmp_path / "font.png")
    (tmp_path / "font.json").write_text(json.dumps(atlas_data))
    return tmp_path


def test_loader_picks_importer_by_extension(asset_root):
    loader = AssetLoader(asset_root)

    assert loader.texture("ocean.png").components == 4
    assert loader.font("font.json").atlas.cap_height == 10.0


def test_loader_font_texture_is_single_channel(asset_root):
    loader = AssetLoader(asset_root)

    assert loader.font_texture("font.png").components == 1
    # Same path through the default importer is a separate entry
    assert loader.texture("font.png").components == 4


def test_loader_caches(asset_root):
    loader = AssetLoader(asset_root)

    first = loader.texture("ocean.png")
    assert loader.texture("ocean.png") is first


def test_loader_unknown_extension(asset_root):
    (asset_root / "notes.txt").write_text("hello")
    loader = AssetLoader(asset_root)

    with pytest.raises(ValueError, match="No importer for .txt"):
        loader.load("notes.txt")


def test_loader_register(asset_root):
    Image.new("RGB", (3, 1), color="white").save(asset_root / "sky.bmp")
    loader = AssetLoader(asset_root)
    loader.register(".BMP", TextureImporter())

    assert loader.load("sky.bmp").width == 3


def test_loader_missing_file(asset_root):
    loader = AssetLoader(asset_root)

    with pytest.raises(FileNotFoundError):
        loader.texture("missing.png")
