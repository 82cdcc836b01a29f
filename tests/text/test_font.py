import pytest

from ripple.errors import FontAtlasError
from ripple.text.font import FontAtlas, Glyph, KerningTable


def test_atlas_from_dict(atlas):
    assert atlas.cap_height == 10.0
    assert atlas.row_height == 16.0
    assert "A" in atlas
    assert atlas.glyph("A") == Glyph(rect=(0.0, 0.0, 8.0, 16.0), bearing_x=1.0, advance_x=9.0)
    assert atlas.glyph("Z") is None
    assert atlas.fallback is atlas.glyph("?")


def test_lowercase_flag(atlas):
    assert atlas.glyph("a").is_lowercase
    assert not atlas.glyph("A").is_lowercase
    assert atlas.glyph("a").width == 6.0


def test_atlas_chars_are_read_only(atlas):
    with pytest.raises(TypeError):
        atlas.chars["Z"] = atlas.fallback


def test_missing_fallback_glyph_is_rejected(atlas_data):
    del atlas_data["chars"]["?"]

    with pytest.raises(FontAtlasError, match="fallback"):
        FontAtlas.from_dict(atlas_data)


def test_missing_metric_is_rejected(atlas_data):
    del atlas_data["x_height"]
    del atlas_data["aspect"]

    with pytest.raises(FontAtlasError, match="x_height, aspect"):
        FontAtlas.from_dict(atlas_data)


def test_malformed_glyph_is_rejected(atlas_data):
    atlas_data["chars"]["A"] = {"rect": [0, 0, 8], "bearing_x": 1, "advance_x": 9}
    with pytest.raises(FontAtlasError, match="4 coordinates"):
        FontAtlas.from_dict(atlas_data)

    atlas_data["chars"]["A"] = {"rect": [0, 0, 8, 16]}
    with pytest.raises(FontAtlasError, match="Malformed"):
        FontAtlas.from_dict(atlas_data)


def test_atlas_errors_are_value_errors(atlas_data):
    del atlas_data["chars"]
    with pytest.raises(ValueError):
        FontAtlas.from_dict(atlas_data)


def test_kerning_lookup(kerning):
    assert kerning.adjustment("A", "B") == -2.0
    assert kerning.adjustment("B", "A") == 0.0
    assert "AB" in kerning
    assert len(kerning) == 1


def test_kerning_is_optional(atlas_data):
    del atlas_data["kern"]
    table = KerningTable.from_dict(atlas_data)

    assert len(table) == 0
    assert table.adjustment("A", "B") == 0.0


def test_kerning_must_be_a_mapping(atlas_data):
    atlas_data["kern"] = [1, 2]
    with pytest.raises(FontAtlasError):
        KerningTable.from_dict(atlas_data)


@pytest.mark.parametrize("key", ["cap_height", "x_height"])
@pytest.mark.parametrize("value", [0, -4])
def test_non_positive_heights_are_rejected(atlas_data, key, value):
    atlas_data[key] = value

    with pytest.raises(FontAtlasError, match=f"{key} must be positive"):
        FontAtlas.from_dict(atlas_data)


def test_non_numeric_metric_is_rejected(atlas_data):
    atlas_data["ascent"] = None

    with pytest.raises(FontAtlasError, match="not a number"):
        FontAtlas.from_dict(atlas_data)


@pytest.mark.parametrize("value", [None, "wide", [1]])
def test_non_numeric_kerning_is_rejected(atlas_data, value):
    atlas_data["kern"] = {"AB": value}

    with pytest.raises(FontAtlasError, match="Malformed kerning"):
        KerningTable.from_dict(atlas_data)
