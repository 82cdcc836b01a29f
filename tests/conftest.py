import numpy as np
import pytest

from ripple.text.font import FontAtlas, KerningTable
from ripple.text.metrics import Metrics

ATLAS_DATA = {
    "cap_height": 10.0,
    "x_height": 5.0,
    "ascent": 12.0,
    "descent": 3.0,
    "line_gap": 1.0,
    "space_advance": 4.0,
    "aspect": 1.0,
    "ix": 1.0,
    "iy": 2.0,
    "row_height": 16.0,
    "chars": {
        "A": {"rect": [0, 0, 8, 16], "bearing_x": 1.0, "advance_x": 9.0, "flags": 0},
        "B": {"rect": [8, 0, 15, 16], "bearing_x": 1.0, "advance_x": 8.0, "flags": 0},
        "a": {"rect": [15, 0, 21, 16], "bearing_x": 0.5, "advance_x": 6.0, "flags": 1},
        "?": {"rect": [21, 0, 28, 16], "bearing_x": 1.0, "advance_x": 7.0, "flags": 0},
    },
    "kern": {"AB": -2.0},
}


@pytest.fixture
def atlas_data():
    """A fresh copy of a tiny four glyph atlas document."""
    data = dict(ATLAS_DATA)
    data["chars"] = {k: dict(v) for k, v in ATLAS_DATA["chars"].items()}
    data["kern"] = dict(ATLAS_DATA["kern"])
    return data


@pytest.fixture
def atlas(atlas_data):
    return FontAtlas.from_dict(atlas_data)


@pytest.fixture
def kerning(atlas_data):
    return KerningTable.from_dict(atlas_data)


@pytest.fixture
def unit_metrics():
    """Scale 1 everywhere, ascent 10 and 12px lines."""
    return Metrics(up_scale=1.0, low_scale=1.0, ascent_scale=10, line_height=12, size=10.0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
