import pytest

from ripple.core.settings import TextSettings, WaveSettings
from ripple.graphics import renderer as renderer_module
from ripple.graphics.renderer import SceneTextures, WaterRenderer


class RecordingPass:
    def __init__(self, *args, **kwargs):
        self.sizes = []
        self.released = 0

    def resize(self, width, height):
        self.sizes.append((width, height))

    def release(self):
        self.released += 1


@pytest.fixture
def renderer(monkeypatch):
    for name in ("ShaderManager", "WavePass", "TextPass", "CompositePass"):
        monkeypatch.setattr(renderer_module, name, RecordingPass)

    textures = SceneTextures(background=None, distortion=None, font=None)
    return WaterRenderer(None, textures, None, TextSettings(), WaveSettings())


def test_composite_uses_screen_size(renderer):
    renderer.resize(1600, 1200, screen_size=(800, 600))

    assert renderer.size == (1600, 1200)
    assert renderer.waves.sizes == [(1600, 1200)]
    assert renderer.text.sizes == [(1600, 1200)]
    assert renderer.composite.sizes == [(800, 600)]


def test_screen_defaults_to_canvas(renderer):
    renderer.resize(640, 480)
    assert renderer.composite.sizes == [(640, 480)]


def test_empty_canvas_is_ignored(renderer):
    renderer.resize(0, 480, screen_size=(0, 480))

    assert renderer.size == (0, 0)
    assert renderer.waves.sizes == []


def test_release_is_idempotent(renderer):
    renderer.release()
    renderer.release()

    for part in (renderer.waves, renderer.text, renderer.composite, renderer.shaders):
        assert part.released == 1
