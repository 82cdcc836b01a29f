# ripple/graphics/renderer.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import moderngl

from ripple.assets.types import FontData, TextureData
from ripple.core.settings import TextSettings, WaveSettings
from ripple.graphics.passes.composite import CompositePass
from ripple.graphics.passes.text import TextPass
from ripple.graphics.passes.waves import WavePass
from ripple.graphics.shaders.shader_manager import ShaderManager
from ripple.waves.scheduler import WaveInstance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneTextures:
    """CPU-side images the renderer uploads once."""

    background: TextureData
    distortion: TextureData
    font: TextureData


class WaterRenderer:
    """
    Renders one frame in three passes: waves into a float target, text
    into a color target, then both composited over the background.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        textures: SceneTextures,
        font: FontData,
        text_settings: TextSettings,
        wave_settings: WaveSettings,
    ):
        self.ctx = ctx
        self.size = (0, 0)
        self._released = False

        self.shaders = ShaderManager(ctx)
        self.waves = WavePass(ctx, self.shaders, textures.distortion, wave_settings)
        self.text = TextPass(ctx, self.shaders, textures.font, font, text_settings)
        self.composite = CompositePass(
            ctx, self.shaders, textures.background, wave_settings.force
        )

    def resize(
        self, width: int, height: int, screen_size: Tuple[int, int] | None = None
    ) -> None:
        """
        Resize the off-screen targets to the canvas size in device pixels.
        `screen_size` is the window framebuffer the composite draws into;
        it defaults to the canvas size.
        """
        # Zero sized targets are invalid; a minimized window keeps the old ones
        if width <= 0 or height <= 0:
            return

        screen_w, screen_h = screen_size or (width, height)

        self.size = (width, height)
        self.waves.resize(width, height)
        self.text.resize(width, height)
        self.composite.resize(screen_w, screen_h)
        logger.info(
            "Canvas resized to %dx%d (screen %dx%d)", width, height, screen_w, screen_h
        )

    def render(self, instances: Sequence[WaveInstance]) -> None:
        if self._released or self.waves.target is None or self.text.target is None:
            return

        self.waves.execute(instances)
        self.text.execute()

        assert self.waves.target.texture is not None
        assert self.text.target.texture is not None
        self.composite.execute(self.waves.target.texture, self.text.target.texture)

    def release(self) -> None:
        if self._released:
            return
        self._released = True

        self.composite.release()
        self.text.release()
        self.waves.release()
        self.shaders.release()
