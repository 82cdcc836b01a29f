# ripple/graphics/passes/text.py
import logging

import moderngl
import numpy as np

from ripple.assets.types import FontData, TextureData
from ripple.core.settings import TextSettings
from ripple.graphics.resources.texture import GPUTexture, RenderTarget
from ripple.graphics.shaders.shader_manager import ShaderId, ShaderManager, ShaderRequest
from ripple.graphics.shaders.sources import TEXT_FRAG, TEXT_VERT
from ripple.graphics.utils.uniforms import pack_mat3, set_uniform
from ripple.text.layout import (
    VERTEX_ATTRIBUTES,
    VERTEX_FORMAT,
    GlyphLayoutEngine,
    TextLayoutResult,
)
from ripple.text.metrics import compute_metrics, font_size_for_canvas, round_half_up
from ripple.types import Rectangle

logger = logging.getLogger(__name__)

FONT_TEXTURE_UNIT = 3


def text_transform(box: Rectangle, width: int, height: int) -> np.ndarray:
    """
    Map centered text pixels to clip space. The translation nudges the box
    origin onto the nearest pixel so glyph baselines stay crisp.
    """
    sx = 2.0 / width
    sy = 2.0 / height

    dx = round_half_up(box.x) - box.x
    dy = round_half_up(box.y) - box.y

    return np.array(
        [
            [sx, 0.0, dx * sx],
            [0.0, sy, dy * sy],
            [0.0, 0.0, 1.0],
        ],
        dtype="f4",
    )


class TextPass:
    """
    Draws the laid out string into an off-screen target with one draw call.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        shaders: ShaderManager,
        font_texture: TextureData,
        font: FontData,
        settings: TextSettings,
    ):
        self._ctx = ctx
        self.settings = settings
        self.font = font

        self.engine = GlyphLayoutEngine(
            font.atlas, font.kerning, capacity=settings.buffer_floats
        )
        self.result: TextLayoutResult | None = None

        self._program = shaders.get(
            ShaderRequest(
                shader_id=ShaderId("sdf_text"),
                vertex=TEXT_VERT,
                fragment=TEXT_FRAG,
                label="SDFText",
            )
        )
        self._texture = GPUTexture(ctx, font_texture)

        # Dynamic since the layout is rebuilt on every resize
        self._vbo = ctx.buffer(reserve=max(settings.buffer_floats, 1) * 4, dynamic=True)
        self._vao = ctx.vertex_array(
            self._program, [(self._vbo, VERTEX_FORMAT, *VERTEX_ATTRIBUTES)]
        )

        set_uniform(self._program, "u_font", FONT_TEXTURE_UNIT)
        set_uniform(self._program, "u_texture_size", self._texture.size)
        set_uniform(self._program, "u_subpixel", settings.subpixel)
        set_uniform(self._program, "u_hint_amount", settings.hint_amount)
        set_uniform(self._program, "u_border_size", font.atlas.iy)
        set_uniform(self._program, "u_color", settings.color)

        self.target: RenderTarget | None = None
        self._viewport = (0, 0, 1, 1)

    @property
    def vertex_count(self) -> int:
        return self.result.vertex_count if self.result else 0

    def resize(self, width: int, height: int) -> None:
        size = font_size_for_canvas(width)
        metrics = compute_metrics(self.font.atlas, size, self.settings.line_gap)

        self.result = self.engine.layout(self.settings.text, metrics)
        if self.result.vertex_count:
            self._vbo.write(self.result.vertices.tobytes())

        transform = text_transform(self.result.box, width, height)
        set_uniform(self._program, "u_transform", pack_mat3(transform))

        if self.target is None:
            self.target = RenderTarget(self._ctx, (width, height))
        else:
            self.target.resize((width, height))
        self._viewport = (0, 0, width, height)

        logger.info(
            "Text laid out at %dpx: %d glyphs, box %.1fx%.1f",
            size,
            self.result.glyph_count,
            self.result.box.width,
            self.result.box.height,
        )

    def execute(self) -> None:
        if self.target is None:
            return

        gl = self._ctx
        self.target.use()
        gl.viewport = self._viewport
        gl.clear(0.0, 0.0, 0.0, 0.0)

        if not self.vertex_count:
            return

        gl.enable(moderngl.BLEND)
        gl.blend_func = moderngl.ONE, moderngl.ONE_MINUS_SRC_ALPHA

        self._texture.use(FONT_TEXTURE_UNIT)
        self._vao.render(moderngl.TRIANGLES, vertices=self.vertex_count)

    def release(self) -> None:
        if self.target is not None:
            self.target.release()
            self.target = None
        self._vao.release()
        self._vbo.release()
        self._texture.release()
