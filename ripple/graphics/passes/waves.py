# ripple/graphics/passes/waves.py
from typing import Sequence

import moderngl
import numpy as np

from ripple.assets.types import TextureData
from ripple.core.settings import WaveSettings
from ripple.graphics.resources.texture import GPUTexture, RenderTarget
from ripple.graphics.shaders.shader_manager import ShaderId, ShaderManager, ShaderRequest
from ripple.graphics.shaders.sources import WAVE_FRAG, WAVE_VERT
from ripple.graphics.utils.uniforms import set_uniform
from ripple.waves.scheduler import WaveInstance

DISTORTION_TEXTURE_UNIT = 1


def wave_plane_vertices(size: float = 128.0) -> np.ndarray:
    """
    Two triangles of a `size` x `size` plane in pixels. The plane is
    centered on the origin so it rotates around its middle.
    """
    offset = size * -0.5
    half = size * 0.5

    return np.array(
        [
            offset, offset,
            half, offset,
            half, half,
            half, half,
            offset, half,
            offset, offset,
        ],
        dtype="f4",
    )  # fmt: skip


class WavePass:
    """
    Accumulates the visible wave planes into a float target, one draw per
    plane with additive blending.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        shaders: ShaderManager,
        distortion: TextureData,
        settings: WaveSettings,
    ):
        self._ctx = ctx

        self._program = shaders.get(
            ShaderRequest(
                shader_id=ShaderId("wave"),
                vertex=WAVE_VERT,
                fragment=WAVE_FRAG,
                label="WavePlane",
            )
        )
        self._texture = GPUTexture(ctx, distortion)

        self._vbo = ctx.buffer(wave_plane_vertices(settings.plane_size).tobytes())
        self._vao = ctx.vertex_array(self._program, [(self._vbo, "2f", "in_position")])

        set_uniform(self._program, "u_distortion", DISTORTION_TEXTURE_UNIT)
        set_uniform(self._program, "u_plane_size", settings.plane_size * 0.5)

        self.target: RenderTarget | None = None
        self._viewport = (0, 0, 1, 1)

    def resize(self, width: int, height: int) -> None:
        set_uniform(self._program, "u_canvas_size", (float(width), float(height)))

        # Signed offsets need a float target
        if self.target is None:
            self.target = RenderTarget(self._ctx, (width, height), dtype="f2")
        else:
            self.target.resize((width, height))
        self._viewport = (0, 0, width, height)

    def execute(self, instances: Sequence[WaveInstance]) -> None:
        if self.target is None:
            return

        gl = self._ctx
        self.target.use()
        gl.viewport = self._viewport
        gl.clear(0.0, 0.0, 0.0, 0.0)

        if not instances:
            return

        gl.enable(moderngl.BLEND)
        gl.blend_func = moderngl.SRC_ALPHA, moderngl.ONE

        self._texture.use(DISTORTION_TEXTURE_UNIT)

        program = self._program
        for instance in instances:
            set_uniform(program, "u_translation", instance.translation)
            set_uniform(program, "u_rotation", instance.rotation)
            set_uniform(program, "u_scale", instance.scale)
            set_uniform(program, "u_alpha", instance.alpha)
            self._vao.render(moderngl.TRIANGLES, vertices=6)

    def release(self) -> None:
        if self.target is not None:
            self.target.release()
            self.target = None
        self._vao.release()
        self._vbo.release()
        self._texture.release()
