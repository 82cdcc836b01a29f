# ripple/graphics/passes/composite.py
import moderngl

from ripple.assets.types import TextureData
from ripple.graphics.helpers.fullscreen import create_fullscreen_triangle
from ripple.graphics.resources.texture import GPUTexture
from ripple.graphics.shaders.shader_manager import ShaderId, ShaderManager, ShaderRequest
from ripple.graphics.shaders.sources import COMPOSITE_FRAG, COMPOSITE_VERT
from ripple.graphics.utils.uniforms import set_uniform

BACKGROUND_UNIT = 0
WAVES_UNIT = 2
TEXT_UNIT = 4


class CompositePass:
    """
    Draws the background to the screen, displaced by the wave target, with
    the text target blended over it.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        shaders: ShaderManager,
        background: TextureData,
        force: float,
    ):
        self._ctx = ctx

        self._program = shaders.get(
            ShaderRequest(
                shader_id=ShaderId("composite"),
                vertex=COMPOSITE_VERT,
                fragment=COMPOSITE_FRAG,
                label="Composite",
            )
        )
        self._background = GPUTexture(ctx, background)

        self._vbo = create_fullscreen_triangle(ctx)
        self._vao = ctx.vertex_array(self._program, [(self._vbo, "2f", "in_pos")])

        set_uniform(self._program, "u_background", BACKGROUND_UNIT)
        set_uniform(self._program, "u_waves", WAVES_UNIT)
        set_uniform(self._program, "u_text", TEXT_UNIT)
        set_uniform(self._program, "u_force", force)

        self._viewport = (0, 0, 1, 1)

    def resize(self, width: int, height: int) -> None:
        self._viewport = (0, 0, width, height)

    def execute(self, waves: moderngl.Texture, text: moderngl.Texture) -> None:
        gl = self._ctx
        gl.screen.use()
        gl.viewport = self._viewport
        gl.disable(moderngl.BLEND)
        gl.clear(0.0, 0.0, 0.0, 1.0)

        self._background.use(BACKGROUND_UNIT)
        waves.use(WAVES_UNIT)
        text.use(TEXT_UNIT)

        self._vao.render(moderngl.TRIANGLES)

    def release(self) -> None:
        self._vao.release()
        self._vbo.release()
        self._background.release()
