# ripple/graphics/resources/texture.py
import moderngl

from ripple.assets.types import TextureData


class GPUTexture:
    """
    Wrapper around moderngl.Texture.
    """

    def __init__(self, ctx: moderngl.Context, data: TextureData):
        self.width = data.width
        self.height = data.height

        self.handle = ctx.texture(
            size=(data.width, data.height),
            components=data.components,
            data=data.data,
        )

        self.handle.filter = (moderngl.LINEAR, moderngl.LINEAR)
        self.handle.repeat_x = False
        self.handle.repeat_y = False

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def use(self, location: int = 0) -> None:
        self.handle.use(location)

    def release(self) -> None:
        self.handle.release()


class RenderTarget:
    """
    Canvas-sized color texture with a framebuffer around it. Recreated on
    resize.
    """

    def __init__(
        self, ctx: moderngl.Context, size: tuple[int, int], dtype: str = "f1"
    ):
        self._ctx = ctx
        self._dtype = dtype
        self.texture: moderngl.Texture | None = None
        self.framebuffer: moderngl.Framebuffer | None = None
        self.resize(size)

    def resize(self, size: tuple[int, int]) -> None:
        self.release()
        self.texture = self._ctx.texture(size, 4, dtype=self._dtype)
        self.texture.filter = (moderngl.LINEAR, moderngl.LINEAR)
        self.texture.repeat_x = False
        self.texture.repeat_y = False
        self.framebuffer = self._ctx.framebuffer(color_attachments=[self.texture])

    def use(self) -> None:
        assert self.framebuffer is not None
        self.framebuffer.use()

    def release(self) -> None:
        if self.framebuffer is not None:
            self.framebuffer.release()
            self.framebuffer = None
        if self.texture is not None:
            self.texture.release()
            self.texture = None
