# ripple/errors.py


class RippleError(RuntimeError):
    """Base class for unrecoverable setup failures."""


class FontAtlasError(RippleError, ValueError):
    """The font atlas is missing required metrics or glyphs."""


class ShaderCompileError(RippleError):
    """A GPU program failed to compile or link."""

    def __init__(self, label: str, message: str):
        super().__init__(f"Shader '{label}' failed to build: {message}")
        self.label = label
