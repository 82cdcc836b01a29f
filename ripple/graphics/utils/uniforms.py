# ripple/graphics/utils/uniforms.py
from typing import Any

import moderngl
import numpy as np


def pack_mat3(mat: np.ndarray) -> bytes:
    """
    Packs a 3x3 matrix for a GLSL `mat3` uniform. GLSL reads columns,
    so the matrix is transposed from numpy's row-major layout.
    """
    if mat.shape != (3, 3):
        raise ValueError("Matrix must be 3x3")
    return np.ascontiguousarray(mat.T, dtype="f4").tobytes()


def set_uniform(
    program: moderngl.Program | None, name: str, value: Any
) -> None:
    if not program:
        return

    # Uniforms the compiler optimized away are silently absent
    if name not in program:
        return

    member = program[name]

    if isinstance(member, moderngl.Uniform):
        if isinstance(value, bytes):
            member.write(value)
        else:
            member.value = value
