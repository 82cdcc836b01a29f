# ripple/graphics/shaders/shader_manager.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, NewType

import moderngl

from ripple.errors import ShaderCompileError

logger = logging.getLogger(__name__)

ShaderId = NewType("ShaderId", str)


@dataclass(frozen=True, slots=True)
class ShaderRequest:
    """Request to compile a vertex + fragment program from GLSL source."""

    shader_id: ShaderId
    vertex: str
    fragment: str
    label: str = ""


class ShaderManager:
    """Compiles each program once and caches it by id."""

    def __init__(self, gl: moderngl.Context) -> None:
        self._gl = gl
        self._cache: Dict[ShaderId, moderngl.Program] = {}

    def get(self, req: ShaderRequest) -> moderngl.Program:
        cached = self._cache.get(req.shader_id)
        if cached is not None:
            return cached

        label = req.label or str(req.shader_id)

        try:
            program = self._gl.program(
                vertex_shader=req.vertex, fragment_shader=req.fragment
            )
        except moderngl.Error as e:
            raise ShaderCompileError(label, str(e)) from e

        logger.debug("Compiled program %s", label)
        self._cache[req.shader_id] = program
        return program

    def release(self) -> None:
        for program in self._cache.values():
            program.release()
        self._cache.clear()
