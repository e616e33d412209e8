"""Shader programs built from GLSL vertex and fragment sources."""

from __future__ import annotations

import numpy as np


class ShaderError(Exception):
    """A shader failed to compile or link, or was used after release."""


class _PygletBackend:
    """Compiles, links and drives shader programs on the current GL context."""

    def compile_shader(self, source, kind):
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException

        try:
            return GLShader(source, kind)
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc

    def link_program(self, vertex, fragment):
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            return ShaderProgram(vertex, fragment)
        except ShaderException as exc:
            raise ShaderError(str(exc)) from exc

    def delete_shader(self, shader):
        shader.delete()

    def use(self, program):
        program.use()

    def delete_program(self, program):
        program.delete()

    def set_uniform(self, program, name, values):
        # A missing uniform is ignored, as OpenGL does for location -1.
        if name in program.uniforms:
            program[name] = values


class Shader:
    """A linked program made from one vertex and one fragment shader."""

    def __init__(self, vertex_source, fragment_source, backend=None):
        self._backend = backend if backend is not None else _PygletBackend()
        vertex = self._compile(vertex_source, "vertex")
        try:
            fragment = self._compile(fragment_source, "fragment")
        except ShaderError:
            self._backend.delete_shader(vertex)
            raise
        try:
            self._program = self._backend.link_program(vertex, fragment)
        except ShaderError as exc:
            raise ShaderError(f"program linking failed:\n{exc}") from exc
        finally:
            self._backend.delete_shader(vertex)
            self._backend.delete_shader(fragment)

    def _compile(self, source, kind):
        try:
            return self._backend.compile_shader(source, kind)
        except ShaderError as exc:
            raise ShaderError(f"{kind} shader compilation failed:\n{exc}") from exc

    @property
    def released(self):
        return self._program is None

    def _live_program(self):
        if self._program is None:
            raise ShaderError("shader program has been released")
        return self._program

    def use(self):
        """Make this program the active one."""
        self._backend.use(self._live_program())

    def release(self):
        """Delete the program; calling it again does nothing."""
        if self._program is not None:
            self._backend.delete_program(self._program)
            self._program = None

    def set_mat4(self, name, matrix):
        """Set a 4x4 matrix uniform from a row-major matrix."""
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        values = tuple(float(v) for v in array.flatten(order="F"))
        self._backend.set_uniform(self._live_program(), name, values)