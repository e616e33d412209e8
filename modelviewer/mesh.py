"""Triangle meshes and their GPU buffers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_FLOATS_PER_VERTEX = 8
_STRIDE = _FLOATS_PER_VERTEX * 4
_POSITION_OFFSET = 0
_NORMAL_OFFSET = 3 * 4
_TEX_COORDS_OFFSET = 6 * 4


@dataclass(frozen=True)
class Vertex:
    """One vertex: position, normal and texture coordinates."""

    position: tuple = (0.0, 0.0, 0.0)
    normal: tuple = (0.0, 0.0, 0.0)
    tex_coords: tuple = (0.0, 0.0)


@dataclass(eq=False)
class Mesh:
    """Indexed triangle list that can be uploaded to and drawn by OpenGL."""

    vertices: list = field(default_factory=list)
    indices: list = field(default_factory=list)
    _vao: object = field(default=None, init=False, repr=False)
    _vbo: object = field(default=None, init=False, repr=False)
    _ebo: object = field(default=None, init=False, repr=False)

    def vertex_array(self):
        """Interleaved float32 vertex data, one row of 8 floats per vertex."""
        rows = [(*v.position, *v.normal, *v.tex_coords) for v in self.vertices]
        return np.array(rows, dtype=np.float32).reshape(-1, _FLOATS_PER_VERTEX)

    def index_array(self):
        """Triangle indices as uint32."""
        return np.array(self.indices, dtype=np.uint32)

    @property
    def uploaded(self):
        return self._vao is not None

    def upload(self):
        """Create the vertex array and buffers on the current GL context."""
        if self.uploaded:
            return
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vertex_data = self.vertex_array().tobytes()
        index_data = self.index_array().tobytes()

        vbo = BufferObject(len(vertex_data), usage=gl.GL_STATIC_DRAW)
        if vertex_data:
            vbo.set_data(vertex_data)
        ebo = BufferObject(len(index_data), usage=gl.GL_STATIC_DRAW)
        if index_data:
            ebo.set_data(index_data)

        vao = VertexArray()
        vao.bind()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo.id)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo.id)
        for location, size, offset in (
            (0, 3, _POSITION_OFFSET),
            (1, 3, _NORMAL_OFFSET),
            (2, 2, _TEX_COORDS_OFFSET),
        ):
            gl.glVertexAttribPointer(location, size, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, offset)
            gl.glEnableVertexAttribArray(location)
        # The element buffer stays bound: the vertex array records it.
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        vao.unbind()

        self._vao, self._vbo, self._ebo = vao, vbo, ebo

    def draw(self):
        """Draw the triangles, uploading the buffers first if needed."""
        from pyglet import gl

        self.upload()
        self._vao.bind()
        gl.glDrawElements(gl.GL_TRIANGLES, len(self.indices), gl.GL_UNSIGNED_INT, 0)

    def release(self):
        """Free the GPU objects; the mesh data is kept and may be uploaded again."""
        for gl_object in (self._vao, self._vbo, self._ebo):
            if gl_object is not None:
                gl_object.delete()
        self._vao = self._vbo = self._ebo = None


def default_mesh():
    """A unit quad in the xy plane made of two triangles."""
    vertices = [
        Vertex((0.5, 0.5, 0.0)),
        Vertex((0.5, -0.5, 0.0)),
        Vertex((-0.5, -0.5, 0.0)),
        Vertex((-0.5, 0.5, 0.0)),
    ]
    return Mesh(vertices, [0, 1, 3, 1, 2, 3])