"""Frame rendering: clearing, camera matrices and model drawing."""

from __future__ import annotations

import numpy as np

CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)


class _PygletRenderState:
    """Global GL state changes used by the renderer."""

    def enable_depth_test(self):
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)

    def clear(self, color):
        from pyglet import gl

        gl.glClearColor(*color)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def set_wireframe(self):
        from pyglet import gl

        gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_LINE)


class Renderer:
    """Draws models through one shader as seen by one camera."""

    def __init__(self, camera, shader, state=None):
        self.camera = camera
        self.shader = shader
        self.frames_rendered = 0
        self._state = state if state is not None else _PygletRenderState()
        self.shader.use()
        self._state.enable_depth_test()

    def begin_frame(self):
        """Clear the buffers and upload the view and projection matrices."""
        self._state.clear(CLEAR_COLOR)
        self.shader.set_mat4("view", self.camera.view_matrix())
        self.shader.set_mat4("projection", self.camera.projection_matrix())

    def end_frame(self):
        """Finish the frame and count it as rendered."""
        self.frames_rendered += 1

    def draw_model(self, model):
        """Draw a model with the identity model transform."""
        self.shader.set_mat4("model", np.identity(4, dtype=np.float32))
        model.draw()

    def enable_wireframe(self):
        """Draw polygons as outlines from now on."""
        self._state.set_wireframe()

    def release(self):
        """Free the shader program."""
        self.shader.release()