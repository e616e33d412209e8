"""The viewer window: loads a model and orbits around it."""

from __future__ import annotations

import argparse
import sys

from .camera import Camera
from .controls import OrbitControls
from .files import read_file
from .model import Model, ModelLoadError
from .renderer import Renderer
from .shader import Shader, ShaderError

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
DEFAULT_MODEL = "models/monkey.obj"
DEFAULT_VERTEX_SHADER = "shaders/basic.vert"
DEFAULT_FRAGMENT_SHADER = "shaders/basic.frag"


class Engine:
    """Owns the window, camera, controls and render loop."""

    def __init__(
        self,
        model_path=DEFAULT_MODEL,
        vertex_shader=DEFAULT_VERTEX_SHADER,
        fragment_shader=DEFAULT_FRAGMENT_SHADER,
        width=SCREEN_WIDTH,
        height=SCREEN_HEIGHT,
        wireframe=False,
        title="ModelViewer",
    ):
        self.model_path = model_path
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.width = width
        self.height = height
        self.wireframe = wireframe
        self.title = title
        self.camera = Camera()
        self.controls = OrbitControls(self.camera)

    def _open_window(self):
        import pyglet

        config = pyglet.gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        return pyglet.window.Window(
            self.width, self.height, self.title, config=config, resizable=True
        )

    def _attach(self, window, renderer, model, shutdown):
        from pyglet import gl
        from pyglet.event import EVENT_HANDLED
        from pyglet.window import key, mouse

        controls = self.controls

        @window.event
        def on_draw():
            renderer.begin_frame()
            renderer.draw_model(model)
            renderer.end_frame()

        @window.event
        def on_resize(width, height):
            fb_width, fb_height = window.get_framebuffer_size()
            gl.glViewport(0, 0, fb_width, fb_height)
            if fb_height:
                controls.resize(fb_width, fb_height)
            return EVENT_HANDLED

        @window.event
        def on_mouse_press(x, y, button, modifiers):
            if button == mouse.LEFT:
                controls.press()

        @window.event
        def on_mouse_release(x, y, button, modifiers):
            if button == mouse.LEFT:
                controls.release()

        @window.event
        def on_mouse_motion(x, y, dx, dy):
            controls.move(x, window.height - y)

        @window.event
        def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
            controls.move(x, window.height - y)

        @window.event
        def on_mouse_scroll(x, y, scroll_x, scroll_y):
            controls.scroll(scroll_y)

        @window.event
        def on_key_press(symbol, modifiers):
            if symbol == key.ESCAPE:
                shutdown()
                return EVENT_HANDLED

        @window.event
        def on_close():
            shutdown()
            return EVENT_HANDLED

    def run(self):
        """Load the model and shaders, open the window and run until closed."""
        model = Model()
        model.load_from_file(self.model_path)
        vertex_source = read_file(self.vertex_shader)
        fragment_source = read_file(self.fragment_shader)

        import pyglet

        window = self._open_window()
        renderer = None
        closed = False

        def shutdown():
            nonlocal closed
            if closed:
                return
            closed = True
            window.switch_to()
            model.release()
            if renderer is not None:
                renderer.release()
            window.close()

        try:
            renderer = Renderer(self.camera, Shader(vertex_source, fragment_source))
            if self.wireframe:
                renderer.enable_wireframe()
            self._attach(window, renderer, model, shutdown)
            pyglet.app.run(1 / 60)
        finally:
            shutdown()


def main(argv=None):
    """Start the viewer; returns a process exit status."""
    parser = argparse.ArgumentParser(prog="modelviewer", description="View a 3D model.")
    parser.add_argument("model", nargs="?", default=DEFAULT_MODEL, help="OBJ file to show")
    parser.add_argument("--vertex-shader", default=DEFAULT_VERTEX_SHADER)
    parser.add_argument("--fragment-shader", default=DEFAULT_FRAGMENT_SHADER)
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--wireframe", action="store_true", help="draw polygon outlines")
    args = parser.parse_args(argv)

    engine = Engine(
        model_path=args.model,
        vertex_shader=args.vertex_shader,
        fragment_shader=args.fragment_shader,
        width=args.width,
        height=args.height,
        wireframe=args.wireframe,
    )
    try:
        engine.run()
    except (ModelLoadError, ShaderError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())