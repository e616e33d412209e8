import numpy as np

from modelviewer.camera import Camera
from modelviewer.model import Model
from modelviewer.renderer import CLEAR_COLOR, Renderer
from modelviewer.shader import Shader


class FakeProgram:
    def __init__(self):
        self.uniforms = {}
        self.deleted = False


class FakeBackend:
    def __init__(self):
        self.program = FakeProgram()
        self.used = 0

    def compile_shader(self, source, kind):
        return kind

    def link_program(self, vertex, fragment):
        return self.program

    def delete_shader(self, shader):
        pass

    def use(self, program):
        self.used += 1

    def delete_program(self, program):
        program.deleted = True

    def set_uniform(self, program, name, values):
        program.uniforms[name] = values


class FakeState:
    def __init__(self):
        self.calls = []

    def enable_depth_test(self):
        self.calls.append("depth")

    def clear(self, color):
        self.calls.append(("clear", color))

    def set_wireframe(self):
        self.calls.append("wireframe")


def make_renderer():
    backend = FakeBackend()
    state = FakeState()
    renderer = Renderer(Camera(), Shader("vs", "fs", backend=backend), state=state)
    return renderer, backend, state


def as_matrix(values):
    return np.array(values).reshape(4, 4, order="F")


def test_init_uses_shader_and_enables_depth():
    _, backend, state = make_renderer()
    assert backend.used == 1
    assert state.calls == ["depth"]


def test_begin_frame_clears_with_background_color():
    renderer, _, state = make_renderer()
    renderer.begin_frame()
    assert state.calls[-1] == ("clear", CLEAR_COLOR)
    assert CLEAR_COLOR == (0.2, 0.3, 0.3, 1.0)


def test_begin_frame_sets_camera_matrices():
    renderer, backend, _ = make_renderer()
    renderer.begin_frame()
    reference = Camera()
    uniforms = backend.program.uniforms
    assert np.allclose(as_matrix(uniforms["view"]), reference.view_matrix())
    assert np.allclose(as_matrix(uniforms["projection"]), reference.projection_matrix())


def test_begin_frame_follows_camera_changes():
    renderer, backend, _ = make_renderer()
    renderer.camera.zoom(2.0)
    renderer.begin_frame()
    assert np.allclose(as_matrix(backend.program.uniforms["view"]), renderer.camera.view_matrix())


def test_draw_model_sets_identity_model_matrix():
    renderer, backend, _ = make_renderer()
    renderer.draw_model(Model())
    assert np.array_equal(as_matrix(backend.program.uniforms["model"]), np.identity(4))


def test_enable_wireframe():
    renderer, _, state = make_renderer()
    renderer.enable_wireframe()
    assert state.calls[-1] == "wireframe"


def test_release_frees_shader():
    renderer, backend, _ = make_renderer()
    renderer.release()
    assert backend.program.deleted is True
    assert renderer.shader.released is True