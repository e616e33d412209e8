# modelviewer

A small 3D model viewer. It opens a window, loads a Wavefront OBJ model, and
draws it with one GLSL shader program and depth testing. An orbit camera
circles the model so you can look at it from any side.

## Installation

```
pip install .
```

This needs an OpenGL 3.3 core profile driver. `numpy` and `pyglet` are
installed as dependencies.

## Running

```
modelviewer
```

With no arguments the viewer opens an 800×600 window. It loads
`models/monkey.obj` and reads its shaders from `shaders/basic.vert` and
`shaders/basic.frag`. These paths are relative to the working directory.

```
modelviewer [model] [--vertex-shader PATH] [--fragment-shader PATH]
            [--width N] [--height N] [--wireframe]
```

| Option | Meaning |
|---|---|
| `model` | OBJ file to show |
| `--vertex-shader` | vertex shader source file |
| `--fragment-shader` | fragment shader source file |
| `--width`, `--height` | initial window size |
| `--wireframe` | draw polygon outlines instead of filled faces |

If the model or a shader file cannot be read, or a shader fails to compile
or link, the command prints `error: ...` to standard error and exits with
status 1.

The shaders receive three `mat4` uniforms: `model`, `view` and `projection`.
The vertex attributes are at these locations:

| Location | Attribute |
|---|---|
| 0 | position (vec3) |
| 1 | normal (vec3) |
| 2 | texture coordinates (vec2) |

The frame is cleared to the colour `(0.2, 0.3, 0.3)`.

### Controls

| Input | Action |
|---|---|
| Left mouse button + drag | Orbit the camera around the model |
| Scroll wheel | Zoom in or out. The distance never goes below 0.1 |
| Window resize | Changes the aspect ratio of the projection to match |
| Escape | Closes the window |

The camera's polar angle stays between 0.1 and π − 0.1 radians, so the view
never flips over.

## OBJ support

`modelviewer.model.parse_obj` reads these statements:

- `v`: positions
- `vn`: normals
- `f`: faces, which may be polygons and are split into triangle fans
- `o` and `g`: each one starts a new mesh

Face indices may be negative, which counts back from the end. Comments after
`#` are ignored, and so are all other statements. If a mesh's faces do not
all give normals, smooth normals are computed from the face geometry. A
malformed line raises `ModelLoadError` with its line number.

## Using it as a library

The pieces of the viewer can also be used on their own:

```python
from modelviewer.camera import Camera
from modelviewer.model import parse_obj

camera = Camera()
camera.rotate(0.1, -0.05)
camera.zoom(-1.0)
view = camera.view_matrix()              # 4x4 numpy float32 array
projection = camera.projection_matrix()

with open("models/monkey.obj") as fh:
    meshes = parse_obj(fh.read())        # a list of Mesh objects
```

The matrices are in row-major layout, so a point transforms as
`projection @ view @ point`. `modelviewer.camera` also has the free
functions `perspective(fov, aspect, near, far)` and
`look_at(eye, target, up)`.

Each `Mesh` returns its interleaved vertex data from `vertex_array()`, with 8
floats per vertex. It returns its triangle indices as `uint32` from
`index_array()`. `modelviewer.mesh.default_mesh()` returns a unit quad made of
two triangles. `Model.load_default()` adds that quad to a model.

`OrbitControls` in `modelviewer.controls` turns press, release, cursor
motion, scroll and resize events into camera moves. It needs no window.

The camera, the parser, `Mesh.vertex_array`/`index_array` and `OrbitControls`
do not need an OpenGL context. `Mesh.upload`, `Mesh.draw`, `Model.draw`,
`Shader` and `Renderer` need one.

`Model.load_from_file` raises `ModelLoadError` if the file cannot be read,
cannot be parsed, or holds no faces. `Shader` raises `ShaderError` if a
shader fails to compile or link. It also raises `ShaderError` if the shader
is used after `release()`.

## What it does not do

The viewer reads OBJ geometry only. It does not load other model formats,
materials (`mtllib`/`usemtl`) or textures. Texture coordinates in the file
are ignored, and every vertex gets `(0, 0)`. The model is always drawn with
the identity model transform, and there is no way to move it or to choose a
mesh on its own.

## Tests

```
pip install .[test]
pytest
```