"""Models made of meshes, loaded from Wavefront OBJ files."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .mesh import Mesh, Vertex, default_mesh


class ModelLoadError(Exception):
    """A model file could not be read or understood."""


def _parse_floats(parts, count, line_number):
    try:
        values = tuple(float(p) for p in parts[:count])
    except ValueError as exc:
        raise ModelLoadError(f"line {line_number}: bad number") from exc
    if len(values) < count:
        raise ModelLoadError(f"line {line_number}: expected {count} values")
    return values


def _resolve(index_text, count, line_number):
    try:
        index = int(index_text)
    except ValueError as exc:
        raise ModelLoadError(f"line {line_number}: bad index {index_text!r}") from exc
    resolved = index - 1 if index > 0 else count + index
    if index == 0 or not 0 <= resolved < count:
        raise ModelLoadError(f"line {line_number}: index {index} out of range")
    return resolved


def _smooth_normals(positions, triangles):
    """Average the face normals of all corners that share a position."""
    sums = {}
    for triangle in triangles:
        a, b, c = (np.array(positions[i], dtype=np.float64) for i in triangle)
        normal = np.cross(b - a, c - a)
        length = np.linalg.norm(normal)
        if length:
            normal /= length
        for i in triangle:
            key = positions[i]
            sums[key] = sums.get(key, np.zeros(3)) + normal
    normals = []
    for position in positions:
        total = sums.get(position, np.zeros(3))
        length = np.linalg.norm(total)
        normals.append(tuple(float(x) for x in (total / length if length else total)))
    return normals


def _build_mesh(corners, triangles):
    positions = [position for position, _ in corners]
    if all(normal is not None for _, normal in corners):
        normals = [normal for _, normal in corners]
    else:
        normals = _smooth_normals(positions, triangles)
    vertices = [Vertex(p, n) for p, n in zip(positions, normals)]
    indices = [i for triangle in triangles for i in triangle]
    return Mesh(vertices, indices)


def parse_obj(text):
    """Parse OBJ text into triangulated meshes, one per object or group."""
    positions = []
    normals = []
    meshes = []
    corners = []
    triangles = []

    def finish():
        if triangles:
            meshes.append(_build_mesh(corners, triangles))
        corners.clear()
        triangles.clear()

    for line_number, raw in enumerate(text.splitlines(), start=1):
        parts = raw.split("#", 1)[0].split()
        if not parts:
            continue
        keyword, args = parts[0], parts[1:]
        if keyword == "v":
            positions.append(_parse_floats(args, 3, line_number))
        elif keyword == "vn":
            normals.append(_parse_floats(args, 3, line_number))
        elif keyword in ("o", "g"):
            finish()
        elif keyword == "f":
            if len(args) < 3:
                raise ModelLoadError(f"line {line_number}: a face needs three vertices")
            face = []
            for token in args:
                fields = token.split("/")
                position = positions[_resolve(fields[0], len(positions), line_number)]
                normal = None
                if len(fields) >= 3 and fields[2]:
                    normal = normals[_resolve(fields[2], len(normals), line_number)]
                face.append(len(corners))
                corners.append((position, normal))
            triangles.extend((face[0], face[k], face[k + 1]) for k in range(1, len(face) - 1))
    finish()
    return meshes


class Model:
    """A collection of meshes drawn together."""

    def __init__(self):
        self.meshes = []
        self.directory = ""

    def load_default(self):
        """Add the built-in quad mesh."""
        self.meshes.append(default_mesh())

    def load_from_file(self, filename):
        """Read an OBJ file and add its meshes."""
        filename = str(filename)
        try:
            text = Path(filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ModelLoadError(f"cannot read {filename}: {exc}") from exc
        meshes = parse_obj(text)
        if not meshes:
            raise ModelLoadError(f"{filename} holds no faces")
        head, sep, _ = filename.rpartition("/")
        self.directory = head if sep else filename
        self.meshes.extend(meshes)

    def draw(self):
        """Draw every mesh."""
        for mesh in self.meshes:
            mesh.draw()

    def release(self):
        """Free the GPU objects of every mesh."""
        for mesh in self.meshes:
            mesh.release()