"""Orbit camera and the projection and view matrices it produces.

Matrices are numpy float32 arrays in row-major (mathematical) layout, so a
point transforms as ``matrix @ point``. Transpose before handing them to
OpenGL, which expects column-major data.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_MIN_PHI = 0.1
_MIN_RADIUS = 0.1


def perspective(fov, aspect, near, far):
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    f = 1.0 / math.tan(fov / 2.0)
    matrix = np.zeros((4, 4), dtype=np.float32)
    matrix[0, 0] = f / aspect
    matrix[1, 1] = f
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def _normalize(vector):
    length = np.linalg.norm(vector)
    return vector / length if length else vector


def look_at(eye, target, up):
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    forward = _normalize(target - eye)
    side = _normalize(np.cross(forward, up))
    true_up = np.cross(side, forward)

    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -side @ eye
    matrix[1, 3] = -true_up @ eye
    matrix[2, 3] = forward @ eye
    return matrix.astype(np.float32)


def _vec3(x, y, z):
    return field(default_factory=lambda: np.array([x, y, z], dtype=np.float32))


@dataclass
class Camera:
    """A camera orbiting its target on a sphere given by radius, theta and phi."""

    fov: float = math.radians(45.0)
    aspect_ratio: float = 800.0 / 600.0
    near_plane: float = 0.1
    far_plane: float = 100.0
    position: np.ndarray = _vec3(0.0, 0.0, 3.0)
    target: np.ndarray = _vec3(0.0, 0.0, 0.0)
    up: np.ndarray = _vec3(0.0, 1.0, 0.0)
    radius: float = 5.0
    theta: float = math.radians(45.0)
    phi: float = math.radians(45.0)

    def projection_matrix(self):
        """The perspective projection for the current field of view and aspect."""
        return perspective(self.fov, self.aspect_ratio, self.near_plane, self.far_plane)

    def view_matrix(self):
        """Place the camera from its spherical coordinates and return the view."""
        self.position = np.array(
            [
                self.radius * math.sin(self.phi) * math.cos(self.theta),
                self.radius * math.cos(self.phi),
                self.radius * math.sin(self.phi) * math.sin(self.theta),
            ],
            dtype=np.float32,
        )
        return look_at(self.position, self.target, self.up)

    def set_aspect_ratio(self, width, height):
        """Set the aspect ratio from a framebuffer size."""
        if height == 0:
            raise ValueError("height must not be zero")
        self.aspect_ratio = float(width) / float(height)

    def rotate(self, d_theta, d_phi):
        """Orbit around the target; phi is kept away from the poles."""
        self.theta += d_theta
        self.phi = min(max(self.phi + d_phi, _MIN_PHI), math.pi - _MIN_PHI)

    def zoom(self, dr):
        """Move towards or away from the target, never closer than 0.1."""
        self.radius = max(_MIN_RADIUS, self.radius + dr)