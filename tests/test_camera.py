import math

import numpy as np
import pytest

from modelviewer.camera import Camera, look_at, perspective


def _project(matrix, point):
    clip = matrix @ np.array([*point, 1.0])
    return clip[:3] / clip[3]


def test_perspective_maps_near_and_far_planes_to_depth_bounds():
    matrix = perspective(math.radians(60.0), 1.5, 0.5, 50.0)
    assert _project(matrix, (0.0, 0.0, -0.5))[2] == pytest.approx(-1.0, abs=1e-5)
    assert _project(matrix, (0.0, 0.0, -50.0))[2] == pytest.approx(1.0, abs=1e-4)


def test_perspective_uses_negative_z_as_w():
    matrix = perspective(math.radians(45.0), 1.0, 0.1, 100.0)
    assert matrix[3, 2] == -1.0
    assert matrix[3, 3] == 0.0


def test_perspective_right_angle_fov_has_unit_scale():
    matrix = perspective(math.pi / 2, 1.0, 1.0, 10.0)
    assert matrix[0, 0] == pytest.approx(1.0)
    assert matrix[1, 1] == pytest.approx(1.0)


def test_perspective_aspect_scales_x_only():
    square = perspective(math.radians(45.0), 1.0, 0.1, 100.0)
    wide = perspective(math.radians(45.0), 2.0, 0.1, 100.0)
    assert wide[0, 0] == pytest.approx(square[0, 0] / 2.0)
    assert wide[1, 1] == pytest.approx(square[1, 1])


def test_look_at_moves_eye_to_origin():
    eye = (1.0, 2.0, 3.0)
    view = look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0], atol=1e-5)


def test_look_at_puts_target_on_negative_z():
    eye = np.array([4.0, 1.0, -2.0])
    target = np.array([0.5, 0.0, 1.0])
    view = look_at(eye, target, (0.0, 1.0, 0.0))
    moved = view @ np.append(target, 1.0)
    distance = np.linalg.norm(target - eye)
    assert np.allclose(moved[:3], [0.0, 0.0, -distance], atol=1e-5)


def test_look_at_rotation_is_orthonormal():
    view = look_at((3.0, 2.0, 1.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3].astype(np.float64)
    assert np.allclose(rotation @ rotation.T, np.identity(3), atol=1e-5)


def test_default_camera_values():
    camera = Camera()
    assert camera.radius == 5.0
    assert camera.fov == pytest.approx(math.radians(45.0))
    assert camera.aspect_ratio == pytest.approx(800.0 / 600.0)
    assert np.allclose(camera.position, [0.0, 0.0, 3.0])


def test_view_matrix_places_camera_at_radius():
    camera = Camera()
    view = camera.view_matrix()
    assert np.linalg.norm(camera.position) == pytest.approx(camera.radius, rel=1e-5)
    moved = view @ np.append(camera.target, 1.0)
    assert np.allclose(moved[:3], [0.0, 0.0, -camera.radius], atol=1e-4)


def test_view_matrix_follows_theta():
    camera = Camera(theta=0.0, phi=math.pi / 2)
    camera.view_matrix()
    assert np.allclose(camera.position, [camera.radius, 0.0, 0.0], atol=1e-5)


def test_set_aspect_ratio():
    camera = Camera()
    camera.set_aspect_ratio(1920, 1080)
    assert camera.aspect_ratio == pytest.approx(1920 / 1080)
    projection = camera.projection_matrix()
    expected = perspective(camera.fov, 1920 / 1080, camera.near_plane, camera.far_plane)
    assert np.allclose(projection, expected)


def test_set_aspect_ratio_zero_height_raises():
    with pytest.raises(ValueError):
        Camera().set_aspect_ratio(100, 0)


def test_rotate_adds_angles():
    camera = Camera()
    theta, phi = camera.theta, camera.phi
    camera.rotate(0.25, 0.1)
    assert camera.theta == pytest.approx(theta + 0.25)
    assert camera.phi == pytest.approx(phi + 0.1)


def test_rotate_clamps_phi():
    camera = Camera()
    camera.rotate(0.0, -10.0)
    assert camera.phi == pytest.approx(0.1)
    camera.rotate(0.0, 10.0)
    assert camera.phi == pytest.approx(math.pi - 0.1)


def test_zoom_changes_radius_with_floor():
    camera = Camera()
    camera.zoom(2.0)
    assert camera.radius == pytest.approx(7.0)
    camera.zoom(-100.0)
    assert camera.radius == pytest.approx(0.1)