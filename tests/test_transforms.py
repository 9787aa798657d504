import math

import numpy as np
import pytest

from gamecore import transforms


def apply(m, point):
    v = m @ np.append(np.asarray(point, dtype=float), 1.0)
    return v[:3] / v[3]


def test_translate_moves_point():
    m = transforms.translate(np.identity(4), (1.0, 2.0, 3.0))
    assert np.allclose(apply(m, (0.0, 0.0, 0.0)), (1.0, 2.0, 3.0))
    assert np.allclose(m[:3, 3], (1.0, 2.0, 3.0))


def test_rotate_by_zero_is_identity():
    m = transforms.rotate(np.identity(4), 0.0, (0.0, 1.0, 0.0))
    assert np.allclose(m, np.identity(4))


def test_rotate_quarter_turn_about_z():
    m = transforms.rotate(np.identity(4), math.pi / 2, (0.0, 0.0, 5.0))
    assert np.allclose(apply(m, (1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))


def test_rotation_is_orthonormal():
    m = transforms.rotate(np.identity(4), 0.7, (1.0, 2.0, 3.0))
    r = m[:3, :3]
    assert np.allclose(r.T @ r, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        transforms.rotate(np.identity(4), 1.0, (0.0, 0.0, 0.0))


def test_scale_diagonal():
    m = transforms.scale(np.identity(4), (2.0, 3.0, 4.0))
    assert np.allclose(np.diag(m), (2.0, 3.0, 4.0, 1.0))


def test_model_transform_identity():
    m = transforms.model_transform((0.0, 0.0, 0.0), 0.0, (0.0, 1.0, 0.0), (1.0, 1.0, 1.0))
    assert np.allclose(m, np.identity(4))


def test_model_transform_translation_column_is_position():
    m = transforms.model_transform((4.0, -2.0, 1.0), 1.2, (0.0, 1.0, 0.0), (2.0, 2.0, 2.0))
    assert np.allclose(m[:3, 3], (4.0, -2.0, 1.0))


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = (1.0, 2.0, 3.0)
    center = (1.0, 2.0, -7.0)
    view = transforms.look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(apply(view, eye), (0.0, 0.0, 0.0))
    ahead = apply(view, center)
    assert np.allclose(ahead[:2], (0.0, 0.0))
    assert ahead[2] < 0


def test_perspective_maps_near_and_far_to_ndc_bounds():
    proj = transforms.perspective(0.8, 1.5, 2.0, 50.0)
    assert apply(proj, (0.0, 0.0, -2.0))[2] == pytest.approx(-1.0)
    assert apply(proj, (0.0, 0.0, -50.0))[2] == pytest.approx(1.0)


def test_ortho_maps_corners_to_unit_cube():
    m = transforms.ortho(0.0, 800.0, 0.0, 600.0, -1.0, 1.0)
    assert np.allclose(apply(m, (0.0, 0.0, 0.0))[:2], (-1.0, -1.0))
    assert np.allclose(apply(m, (800.0, 600.0, 0.0))[:2], (1.0, 1.0))


def test_bad_vector_shape_raises():
    with pytest.raises(ValueError):
        transforms.translate(np.identity(4), (1.0, 2.0))