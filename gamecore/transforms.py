"""4x4 matrix helpers for projection, view and model transforms.

Matrices are numpy arrays acting on column vectors (``m @ v``), so the
translation lives in the last column.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def _vec3(v: Vector) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` is in radians."""
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Orthographic projection."""
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(eye: Vector, center: Vector, up: Vector) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec3(eye)
    f = _normalize(_vec3(center) - eye_v)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


def translate(matrix: np.ndarray, offset: Vector) -> np.ndarray:
    t = np.identity(4)
    t[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ t


def rotate(matrix: np.ndarray, angle: float, axis: Vector) -> np.ndarray:
    """Rotate by ``angle`` radians about ``axis``."""
    a = _normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    r = np.identity(4)
    r[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix: np.ndarray, factors: Vector) -> np.ndarray:
    s = np.identity(4)
    s[:3, :3] = np.diag(_vec3(factors))
    return np.asarray(matrix, dtype=float) @ s


def model_transform(position: Vector, angle: float, rotation: Vector, scale_factors: Vector) -> np.ndarray:
    """Translate, then rotate, then scale, starting from identity."""
    m = translate(np.identity(4), position)
    m = rotate(m, angle, rotation)
    return scale(m, scale_factors)