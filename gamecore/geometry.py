"""Bounding boxes, rays and ray picking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from gamecore.camera import Camera

_PARALLEL_EPSILON = 0.001


def _as_vec3(v: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(3).copy()


@dataclass
class BoundingBox:
    """An axis-aligned box in model space with a model transform."""

    min_vert: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max_vert: np.ndarray = field(default_factory=lambda: np.zeros(3))
    transform: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        self.min_vert = _as_vec3(self.min_vert)
        self.max_vert = _as_vec3(self.max_vert)
        self.transform = np.asarray(self.transform, dtype=float).reshape(4, 4).copy()

    def transformed_point(self, point: Sequence[float] | np.ndarray) -> np.ndarray:
        """Offset a point by this box's translation only."""
        return self.transform[:3, 3] + _as_vec3(point)

    def intersects(self, other: BoundingBox) -> bool:
        """Strict overlap test of the translated boxes."""
        lo = self.transformed_point(self.min_vert)
        hi = self.transformed_point(self.max_vert)
        other_lo = other.transformed_point(other.min_vert)
        other_hi = other.transformed_point(other.max_vert)
        return bool(np.all(hi > other_lo) and np.all(lo < other_hi))


@dataclass
class Ray:
    origin: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))
    intersection_distance: float = 0.0

    def __post_init__(self) -> None:
        self.origin = _as_vec3(self.origin)
        self.direction = _as_vec3(self.direction)

    def is_colliding(self, box: BoundingBox, near: float, far: float) -> bool:
        """Test against an oriented box between ``near`` and ``far``.

        On a miss ``intersection_distance`` is left at -1.
        """
        self.intersection_distance = -1.0
        return ray_obb_intersection(self, box, near, far)


def ray_obb_intersection(ray: Ray, box: BoundingBox, near: float, far: float) -> bool:
    """Slab test of a ray against a box oriented by its transform.

    On a hit, stores the entry distance on the ray and returns True.
    """
    model = box.transform
    t_min = near
    t_max = far
    delta = model[:3, 3] - ray.origin

    for i in range(3):
        axis = model[:3, i]
        e = float(np.dot(axis, delta))
        f = float(np.dot(ray.direction, axis))
        if abs(f) > _PARALLEL_EPSILON:
            t1 = (e + box.min_vert[i]) / f
            t2 = (e + box.max_vert[i]) / f
            if t1 > t2:
                t1, t2 = t2, t1
            t_max = min(t_max, t2)
            t_min = max(t_min, t1)
            if t_max < t_min:
                return False
        elif -e + box.min_vert[i] > 0.0 or -e + box.max_vert[i] < 0.0:
            return False

    ray.intersection_distance = float(t_min)
    return True


def screen_pos_to_world_ray(
    mouse: Sequence[float], screen_size: Sequence[float], camera: Camera
) -> Ray:
    """Unproject a screen position into a world-space ray from the near plane."""
    x = (mouse[0] / screen_size[0] - 0.5) * 2.0
    y = (mouse[1] / screen_size[1] - 0.5) * 2.0
    inverse = np.linalg.inv(camera.perspective() @ camera.view())

    start = inverse @ np.array([x, y, -1.0, 1.0])
    start = start / start[3]
    end = inverse @ np.array([x, y, 0.0, 1.0])
    end = end / end[3]

    direction = end[:3] - start[:3]
    direction = direction / np.linalg.norm(direction)
    return Ray(start[:3], direction)