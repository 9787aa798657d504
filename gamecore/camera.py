"""Free-look camera driven by yaw, pitch and mouse input."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from gamecore import transforms


class Camera:
    """A perspective camera positioned in world space."""

    def __init__(self, screen_size: Sequence[float]) -> None:
        self.screen_size = (float(screen_size[0]), float(screen_size[1]))
        self.position = np.zeros(3)
        self.field_of_view = 45.0
        self.forward = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.world_up = self.up.copy()
        self.right = np.array([1.0, 0.0, 0.0])
        self.near_plane = 2.0
        self.far_plane = 50.0
        self.yaw = -90.0
        self.pitch = 0.0
        self._update_vectors()

    def set_position(self, position: Sequence[float]) -> None:
        self.position = np.asarray(position, dtype=float).copy()
        self._update_vectors()

    def set_rotation(self, yaw: float, pitch: float) -> None:
        self.yaw = yaw
        self.pitch = pitch
        self._update_vectors()

    def view(self) -> np.ndarray:
        return transforms.look_at(self.position, self.position + self.forward, self.up)

    def perspective(self) -> np.ndarray:
        width, height = self.screen_size
        return transforms.perspective(self.field_of_view, width / height, self.near_plane, self.far_plane)

    def orthographic(self) -> np.ndarray:
        width, height = self.screen_size
        return transforms.ortho(0.0, width, 0.0, height, -1.0, 1.0)

    def process_mouse_movement(self, x_offset: float, y_offset: float) -> None:
        self.yaw += x_offset * 0.5
        self.pitch += y_offset * 0.5
        self.pitch = min(max(self.pitch, -89.0), 89.0)
        if self.yaw < 0.0:
            self.yaw += 360.0
        if self.yaw > 360.0:
            self.yaw -= 360.0
        self._update_vectors()

    def process_mouse_zoom(self, y: int) -> None:
        if y != 0:
            self.position = self.position + float(y) * (self.forward * 2.0)
        self._update_vectors()

    def clipping_planes(self) -> tuple[float, float]:
        return (self.near_plane, self.far_plane)

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        forward = np.array(
            [math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)]
        )
        self.forward = forward / np.linalg.norm(forward)
        right = np.cross(self.forward, self.world_up)
        self.right = right / np.linalg.norm(right)
        up = np.cross(self.right, self.forward)
        self.up = up / np.linalg.norm(up)