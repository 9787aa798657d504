"""Scene objects placed in the world as instances of a model."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from gamecore.geometry import BoundingBox
from gamecore.model import Model

_SPIN_PER_UPDATE = 0.005


class GameObject:
    """An instance of a model with its own position, rotation and scale.

    Changing any of these updates the model instance and the bounding box.
    """

    def __init__(self, model: Model | None, position: Sequence[float] | None = None) -> None:
        self.model = model
        self._position = np.zeros(3) if position is None else np.asarray(position, dtype=float).copy()
        self._angle = 0.0
        self._rotation = np.array([0.0, 1.0, 0.0])
        self._scale = np.ones(3)
        self.tag = ""
        self.hit = False
        self.model_instance = 0
        self.bounding_box = BoundingBox()
        if model is not None:
            self.model_instance = model.create_instance(
                self._position, self._angle, self._rotation, self._scale
            )
            self.bounding_box = model.bounding_box
            self.bounding_box.transform = model.transform(self.model_instance)

    def _sync(self) -> None:
        if self.model is not None:
            self.model.update_instance(
                self.model_instance, self._position, self._angle, self._rotation, self._scale
            )
            self.bounding_box.transform = self.model.transform(self.model_instance)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.asarray(value, dtype=float).copy()
        self._sync()

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = float(value)
        self._sync()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Sequence[float]) -> None:
        self._rotation = np.asarray(value, dtype=float).copy()
        self._sync()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = np.asarray(value, dtype=float).copy()
        if self.model is not None:
            self._sync()
            factor = self._scale if self._scale[0] > 1.0 else self._scale / 2.0
            self.bounding_box.min_vert = self.bounding_box.min_vert * factor
            self.bounding_box.max_vert = self.bounding_box.max_vert * factor

    def update(self, delta_time: float) -> None:
        """Spin the object a fixed step about its rotation axis."""
        self.angle = self._angle + _SPIN_PER_UPDATE

    def set_hit(self, hit: bool, button_type: int) -> None:
        self.hit = hit
        if self.hit:
            print(f"hit: {self.tag}")