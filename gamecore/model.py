"""Models: sub-meshes sharing a shader, drawn at several instance transforms."""

from __future__ import annotations

import os
from typing import Sequence

import numpy as np

from gamecore.assets import MaterialLibrary, TextureLibrary
from gamecore.geometry import BoundingBox
from gamecore.obj_loader import ObjLoader, SubMesh
from gamecore.transforms import model_transform


def _copy_box(box: BoundingBox) -> BoundingBox:
    return BoundingBox(box.min_vert, box.max_vert, box.transform)


class Model:
    """A set of sub-meshes with a bounding box and per-instance transforms."""

    def __init__(
        self,
        sub_meshes: Sequence[SubMesh] = (),
        bounding_box: BoundingBox | None = None,
        shader_program: int = 0,
    ) -> None:
        self.sub_meshes: list[SubMesh] = list(sub_meshes)
        self._bounding_box = _copy_box(bounding_box) if bounding_box is not None else BoundingBox()
        self.shader_program = shader_program
        self._instances: list[np.ndarray] = []

    @classmethod
    def from_files(
        cls,
        obj_path: str | os.PathLike[str],
        material_path: str | os.PathLike[str] | None,
        shader_program: int,
        textures: TextureLibrary,
        materials: MaterialLibrary,
        texture_dir: str | os.PathLike[str],
    ) -> Model:
        """Load a model from an OBJ file and its material library."""
        loader = ObjLoader(textures, materials, texture_dir)
        loader.load_model(obj_path, material_path)
        return cls(list(loader.sub_meshes), loader.bounding_box(), shader_program)

    @property
    def bounding_box(self) -> BoundingBox:
        """A copy of the model-space bounding box."""
        return _copy_box(self._bounding_box)

    @property
    def instance_count(self) -> int:
        return len(self._instances)

    def add_mesh(self, mesh: SubMesh) -> None:
        self.sub_meshes.append(mesh)

    def create_instance(
        self,
        position: Sequence[float],
        angle: float,
        rotation: Sequence[float],
        scale_factors: Sequence[float],
    ) -> int:
        """Add an instance and return its index."""
        self._instances.append(model_transform(position, angle, rotation, scale_factors))
        return len(self._instances) - 1

    def update_instance(
        self,
        index: int,
        position: Sequence[float],
        angle: float,
        rotation: Sequence[float],
        scale_factors: Sequence[float],
    ) -> None:
        if not 0 <= index < len(self._instances):
            raise IndexError(f"no model instance {index}")
        self._instances[index] = model_transform(position, angle, rotation, scale_factors)

    def transform(self, index: int) -> np.ndarray:
        """A copy of the transform of instance ``index``."""
        if not 0 <= index < len(self._instances):
            raise IndexError(f"no model instance {index}")
        return self._instances[index].copy()