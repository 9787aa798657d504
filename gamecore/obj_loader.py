"""Wavefront OBJ loading into textured sub-meshes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, TypeVar

import numpy as np

from gamecore.assets import MaterialLibrary, TextureLibrary, load_material_library
from gamecore.geometry import BoundingBox

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coords: tuple[float, float] = (0.0, 0.0)
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class SubMesh:
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    texture_id: int = 0


def _floats(text: str, count: int) -> tuple[float, ...]:
    parts = text.split()
    if len(parts) < count:
        raise ValueError(f"expected {count} numbers in {text!r}")
    return tuple(float(p) for p in parts[:count])


def _face_corner(token: str) -> tuple[int, int, int]:
    parts = token.split("/")
    if len(parts) < 3:
        raise ValueError(f"face corner {token!r} needs position/texture/normal indices")
    return int(parts[0]) - 1, int(parts[1]) - 1, int(parts[2]) - 1


def _pick(items: Sequence[T], index: int, kind: str) -> T:
    if not 0 <= index < len(items):
        raise IndexError(f"{kind} index {index + 1} out of range")
    return items[index]


class ObjLoader:
    """Parses OBJ files; each ``usemtl`` starts a new sub-mesh.

    Note that the vertex list of each sub-mesh holds every vertex built so
    far, not only those of its own faces.
    """

    def __init__(
        self,
        textures: TextureLibrary,
        materials: MaterialLibrary,
        texture_dir: str | os.PathLike[str],
    ) -> None:
        self.textures = textures
        self.materials = materials
        self.texture_dir = Path(texture_dir)
        self.positions: list[tuple[float, float, float]] = []
        self.normals: list[tuple[float, float, float]] = []
        self.tex_coords: list[tuple[float, float]] = []
        self.indices: list[int] = []
        self.normal_indices: list[int] = []
        self.texture_indices: list[int] = []
        self.mesh_vertices: list[Vertex] = []
        self.sub_meshes: list[SubMesh] = []
        self.current_texture = 0
        self._min_vert = [0.0, 0.0, 0.0]
        self._max_vert = [0.0, 0.0, 0.0]

    def load_model(
        self,
        file_name: str | os.PathLike[str],
        material_file: str | os.PathLike[str] | None = None,
    ) -> None:
        """Load an OBJ file, reading its material library first if given.

        A missing material library is logged and skipped; a missing OBJ
        file raises OSError.
        """
        if material_file is not None:
            try:
                load_material_library(material_file, self.materials, self.textures, self.texture_dir)
            except OSError as exc:
                logger.error("could not open material file %s: %s", material_file, exc)

        with open(file_name, encoding="utf-8") as obj:
            for raw in obj:
                line = raw.rstrip("\n")
                if line.startswith("v "):
                    self.positions.append(_floats(line[2:], 3))
                if line.startswith("vn "):
                    self.normals.append(_floats(line[2:], 3))
                if line.startswith("vt "):
                    self.tex_coords.append(_floats(line[2:], 2))
                if line.startswith("f"):
                    tokens = line[2:].split()
                    if len(tokens) < 3:
                        raise ValueError(f"face needs three corners: {line!r}")
                    corners = [_face_corner(t) for t in tokens[:3]]
                    self.indices.extend(c[0] for c in corners)
                    self.texture_indices.extend(c[1] for c in corners)
                    self.normal_indices.extend(c[2] for c in corners)
                elif line.startswith("usemtl "):
                    if self.indices:
                        self._post_process()
                    self._load_material(line[7:])
        self._post_process()

    def bounding_box(self) -> BoundingBox:
        """Bounds of all vertex positions read so far."""
        lo, hi = self._min_vert, self._max_vert
        for vertex in self.positions:
            for axis in range(3):
                if vertex[axis] < lo[axis]:
                    lo[axis] = vertex[axis]
                if vertex[axis] > lo[axis]:
                    hi[axis] = vertex[axis]
        return BoundingBox(np.array(lo), np.array(hi))

    def clear(self) -> None:
        self.positions.clear()
        self.normals.clear()
        self.tex_coords.clear()
        self.indices.clear()
        self.normal_indices.clear()
        self.texture_indices.clear()
        self.mesh_vertices.clear()
        self.sub_meshes.clear()

    def _post_process(self) -> None:
        for index, normal_index, texture_index in zip(
            self.indices, self.normal_indices, self.texture_indices
        ):
            self.mesh_vertices.append(
                Vertex(
                    position=_pick(self.positions, index, "vertex"),
                    normal=_pick(self.normals, normal_index, "normal"),
                    tex_coords=_pick(self.tex_coords, texture_index, "texture coordinate"),
                )
            )
        self.sub_meshes.append(
            SubMesh(list(self.mesh_vertices), list(self.indices), self.current_texture)
        )
        self.indices.clear()
        self.normal_indices.clear()
        self.texture_indices.clear()
        self.current_texture = 0

    def _load_material(self, name: str) -> None:
        self.current_texture = self.textures.get_id(name)
        if self.current_texture == 0:
            try:
                self.textures.create(name, self.texture_dir / f"{name}.jpg")
            except OSError as exc:
                logger.error("failed to load texture %s: %s", name, exc)
            self.current_texture = self.textures.get_id(name)