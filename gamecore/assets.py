"""Material and texture registries and the material library loader."""

from __future__ import annotations

import itertools
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Material:
    """Surface properties of a mesh; ``diffuse_map`` is a texture id."""

    diffuse_map: int = 0
    shininess: float = 0.0
    transparency: float = 0.0
    ambient: Vec3 = (1.0, 1.0, 1.0)
    diffuse: Vec3 = (1.0, 1.0, 1.0)
    specular: Vec3 = (0.0, 0.0, 0.0)


class MaterialLibrary:
    """Materials stored by name."""

    def __init__(self) -> None:
        self._materials: dict[str, Material] = {}

    def add(self, name: str, material: Material) -> None:
        self._materials[name] = material

    def get(self, name: str) -> Material:
        """Return the named material, or a default material if unknown."""
        return self._materials.get(name, Material())

    def clear(self) -> None:
        self._materials.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._materials

    def __len__(self) -> int:
        return len(self._materials)


@dataclass(frozen=True)
class Texture:
    """Decoded image data registered under a texture id."""

    texture_id: int = 0
    width: float = 0.0
    height: float = 0.0
    mode: str = "RGB"
    pixels: bytes = b""


class TextureLibrary:
    """Textures loaded from image files, stored by name.

    Ids are handed out from 1 upwards; 0 means "no texture".
    """

    def __init__(self) -> None:
        self._textures: dict[str, Texture] = {}
        self._ids = itertools.count(1)

    def create(self, name: str, file_name: str | os.PathLike[str]) -> Texture:
        """Load an image and register it under ``name``.

        Raises OSError if the file cannot be opened or decoded.
        """
        with Image.open(file_name) as image:
            mode = "RGBA" if len(image.getbands()) == 4 else "RGB"
            converted = image.convert(mode)
        texture = Texture(
            texture_id=next(self._ids),
            width=float(converted.width),
            height=float(converted.height),
            mode=mode,
            pixels=converted.tobytes(),
        )
        self._textures[name] = texture
        return texture

    def get_id(self, name: str) -> int:
        texture = self._textures.get(name)
        return texture.texture_id if texture is not None else 0

    def get_data(self, name: str) -> Texture | None:
        return self._textures.get(name)

    def clear(self) -> None:
        self._textures.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._textures

    def __len__(self) -> int:
        return len(self._textures)


def _texture_for(name: str, textures: TextureLibrary, texture_dir: str | os.PathLike[str]) -> int:
    texture_id = textures.get_id(name)
    if texture_id == 0:
        try:
            textures.create(name, Path(texture_dir) / f"{name}.jpg")
        except OSError as exc:
            logger.error("failed to load texture %s: %s", name, exc)
        texture_id = textures.get_id(name)
    return texture_id


def load_material_library(
    path: str | os.PathLike[str],
    materials: MaterialLibrary,
    textures: TextureLibrary,
    texture_dir: str | os.PathLike[str],
) -> None:
    """Read ``newmtl`` entries and register a material for each one whose
    diffuse texture ``<texture_dir>/<name>.jpg`` could be loaded.

    Raises OSError if the material file cannot be opened.
    """
    material = Material()
    name = ""
    with open(path, encoding="utf-8") as mtl:
        for raw in mtl:
            line = raw.rstrip("\n")
            if line.startswith("newmtl "):
                if material.diffuse_map != 0:
                    materials.add(name, material)
                name = line[7:]
                material = replace(material, diffuse_map=_texture_for(name, textures, texture_dir))
    if material.diffuse_map != 0:
        materials.add(name, material)