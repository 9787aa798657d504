"""Core of a small 3D game engine: matrices, camera, OBJ/MTL assets, octree picking, scene graph and frame loop."""

__version__ = "0.1.0"