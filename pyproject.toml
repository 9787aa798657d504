[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecore"
version = "0.1.0"
description = "Core of a small 3D game engine: camera, OBJ/MTL loading, models, octree picking, a scene graph and a frame loop."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["game engine", "3d", "octree", "ray casting", "picking", "obj", "mtl", "scene graph", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gamecore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
