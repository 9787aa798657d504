"""The sample game: a start scene that hands over to a picking scene."""

from __future__ import annotations

import os
from pathlib import Path

from gamecore.camera import Camera
from gamecore.collision import CollisionHandler
from gamecore.engine import CoreEngine, GameInterface, Scene
from gamecore.game_object import GameObject
from gamecore.model import Model
from gamecore.scene_graph import SceneGraph

_LOG_NAME = "game.py"
_WORLD_SIZE = 100.0
_MODEL_NAMES = ("Apple", "Dice")


class StartScene(Scene):
    """Switches the engine straight on to the game scene."""

    def __init__(self, engine: CoreEngine) -> None:
        self.engine = engine

    def on_create(self) -> bool:
        self.engine.debug.info("Creating StartScene", _LOG_NAME, 0)
        self.engine.current_scene = 1
        return True

    def update(self, delta_time: float) -> None:
        """The start scene has nothing to animate."""

    def render(self) -> None:
        """The start scene draws nothing."""

    def on_destroy(self) -> None:
        """The start scene holds no resources."""


class GameScene(Scene):
    """Loads the apple and dice models and makes them pickable."""

    def __init__(self, engine: CoreEngine, asset_root: str | os.PathLike[str] = ".") -> None:
        self.engine = engine
        self.asset_root = Path(asset_root)
        self.scene_graph = SceneGraph()
        self.collision_handler: CollisionHandler | None = None
        self.models: list[Model] = []
        self.draw_list: list[tuple[int, Model]] = []

    def on_create(self) -> bool:
        """Set up camera, collisions and models; False if an asset fails."""
        engine = self.engine
        engine.camera = Camera(engine.screen_size)
        engine.camera.set_position((0.0, 0.0, 4.0))

        self.collision_handler = CollisionHandler(_WORLD_SIZE)
        engine.collision_handler = self.collision_handler
        engine.debug.info("Created GameScene", _LOG_NAME, 0)

        engine_dir = self.asset_root / "Engine"
        shader = engine.shader_programs.get("BasicShader", 0)
        for name in _MODEL_NAMES:
            try:
                model = Model.from_files(
                    engine_dir / "models" / f"{name}.obj",
                    engine_dir / "this" / f"{name}.mtl",
                    shader,
                    engine.textures,
                    engine.materials,
                    engine_dir / "Textures",
                )
            except (OSError, ValueError, IndexError) as exc:
                engine.debug.error(f"cant open obj: {name}: {exc}", _LOG_NAME, 0)
                return False
            self.models.append(model)
            self.scene_graph.add_model(model)
            self.scene_graph.add_game_object(GameObject(model), name)

        for name in _MODEL_NAMES:
            self.collision_handler.add_game_object(self.scene_graph.game_object(name))

        self.scene_graph.game_object("Apple").position = (-4.0, -4.0, -4.0)
        return True

    def update(self, delta_time: float) -> None:
        self.scene_graph.update(delta_time)

    def render(self) -> None:
        """Collect this frame's models in shader-program order."""
        self.draw_list = [
            (program, model)
            for program, models in self.scene_graph.models.items()
            for model in models
        ]

    def on_destroy(self) -> None:
        self.scene_graph.clear()
        self.draw_list = []


class Game1(GameInterface):
    """Builds the scene the engine asks for whenever it changes."""

    def __init__(self, asset_root: str | os.PathLike[str] = ".") -> None:
        self.asset_root = Path(asset_root)
        self.current_scene: Scene | None = None
        self.scene_num = 0

    def _engine(self) -> CoreEngine:
        if self.engine is None:
            raise RuntimeError("game is not attached to an engine")
        return self.engine

    def on_create(self) -> bool:
        engine = self._engine()
        if self.current_scene is not None:
            self.current_scene.on_destroy()
            self.current_scene = None
        if engine.current_scene == 0:
            self.current_scene = StartScene(engine)
            if not self.current_scene.on_create():
                return False
        self.scene_num = 0
        return True

    def update(self, delta_time: float) -> None:
        engine = self._engine()
        if self.scene_num != engine.current_scene:
            self._build_scene()
        if self.current_scene is not None:
            self.current_scene.update(delta_time)

    def render(self) -> None:
        if self.current_scene is not None:
            self.current_scene.render()

    def on_destroy(self) -> None:
        if self.current_scene is not None:
            self.current_scene.on_destroy()
        self.current_scene = None

    def _build_scene(self) -> None:
        engine = self._engine()
        self.on_destroy()
        if engine.current_scene == 1:
            self.current_scene = GameScene(engine, self.asset_root)
        else:
            self.current_scene = StartScene(engine)
        if not self.current_scene.on_create():
            engine.is_running = False
        self.scene_num = engine.current_scene