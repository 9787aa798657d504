"""Registry of the models and named game objects that make up a scene."""

from __future__ import annotations

import logging

from gamecore.game_object import GameObject
from gamecore.model import Model

logger = logging.getLogger(__name__)


class SceneGraph:
    """Models grouped by shader program, and game objects stored by name.

    Both collections are visited in key order, as with an ordered map.
    """

    def __init__(self) -> None:
        self._models: dict[int, list[Model]] = {}
        self._game_objects: dict[str, GameObject] = {}

    @property
    def models(self) -> dict[int, list[Model]]:
        """Models per shader program, ordered by program id."""
        return {program: list(self._models[program]) for program in sorted(self._models)}

    @property
    def game_objects(self) -> dict[str, GameObject]:
        """Game objects ordered by name."""
        return {name: self._game_objects[name] for name in sorted(self._game_objects)}

    def add_model(self, model: Model) -> None:
        self._models.setdefault(model.shader_program, []).append(model)

    def _generated_name(self) -> str:
        return f"gameObject{len(self._game_objects) + 1}"

    def add_game_object(self, game_object: GameObject, name: str = "") -> str:
        """Register a game object, tag it with its name and return the name.

        An empty name, or one already taken, is replaced by a generated
        ``gameObject<N>`` name, N being the number of objects after adding.
        """
        if name and name in self._game_objects:
            logger.error("trying to add game object with name %s which already exists", name)
            name = ""
        if not name:
            name = self._generated_name()
        game_object.tag = name
        self._game_objects[name] = game_object
        return name

    def game_object(self, name: str) -> GameObject | None:
        return self._game_objects.get(name)

    def update(self, delta_time: float) -> None:
        for name in sorted(self._game_objects):
            self._game_objects[name].update(delta_time)

    def clear(self) -> None:
        self._game_objects.clear()
        self._models.clear()

    def __len__(self) -> int:
        return len(self._game_objects)

    def __contains__(self, name: object) -> bool:
        return name in self._game_objects