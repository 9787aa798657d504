"""Mouse picking of game objects through the octree."""

from __future__ import annotations

from typing import Sequence

from gamecore.camera import Camera
from gamecore.game_object import GameObject
from gamecore.geometry import screen_pos_to_world_ray
from gamecore.octree import OctSpatialPartition


class CollisionHandler:
    """Tracks pickable objects and which one the mouse last selected."""

    def __init__(self, world_size: float) -> None:
        self.colliders: list[GameObject] = []
        self.prev_collisions: list[GameObject] = []
        self.partition = OctSpatialPartition(world_size)

    def add_game_object(self, game_object: GameObject) -> None:
        self.colliders.append(game_object)
        self.partition.add_object(game_object)

    def update(
        self,
        mouse_position: Sequence[float],
        button_type: int,
        screen_size: Sequence[float],
        camera: Camera,
    ) -> GameObject | None:
        """Pick the object under the mouse, clearing the previous pick."""
        ray = screen_pos_to_world_ray(mouse_position, screen_size, camera)
        near, far = camera.clipping_planes()
        hit_result = self.partition.get_collision(ray, near, far)

        if hit_result is not None:
            hit_result.set_hit(True, button_type)

        for prev in self.prev_collisions:
            if prev is not hit_result:
                prev.set_hit(False, button_type)

        self.prev_collisions = [hit_result] if hit_result is not None else []
        return hit_result