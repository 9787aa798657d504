from gamecore.camera import Camera
from gamecore.collision import CollisionHandler
from gamecore.game_object import GameObject
from gamecore.geometry import BoundingBox
from gamecore.model import Model

SCREEN = (800, 600)
CENTRE = (400, 300)


def _object(position, tag):
    go = GameObject(Model([], BoundingBox([-1, -1, -1], [1, 1, 1]), 0), position)
    go.tag = tag
    return go


def test_add_game_object_registers_collider():
    handler = CollisionHandler(100)
    obj = _object((0, 0, -10), "a")
    handler.add_game_object(obj)
    assert handler.colliders == [obj]
    assert any(obj in leaf.objects for leaf in handler.partition.root.leaves())


def test_click_centre_hits_object_in_front():
    handler = CollisionHandler(100)
    obj = _object((0, 0, -10), "a")
    handler.add_game_object(obj)
    camera = Camera(SCREEN)
    assert handler.update(CENTRE, 1, SCREEN, camera) is obj
    assert obj.hit is True
    assert handler.prev_collisions == [obj]


def test_click_corner_misses_and_clears_previous():
    handler = CollisionHandler(100)
    obj = _object((0, 0, -10), "a")
    handler.add_game_object(obj)
    camera = Camera(SCREEN)
    handler.update(CENTRE, 1, SCREEN, camera)
    assert handler.update((0, 0), 1, SCREEN, camera) is None
    assert obj.hit is False
    assert handler.prev_collisions == []


def test_nearest_object_is_picked():
    handler = CollisionHandler(100)
    near_obj = _object((0, 0, -10), "near")
    far_obj = _object((0, 0, -20), "far")
    handler.add_game_object(far_obj)
    handler.add_game_object(near_obj)
    camera = Camera(SCREEN)
    assert handler.update(CENTRE, 3, SCREEN, camera) is near_obj
    assert far_obj.hit is False


def test_object_behind_camera_is_not_hit():
    handler = CollisionHandler(100)
    obj = _object((0, 0, 10), "behind")
    handler.add_game_object(obj)
    camera = Camera(SCREEN)
    assert handler.update(CENTRE, 1, SCREEN, camera) is None
    assert obj.hit is False