import numpy as np
import pytest

from gamecore.camera import Camera
from gamecore.geometry import BoundingBox, Ray, ray_obb_intersection, screen_pos_to_world_ray


def translated(offset):
    m = np.identity(4)
    m[:3, 3] = offset
    return m


def unit_box(transform=None):
    return BoundingBox(
        (-1.0, -1.0, -1.0),
        (1.0, 1.0, 1.0),
        np.identity(4) if transform is None else transform,
    )


def test_transformed_point_adds_translation():
    box = unit_box(translated((5.0, 6.0, 7.0)))
    assert np.allclose(box.transformed_point((1.0, 1.0, 1.0)), (6.0, 7.0, 8.0))


def test_overlapping_boxes_intersect():
    a = unit_box()
    b = BoundingBox((0.5, 0.5, 0.5), (2.0, 2.0, 2.0))
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_boxes_do_not_intersect():
    a = unit_box()
    b = BoundingBox((1.0, -1.0, -1.0), (3.0, 1.0, 1.0))
    assert not a.intersects(b)


def test_translation_separates_boxes():
    a = unit_box()
    b = unit_box(translated((10.0, 0.0, 0.0)))
    assert not a.intersects(b)


def test_ray_hits_box_with_entry_distance():
    ray = Ray((0.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    assert ray.is_colliding(unit_box(), 0.0, 100.0)
    assert ray.intersection_distance == pytest.approx(9.0)


def test_ray_pointing_away_misses():
    ray = Ray((0.0, 0.0, 10.0), (0.0, 0.0, 1.0))
    assert not ray.is_colliding(unit_box(), 0.0, 100.0)
    assert ray.intersection_distance == -1.0


def test_parallel_ray_outside_slab_misses():
    ray = Ray((5.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    assert not ray_obb_intersection(ray, unit_box(), 0.0, 100.0)


def test_box_beyond_far_plane_misses():
    ray = Ray((0.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    assert not ray_obb_intersection(ray, unit_box(), 0.0, 5.0)


def test_translated_box_is_hit_where_it_is():
    box = unit_box(translated((4.0, 0.0, 0.0)))
    hit = Ray((4.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    miss = Ray((0.0, 0.0, 10.0), (0.0, 0.0, -1.0))
    assert hit.is_colliding(box, 0.0, 100.0)
    assert not miss.is_colliding(box, 0.0, 100.0)


def test_screen_centre_ray_follows_camera_forward():
    camera = Camera((800, 600))
    camera.set_position((0.0, 0.0, 4.0))
    ray = screen_pos_to_world_ray((400.0, 300.0), (800.0, 600.0), camera)
    assert np.linalg.norm(ray.direction) == pytest.approx(1.0)
    assert np.allclose(ray.direction, camera.forward)
    near, _ = camera.clipping_planes()
    assert np.dot(ray.origin - camera.position, camera.forward) == pytest.approx(near)


def test_screen_ray_picks_box_in_front_of_camera():
    camera = Camera((800, 600))
    camera.set_position((0.0, 0.0, 10.0))
    ray = screen_pos_to_world_ray((400.0, 300.0), (800.0, 600.0), camera)
    assert ray.is_colliding(unit_box(), *camera.clipping_planes())
    assert ray.intersection_distance > 0.0