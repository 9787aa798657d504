import pytest

from gamecore.game_object import GameObject
from gamecore.model import Model
from gamecore.scene_graph import SceneGraph


@pytest.fixture
def graph():
    return SceneGraph()


def test_named_object_is_tagged_and_found(graph):
    obj = GameObject(None)
    name = graph.add_game_object(obj, "Apple")
    assert name == "Apple"
    assert obj.tag == "Apple"
    assert graph.game_object("Apple") is obj


def test_empty_name_generates_name(graph):
    first = GameObject(None)
    second = GameObject(None)
    assert graph.add_game_object(first) == "gameObject1"
    assert graph.add_game_object(second, "") == "gameObject2"
    assert second.tag == "gameObject2"


def test_duplicate_name_is_replaced(graph):
    original = GameObject(None)
    duplicate = GameObject(None)
    graph.add_game_object(original, "Dice")
    name = graph.add_game_object(duplicate, "Dice")
    assert name == "gameObject2"
    assert graph.game_object("Dice") is original
    assert graph.game_object(name) is duplicate
    assert len(graph) == 2


def test_unknown_name_returns_none(graph):
    assert graph.game_object("missing") is None


def test_update_spins_every_object(graph):
    objects = [GameObject(None), GameObject(None)]
    for obj in objects:
        graph.add_game_object(obj)
    graph.update(0.016)
    assert all(obj.angle == pytest.approx(0.005) for obj in objects)


def test_models_grouped_by_shader(graph):
    a = Model(shader_program=3)
    b = Model(shader_program=1)
    c = Model(shader_program=3)
    for model in (a, b, c):
        graph.add_model(model)
    models = graph.models
    assert list(models) == [1, 3]
    assert models[3] == [a, c]
    assert models[1] == [b]


def test_game_objects_ordered_by_name(graph):
    graph.add_game_object(GameObject(None), "b")
    graph.add_game_object(GameObject(None), "a")
    assert list(graph.game_objects) == ["a", "b"]


def test_clear_empties_graph(graph):
    graph.add_game_object(GameObject(None), "x")
    graph.add_model(Model(shader_program=2))
    graph.clear()
    assert len(graph) == 0
    assert "x" not in graph
    assert graph.models == {}