from dataclasses import dataclass

import pytest

from pengin.ecs import ECS, ComponentView
from pengin.entity_id import NULL_ENTITY_ID


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Name:
    value: str = ""


def test_created_entities_are_distinct_and_exist():
    ecs = ECS()
    a = ecs.create_entity()
    b = ecs.create_entity()
    assert a != b
    assert NULL_ENTITY_ID not in (a, b)
    assert ecs.exists(a) and ecs.exists(b)
    assert ecs.all_entities() == [a, b]


def test_add_and_get_component_returns_same_object():
    ecs = ECS()
    e = ecs.create_entity()
    pos = ecs.add_component(e, Position(1.0, 2.0))
    assert ecs.get_component(e, Position) is pos
    assert ecs.has_component(e, Position)
    assert not ecs.has_component(e, Name)
    pos.x = 5.0
    assert ecs.get_component(e, Position).x == 5.0


def test_component_types_in_added_order():
    ecs = ECS()
    e = ecs.create_entity()
    ecs.add_component(e, Name("a"))
    ecs.add_component(e, Position())
    assert ecs.component_types(e) == [Name, Position]


def test_adding_same_type_twice_raises():
    ecs = ECS()
    e = ecs.create_entity()
    ecs.add_component(e, Position())
    with pytest.raises(KeyError):
        ecs.add_component(e, Position())


def test_add_to_unknown_entity_raises():
    ecs = ECS()
    with pytest.raises(KeyError):
        ecs.add_component(42, Position())


def test_get_missing_component_raises():
    ecs = ECS()
    e = ecs.create_entity()
    with pytest.raises(KeyError):
        ecs.get_component(e, Position)


def test_remove_component_is_deferred():
    ecs = ECS()
    e = ecs.create_entity()
    ecs.add_component(e, Position())
    ecs.remove_component(e, Position)
    assert ecs.has_component(e, Position)
    ecs.clean_up_destroys()
    assert not ecs.has_component(e, Position)
    assert ecs.component_types(e) == []
    assert ecs.exists(e)


def test_destroy_entity_is_deferred_and_removes_components():
    ecs = ECS()
    a = ecs.create_entity()
    b = ecs.create_entity()
    ecs.add_component(a, Position(1, 1))
    ecs.add_component(b, Position(2, 2))
    ecs.destroy_entity(a)
    assert ecs.exists(a)
    ecs.clean_up_destroys()
    assert not ecs.exists(a)
    assert not ecs.has_component(a, Position)
    assert ecs.all_entities() == [b]
    assert ecs.get_component(b, Position) == Position(2, 2)
    assert len(ecs.get_components(Position)) == 1


def test_remove_after_destroy_in_same_cleanup_is_ignored():
    ecs = ECS()
    e = ecs.create_entity()
    ecs.add_component(e, Name("x"))
    ecs.destroy_entity(e)
    ecs.remove_component(e, Name)
    ecs.clean_up_destroys()
    assert not ecs.exists(e)
    with pytest.raises(KeyError):
        ecs.component_types(e)


def test_component_view_iteration_and_items():
    ecs = ECS()
    ids = [ecs.create_entity() for _ in range(3)]
    comps = [ecs.add_component(i, Name(str(i))) for i in ids]
    view = ecs.get_components(Name)
    assert len(view) == 3
    assert list(view) == comps
    assert list(view.items()) == list(zip(ids, comps))
    assert view.get_component(ids[1]) is comps[1]


def test_view_for_unused_type_is_empty():
    ecs = ECS()
    view = ecs.get_components(Position)
    assert len(view) == 0
    assert list(view) == []
    assert list(view.items()) == []
    with pytest.raises(KeyError):
        view.get_component(0)


def test_view_over_none_storage():
    view = ComponentView(None)
    assert len(view) == 0
    with pytest.raises(KeyError):
        view.get_component(1)