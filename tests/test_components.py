import pytest

from cardtable.components import CardObject, Component, Entity, Transform
from cardtable.enums import CardObjectKind, ComponentType
from cardtable.vector import Vector2


def test_entity_name_defaults_empty_and_is_settable():
    entity = Entity()
    assert entity.name == ""
    entity.name = "table"
    assert entity.name == "table"


def test_component_keeps_kind():
    comp = Component(ComponentType.AUDIO, name="sound")
    assert comp.kind is ComponentType.AUDIO
    assert comp.name == "sound"


def test_component_kind_is_read_only():
    comp = Component(ComponentType.COLLIDER)
    with pytest.raises(AttributeError):
        comp.kind = ComponentType.AUDIO
    assert comp.kind is ComponentType.COLLIDER


def test_component_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Component(99)


def test_transform_defaults():
    t = Transform()
    assert t.kind is ComponentType.TRANSFORM
    assert t.pos == Vector2()
    assert t.size == Vector2()


def test_transform_pos_and_size_round_trip():
    t = Transform()
    t.pos = Vector2(10, 20)
    t.size = Vector2(30, 40)
    assert t.pos == Vector2(10, 20)
    assert t.size == Vector2(30, 40)


def test_transform_lifecycle_keeps_state():
    t = Transform(Vector2(1, 2), Vector2(3, 4))
    t.initialize()
    t.update()
    t.render(object())
    t.release()
    assert t.pos == Vector2(1, 2)
    assert t.size == Vector2(3, 4)


def test_card_object_kind():
    part = CardObject(CardObjectKind.FRAME)
    assert part.kind is CardObjectKind.FRAME
    part.initialize()
    part.update()
    part.render(None)
    part.release()
    assert part.kind is CardObjectKind.FRAME
    assert isinstance(part, Entity)