import dataclasses

import pytest

from tapioca.component import BasicBuilder, Component, ComponentBuilder, Event


class Health(Component):
    component_id = "health"


class Anonymous(Component):
    pass


class _FakeObject:
    def __init__(self):
        self.sent = []

    def push_event(self, event_id, info, global_, delay):
        self.sent.append((event_id, info, global_, delay))


def test_new_component_state():
    comp = Component()
    assert comp.object is None
    assert comp.alive is True
    assert comp.active is True
    assert comp.init_component({}) is True


def test_die_marks_dead():
    comp = Component()
    comp.die()
    assert comp.alive is False


def test_value_from_map_returns_matching_value():
    comp = Component()
    assert comp.value_from_map({"speed": 2.5}, "speed", float) == 2.5
    assert comp.value_from_map({"name": "hero"}, "name", str) == "hero"


def test_value_from_map_missing_name():
    comp = Component()
    assert comp.value_from_map({"speed": 2.5}, "size", float) is None


def test_value_from_map_type_mismatch_is_exact():
    comp = Component()
    assert comp.value_from_map({"speed": 3}, "speed", float) is None
    assert comp.value_from_map({"flag": True}, "flag", int) is None
    assert comp.value_from_map({"flag": True}, "flag", bool) is True


def test_push_event_forwards_to_object():
    comp = Component()
    obj = _FakeObject()
    comp.object = obj
    comp.push_event("jump", 4, global_=False, delay=True)
    comp.push_event("land")
    assert obj.sent == [("jump", 4, False, True), ("land", None, True, False)]


def test_push_event_without_object_raises():
    with pytest.raises(RuntimeError):
        Component().push_event("jump")


def test_basic_builder_creates_fresh_instances():
    builder = BasicBuilder(Health)
    assert builder.component_id == "health"
    first = builder.create_component()
    second = builder.create_component()
    assert isinstance(first, Health)
    assert first is not second


def test_basic_builder_requires_id():
    with pytest.raises(TypeError):
        BasicBuilder(Anonymous)


def test_basic_builder_requires_component_class():
    with pytest.raises(TypeError):
        BasicBuilder(dict)


def test_component_builder_is_abstract():
    with pytest.raises(TypeError):
        ComponentBuilder("health")


def test_event_defaults_and_immutability():
    event = Event(None, "hit")
    assert event.global_ is True
    assert event.info is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.event_id = "other"