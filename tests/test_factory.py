import pytest

from tapioca.component import BasicBuilder, Component, ComponentBuilder
from tapioca.factory import FactoryManager


class Sprite(Component):
    component_id = "sprite"


class _ConstantBuilder(ComponentBuilder):
    def __init__(self, component_id, component):
        super().__init__(component_id)
        self.component = component

    def create_component(self):
        return self.component


@pytest.fixture(autouse=True)
def fresh_factory():
    FactoryManager.reset()
    yield
    FactoryManager.reset()


def test_instance_is_shared():
    FactoryManager.instance().add_builder(BasicBuilder(Sprite))
    assert ("sprite" in FactoryManager.instance()) is True


def test_reset_forgets_builders():
    FactoryManager.instance().add_builder(BasicBuilder(Sprite))
    FactoryManager.reset()
    assert FactoryManager.instance().create_component("sprite") is None


def test_unknown_component_is_none():
    assert FactoryManager.instance().create_component("sprite") is None


def test_registered_builder_creates_component():
    factory = FactoryManager.instance()
    factory.add_builder(BasicBuilder(Sprite))
    assert "sprite" in factory
    assert isinstance(factory.create_component("sprite"), Sprite)


def test_later_builder_replaces_earlier():
    factory = FactoryManager.instance()
    factory.add_builder(BasicBuilder(Sprite))
    fixed = Sprite()
    factory.add_builder(_ConstantBuilder("sprite", fixed))
    assert factory.create_component("sprite") is fixed