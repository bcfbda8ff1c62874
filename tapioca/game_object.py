"""Game objects: containers of components living in a scene."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Tuple, Type, Union

from tapioca.component import CompMap, Component, Event
from tapioca.factory import FactoryManager

if TYPE_CHECKING:
    from tapioca.scene import Scene

logger = logging.getLogger("tapioca")

ComponentKey = Union[str, Type[Component]]
ComponentSpec = Tuple[ComponentKey, CompMap]


def _resolve(key: ComponentKey) -> tuple[type[Component] | None, str]:
    """Split a key into the class to instantiate (if given) and its id."""
    if isinstance(key, str):
        return None, key
    if (
        isinstance(key, type)
        and issubclass(key, Component)
        and isinstance(key.component_id, str)
    ):
        return key, key.component_id
    raise TypeError(f"{key!r} is neither a component id nor a component class with an id")


class GameObject:
    """An object of the game, made of components."""

    def __init__(self, component_specs: Iterable[ComponentSpec] | None = None) -> None:
        self.z_order = 0
        self.scene: Scene | None = None
        self.alive = True
        self.handler = ""
        self.component_specs: list[ComponentSpec] = list(component_specs or [])
        self._components: list[tuple[str, Component]] = []

    def _live(self) -> Iterator[Component]:
        return (comp for _, comp in list(self._components) if comp.alive)

    def awake(self) -> None:
        """Call ``awake`` on every component."""
        for _, comp in list(self._components):
            comp.awake()

    def start(self) -> None:
        """Call ``start`` on every component."""
        for _, comp in list(self._components):
            comp.start()

    def update(self, delta_time: int) -> None:
        """Update the live, active components."""
        for comp in self._live():
            if comp.active:
                comp.update(delta_time)

    def fixed_update(self) -> None:
        """Run a fixed step on the live, active components."""
        for comp in self._live():
            if comp.active:
                comp.fixed_update()

    def render(self) -> None:
        """Render the live, active components."""
        for comp in self._live():
            if comp.active:
                comp.render()

    def refresh(self) -> None:
        """Discard the components marked as dead."""
        dead = [comp for _, comp in self._components if not comp.alive]
        self._components = [(key, comp) for key, comp in self._components if comp.alive]
        for comp in dead:
            comp.on_destroy()

    def destroy(self) -> None:
        """Discard every component."""
        components, self._components = self._components, []
        for _, comp in components:
            comp.on_destroy()

    def handle_event(self, event_id: str, info: Any) -> None:
        """Deliver an event to every live component, active or not."""
        for comp in self._live():
            comp.handle_event(event_id, info)

    def die(self) -> None:
        """Mark the object for removal."""
        self.alive = False

    def attach(self, component: Component, component_id: str) -> None:
        """Attach an already initialised component under ``component_id``."""
        component.object = self
        self._components.append((component_id, component))

    def _create(self, key: ComponentKey) -> tuple[Component | None, str]:
        component_class, component_id = _resolve(key)
        if component_class is not None:
            return component_class(), component_id
        comp = FactoryManager.instance().create_component(component_id)
        if comp is None:
            logger.error('GameObject: no builder for component "%s".', component_id)
        return comp, component_id

    def add_component(
        self, component_id: ComponentKey, variables: CompMap | None = None
    ) -> Component | None:
        """Create, initialise, attach, awake and start a component.

        ``component_id`` is a registered id or a component class. Returns None
        if the component cannot be created or rejects its variables.
        """
        comp, key = self._create(component_id)
        if comp is None:
            return None
        if not comp.init_component({} if variables is None else variables):
            comp.on_destroy()
            return None
        self.attach(comp, key)
        comp.awake()
        comp.start()
        return comp

    def add_components(self, specs: Iterable[ComponentSpec]) -> list[Component]:
        """Add several components at once, all or none.

        If any component cannot be created or initialised, the ones already
        created are discarded and an empty list is returned.
        """
        created: list[tuple[str, Component]] = []
        for key, variables in specs:
            comp, component_id = self._create(key)
            if comp is None or not comp.init_component(variables):
                for _, done in created:
                    done.on_destroy()
                if comp is not None:
                    comp.on_destroy()
                return []
            created.append((component_id, comp))

        for component_id, comp in created:
            self.attach(comp, component_id)
        for _, comp in created:
            comp.awake()
        for _, comp in created:
            comp.start()
        return [comp for _, comp in created]

    def get_component(self, component_id: ComponentKey) -> Component | None:
        """First component with the given id or class, or None."""
        _, key = _resolve(component_id)
        return next((comp for k, comp in self._components if k == key), None)

    def get_all_components(self) -> list[Component]:
        """Every component of the object."""
        return [comp for _, comp in self._components]

    def get_components(self, component_id: ComponentKey) -> list[Component]:
        """Every component with the given id or class."""
        _, key = _resolve(component_id)
        return [comp for k, comp in self._components if k == key]

    def push_event(
        self, event_id: str, info: Any = None, global_: bool = True, delay: bool = False
    ) -> None:
        """Send an event.

        A local event without delay goes straight to this object's components;
        anything else goes through the scene to the main loop.
        """
        if not global_ and not delay:
            self.handle_event(event_id, info)
            return
        if self.scene is None:
            logger.warning('GameObject: event "%s" dropped, object has no scene.', event_id)
            return
        self.scene.push_event(Event(self, event_id, info, global_), delay)