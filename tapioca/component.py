"""Components, their builders and the events they exchange."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Union

if TYPE_CHECKING:
    from tapioca.game_object import GameObject

logger = logging.getLogger("tapioca")

# A value a component can be configured with: a one-character string, an
# integer, a float, a boolean, a string or None.
CompValue = Optional[Union[str, int, float, bool]]
CompMap = Dict[str, CompValue]


@dataclass(frozen=True)
class Event:
    """A message sent by a game object."""

    emitter: GameObject | None
    event_id: str
    info: Any = None
    global_: bool = True


class Component:
    """Base class of every component attached to a game object.

    Subclasses that are to be built by :class:`BasicBuilder` or looked up by
    class must set ``component_id`` to a string. The default hooks only keep
    track of how the component has been driven.
    """

    component_id: ClassVar[str | None] = None

    awakened: bool = False
    started: bool = False
    elapsed: int = 0
    fixed_steps: int = 0
    frames_rendered: int = 0
    ui_updates: int = 0
    last_event: tuple[str, Any] | None = None

    def __init__(self) -> None:
        self.object: GameObject | None = None
        self.alive = True
        self.active = True

    def init_component(self, variables: CompMap) -> bool:
        """Read the initial parameters; return whether they were acceptable.

        The default accepts any map whose names are strings.
        """
        return all(isinstance(name, str) for name in variables)

    def awake(self) -> None:
        """Called once all initial components exist, before :meth:`start`."""
        self.awakened = True

    def start(self) -> None:
        """Called once all initial components exist."""
        self.started = True

    def update(self, delta_time: int) -> None:
        """Called every frame with the milliseconds since the previous one."""
        self.elapsed += delta_time

    def fixed_update(self) -> None:
        """Called once per fixed time step."""
        self.fixed_steps += 1

    def render(self) -> None:
        """Draw the component."""
        self.frames_rendered += 1

    def update_ui(self) -> None:
        """Refresh the user interface."""
        self.ui_updates += 1

    def handle_event(self, event_id: str, info: Any) -> None:
        """Receive an event."""
        self.last_event = (event_id, info)

    def on_destroy(self) -> None:
        """Called when the component is discarded."""

    def push_event(
        self, event_id: str, info: Any = None, global_: bool = True, delay: bool = False
    ) -> None:
        """Send an event through the game object this component belongs to."""
        if self.object is None:
            raise RuntimeError("component is not attached to a game object")
        self.object.push_event(event_id, info, global_, delay)

    def value_from_map(self, variables: CompMap, name: str, kind: type) -> CompValue:
        """Return ``variables[name]`` if present and exactly of type ``kind``, else None."""
        if name not in variables:
            logger.warning('value_from_map: variable "%s" not found in the map.', name)
            return None
        value = variables[name]
        if type(value) is not kind:
            logger.error('value_from_map: type mismatch in variable "%s".', name)
            return None
        return value

    def die(self) -> None:
        """Mark the component for removal."""
        self.alive = False


class ComponentBuilder(ABC):
    """Creates components of one id."""

    def __init__(self, component_id: str) -> None:
        self.component_id = component_id

    @abstractmethod
    def create_component(self) -> Component:
        """Create a new component."""


class BasicBuilder(ComponentBuilder):
    """Builder that instantiates a component class with no arguments."""

    def __init__(self, component_class: type[Component]) -> None:
        if not (isinstance(component_class, type) and issubclass(component_class, Component)):
            raise TypeError(f"{component_class!r} is not a Component subclass")
        if not isinstance(component_class.component_id, str):
            raise TypeError(f"{component_class.__name__} has no component_id")
        super().__init__(component_class.component_id)
        self.component_class = component_class

    def create_component(self) -> Component:
        return self.component_class()