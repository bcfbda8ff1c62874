"""Scenes: sets of game objects arranged in layers."""

from __future__ import annotations

import logging
from typing import Any

from tapioca.component import Event
from tapioca.game_object import GameObject
from tapioca.main_loop import MainLoop

logger = logging.getLogger("tapioca")


class Scene:
    """A named collection of game objects, each on a z-index layer."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.active = True
        self.visible = True
        self._objects: dict[GameObject, None] = {}
        self._handlers: dict[str, GameObject] = {}
        self._layers: dict[int, dict[GameObject, None]] = {}

    @property
    def name(self) -> str:
        """Name of the scene."""
        return self._name

    @property
    def objects(self) -> list[GameObject]:
        """The objects of the scene."""
        return list(self._objects)

    def get_handler(self, handler: str) -> GameObject | None:
        """The object registered under ``handler``, or None."""
        return self._handlers.get(handler)

    def add_object(self, obj: GameObject, handler: str = "", z_index: int = 0) -> bool:
        """Add ``obj`` on layer ``z_index``; handlers must be unique.

        Returns False, leaving the object out, when the handler is taken.
        """
        if handler:
            if handler in self._handlers:
                logger.error(
                    'Scene: the handler "%s" already exists, please choose another.', handler
                )
                return False
            obj.handler = handler
            self._handlers[handler] = obj

        self._objects[obj] = None
        self._layers.setdefault(z_index, {})[obj] = None
        obj.scene = self
        obj.z_order = z_index
        return True

    def awake(self) -> None:
        """Awake every object."""
        for obj in list(self._objects):
            obj.awake()

    def start(self) -> None:
        """Start every object."""
        for obj in list(self._objects):
            obj.start()

    def update(self, delta_time: int) -> None:
        """Update the live objects."""
        for obj in list(self._objects):
            if obj.alive:
                obj.update(delta_time)

    def fixed_update(self) -> None:
        """Run a fixed step on the live objects."""
        for obj in list(self._objects):
            if obj.alive:
                obj.fixed_update()

    def render(self) -> None:
        """Render the live objects, higher layers first so they end up underneath."""
        if not self.active or not self.visible:
            return
        for z_index in sorted(self._layers, reverse=True):
            for obj in list(self._layers[z_index]):
                if obj.alive:
                    obj.render()

    def refresh(self) -> None:
        """Discard dead objects, then dead components of the remaining ones."""
        dead = [obj for obj in self._objects if not obj.alive]
        for obj in dead:
            del self._objects[obj]
            if self._handlers.get(obj.handler) is obj:
                del self._handlers[obj.handler]
            layer = self._layers.get(obj.z_order)
            if layer is not None:
                layer.pop(obj, None)
            obj.destroy()

        for obj in list(self._objects):
            obj.refresh()

    def handle_event(self, event_id: str, info: Any) -> None:
        """Deliver an event to the live objects."""
        for obj in list(self._objects):
            if obj.alive:
                obj.handle_event(event_id, info)

    def push_event(self, event: Event, delay: bool = False) -> None:
        """Send an event through the main loop."""
        MainLoop.instance().push_event(event, delay)

    def update_z_index(self, obj: GameObject, z_index: int) -> None:
        """Move ``obj`` to layer ``z_index``; negative and zero indices are ignored."""
        if z_index < 0:
            logger.warning("Scene: an object cannot have a negative z-index.")
            return
        if z_index == 0:
            return

        layer = self._layers.get(obj.z_order)
        if layer is not None:
            layer.pop(obj, None)
        self._layers.setdefault(z_index, {})[obj] = None
        obj.z_order = z_index

    def __repr__(self) -> str:
        return f"Scene({self._name!r})"