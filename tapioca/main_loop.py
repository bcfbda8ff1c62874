"""The engine's main loop: modules, loaded scenes and event dispatch."""

from __future__ import annotations

import logging
import os
import time
from typing import TYPE_CHECKING, ClassVar

from tapioca.component import Event
from tapioca.module import Module

if TYPE_CHECKING:
    from tapioca.scene import Scene

logger = logging.getLogger("tapioca")


def _now_ms() -> int:
    return time.perf_counter_ns() // 1_000_000


def _discard(scene: Scene) -> None:
    """Release every object of a scene that is leaving the loop."""
    for obj in scene.objects:
        obj.destroy()


class MainLoop:
    """Runs the modules and the loaded scenes with a fixed-step update."""

    FIXED_DELTA_TIME: ClassVar[int] = 1000 // 60
    MAX_NUM_FIXED_UPDATES: ClassVar[int] = 150

    _instance: ClassVar[MainLoop | None] = None

    def __init__(self, assets_path: str = "assets") -> None:
        self.assets_path = assets_path
        self.delta_time = 0
        self._finish = False
        self._delayed_events: list[Event] = []
        self._modules: list[Module] = []
        self._loaded_scenes: dict[str, Scene] = {}
        self._scene_buffer: dict[Scene, None] = {}
        self._to_delete: dict[Scene, None] = {}

        if not os.path.exists(assets_path):
            logger.info('MainLoop: the folder "%s" does not exist.', assets_path)
            try:
                os.mkdir(assets_path)
                logger.info("MainLoop: assets folder created.")
            except OSError as exc:
                logger.error("MainLoop: could not create the assets folder. %s", exc)

    @classmethod
    def instance(cls) -> MainLoop:
        """Return the shared loop, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared loop."""
        cls._instance = None

    @property
    def finished(self) -> bool:
        """Whether the loop has been asked to stop."""
        return self._finish

    @property
    def loaded_scenes(self) -> dict[str, Scene]:
        """The loaded scenes by name."""
        return dict(self._loaded_scenes)

    @property
    def modules(self) -> list[Module]:
        """The registered modules, in order."""
        return list(self._modules)

    def exit(self) -> None:
        """Stop the main loop after the current iteration."""
        self._finish = True

    def init(self) -> bool:
        """Initialise the modules in order, stopping at the first failure."""
        return all(module.init() for module in self._modules)

    def init_config(self) -> bool:
        """Apply the game configuration to the modules, stopping at the first failure."""
        return all(module.init_config() for module in self._modules)

    def start(self) -> None:
        """Start the modules and warn if there is nothing to run."""
        for module in self._modules:
            module.start()
        if not self._loaded_scenes and not self._scene_buffer:
            logger.warning("MainLoop: there is no start scene. The application will close.")

    def run(self) -> None:
        """Run until :meth:`exit` is called or no scene is left."""
        self.start()
        self._finish = False
        self.delta_time = 0
        current = _now_ms()
        lag = 0

        while not self._finish:
            now = _now_ms()
            self.delta_time = now - current
            current = now
            lag += self.delta_time

            fixed_updates = 0
            while lag >= self.FIXED_DELTA_TIME:
                self.fixed_update()
                lag -= self.FIXED_DELTA_TIME
                # Avoid the spiral of death when frames get too slow.
                fixed_updates += 1
                if fixed_updates > self.MAX_NUM_FIXED_UPDATES:
                    lag = 0
                    break

            self.handle_delayed_events()
            self.update()
            self.refresh()
            self.render()

    def update(self) -> None:
        """Update the modules and the active scenes."""
        for module in self._modules:
            module.update(self.delta_time)
        for scene in list(self._loaded_scenes.values()):
            if scene.active:
                scene.update(self.delta_time)

    def fixed_update(self) -> None:
        """Run a fixed step on the modules and the active scenes."""
        for module in self._modules:
            module.fixed_update()
        for scene in list(self._loaded_scenes.values()):
            if scene.active:
                scene.fixed_update()

    def render(self) -> None:
        """Render the modules."""
        for module in self._modules:
            module.render()

    def refresh(self) -> None:
        """Drop deleted scenes, bring in pending ones and clear out dead objects.

        The loop stops when no scene is loaded or pending.
        """
        for module in self._modules:
            module.refresh()

        for scene in self._to_delete:
            self._loaded_scenes.pop(scene.name, None)
            _discard(scene)
        self._to_delete.clear()

        if self._scene_buffer:
            pending = list(self._scene_buffer)
            self._scene_buffer.clear()
            for scene in pending:
                if scene.name in self._loaded_scenes:
                    _discard(scene)
                    logger.error('MainLoop: scene "%s" not loaded, it already exists.', scene.name)
                else:
                    self._loaded_scenes[scene.name] = scene
                    scene.awake()
                    scene.start()

        if not self._loaded_scenes and not self._scene_buffer:
            self.exit()
            logger.warning("MainLoop: there are no scenes left. The application will close.")

        for scene in list(self._loaded_scenes.values()):
            if scene.active:
                scene.refresh()

    def handle_delayed_events(self) -> None:
        """Deliver the events delayed from the previous iteration."""
        events, self._delayed_events = self._delayed_events, []
        for event in events:
            if not event.global_ and event.emitter is not None:
                event.emitter.handle_event(event.event_id, event.info)
            else:
                self._broadcast(event)

    def load_scene(self, scene: Scene) -> None:
        """Queue a scene to be loaded at the next refresh."""
        self._scene_buffer[scene] = None

    def delete_scene(self, scene: Scene | str) -> None:
        """Queue a loaded scene, given by object or name, for removal."""
        name = scene if isinstance(scene, str) else scene.name
        loaded = self._loaded_scenes.get(name)
        if loaded is not None:
            self._to_delete[loaded] = None

    def get_scene(self, name: str) -> Scene | None:
        """The loaded scene called ``name``, or None."""
        return self._loaded_scenes.get(name)

    def add_module(self, module: Module) -> None:
        """Register a module; modules run in the order they are added."""
        self._modules.append(module)

    def push_event(self, event: Event, delay: bool = False) -> None:
        """Send an event to the active scenes now, or queue it for the next iteration."""
        if delay:
            self._delayed_events.append(event)
        else:
            self._broadcast(event)

    def _broadcast(self, event: Event) -> None:
        for scene in list(self._loaded_scenes.values()):
            if scene.active:
                scene.handle_event(event.event_id, event.info)