"""Registry of component builders."""

from __future__ import annotations

import logging
from typing import ClassVar

from tapioca.component import Component, ComponentBuilder
from tapioca.module import Module

logger = logging.getLogger("tapioca")


class FactoryManager(Module):
    """Single shared registry that creates components by id."""

    _instance: ClassVar[FactoryManager | None] = None

    def __init__(self) -> None:
        self._builders: dict[str, ComponentBuilder] = {}

    @classmethod
    def instance(cls) -> FactoryManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared manager."""
        cls._instance = None

    def create_component(self, name: str) -> Component | None:
        """Create a component with the builder registered under ``name``, if any."""
        builder = self._builders.get(name)
        if builder is None:
            return None
        return builder.create_component()

    def add_builder(self, builder: ComponentBuilder) -> None:
        """Register ``builder``, replacing any builder with the same id."""
        logger.info('FactoryManager: adding builder "%s".', builder.component_id)
        self._builders[builder.component_id] = builder

    def __contains__(self, name: object) -> bool:
        return name in self._builders