"""Core of a component-based game engine: vectors, quaternions, components, game objects, scenes, transforms and a fixed-step main loop."""

__version__ = "0.1.0"