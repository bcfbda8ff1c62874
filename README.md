# tapioca

The core of a small component-based game engine, in pure Python with no
dependencies outside the standard library.

| Module | What it holds |
| --- | --- |
| `tapioca.vector2` | `Vector2` and `clamp` |
| `tapioca.vector3` | `Vector3` |
| `tapioca.vector4` | `Vector4` |
| `tapioca.quaternion` | `Quaternion` |
| `tapioca.module` | `Module`, the base class for engine subsystems |
| `tapioca.component` | `Component`, `ComponentBuilder`, `BasicBuilder`, `Event` |
| `tapioca.factory` | `FactoryManager`, a shared registry of component builders |
| `tapioca.game_object` | `GameObject`, a container of components |
| `tapioca.scene` | `Scene`, game objects arranged in z-index layers |
| `tapioca.main_loop` | `MainLoop`, the fixed-step loop that drives modules and scenes |
| `tapioca.transform` | `Transform`, a component for position, rotation, scale and parenting |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Geometry

```python
from tapioca.vector3 import Vector3
from tapioca.quaternion import Quaternion

v = Vector3(1, 0, 0)
q = Quaternion.from_axis_angle(90, Vector3(0, 0, 1))
print(q.rotate_point(v))          # close to Vector3(0.0, 1.0, 0.0)
print(v.cross(Vector3(0, 1, 0)))  # Vector3(0.0, 0.0, 1.0)
print(v.lerp(Vector3(3, 0, 0), 0.5))
```

- A vector built from a single number gives it to every coordinate:
  `Vector3(2)` is `(2, 2, 2)`. `Vector3.from_vector2`, `Vector4.from_vector3`
  and `Vector4.from_vector2` widen smaller vectors; `Vector3.to_vector2` drops `z`.
- `lerp` clamps its factor to the range 0 to 1.
- `normalize()` changes a vector in place and returns its old magnitude; a
  zero vector is left unchanged. `normalized()` returns a new vector.
- `Vector4.magnitude()` only takes `x`, `y` and `z` into account, while
  normalising divides all four coordinates by it.
- `Vector3 * Vector3` is a vector product whose `y` component has the opposite
  sign of `cross`; use `cross` for the right-handed cross product.
- Vectors compare with `==` and are not hashable.
- `Quaternion` can be built from four components, with `from_axis_angle`
  (degrees) or with `from_euler` (a `Vector3` of degrees). `to_euler`
  normalises the quaternion in place and returns degrees. `q * q2` is the
  Hamilton product, `q * 2.0` and `q / 2.0` scale it.

## Components and game objects

Subclass `Component`, give it a `component_id`, and register a builder for it
with the factory:

```python
from tapioca.component import Component, BasicBuilder
from tapioca.factory import FactoryManager
from tapioca.game_object import GameObject

class Health(Component):
    component_id = "Health"

    def init_component(self, variables):
        self.points = self.value_from_map(variables, "points", int) or 100
        return True

FactoryManager.instance().add_builder(BasicBuilder(Health))

player = GameObject()
health = player.add_component("Health", {"points": 50})
assert player.get_component("Health") is health
```

- `add_component` takes a registered id or a component class with a
  `component_id`. It initialises, attaches, awakes and starts the component,
  and returns `None` when the component cannot be built or when
  `init_component` returns false.
- `add_components` takes `(id or class, variables)` pairs and adds all of them
  or, if any fails, none, returning an empty list.
- `value_from_map` returns the value only if it is present and of exactly the
  requested type, and `None` otherwise.
- `die()` marks a component or object for removal; it is discarded at the next
  refresh, when the component's `on_destroy` is called.
- Inactive components (`active = False`) are not updated or rendered but still
  receive events.

## Scenes and the main loop

```python
from tapioca.main_loop import MainLoop
from tapioca.module import Module
from tapioca.scene import Scene

class StopAfterOneSecond(Module):
    def update(self, delta_time):
        super().update(delta_time)
        if self.elapsed >= 1000:
            MainLoop.instance().exit()

loop = MainLoop.instance()
loop.add_module(StopAfterOneSecond())

scene = Scene("level1")
scene.add_object(player, "player", 0)
loop.load_scene(scene)
loop.run()   # runs until exit() is called or no scenes remain
```

- Creating a `MainLoop` creates its assets folder (`"assets"` by default) if it
  does not exist.
- Each iteration runs as many fixed steps of `MainLoop.FIXED_DELTA_TIME`
  milliseconds as the elapsed time calls for (at most
  `MAX_NUM_FIXED_UPDATES + 1`), then delivers delayed events, updates,
  refreshes and renders.
- Scenes passed to `load_scene` are added at the next refresh, which is when
  their `awake` and `start` are called; a scene whose name is already loaded is
  discarded. `delete_scene` takes a scene or a name and removes it at the next
  refresh. The loop stops when no scene is loaded or pending.
- Handlers given to `Scene.add_object` must be unique; `get_handler` finds the
  object again. `render` draws higher z-index layers first.
- `GameObject.push_event` delivers a local, undelayed event straight to the
  object's own components. Anything else goes through its scene to the main
  loop: global events reach every active scene at once, or on the next
  iteration when `delay` is true; delayed local events go back to the object
  that sent them.
- `MainLoop.instance()` and `FactoryManager.instance()` return shared
  instances; `reset()` forgets them.

## Transforms

```python
from tapioca.game_object import GameObject
from tapioca.transform import Transform
from tapioca.vector3 import Vector3

parent = GameObject().add_component(Transform, {"positionX": 1.0})
child = GameObject().add_component(Transform, {"positionX": 2.0})
child.set_parent(parent)
print(child.global_position())   # Vector3(3.0, 0.0, 0.0)
```

`init_component` reads `positionX`, `positionY`, `positionZ`, `rotationX`,
`rotationY`, `rotationZ` (degrees), `scaleX`, `scaleY` and `scaleZ`; each must
be a float, and missing or mistyped values keep their defaults (position 0,
no rotation, scale 1). Changes are announced to the object's components as the
local events `posChanged`, `rotChanged` and `scaleChanged`, and a transform
that receives one passes it on to its children. When a transform is
discarded, its descendants' objects and its own object are marked dead.

Messages go to the standard `logging` logger named `"tapioca"`.

## What it does not do

This package is the engine's core only. It has no window, renderer, input,
audio or physics: `render` hooks exist but draw nothing unless you override
them. It does not read scenes or prefabs from files, has no scripting layer,
and does not load game code on its own; you build scenes and register
component builders from Python. There is no command-line program.