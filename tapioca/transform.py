"""Position, rotation and scale of a game object within a hierarchy."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from tapioca.component import CompMap, Component
from tapioca.quaternion import Quaternion
from tapioca.vector3 import Vector3

logger = logging.getLogger("tapioca")


def _copy(vector: Vector3) -> Vector3:
    return Vector3(vector.x, vector.y, vector.z)


def _scaled(point: Vector3, scale: Vector3) -> Vector3:
    return Vector3(point.x * scale.x, point.y * scale.y, point.z * scale.z)


class Transform(Component):
    """Local position, rotation and scale, relative to an optional parent.

    Changes are announced to the owning object's components with the local
    events ``posChanged``, ``rotChanged`` and ``scaleChanged``; a transform
    that receives one of them forwards it to its children.
    """

    component_id: ClassVar[str | None] = "transform"

    def __init__(self) -> None:
        super().__init__()
        self.position = Vector3(0)
        self.rotation = Quaternion.from_euler(Vector3(0.0))
        self.scale = Vector3(1.0)
        self._parent: Transform | None = None
        self._children: dict[Transform, None] = {}

    @property
    def parent(self) -> Transform | None:
        """The parent transform, or None."""
        return self._parent

    def _read(self, variables: CompMap, name: str, default: float) -> float:
        value = self.value_from_map(variables, name, float)
        if value is None:
            logger.info(
                'Transform: no value found for %s. Using the default: "%f".', name, default
            )
            return default
        return float(value)

    def init_component(self, variables: CompMap) -> bool:
        """Read ``positionX``..``scaleZ`` as floats; missing ones keep their defaults."""
        self.position = Vector3(
            self._read(variables, "positionX", self.position.x),
            self._read(variables, "positionY", self.position.y),
            self._read(variables, "positionZ", self.position.z),
        )
        euler = Vector3(
            self._read(variables, "rotationX", 0.0),
            self._read(variables, "rotationY", 0.0),
            self._read(variables, "rotationZ", 0.0),
        )
        self.rotation = Quaternion.from_euler(euler)
        self.scale = Vector3(
            self._read(variables, "scaleX", self.scale.x),
            self._read(variables, "scaleY", self.scale.y),
            self._read(variables, "scaleZ", self.scale.z),
        )
        return True

    def start(self) -> None:
        """Announce the initial position, rotation and scale."""
        self._pos_changed()
        self._rot_changed()
        self._scale_changed()

    def handle_event(self, event_id: str, info: Any) -> None:
        """Forward change notifications to the children."""
        if event_id == "posChanged":
            for child in list(self._children):
                child._pos_changed()
        elif event_id == "rotChanged":
            for child in list(self._children):
                child._rot_changed()
        elif event_id == "scaleChanged":
            for child in list(self._children):
                child._scale_changed()

    def on_destroy(self) -> None:
        """Kill every descendant's object, detach and kill the own object."""
        for child in self.get_all_children():
            if child.object is not None:
                child.object.die()
        self.remove_connections()
        if self.object is not None:
            self.object.die()

    def _notify(self, event_id: str, info: Any) -> None:
        if self.object is not None:
            self.push_event(event_id, info, False)

    def _pos_changed(self, rb: bool = False) -> None:
        self._notify("posChanged", rb)

    def _rot_changed(self, rb: bool = False) -> None:
        self._notify("rotChanged", rb)

    def _scale_changed(self) -> None:
        self._notify("scaleChanged", None)

    def add_child(self, child: Transform) -> None:
        """Register ``child`` as a direct child."""
        self._children.setdefault(child, None)

    def remove_child(self, child: Transform) -> None:
        """Forget ``child`` as a direct child, if it is one."""
        self._children.pop(child, None)

    def remove_connections(self) -> None:
        """Detach from the parent and from every direct child."""
        self.remove_parent()
        for child in list(self._children):
            child.remove_parent()
        self._children.clear()

    def remove_parent(self) -> None:
        """Detach from the parent."""
        if self._parent is not None:
            self._parent.remove_child(self)
        self._parent = None

    def set_parent(self, transform: Transform | None) -> None:
        """Move under ``transform``; None only detaches."""
        self.remove_parent()
        self._parent = transform
        if transform is not None:
            transform.add_child(self)

    def get_children(self) -> list[Transform]:
        """The direct children."""
        return list(self._children)

    def get_all_children(self) -> list[Transform]:
        """Every descendant, depth first."""
        result: list[Transform] = []
        for child in self._children:
            result.append(child)
            result.extend(child.get_all_children())
        return result

    def _axis(self, rotation: Quaternion, base: Vector3) -> Vector3:
        v = rotation.rotate_point(base)
        v.normalize()
        return v

    def local_right(self) -> Vector3:
        """Right direction under the local rotation."""
        return self._axis(self.rotation, Vector3(-1, 0, 0))

    def local_up(self) -> Vector3:
        """Up direction under the local rotation."""
        return self._axis(self.rotation, Vector3(0, 1, 0))

    def local_forward(self) -> Vector3:
        """Forward direction under the local rotation."""
        v = self.local_up().cross(self.local_right())
        v.normalize()
        return v

    def _global_without_rotation(self, point: Vector3) -> Vector3:
        parent = self._parent
        if parent is None:
            return point
        point = _scaled(point, parent.scale) + parent.position
        return parent._global_without_rotation(point)

    def _global(self, point: Vector3) -> Vector3:
        parent = self._parent
        if parent is None:
            return point
        x_axis = -parent.local_right()
        y_axis = parent.local_up()
        z_axis = parent.local_forward()
        point = _scaled(point, parent.scale)
        pos = x_axis * point.x + y_axis * point.y + z_axis * point.z
        return parent._global(pos + parent.position)

    def get_local_from_global_position(self, point: Vector3) -> Vector3:
        """Convert a global point into this transform's local position space."""
        parent = self._parent
        if parent is None:
            return _copy(point)
        point = parent.get_local_from_global_position(point) - parent.position
        local = Vector3(
            point.dot(-parent.local_right()),
            point.dot(parent.local_up()),
            point.dot(parent.local_forward()),
        )
        s = parent.scale
        return Vector3(local.x / s.x, local.y / s.y, local.z / s.z)

    def global_position(self) -> Vector3:
        """Position in world space."""
        return self._global(_copy(self.position))

    def global_position_without_rotation(self) -> Vector3:
        """World position ignoring the ancestors' rotations."""
        return self._global_without_rotation(_copy(self.position))

    def global_rotation(self) -> Quaternion:
        """Rotation in world space."""
        if self._parent is None:
            r = self.rotation
            return Quaternion(r.scalar, r.vector.x, r.vector.y, r.vector.z)
        return self._parent.global_rotation() * self.rotation

    def global_scale(self) -> Vector3:
        """Scale in world space."""
        if self._parent is None:
            return _copy(self.scale)
        return _scaled(self.scale, self._parent.global_scale())

    def set_position(self, position: Vector3, rb: bool = False) -> None:
        """Set the local position."""
        self.position = _copy(position)
        self._pos_changed(rb)

    def set_global_position(self, position: Vector3, rb: bool = False) -> None:
        """Set the position from a world-space point."""
        self.position = self.get_local_from_global_position(position)
        self._pos_changed(rb)

    def set_rotation(self, rotation: Vector3 | Quaternion, rb: bool = False) -> None:
        """Set the local rotation from Euler degrees or a quaternion."""
        if isinstance(rotation, Vector3):
            self.rotation = Quaternion.from_euler(rotation)
        else:
            v = rotation.vector
            self.rotation = Quaternion(rotation.scalar, v.x, v.y, v.z)
            self.rotation.angle = rotation.angle
        self._pos_changed(rb)
        self._rot_changed(rb)

    def set_scale(self, scale: Vector3) -> None:
        """Set the local scale."""
        self.scale = _copy(scale)
        self._pos_changed()
        self._scale_changed()

    def translate(self, offset: Vector3) -> None:
        """Move the local position by ``offset``."""
        self.position = self.position + offset
        self._pos_changed()

    def rotate(self, rotation: Vector3 | Quaternion) -> None:
        """Compose the local rotation with Euler degrees or a quaternion."""
        q = Quaternion.from_euler(rotation) if isinstance(rotation, Vector3) else rotation
        self.rotation = self.rotation * q
        self._pos_changed()
        self._rot_changed()

    def right(self) -> Vector3:
        """Right direction in world space."""
        return self._axis(self.global_rotation(), Vector3(-1, 0, 0))

    def up(self) -> Vector3:
        """Up direction in world space."""
        return self._axis(self.global_rotation(), Vector3(0, 1, 0))

    def forward(self) -> Vector3:
        """Forward direction in world space."""
        v = self.up().cross(self.right())
        v.normalize()
        return v