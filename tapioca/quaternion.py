"""Quaternions for rotations in a right-handed system."""

from __future__ import annotations

import math

from tapioca.vector3 import Vector3


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _acos(value: float) -> float:
    """Arc cosine that yields NaN outside ``[-1, 1]`` instead of raising."""
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return math.nan


class Quaternion:
    """A quaternion ``scalar + vector`` with its rotation angle in radians."""

    __slots__ = ("scalar", "vector", "angle")

    def __init__(self, scalar: float, x: float, y: float, z: float) -> None:
        """Build from the four components; the angle is derived from the scalar."""
        self.scalar = float(scalar)
        self.vector = Vector3(x, y, z)
        aux = self.scalar
        if aux > 1 or aux < -1:
            aux = _round_half_away(aux)
        self.angle = 2.0 * _acos(aux)

    @classmethod
    def from_axis_angle(cls, degrees: float, axis: Vector3) -> Quaternion:
        """Rotation of ``degrees`` about ``axis`` (which need not be unit length)."""
        unit = axis / axis.magnitude()
        rad = math.radians(degrees)
        half_sin = math.sin(rad / 2)
        q = cls(math.cos(rad / 2), half_sin * unit.x, half_sin * unit.y, half_sin * unit.z)
        q.angle = rad
        return q

    @classmethod
    def from_euler(cls, euler: Vector3) -> Quaternion:
        """Rotation from angles in degrees about the global x, y and z axes."""
        roll = math.radians(euler.x)
        cr, sr = math.cos(roll / 2), math.sin(roll / 2)
        yaw = math.radians(euler.y)
        cy, sy = math.cos(yaw / 2), math.sin(yaw / 2)
        pitch = math.radians(euler.z)
        cp, sp = math.cos(pitch / 2), math.sin(pitch / 2)

        q = cls(
            cr * cy * cp - sr * sy * sp,
            sr * cy * cp + cr * sy * sp,
            cr * sy * cp + sr * cy * sp,
            cr * cy * sp - sr * sy * cp,
        )
        q.angle = 2.0 * math.acos(max(-1.0, min(1.0, q.scalar)))
        return q

    def inverse(self) -> Quaternion:
        """Conjugate divided by the magnitude."""
        return self.conjugate() / self.magnitude()

    def conjugate(self) -> Quaternion:
        """Same scalar with the vector part negated."""
        return Quaternion(self.scalar, -self.vector.x, -self.vector.y, -self.vector.z)

    def magnitude(self) -> float:
        """Norm of the four components."""
        v = self.vector
        return math.sqrt(self.scalar * self.scalar + v.x * v.x + v.y * v.y + v.z * v.z)

    def to_euler(self) -> Vector3:
        """Normalise in place and return the rotation as angles in degrees."""
        self.normalize()
        s = self.scalar
        v = self.vector

        sinr_cosp = 2 * (s * v.x + v.y * s)
        cosr_cosp = 1 - 2 * (v.x * v.x + v.y * v.y)
        x = math.atan2(sinr_cosp, cosr_cosp)

        sinp = 2 * (s * v.y - v.z * v.x)
        if abs(sinp) >= 1:
            y = math.copysign(math.pi / 2, sinp)
        else:
            y = math.asin(sinp)

        siny_cosp = 2 * (s * v.z + v.x * v.y)
        cosy_cosp = 1 - 2 * (v.y * v.y + v.z * v.z)
        z = math.atan2(siny_cosp, cosy_cosp)

        return Vector3(math.degrees(x), math.degrees(y), math.degrees(z))

    def rotate_point(self, point: Vector3) -> Vector3:
        """Rotate ``point`` with the Rodrigues formula."""
        v = self.vector
        if not (v.x or v.y or v.z) or not self.angle:
            return Vector3(point.x, point.y, point.z)
        axis = v / math.sin(self.angle / 2)
        across = axis.cross(point)
        return (
            point
            + axis.cross(across * (1.0 - math.cos(self.angle)))
            + across * math.sin(self.angle)
        )

    def normalized(self) -> Quaternion:
        """This quaternion divided by its magnitude."""
        return self / self.magnitude()

    def normalize(self) -> None:
        """Divide this quaternion by its magnitude in place."""
        unit = self.normalized()
        self.scalar = unit.scalar
        self.vector = unit.vector
        self.angle = unit.angle

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        """Hamilton product with a quaternion, or scaling by a number."""
        if isinstance(other, Quaternion):
            s, v = self.scalar, self.vector
            rs, rv = other.scalar, other.vector
            return Quaternion(
                s * rs - v.x * rv.x - v.y * rv.y - v.z * rv.z,
                s * rv.x + v.x * rs + v.y * rv.z - v.z * rv.y,
                s * rv.y - v.x * rv.z + v.y * rs + v.z * rv.x,
                s * rv.z + v.x * rv.y - v.y * rv.x + v.z * rs,
            )
        if isinstance(other, (int, float)):
            v = self.vector
            return Quaternion(self.scalar * other, v.x * other, v.y * other, v.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * scalar

    def __truediv__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        v = self.vector
        return Quaternion(self.scalar / scalar, v.x / scalar, v.y / scalar, v.z / scalar)

    def __repr__(self) -> str:
        v = self.vector
        return f"Quaternion({self.scalar!r}, {v.x!r}, {v.y!r}, {v.z!r})"