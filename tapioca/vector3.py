"""Three-dimensional geometric vector."""

from __future__ import annotations

import math

from tapioca.vector2 import Vector2, _is_scalar, _Vector, clamp


class Vector3(_Vector):
    """A mutable 3D vector with the usual arithmetic."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float | None = None, z: float = 0.0) -> None:
        """Build a vector; with a single value all three coordinates take it."""
        if y is None:
            y = z = x
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_vector2(cls, other: Vector2, z: float = 0.0) -> Vector3:
        """Take ``x`` and ``y`` from a 2D vector and add ``z``."""
        return cls(other.x, other.y, z)

    def magnitude_squared(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> Vector3:
        """Coordinates divided by the magnitude, or the zero vector if it is zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector3()
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def normalize(self) -> float:
        """Normalise in place and return the magnitude the vector had before."""
        mag = self.magnitude()
        if mag != 0:
            self.x /= mag
            self.y /= mag
            self.z /= mag
        return mag

    def rotate_x(self, degrees: float) -> Vector3:
        """Rotate about the x axis by ``degrees``."""
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return Vector3(self.x, c * self.y - s * self.z, s * self.y + c * self.z)

    def rotate_y(self, degrees: float) -> Vector3:
        """Rotate about the y axis by ``degrees``."""
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return Vector3(c * self.x + s * self.z, self.y, -s * self.x + c * self.z)

    def rotate_z(self, degrees: float) -> Vector3:
        """Rotate about the z axis by ``degrees``."""
        rad = math.radians(degrees)
        c, s = math.cos(rad), math.sin(rad)
        return Vector3(c * self.x - s * self.y, s * self.x + c * self.y, self.z)

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def lerp(self, end: Vector3, t: float) -> Vector3:
        """Interpolate towards ``end``; ``t`` is clamped to ``[0, 1]``."""
        t = clamp(t, 0.0, 1.0)
        return Vector3(
            (1 - t) * self.x + t * end.x,
            (1 - t) * self.y + t * end.y,
            (1 - t) * self.z + t * end.z,
        )

    def distance(self, other: Vector3) -> float:
        """Euclidean distance to ``other``."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def to_vector2(self) -> Vector2:
        """Drop the z coordinate."""
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: float | Vector3) -> Vector3:
        """Scale by a number, or take the engine's vector product with another vector.

        The vector product keeps the historical sign of the y component:
        ``x*oz - z*ox`` rather than the right-handed ``z*ox - x*oz``.
        """
        if isinstance(other, Vector3):
            return Vector3(
                self.y * other.z - self.z * other.y,
                -(self.z * other.x - self.x * other.z),
                self.x * other.y - self.y * other.x,
            )
        if not _is_scalar(other):
            return NotImplemented
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, scalar: float) -> Vector3:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # type: ignore[assignment]