"""Four-dimensional geometric vector."""

from __future__ import annotations

import math

from tapioca.vector2 import Vector2, _is_scalar, _Vector, clamp
from tapioca.vector3 import Vector3


class Vector4(_Vector):
    """A mutable 4D vector with the usual arithmetic.

    The magnitude only takes ``x``, ``y`` and ``z`` into account, while
    normalisation divides all four coordinates by it.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(
        self, x: float = 0.0, y: float | None = None, z: float = 0.0, w: float = 0.0
    ) -> None:
        """Build a vector; with a single value all four coordinates take it."""
        if y is None:
            y = z = w = x
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def from_vector3(cls, other: Vector3, w: float = 0.0) -> Vector4:
        """Take ``x``, ``y`` and ``z`` from a 3D vector and add ``w``."""
        return cls(other.x, other.y, other.z, w)

    @classmethod
    def from_vector2(cls, other: Vector2, z: float = 0.0, w: float = 0.0) -> Vector4:
        """Take ``x`` and ``y`` from a 2D vector and add ``z`` and ``w``."""
        return cls(other.x, other.y, z, w)

    def magnitude_squared(self) -> float:
        """Squared length of the ``x``, ``y``, ``z`` part."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Length of the ``x``, ``y``, ``z`` part."""
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> Vector4:
        """All coordinates divided by the magnitude, or the zero vector if it is zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector4()
        return Vector4(self.x / mag, self.y / mag, self.z / mag, self.w / mag)

    def normalize(self) -> float:
        """Normalise in place and return the magnitude the vector had before."""
        mag = self.magnitude()
        if mag != 0:
            self.x /= mag
            self.y /= mag
            self.z /= mag
            self.w /= mag
        return mag

    def lerp(self, end: Vector4, t: float) -> Vector4:
        """Interpolate towards ``end``; ``t`` is clamped to ``[0, 1]``."""
        t = clamp(t, 0.0, 1.0)
        return Vector4(
            (1 - t) * self.x + t * end.x,
            (1 - t) * self.y + t * end.y,
            (1 - t) * self.z + t * end.z,
            (1 - t) * self.w + t * end.w,
        )

    def distance(self, other: Vector4) -> float:
        """Euclidean distance to ``other`` over all four coordinates."""
        return math.dist(
            (self.x, self.y, self.z, self.w), (other.x, other.y, other.z, other.w)
        )

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vector4:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __truediv__(self, scalar: float) -> Vector4:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.w == other.w
        )

    __hash__ = None  # type: ignore[assignment]