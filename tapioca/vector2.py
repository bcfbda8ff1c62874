"""Two-dimensional geometric vector and the pieces shared by all vectors."""

from __future__ import annotations

import math
from collections.abc import Iterator


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


class _Vector:
    """Fixed-size vector whose coordinates are the slots of the concrete class."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self.__slots__)

    def __rmul__(self, scalar: float):
        return self * scalar

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"


class Vector2(_Vector):
    """A mutable 2D vector with the usual arithmetic."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        """Build a vector; with a single value both coordinates take it."""
        self.x = float(x)
        self.y = float(x if y is None else y)

    def magnitude_squared(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> Vector2:
        """Coordinates divided by the magnitude, or the zero vector if it is zero."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2()
        return Vector2(self.x / mag, self.y / mag)

    def normalize(self) -> float:
        """Normalise in place and return the magnitude the vector had before."""
        mag = self.magnitude()
        if mag != 0:
            self.x /= mag
            self.y /= mag
        return mag

    def lerp(self, end: Vector2, t: float) -> Vector2:
        """Interpolate towards ``end``; ``t`` is clamped to ``[0, 1]``."""
        t = clamp(t, 0.0, 1.0)
        return Vector2((1 - t) * self.x + t * end.x, (1 - t) * self.y + t * end.y)

    def distance(self, other: Vector2) -> float:
        """Euclidean distance to ``other``."""
        return math.dist((self.x, self.y), (other.x, other.y))

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]