"""A 2D vector type and the operations that mix vectors with points."""

from __future__ import annotations

import math
from dataclasses import dataclass

from halozero.structs import Point2f

DEFAULT_EPSILON = 0.001


@dataclass(eq=False)
class Vector2f:
    """A 2D vector; equality is approximate, within ``DEFAULT_EPSILON``."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_points(cls, from_point: Point2f, till_point: Point2f) -> Vector2f:
        """Vector pointing from ``from_point`` to ``till_point``."""
        return cls(till_point.x - from_point.x, till_point.y - from_point.y)

    @classmethod
    def from_point(cls, point: Point2f) -> Vector2f:
        """Vector from the origin to ``point``."""
        return cls.from_points(Point2f(0.0, 0.0), point)

    def to_point(self) -> Point2f:
        return Point2f(self.x, self.y)

    def equals(self, other: Vector2f, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if both components differ by less than ``epsilon``."""
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def dot(self, other: Vector2f) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2f) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return self.length()

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def angle_with(self, other: Vector2f) -> float:
        """Signed angle in radians; positive is counter-clockwise to ``other``."""
        return math.atan2(
            self.x * other.y - other.x * self.y,
            self.x * other.x + self.y * other.y,
        )

    def normalized(self, epsilon: float = DEFAULT_EPSILON) -> Vector2f:
        """Unit vector in the same direction, or zero if too short."""
        length = self.length()
        if length < epsilon:
            return Vector2f(0.0, 0.0)
        return Vector2f(self.x / length, self.y / length)

    def orthogonal(self) -> Vector2f:
        return Vector2f(-self.y, self.x)

    def reflect(self, surface_normal: Vector2f) -> Vector2f:
        """Reflect this vector about a surface with the given normal."""
        return self - 2 * (self.dot(surface_normal) * surface_normal)

    def __neg__(self) -> Vector2f:
        return Vector2f(-self.x, -self.y)

    def __pos__(self) -> Vector2f:
        return Vector2f(self.x, self.y)

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2f:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2f(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2f:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * (1 / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Vector2f({self.x:.2f}, {self.y:.2f})"


def translate(point: Point2f, vector: Vector2f) -> Point2f:
    """Return ``point`` moved by ``vector``."""
    return Point2f(point.x + vector.x, point.y + vector.y)


def point_difference(lhs: Point2f, rhs: Point2f) -> Vector2f:
    """Vector from ``rhs`` to ``lhs``."""
    return Vector2f(lhs.x - rhs.x, lhs.y - rhs.y)