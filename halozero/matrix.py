"""A 2x3 affine transformation matrix for 2D points and vectors."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from halozero.structs import Point2f, Rectf
from halozero.vector import DEFAULT_EPSILON, Vector2f

_PI = 3.1415926535


def _rotation_axes(degrees: float) -> tuple[Vector2f, Vector2f]:
    radians = degrees * _PI / 180
    cos_a, sin_a = math.cos(radians), math.sin(radians)
    return Vector2f(cos_a, sin_a), Vector2f(-sin_a, cos_a)


def _pair(first: float | Vector2f, second: float | None) -> tuple[float, float]:
    """Accept either a vector or one or two scalars and return two scalars."""
    if isinstance(first, Vector2f):
        return first.x, first.y
    return first, first if second is None else second


@dataclass(eq=False)
class Matrix2x3:
    """Affine transform: two axis columns plus a translation column.

    The default value is the identity matrix. Equality is approximate,
    within ``DEFAULT_EPSILON`` per component.
    """

    dir_x: Vector2f = field(default_factory=lambda: Vector2f(1.0, 0.0))
    dir_y: Vector2f = field(default_factory=lambda: Vector2f(0.0, 1.0))
    orig: Vector2f = field(default_factory=lambda: Vector2f(0.0, 0.0))

    @classmethod
    def from_floats(
        cls, e1x: float, e1y: float, e2x: float, e2y: float, ox: float, oy: float
    ) -> Matrix2x3:
        """Build a matrix from its six components, column by column."""
        return cls(Vector2f(e1x, e1y), Vector2f(e2x, e2y), Vector2f(ox, oy))

    def transform_vector(self, vector: Vector2f) -> Vector2f:
        """Transform a vector, ignoring the translation."""
        return vector.x * self.dir_x + vector.y * self.dir_y

    def transform_point(self, point: Point2f) -> Point2f:
        """Transform a point, including the translation."""
        moved = self.transform_vector(Vector2f.from_point(point)) + self.orig
        return moved.to_point()

    def transform_rect(self, rect: Rectf) -> list[Point2f]:
        """Transform the four corners of a rectangle.

        Corners come in the order bottom-left, top-left, top-right,
        bottom-right.
        """
        right = rect.left + rect.width
        top = rect.bottom + rect.height
        corners = (
            Point2f(rect.left, rect.bottom),
            Point2f(rect.left, top),
            Point2f(right, top),
            Point2f(right, rect.bottom),
        )
        return [self.transform_point(corner) for corner in corners]

    def transform_points(self, points: Iterable[Point2f]) -> list[Point2f]:
        """Transform every point of a polygon."""
        return [self.transform_point(point) for point in points]

    def determinant(self) -> float:
        return self.dir_x.x * self.dir_y.y - self.dir_x.y * self.dir_y.x

    def inverse(self) -> Matrix2x3:
        """Return the inverse matrix.

        Raises ``ZeroDivisionError`` if the matrix is singular.
        """
        det = self.determinant()
        dx, dy, o = self.dir_x, self.dir_y, self.orig
        return Matrix2x3(
            Vector2f(dy.y, -dx.y) / det,
            Vector2f(-dy.x, dx.x) / det,
            Vector2f(dy.x * o.y - dy.y * o.x, -(dx.x * o.y - dx.y * o.x)) / det,
        )

    def equals(self, other: Matrix2x3, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if all components agree within ``epsilon``."""
        return (
            self.dir_x.equals(other.dir_x, epsilon)
            and self.dir_y.equals(other.dir_y, epsilon)
            and self.orig.equals(other.orig, epsilon)
        )

    def set_as_identity(self) -> None:
        self.dir_x = Vector2f(1.0, 0.0)
        self.dir_y = Vector2f(0.0, 1.0)
        self.orig = Vector2f(0.0, 0.0)

    def set_as_rotate(self, degrees: float) -> None:
        """Turn this matrix into a counter-clockwise rotation."""
        self.dir_x, self.dir_y = _rotation_axes(degrees)
        self.orig = Vector2f(0.0, 0.0)

    def set_as_translate(self, tx: float | Vector2f, ty: float | None = None) -> None:
        """Turn this matrix into a translation by ``(tx, ty)`` or a vector."""
        x, y = _pair(tx, ty)
        self.dir_x = Vector2f(1.0, 0.0)
        self.dir_y = Vector2f(0.0, 1.0)
        self.orig = Vector2f(x, y)

    def set_as_scale(self, sx: float, sy: float | None = None) -> None:
        """Turn this matrix into a scale; one argument scales uniformly."""
        x, y = _pair(sx, sy)
        self.dir_x = Vector2f(x, 0.0)
        self.dir_y = Vector2f(0.0, y)
        self.orig = Vector2f(0.0, 0.0)

    @classmethod
    def identity(cls) -> Matrix2x3:
        return cls()

    @classmethod
    def rotation(cls, degrees: float) -> Matrix2x3:
        dir_x, dir_y = _rotation_axes(degrees)
        return cls(dir_x, dir_y, Vector2f())

    @classmethod
    def scaling(cls, sx: float | Vector2f, sy: float | None = None) -> Matrix2x3:
        """Scale matrix from one factor, two factors or a vector."""
        x, y = _pair(sx, sy)
        return cls(Vector2f(x, 0.0), Vector2f(0.0, y), Vector2f())

    @classmethod
    def translation(cls, tx: float | Vector2f, ty: float | None = None) -> Matrix2x3:
        """Translation matrix from two offsets or a vector."""
        x, y = _pair(tx, ty)
        return cls(Vector2f(1.0, 0.0), Vector2f(0.0, 1.0), Vector2f(x, y))

    def __mul__(self, other: Matrix2x3) -> Matrix2x3:
        if not isinstance(other, Matrix2x3):
            return NotImplemented
        lhs, rhs = self, other
        return Matrix2x3(
            Vector2f(
                rhs.dir_x.x * lhs.dir_x.x + rhs.dir_x.y * lhs.dir_y.x,
                rhs.dir_x.x * lhs.dir_x.y + rhs.dir_x.y * lhs.dir_y.y,
            ),
            Vector2f(
                rhs.dir_y.x * lhs.dir_x.x + rhs.dir_y.y * lhs.dir_y.x,
                rhs.dir_y.x * lhs.dir_x.y + rhs.dir_y.y * lhs.dir_y.y,
            ),
            Vector2f(
                rhs.orig.x * lhs.dir_x.x + rhs.orig.y * lhs.dir_y.x + lhs.orig.x,
                rhs.orig.x * lhs.dir_x.y + rhs.orig.y * lhs.dir_y.y + lhs.orig.y,
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2x3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Matrix2x3( x( {self.dir_x.x:f}, {self.dir_x.y:f} ), "
            f"y( {self.dir_y.x:f}, {self.dir_y.y:f} ), "
            f"orig( {self.orig.x:f}, {self.orig.y:f} )  )"
        )