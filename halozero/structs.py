"""Plain geometric and configuration records shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Window:
    """Properties of the window the game renders to."""

    title: str = "Title"
    width: float = 320.0
    height: float = 180.0
    is_vsync_on: bool = True


@dataclass
class Point2f:
    """A point in 2D space."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rectf:
    """An axis-aligned rectangle anchored at its bottom-left corner."""

    left: float = 0.0
    bottom: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def center(self) -> Point2f:
        """Return the point in the middle of the rectangle."""
        return Point2f(self.left + self.width / 2, self.bottom + self.height / 2)


@dataclass
class Color4f:
    """An RGBA colour with components in the range [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass
class Circlef:
    """A circle given by its centre and radius."""

    center: Point2f = field(default_factory=Point2f)
    radius: float = 0.0


@dataclass
class Ellipsef:
    """An axis-aligned ellipse given by its centre and two radii."""

    center: Point2f = field(default_factory=Point2f)
    radius_x: float = 0.0
    radius_y: float = 0.0