"""A side-scrolling camera that follows a target inside level bounds."""

from __future__ import annotations

from halozero.structs import Point2f, Rectf


class Camera:
    """Computes the bottom-left corner of the view for a tracked target."""

    def __init__(self, width: float = 360.0, height: float = 240.0) -> None:
        self._width = width
        self._height = height
        self._level_boundaries = Rectf()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def set_level_boundaries(self, level_boundaries: Rectf) -> None:
        self._level_boundaries = level_boundaries

    def camera_pos(self, target: Rectf) -> Point2f:
        """Bottom-left corner of the view, clamped to the level boundaries."""
        tracked = self._track(target)
        position = Point2f(tracked.x - self._width / 2, tracked.y - self._height / 2)
        return self._clamp(position)

    @staticmethod
    def _track(target: Rectf) -> Point2f:
        return Point2f(target.left + target.width, target.bottom + target.height / 2)

    def _clamp(self, position: Point2f) -> Point2f:
        bounds = self._level_boundaries
        max_x = bounds.left + bounds.width - self._width
        max_y = bounds.bottom + bounds.height - self._height

        x = position.x
        if x <= bounds.left:
            x = bounds.left
        elif x >= max_x:
            x = max_x

        y = position.y
        if y <= bounds.bottom:
            y = bounds.bottom
        elif y >= max_y:
            y = max_y

        return Point2f(x, y)