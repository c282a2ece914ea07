"""Distance, containment and intersection tests for points, segments and shapes."""

from __future__ import annotations

import math

from halozero.structs import Circlef, Point2f, Rectf
from halozero.vector import Vector2f, point_difference


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats: a zero denominator yields inf or nan, not an error."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def get_distance(p1: Point2f, p2: Point2f) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def is_point_in_rect(p: Point2f, r: Rectf) -> bool:
    """True if ``p`` lies inside ``r`` or on its border."""
    return (
        r.left <= p.x <= r.left + r.width
        and r.bottom <= p.y <= r.bottom + r.height
    )


def is_point_in_circle(p: Point2f, c: Circlef) -> bool:
    """True if ``p`` lies inside ``c`` or on its circumference."""
    dx = p.x - c.center.x
    dy = p.y - c.center.y
    return c.radius * c.radius >= dx * dx + dy * dy


def is_point_on_line_segment(p: Point2f, a: Point2f, b: Point2f) -> bool:
    """True if ``p`` lies on the segment from ``a`` to ``b``."""
    ap = Vector2f.from_points(a, p)
    bp = Vector2f.from_points(b, p)
    if abs(ap.cross(bp)) > 0.001:
        return False
    # Between a and b the two vectors point in opposite directions.
    return ap.dot(bp) <= 0


def intersect_line_segments(
    p1: Point2f,
    p2: Point2f,
    q1: Point2f,
    q2: Point2f,
    epsilon: float = 1e-6,
) -> tuple[float, float] | None:
    """Intersect the lines through ``p1``-``p2`` and ``q1``-``q2``.

    Returns the parameters ``(lambda1, lambda2)`` of the intersection along
    each line, or ``None`` if there is none. For non-parallel lines the
    parameters are returned whether or not they fall within [0, 1]. For
    collinear segments that touch or overlap, ``(0.0, 0.0)`` is returned.
    """
    p1p2 = Vector2f.from_points(p1, p2)
    q1q2 = Vector2f.from_points(q1, q2)
    p1q1 = Vector2f.from_points(p1, q1)

    denom = p1p2.cross(q1q2)
    if abs(denom) > epsilon:
        return p1q1.cross(q1q2) / denom, p1q1.cross(p1p2) / denom

    # Parallel: only collinear segments can meet.
    if abs(p1q1.cross(q1q2)) > epsilon:
        return None

    if (
        is_point_on_line_segment(p1, q1, q2)
        or is_point_on_line_segment(p2, q1, q2)
        or is_point_on_line_segment(q1, p1, p2)
        or is_point_on_line_segment(q2, p1, p2)
    ):
        return 0.0, 0.0
    return None


def dist_point_line_segment(p: Point2f, a: Point2f, b: Point2f) -> float:
    """Shortest distance from ``p`` to the segment from ``a`` to ``b``."""
    ab = Vector2f.from_points(a, b)
    ap = Vector2f.from_points(a, p)
    ab_norm = ab.normalized()
    dist_to_a = ab_norm.dot(ap)

    if dist_to_a < 0:
        return ap.length()
    if dist_to_a > ab.length():
        return Vector2f.from_points(b, p).length()

    foot = dist_to_a * ab_norm + Vector2f.from_point(a)
    return point_difference(p, foot.to_point()).length()


def intersect_rect_line(
    r: Rectf, p1: Point2f, p2: Point2f
) -> tuple[float, float] | None:
    """Clip the line through ``p1`` and ``p2`` against rectangle ``r``.

    Returns ``(t_min, t_max)``, the line parameters where it enters and
    leaves the rectangle (0 at ``p1``, 1 at ``p2``), or ``None`` if the
    line misses the rectangle.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    x1 = _divide(r.left - p1.x, dx)
    x2 = _divide(r.left + r.width - p1.x, dx)
    y1 = _divide(r.bottom - p1.y, dy)
    y2 = _divide(r.bottom + r.height - p1.y, dy)

    t_min = max(min(x1, x2), min(y1, y2))
    t_max = min(max(x1, x2), max(y1, y2))
    if t_min > t_max:
        return None
    return t_min, t_max