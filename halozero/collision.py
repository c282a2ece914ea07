"""Overlap tests between shapes and raycasting against polygons."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from halozero.geometry import (
    dist_point_line_segment,
    intersect_line_segments,
    is_point_in_circle,
    is_point_in_rect,
)
from halozero.structs import Circlef, Point2f, Rectf
from halozero.vector import Vector2f, point_difference


@dataclass
class HitInfo:
    """Where a ray hit a polygon edge."""

    lambda_: float = 0.0
    intersect_point: Point2f = field(default_factory=Point2f)
    normal: Vector2f = field(default_factory=Vector2f)


def _closed_edges(vertices: Sequence[Point2f]):
    """Yield consecutive vertex pairs, including the closing edge."""
    count = len(vertices)
    for index, start in enumerate(vertices):
        yield start, vertices[(index + 1) % count]


def _bounding_rect(a: Point2f, b: Point2f) -> Rectf:
    left = min(a.x, b.x)
    bottom = min(a.y, b.y)
    return Rectf(left, bottom, max(a.x, b.x) - left, max(a.y, b.y) - bottom)


def _rect_corners(r: Rectf) -> list[Point2f]:
    return [
        Point2f(r.left, r.bottom),
        Point2f(r.left + r.width, r.bottom),
        Point2f(r.left + r.width, r.bottom + r.height),
        Point2f(r.left, r.bottom + r.height),
    ]


def is_point_in_polygon(p: Point2f, vertices: Sequence[Point2f]) -> bool:
    """True if ``p`` lies inside the closed polygon given by ``vertices``."""
    if len(vertices) < 2:
        return False

    x_min = min(v.x for v in vertices)
    x_max = max(v.x for v in vertices)
    y_min = min(v.y for v in vertices)
    y_max = max(v.y for v in vertices)
    if p.x < x_min or p.x > x_max or p.y < y_min or p.y > y_max:
        return False

    # Cast a horizontal ray to a point outside the polygon and count crossings.
    outside = Point2f(x_max + 10.0, p.y)
    crossings = 0
    for start, end in _closed_edges(vertices):
        hit = intersect_line_segments(start, end, p, outside)
        if hit is None:
            continue
        lambda1, lambda2 = hit
        if 0 < lambda1 <= 1 and 0 < lambda2 <= 1:
            crossings += 1
    return crossings % 2 == 1


def segment_overlaps_circle(a: Point2f, b: Point2f, c: Circlef) -> bool:
    """True if the segment from ``a`` to ``b`` touches circle ``c``."""
    return dist_point_line_segment(c.center, a, b) <= c.radius


def segment_overlaps_rect(a: Point2f, b: Point2f, r: Rectf) -> bool:
    """True if the segment from ``a`` to ``b`` touches rectangle ``r``."""
    if is_point_in_rect(a, r) or is_point_in_rect(b, r):
        return True
    return raycast(_rect_corners(r), a, b) is not None


def rects_overlap(r1: Rectf, r2: Rectf) -> bool:
    """True if the two rectangles overlap or touch."""
    if r1.left + r1.width < r2.left or r2.left + r2.width < r1.left:
        return False
    if r1.bottom > r2.bottom + r2.height or r2.bottom > r1.bottom + r1.height:
        return False
    return True


def rect_overlaps_circle(r: Rectf, c: Circlef) -> bool:
    """True if rectangle ``r`` and circle ``c`` overlap or touch."""
    if is_point_in_rect(c.center, r):
        return True
    bottom_left = Point2f(r.left, r.bottom)
    top_left = Point2f(r.left, r.bottom + r.height)
    top_right = Point2f(r.left + r.width, r.bottom + r.height)
    bottom_right = Point2f(r.left + r.width, r.bottom)
    sides = (
        (bottom_left, top_left),
        (bottom_left, bottom_right),
        (top_right, top_left),
        (top_right, bottom_right),
    )
    return any(
        dist_point_line_segment(c.center, start, end) <= c.radius
        for start, end in sides
    )


def circles_overlap(c1: Circlef, c2: Circlef) -> bool:
    """True if the circles overlap; merely touching does not count."""
    dx = c1.center.x - c2.center.x
    dy = c1.center.y - c2.center.y
    touching = c1.radius + c2.radius
    return dx * dx + dy * dy < touching * touching


def polygon_overlaps_circle(vertices: Sequence[Point2f], c: Circlef) -> bool:
    """True if the closed polygon and circle ``c`` overlap."""
    if any(is_point_in_circle(v, c) for v in vertices):
        return True
    if any(
        dist_point_line_segment(c.center, start, end) <= c.radius
        for start, end in _closed_edges(vertices)
    ):
        return True
    return is_point_in_polygon(c.center, vertices)


def raycast(
    vertices: Sequence[Point2f], ray_p1: Point2f, ray_p2: Point2f
) -> HitInfo | None:
    """Cast the segment ``ray_p1``-``ray_p2`` against a closed polygon.

    Returns the hit closest to ``ray_p1``, or ``None`` if nothing is hit.
    """
    if not vertices:
        return None

    ray_box = _bounding_rect(ray_p1, ray_p2)
    closest: HitInfo | None = None
    for q1, q2 in _closed_edges(vertices):
        if not rects_overlap(ray_box, _bounding_rect(q1, q2)):
            continue
        hit = intersect_line_segments(ray_p1, ray_p2, q1, q2)
        if hit is None:
            continue
        lambda1, lambda2 = hit
        if not (0 < lambda1 <= 1 and 0 < lambda2 <= 1):
            continue
        if closest is not None and not lambda1 < closest.lambda_:
            continue
        closest = HitInfo(
            lambda_=lambda1,
            intersect_point=Point2f(
                ray_p1.x + (ray_p2.x - ray_p1.x) * lambda1,
                ray_p1.y + (ray_p2.y - ray_p1.y) * lambda1,
            ),
            normal=point_difference(q2, q1).orthogonal().normalized(),
        )
    return closest