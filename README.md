# halozero

The geometry core of a small 2D side-scrolling shooter. It is pure Python and
has no dependencies.

## Modules

- `halozero.structs` defines the dataclasses `Window`, `Point2f`, `Rectf`,
  `Color4f`, `Circlef` and `Ellipsef`. The y axis points up. A rectangle is
  anchored at its bottom-left corner, and `Rectf.center()` returns its middle.
- `halozero.vector` defines `Vector2f`. It has `dot`, `cross`, `length`,
  `squared_length`, `normalized`, `orthogonal`, `reflect` and `angle_with`,
  and supports arithmetic operators. Vectors compare equal when each component
  is within `0.001` of the other. The module also has `translate(point, vector)`
  and `point_difference(lhs, rhs)` for working with points and vectors together.
- `halozero.matrix` defines `Matrix2x3`, a 2D affine transform. It has the
  constructors `identity`, `rotation`, `scaling`, `translation` and
  `from_floats`. It can transform a vector, a point, a rectangle (its four
  corners) or a list of points. It also has `determinant` and `inverse` (which
  raises `ZeroDivisionError` when the matrix is singular), and `*` composes
  two matrices.
- `halozero.geometry` has `get_distance`, `is_point_in_rect`,
  `is_point_in_circle`, `is_point_on_line_segment`,
  `dist_point_line_segment`, `intersect_line_segments` and
  `intersect_rect_line`. The two intersection functions return a tuple of
  line parameters, or `None` when there is no intersection.
- `halozero.collision` has overlap tests:
  - `rects_overlap`, `rect_overlaps_circle` and `circles_overlap`
  - `segment_overlaps_rect` and `segment_overlaps_circle`
  - `polygon_overlaps_circle` and `is_point_in_polygon`

  It also has `raycast(vertices, ray_p1, ray_p2)`. This returns the `HitInfo`
  closest to `ray_p1`, with fields `lambda_`, `intersect_point` and `normal`,
  or `None` when the ray hits nothing.
- `halozero.camera` defines `Camera(width=360, height=240)`. Its
  `camera_pos(target)` returns the bottom-left corner of a view that follows
  the target rectangle. That position is clamped to the rectangle passed to
  `set_level_boundaries`.
- `halozero.svg` reads straight-line SVG paths. Supported commands are `M`,
  `L`, `H`, `V` and `Z`, each absolute or relative.
  - `vertices_from_path_data` parses the `d` attribute of one path.
  - `vertices_from_svg_string` returns the vertices of every path as they are
    written.
  - `vertices_from_svg_file` reads a file and flips the y axis against the
    height of the `viewBox`.

  Curves, other commands and malformed data raise `SvgError`, a subclass of
  `ValueError`. An unreadable file raises `OSError`.

## Install

```
pip install .
```

## Example

```python
from halozero.structs import Point2f, Rectf
from halozero.matrix import Matrix2x3
from halozero.collision import raycast, rects_overlap
from halozero.camera import Camera

m = Matrix2x3.translation(10, 0) * Matrix2x3.rotation(90)
print(m.transform_point(Point2f(1, 0)))        # about Point2f(x=10, y=1)

square = [Point2f(0, 0), Point2f(10, 0), Point2f(10, 10), Point2f(0, 10)]
hit = raycast(square, Point2f(-5, 5), Point2f(5, 5))
if hit:
    print(hit.intersect_point, hit.normal)     # the left edge, at x = 0

print(rects_overlap(Rectf(0, 0, 5, 5), Rectf(4, 4, 5, 5)))   # True

camera = Camera(360, 240)
camera.set_level_boundaries(Rectf(0, 0, 2000, 480))
print(camera.camera_pos(Rectf(500, 100, 20, 40)))            # Point2f(x=340.0, y=0)
```

## What it does not do

This package contains only geometry and data handling. It does not:

- open a window, draw, or load textures and fonts
- play sound
- run a game loop or handle input
- provide game entities such as the player, enemies, projectiles or pickups

`Window` and `Color4f` are plain records, and nothing in the package uses
them for rendering.

## Tests

```
pip install .[test]
pytest
```