"""Vectors, affine matrices, collision tests, a tracking camera and SVG path loading for a 2D side-scroller."""

__version__ = "0.1.0"
__all__ = ["structs", "vector", "matrix", "camera", "geometry", "collision", "svg"]