"""Bounding box measurement of geometry objects."""

from __future__ import annotations

from typing import Any

from svg_serializer.exceptions import GeometryError
from svg_serializer.geometry.geom2 import Geom2
from svg_serializer.geometry.geom3 import Geom3, Vec3
from svg_serializer.geometry.path2 import Path2

Bounds = tuple[Vec3, Vec3]

EMPTY_BOUNDS: Bounds = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def _points3(obj: Any) -> list[Vec3]:
    if isinstance(obj, Path2):
        return [(x, y, 0.0) for x, y in obj.points]
    if isinstance(obj, Geom2):
        return [(x, y, 0.0) for x, y in obj.to_points()]
    if isinstance(obj, Geom3):
        return obj.to_points()
    raise GeometryError(f"Cannot measure bounds of {type(obj).__name__}")


def measure_bounds(*objects: Any) -> list[Bounds]:
    """Return ``((minx, miny, minz), (maxx, maxy, maxz))`` for each object.

    2D geometry is measured with z = 0. Objects without points measure as
    EMPTY_BOUNDS.
    """
    result: list[Bounds] = []
    for obj in objects:
        points = _points3(obj)
        if not points:
            result.append(EMPTY_BOUNDS)
            continue
        xs, ys, zs = zip(*points)
        result.append(((min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))))
    return result
