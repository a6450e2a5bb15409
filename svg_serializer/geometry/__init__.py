"""Geometry primitives consumed by the serializer.

- Path2: open or closed polylines
- Geom2: filled regions made of one or more outlines
- Geom3: 3D solids (measured, never converted)
"""

from svg_serializer.geometry.classify import GeometryKind, classify, filter_2d
from svg_serializer.geometry.geom2 import Geom2
from svg_serializer.geometry.geom3 import Geom3
from svg_serializer.geometry.measurements import Bounds, measure_bounds
from svg_serializer.geometry.path2 import Path2
from svg_serializer.geometry.utils import flatten

__all__ = [
    "Bounds",
    "Geom2",
    "Geom3",
    "GeometryKind",
    "Path2",
    "classify",
    "filter_2d",
    "flatten",
    "measure_bounds",
]
