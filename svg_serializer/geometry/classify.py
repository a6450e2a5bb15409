"""Sort input objects into regions, paths and everything else."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any

from svg_serializer.geometry.geom2 import Geom2
from svg_serializer.geometry.path2 import Path2


class GeometryKind(enum.Enum):
    REGION = "region"
    PATH = "path"
    UNSUPPORTED = "unsupported"


def classify(obj: Any) -> GeometryKind:
    if isinstance(obj, Geom2):
        return GeometryKind.REGION
    if isinstance(obj, Path2):
        return GeometryKind.PATH
    return GeometryKind.UNSUPPORTED


def filter_2d(objects: Iterable[Any]) -> list[Any]:
    """Keep the objects that can be converted to SVG, in input order."""
    return [obj for obj in objects if classify(obj) is not GeometryKind.UNSUPPORTED]
