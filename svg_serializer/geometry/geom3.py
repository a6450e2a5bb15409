"""3D solids. They are never converted to SVG, only measured and rejected."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from svg_serializer.exceptions import GeometryError
from svg_serializer.geometry.path2 import Color, to_color

Vec3 = tuple[float, float, float]


def to_vec3(point: Sequence[float]) -> Vec3:
    try:
        if len(point) != 3:
            raise GeometryError(f"3D point needs 3 coordinates, got {point!r}")
        return (float(point[0]), float(point[1]), float(point[2]))
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Invalid 3D point {point!r}") from e


@dataclass(frozen=True)
class Geom3:
    polygons: tuple[tuple[Vec3, ...], ...] = ()
    color: Optional[Color] = None

    @classmethod
    def from_points(
        cls,
        polygons: Iterable[Iterable[Sequence[float]]],
        color: Optional[Sequence[float]] = None,
    ) -> Geom3:
        return cls(
            polygons=tuple(tuple(to_vec3(p) for p in polygon) for polygon in polygons),
            color=to_color(color),
        )

    def to_points(self) -> list[Vec3]:
        return [vertex for polygon in self.polygons for vertex in polygon]
