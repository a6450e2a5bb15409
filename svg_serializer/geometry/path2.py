"""Open or closed 2D polylines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Optional

from svg_serializer.exceptions import GeometryError

Vec2 = tuple[float, float]
Color = tuple[float, float, float, float]


def to_vec2(point: Sequence[float]) -> Vec2:
    """Coerce a 2 (or more) element sequence to an (x, y) float tuple."""
    try:
        if len(point) < 2:
            raise GeometryError(f"Point needs at least 2 coordinates, got {point!r}")
        return (float(point[0]), float(point[1]))
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Invalid point {point!r}") from e


def to_color(color: Optional[Sequence[float]]) -> Optional[Color]:
    """Coerce an RGB or RGBA sequence to an RGBA float tuple."""
    if color is None:
        return None
    try:
        channels = [float(c) for c in color]
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Invalid color {color!r}") from e
    if len(channels) == 3:
        channels.append(1.0)
    if len(channels) != 4:
        raise GeometryError(f"Color needs 3 or 4 channels, got {color!r}")
    return (channels[0], channels[1], channels[2], channels[3])


@dataclass(frozen=True)
class Path2:
    """Ordered point sequence, optionally closed.

    ``color`` is the stroke color of a standalone path. ``fill`` is set only on
    paths derived from a region outline.
    """

    points: tuple[Vec2, ...] = ()
    is_closed: bool = False
    color: Optional[Color] = None
    fill: Optional[Color] = None

    @classmethod
    def from_points(
        cls,
        points: Iterable[Sequence[float]],
        closed: bool = False,
        color: Optional[Sequence[float]] = None,
    ) -> Path2:
        pts = [to_vec2(p) for p in points]
        # a closed path does not repeat its first point
        if closed and len(pts) > 1 and pts[0] == pts[-1]:
            pts.pop()
        return cls(points=tuple(pts), is_closed=bool(closed), color=to_color(color))

    def with_fill(self, fill: Optional[Color]) -> Path2:
        return replace(self, fill=fill)

    def close(self) -> Path2:
        if self.is_closed:
            return self
        return Path2.from_points(self.points, closed=True, color=self.color)

    def __len__(self) -> int:
        return len(self.points)
