"""Filled 2D regions.

A Geom2 stores the directed sides of all its outlines. Outlines (islands and
holes alike) are recovered with to_outlines().
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from svg_serializer.exceptions import GeometryError
from svg_serializer.geometry.path2 import Color, Vec2, to_color, to_vec2

Side = tuple[Vec2, Vec2]


def _outline_sides(outline: Sequence[Vec2]) -> list[Side]:
    points = list(outline)
    if len(points) > 1 and points[0] == points[-1]:
        points.pop()
    if len(points) < 3:
        raise GeometryError(f"An outline needs at least 3 points, got {len(points)}")
    return [(points[i - 1], points[i]) for i in range(len(points))]


@dataclass(frozen=True)
class Geom2:
    sides: tuple[Side, ...] = ()
    color: Optional[Color] = None

    @classmethod
    def from_points(
        cls, points: Iterable[Sequence[float]], color: Optional[Sequence[float]] = None
    ) -> Geom2:
        """Region bounded by a single closed outline."""
        return cls.from_outlines([points], color=color)

    @classmethod
    def from_outlines(
        cls,
        outlines: Iterable[Iterable[Sequence[float]]],
        color: Optional[Sequence[float]] = None,
    ) -> Geom2:
        """Region bounded by several outlines (islands and holes).

        An outline with fewer than 3 distinct points raises GeometryError here;
        it is never turned into an empty path.
        """
        sides: list[Side] = []
        for outline in outlines:
            sides.extend(_outline_sides([to_vec2(p) for p in outline]))
        return cls(sides=tuple(sides), color=to_color(color))

    def to_sides(self) -> tuple[Side, ...]:
        return self.sides

    def to_points(self) -> list[Vec2]:
        """Start point of every side."""
        return [side[0] for side in self.sides]

    def to_outlines(self) -> list[list[Vec2]]:
        """Chain the sides end-to-start into closed outlines.

        Each outline starts at the first unused side in storage order and ends
        when it returns to its start vertex, so outlines touching at a vertex
        stay separate.
        """
        # start point -> indexes of sides starting there, in storage order
        starts: dict[Vec2, list[int]] = {}
        for index, (start, _end) in enumerate(self.sides):
            starts.setdefault(start, []).append(index)

        used = [False] * len(self.sides)
        outlines: list[list[Vec2]] = []
        for first in range(len(self.sides)):
            if used[first]:
                continue
            outline: list[Vec2] = []
            index: Optional[int] = first
            while index is not None:
                used[index] = True
                start, end = self.sides[index]
                outline.append(start)
                if end == outline[0]:
                    break
                index = next((i for i in starts.get(end, ()) if not used[i]), None)
            outlines.append(outline)
        return outlines
