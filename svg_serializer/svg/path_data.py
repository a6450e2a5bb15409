"""Map geometry points to device space and emit path instruction strings."""

from __future__ import annotations

from svg_serializer.geometry.measurements import Bounds
from svg_serializer.geometry.path2 import Path2, Vec2
from svg_serializer.svg.numbers import format_number, round_coordinate


def document_offset(bounds: Bounds) -> Vec2:
    """Translation bringing the bounds' left edge to x=0 and top edge to y=0.

    The top edge is the maximum Y, since Y is flipped afterwards.
    """
    return (0 - bounds[0][0], 0 - bounds[1][1])


def transform_point(point: Vec2, offset: Vec2, decimals: int) -> Vec2:
    """Translate, reflect across the horizontal axis and round one point."""
    x = point[0] + offset[0]
    y = point[1] + offset[1]
    # SVG Y grows downward
    y = -y
    return (round_coordinate(x, decimals), round_coordinate(y, decimals))


def path_instructions(path: Path2, offset: Vec2, decimals: int) -> str:
    """Return the move/line instructions of one path.

    A closed path gets one extra logical point that wraps back to the first
    point. An empty path yields an empty string.
    """
    count = len(path.points)
    logical_count = count + (1 if path.is_closed and count else 0)
    parts: list[str] = []
    for index in range(logical_count):
        x, y = transform_point(path.points[index % count], offset, decimals)
        command = "L" if index else "M"
        parts.append(f"{command}{format_number(x)} {format_number(y)}")
    return "".join(parts)
