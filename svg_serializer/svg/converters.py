"""Turn classified geometry into document nodes."""

from __future__ import annotations

from collections.abc import Sequence

from svg_serializer.geometry.geom2 import Geom2
from svg_serializer.geometry.path2 import Color, Path2, Vec2
from svg_serializer.svg.nodes import GroupNode, PathNode
from svg_serializer.svg.numbers import format_number
from svg_serializer.svg.path_data import path_instructions

STROKE_WIDTH = "1"


def convert_color(color: Color) -> str:
    """Scale every channel, alpha included, from 0..1 to 0..255."""
    return "rgb({})".format(",".join(format_number(channel * 255) for channel in color))


def region_paths(geometry: Geom2) -> list[Path2]:
    """One closed path per outline, each carrying the region color as fill."""
    return [
        Path2.from_points(outline, closed=True).with_fill(geometry.color)
        for outline in geometry.to_outlines()
    ]


def convert_geom2(geometry: Geom2, offset: Vec2, decimals: int) -> GroupNode:
    """A group with a single path combining every outline of the region.

    Holes rely on the even-odd fill rule.
    """
    paths = region_paths(geometry)
    d = "".join(path_instructions(path, offset, decimals) for path in paths)
    if paths and paths[0].fill is not None:
        node = PathNode(d=d, fill_rule="evenodd", fill=convert_color(paths[0].fill))
    else:
        node = PathNode(d=d)
    return GroupNode(children=(node,))


def convert_paths(paths: Sequence[Path2], offset: Vec2, decimals: int) -> GroupNode:
    """A group with one path node per input path, stroked when colored."""
    nodes = []
    for path in paths:
        d = path_instructions(path, offset, decimals)
        if path.color is not None:
            nodes.append(PathNode(d=d, stroke=convert_color(path.color), stroke_width=STROKE_WIDTH))
        else:
            nodes.append(PathNode(d=d))
    return GroupNode(children=tuple(nodes))
