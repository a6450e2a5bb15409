"""SVG side of the serializer.

- numbers: coordinate rounding and formatting
- path_data: device-space transform and move/line instructions
- converters: regions and paths to group/path nodes
- writer: document assembly and markup output
"""

from svg_serializer.svg.bounds import get_bounds
from svg_serializer.svg.converters import convert_color, convert_geom2, convert_paths
from svg_serializer.svg.nodes import GroupNode, PathNode, SVGRoot
from svg_serializer.svg.numbers import format_number, round_coordinate
from svg_serializer.svg.path_data import document_offset, path_instructions, transform_point
from svg_serializer.svg.writer import HEADER, build_document, build_root, stringify

__all__ = [
    "HEADER",
    "GroupNode",
    "PathNode",
    "SVGRoot",
    "build_document",
    "build_root",
    "convert_color",
    "convert_geom2",
    "convert_paths",
    "document_offset",
    "format_number",
    "get_bounds",
    "path_instructions",
    "round_coordinate",
    "stringify",
    "transform_point",
]
