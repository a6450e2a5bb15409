"""Document assembly and text output.

The node tree is converted to an ElementTree and written with two-space
indentation below a fixed XML/DOCTYPE header.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from svg_serializer.geometry.measurements import Bounds
from svg_serializer.svg.nodes import GroupNode, Node, PathNode, SVGRoot
from svg_serializer.svg.numbers import format_number, round_coordinate

logger = logging.getLogger(__name__)

GENERATOR = "svg-serializer"

HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f"<!-- Generated by {GENERATOR} -->\n"
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1 Tiny//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11-tiny.dtd">\n'
)


def document_size(bounds: Optional[Bounds], decimals: int) -> tuple[float, float]:
    """Rounded width and height of the bounds; (0, 0) without bounds."""
    if bounds is None:
        return (0.0, 0.0)
    width = round_coordinate(bounds[1][0] - bounds[0][0], decimals)
    height = round_coordinate(bounds[1][1] - bounds[0][1], decimals)
    return (width, height)


def build_root(
    width: float, height: float, unit: str, children: Sequence[Node] = ()
) -> SVGRoot:
    w = format_number(width)
    h = format_number(height)
    return SVGRoot(
        width=f"{w}{unit}",
        height=f"{h}{unit}",
        view_box=f"0 0 {w} {h}",
        children=tuple(children),
    )


def _append(parent: Element, node: Node) -> None:
    if isinstance(node, PathNode):
        SubElement(parent, "path", node.attributes())
    elif isinstance(node, GroupNode):
        group = SubElement(parent, "g")
        for child in node.children:
            _append(group, child)
    else:
        raise TypeError(f"Unknown document node {type(node).__name__}")


def to_element(root: SVGRoot) -> Element:
    svg = Element("svg", root.attributes())
    for child in root.children:
        _append(svg, child)
    return svg


def stringify(root: SVGRoot) -> str:
    """Serialize the node tree to indented markup, without the header."""
    element = to_element(root)
    indent(element, space="  ")
    return tostring(element, encoding="unicode")


def build_document(root: SVGRoot) -> str:
    text = HEADER + stringify(root) + "\n"
    logger.debug("Built SVG document: %s x %s, %d characters", root.width, root.height, len(text))
    return text
