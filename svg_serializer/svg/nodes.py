"""Document node tree built before text serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class PathNode:
    """A ``<path>`` leaf.

    Only the style attributes that are set are written out.
    """

    d: str
    fill: Optional[str] = None
    fill_rule: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[str] = None

    def attributes(self) -> dict[str, str]:
        attrs: dict[str, str] = {}
        if self.fill_rule is not None:
            attrs["fill-rule"] = self.fill_rule
        if self.fill is not None:
            attrs["fill"] = self.fill
        if self.stroke is not None:
            attrs["stroke"] = self.stroke
        if self.stroke_width is not None:
            attrs["stroke-width"] = self.stroke_width
        attrs["d"] = self.d
        return attrs


@dataclass(frozen=True)
class GroupNode:
    """A ``<g>`` element holding path leaves in order."""

    children: tuple[Node, ...] = field(default_factory=tuple)


Node = Union[GroupNode, PathNode]


@dataclass(frozen=True)
class SVGRoot:
    """The ``<svg>`` element."""

    width: str
    height: str
    view_box: str
    children: tuple[Node, ...] = ()

    def attributes(self) -> dict[str, str]:
        return {
            "width": self.width,
            "height": self.height,
            "viewBox": self.view_box,
            "version": "1.1",
            "baseProfile": "tiny",
            "xmlns": "http://www.w3.org/2000/svg",
            "xmlns:xlink": "http://www.w3.org/1999/xlink",
        }
