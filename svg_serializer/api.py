"""Public serialization API.

Example:
    >>> from svg_serializer import Geom2, serialize
    >>> square = Geom2.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])
    >>> [svg] = serialize({"unit": "px"}, square)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from svg_serializer.config import Config
from svg_serializer.exceptions import OutputError, UnsupportedInputError
from svg_serializer.geometry.classify import GeometryKind, classify, filter_2d
from svg_serializer.geometry.measurements import Bounds
from svg_serializer.geometry.path2 import Vec2
from svg_serializer.geometry.utils import flatten
from svg_serializer.svg.bounds import get_bounds
from svg_serializer.svg.converters import convert_geom2, convert_paths
from svg_serializer.svg.nodes import GroupNode
from svg_serializer.svg.path_data import document_offset
from svg_serializer.svg.writer import build_document, build_root, document_size

logger = logging.getLogger(__name__)

MIME_TYPE = "image/svg+xml"

Options = Union[Config, Mapping[str, Any], None]


@dataclass(frozen=True)
class SerializationResult:
    """Outcome of one serialization."""

    document: str
    converted: int
    skipped: int
    width: float
    height: float
    unit: str


def _convert_objects(objects: Sequence[Any], bounds: Bounds, config: Config) -> list[GroupNode]:
    offset: Vec2 = document_offset(bounds)
    converters = {
        GeometryKind.REGION: lambda obj: convert_geom2(obj, offset, config.decimals),
        GeometryKind.PATH: lambda obj: convert_paths([obj], offset, config.decimals),
    }

    groups = []
    for index, obj in enumerate(objects):
        config.report(100 * index / len(objects))
        groups.append(converters[classify(obj)](obj))
    return groups


def _serialize(config: Config, objects: tuple[Any, ...]) -> SerializationResult:
    flat = flatten(objects)
    convertible = filter_2d(flat)

    if not convertible:
        raise UnsupportedInputError()
    skipped = len(flat) - len(convertible)
    if skipped:
        logger.warning("%d objects could not be serialized to SVG", skipped)

    config.report(0)

    bounds = get_bounds(convertible)
    width, height = document_size(bounds, config.decimals)
    children: list[GroupNode] = []
    if bounds is not None:
        children = _convert_objects(convertible, bounds, config)

    document = build_document(build_root(width, height, config.unit, children))
    config.report(100)

    logger.debug(
        "Serialized %d objects (%d skipped) into %s x %s %s",
        len(convertible), skipped, width, height, config.unit,
    )
    return SerializationResult(
        document=document,
        converted=len(convertible),
        skipped=skipped,
        width=width,
        height=height,
        unit=config.unit,
    )


def serialize(options: Options, *objects: Any) -> list[str]:
    """Serialize 2D geometry to a single SVG document.

    Args:
        options: A Config, a mapping of Config fields, or None for defaults.
        *objects: Geometry objects, possibly nested in lists or tuples.

    Returns:
        A one-element list holding the document text.

    Raises:
        UnsupportedInputError: None of the objects is 2D geometry.
        ConfigError: The options are invalid.
    """
    return [_serialize(Config.from_options(options), objects).document]


class SVGSerializer:
    """Reusable serializer bound to one Config."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()

    def serialize(self, *objects: Any) -> list[str]:
        return [self.serialize_with_result(*objects).document]

    def serialize_with_result(self, *objects: Any) -> SerializationResult:
        return _serialize(self.config, objects)

    def write(self, path: Union[str, os.PathLike[str]], *objects: Any) -> Path:
        """Serialize ``objects`` into ``path``, adding a .svg suffix if missing.

        Returns:
            The path actually written.
        """
        out = Path(path)
        if out.suffix.lower() != ".svg":
            out = out.with_suffix(".svg")

        result = self.serialize_with_result(*objects)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(result.document, encoding="utf-8")
        except OSError as e:
            raise OutputError(f"Could not write SVG: {out}", path=str(out)) from e
        logger.info("Wrote %s (%d objects)", out, result.converted)
        return out
