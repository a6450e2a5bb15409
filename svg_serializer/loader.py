"""Load geometry from a YAML or JSON description file.

Expected layout::

    objects:
      - type: geom2
        color: [1, 0, 0, 1]
        outlines:
          - [[0, 0], [10, 0], [10, 10], [0, 10]]
      - type: path2
        closed: false
        points: [[0, 0], [5, 5]]

A top-level list is read as the ``objects`` list. JSON is valid YAML, so
both formats go through yaml.safe_load.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Union

import yaml

from svg_serializer.exceptions import GeometryError
from svg_serializer.geometry.geom2 import Geom2
from svg_serializer.geometry.geom3 import Geom3
from svg_serializer.geometry.path2 import Path2

logger = logging.getLogger(__name__)

REGION_TYPES = ("geom2", "region")
PATH_TYPES = ("path2", "path")
SOLID_TYPES = ("geom3", "solid")


def _require(entry: dict[str, Any], key: str, where: str) -> Any:
    if key not in entry:
        raise GeometryError(f"{where}: missing '{key}'")
    return entry[key]


def _parse_entry(entry: Any, where: str) -> Any:
    # nested groups are kept as lists; serialize() flattens them
    if isinstance(entry, list):
        return [_parse_entry(child, f"{where}[{i}]") for i, child in enumerate(entry)]
    if not isinstance(entry, dict):
        raise GeometryError(f"{where}: expected a mapping, got {type(entry).__name__}")

    kind = str(_require(entry, "type", where)).lower()
    color = entry.get("color")

    if kind in REGION_TYPES:
        if "outlines" in entry:
            return Geom2.from_outlines(entry["outlines"], color=color)
        return Geom2.from_points(_require(entry, "points", where), color=color)
    if kind in PATH_TYPES:
        return Path2.from_points(
            _require(entry, "points", where),
            closed=bool(entry.get("closed", False)),
            color=color,
        )
    if kind in SOLID_TYPES:
        return Geom3.from_points(_require(entry, "polygons", where), color=color)

    raise GeometryError(f"{where}: unknown geometry type {kind!r}")


def parse_geometries(data: Any) -> list[Any]:
    """Build geometry objects from already-parsed YAML/JSON data."""
    if isinstance(data, dict):
        data = _require(data, "objects", "document")
    if not isinstance(data, list):
        raise GeometryError("document: 'objects' must be a list")
    return [_parse_entry(entry, f"objects[{i}]") for i, entry in enumerate(data)]


def load_geometries(path: Union[str, os.PathLike[str]]) -> list[Any]:
    source = Path(path)
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise GeometryError(f"Invalid YAML/JSON in {source}: {e}") from e
    except OSError as e:
        raise GeometryError(f"Cannot read {source}: {e}") from e

    objects = parse_geometries(data)
    logger.debug("Loaded %d top-level objects from %s", len(objects), source)
    return objects
