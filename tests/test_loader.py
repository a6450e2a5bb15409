"""Unit tests for svg_serializer.loader (geometry description files)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from svg_serializer import Geom2, Geom3, GeometryError, Path2, load_geometries
from svg_serializer.loader import parse_geometries


class TestLoadGeometries:
    def test_yaml_document(self, geometry_yaml: Path) -> None:
        region, path = load_geometries(geometry_yaml)
        assert isinstance(region, Geom2)
        assert region.color == (1.0, 0.0, 0.0, 1.0)
        assert len(region.to_outlines()) == 1
        assert isinstance(path, Path2)
        assert path.is_closed is False
        assert path.points == ((0.0, 0.0), (5.0, 5.0))

    def test_json_document(self, tmp_path: Path) -> None:
        source = tmp_path / "shapes.json"
        source.write_text(
            json.dumps(
                {
                    "objects": [
                        {"type": "region", "points": [[0, 0], [4, 0], [0, 3]]},
                        {"type": "path", "closed": True, "points": [[0, 0], [1, 1], [2, 0]]},
                        {"type": "solid", "polygons": [[[0, 0, 0], [1, 0, 0], [0, 1, 0]]]},
                    ]
                }
            )
        )
        region, path, solid = load_geometries(source)
        assert isinstance(region, Geom2)
        assert path.is_closed is True
        assert isinstance(solid, Geom3)

    def test_unreadable_file(self, tmp_path: Path) -> None:
        with pytest.raises(GeometryError, match="Cannot read"):
            load_geometries(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        source = tmp_path / "bad.yaml"
        source.write_text("objects: [unclosed")
        with pytest.raises(GeometryError, match="Invalid YAML/JSON"):
            load_geometries(source)


class TestParseGeometries:
    def test_top_level_list(self) -> None:
        [path] = parse_geometries([{"type": "path2", "points": [[0, 0], [1, 1]]}])
        assert isinstance(path, Path2)

    def test_nested_groups_are_kept(self) -> None:
        objects = parse_geometries(
            {"objects": [[{"type": "path2", "points": [[0, 0]]}, {"type": "path2", "points": [[1, 1]]}]]}
        )
        assert len(objects) == 1
        assert len(objects[0]) == 2

    def test_missing_objects_key(self) -> None:
        with pytest.raises(GeometryError, match="missing 'objects'"):
            parse_geometries({"shapes": []})

    def test_unknown_type(self) -> None:
        with pytest.raises(GeometryError, match=r"objects\[0\]: unknown geometry type 'circle'"):
            parse_geometries([{"type": "circle", "r": 3}])

    def test_missing_points(self) -> None:
        with pytest.raises(GeometryError, match="missing 'points'"):
            parse_geometries([{"type": "path2"}])

    def test_entry_must_be_mapping(self) -> None:
        with pytest.raises(GeometryError, match="expected a mapping"):
            parse_geometries(["path2"])

    def test_objects_must_be_list(self) -> None:
        with pytest.raises(GeometryError, match="must be a list"):
            parse_geometries({"objects": "none"})
