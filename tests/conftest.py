"""Pytest configuration and shared fixtures for svg-serializer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_serializer import Geom2, Geom3, Path2

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
RED = (1, 0, 0, 1)


@pytest.fixture
def square_region() -> Geom2:
    """10x10 red square region at the origin."""
    return Geom2.from_points(SQUARE, color=RED)


@pytest.fixture
def framed_region() -> Geom2:
    """Square with a square hole, no color."""
    outer = [(0, 0), (20, 0), (20, 20), (0, 20)]
    hole = [(5, 5), (5, 15), (15, 15), (15, 5)]
    return Geom2.from_outlines([outer, hole])


@pytest.fixture
def open_paths() -> list[Path2]:
    """Two disjoint uncolored two-point paths."""
    return [
        Path2.from_points([(0, 0), (5, 5)]),
        Path2.from_points([(10, 10), (20, 15)]),
    ]


@pytest.fixture
def solid() -> Geom3:
    """Single 3D triangle."""
    return Geom3.from_points([[(0, 0, 0), (1, 0, 0), (0, 1, 1)]])


@pytest.fixture
def geometry_yaml(tmp_path: Path) -> Path:
    """Geometry description with one region and one stroked path."""
    content = """\
objects:
  - type: geom2
    color: [1, 0, 0, 1]
    outlines:
      - [[0, 0], [10, 0], [10, 10], [0, 10]]
  - type: path2
    closed: false
    color: [0, 0, 1, 1]
    points: [[0, 0], [5, 5]]
"""
    path = tmp_path / "shapes.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def solid_only_yaml(tmp_path: Path) -> Path:
    """Geometry description holding only a 3D solid."""
    content = """\
objects:
  - type: geom3
    polygons:
      - [[0, 0, 0], [1, 0, 0], [0, 1, 0]]
"""
    path = tmp_path / "solid.yaml"
    path.write_text(content, encoding="utf-8")
    return path
