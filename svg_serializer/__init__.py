"""svg-serializer: Convert 2D geometry to SVG documents.

Regions become filled paths (even-odd rule, one path per region), polylines
become stroked paths. Coordinates are moved to a non-negative origin, flipped
to SVG's downward Y axis and rounded to a fixed number of subdivisions.

Example:
    >>> from svg_serializer import Path2, serialize
    >>> line = Path2.from_points([(0, 0), (10, 5)], color=(0, 0, 1, 1))
    >>> [svg] = serialize(None, line)
"""

from svg_serializer.api import MIME_TYPE, SerializationResult, SVGSerializer, serialize
from svg_serializer.config import SUPPORTED_UNITS, Config
from svg_serializer.exceptions import (
    ConfigError,
    GeometryError,
    OutputError,
    SVGSerializerError,
    UnsupportedInputError,
)
from svg_serializer.geometry import Geom2, Geom3, Path2
from svg_serializer.loader import load_geometries

__version__ = "0.1.0"

__all__ = [
    # Main API
    "serialize",
    "SVGSerializer",
    "SerializationResult",
    "MIME_TYPE",
    "Config",
    "SUPPORTED_UNITS",
    "load_geometries",
    # Geometry
    "Geom2",
    "Geom3",
    "Path2",
    # Exceptions
    "SVGSerializerError",
    "UnsupportedInputError",
    "ConfigError",
    "GeometryError",
    "OutputError",
    # Metadata
    "__version__",
]
