"""Exception hierarchy for svg-serializer.

Every error raised on purpose by the package derives from SVGSerializerError,
so callers can catch one type.
"""

from __future__ import annotations


class SVGSerializerError(Exception):
    """Base exception for svg-serializer."""


class UnsupportedInputError(SVGSerializerError):
    """None of the given objects is 2D geometry."""

    def __init__(self, message: str = "only 2D geometries can be serialized to SVG") -> None:
        super().__init__(message)


class ConfigError(SVGSerializerError):
    """Invalid configuration value or configuration file."""


class GeometryError(SVGSerializerError):
    """Malformed geometry or geometry description."""


class OutputError(SVGSerializerError):
    """The document could not be written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
