"""Command-line interface for svg-serializer."""

from svg_serializer.cli.main import cli

__all__ = ["cli"]
