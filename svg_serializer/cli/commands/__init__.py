"""CLI commands for svg-serializer."""

from svg_serializer.cli.commands.convert import convert
from svg_serializer.cli.commands.inspect import inspect

__all__ = ["convert", "inspect"]
