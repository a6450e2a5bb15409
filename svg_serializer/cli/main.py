"""svg-serializer command group."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from svg_serializer import __version__
from svg_serializer.cli.commands import convert, inspect
from svg_serializer.config import Config
from svg_serializer.exceptions import ConfigError
from svg_serializer.log import LOG_LEVELS, configure_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="svg-serializer")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with default unit/decimals",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: Optional[Path]) -> None:
    """Serialize 2D geometry to SVG documents."""
    configure_logging(log_level)
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = log_level.upper()


cli.add_command(convert)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
