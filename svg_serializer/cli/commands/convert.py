"""Convert command - geometry description file to SVG."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.progress import Progress

from svg_serializer.api import SVGSerializer
from svg_serializer.config import SUPPORTED_UNITS, Config
from svg_serializer.exceptions import SVGSerializerError
from svg_serializer.loader import load_geometries

console = Console()


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output SVG file")
@click.option("--unit", type=click.Choice(SUPPORTED_UNITS), help="Document length unit")
@click.option("--decimals", type=click.IntRange(min=1), help="Rounding subdivisions (10000 = 1/10000)")
@click.option("-q", "--quiet", is_flag=True, help="No progress bar or summary")
@click.pass_context
def convert(
    ctx: click.Context,
    input_file: Path,
    output: Optional[Path],
    unit: Optional[str],
    decimals: Optional[int],
    quiet: bool,
) -> None:
    """Serialize the geometry described in INPUT_FILE (YAML or JSON) to SVG."""
    config: Config = (ctx.obj or {}).get("config") or Config()
    overrides = {}
    if unit:
        overrides["unit"] = unit
    if decimals:
        overrides["decimals"] = decimals

    output_path = output or input_file.with_suffix(".svg")

    try:
        objects = load_geometries(input_file)
        if quiet:
            written = SVGSerializer(config.replace(**overrides)).write(output_path, objects)
        else:
            with Progress(console=console, transient=True) as progress:
                task = progress.add_task("[green]Serializing...", total=100)

                def on_status(value: float) -> None:
                    progress.update(task, completed=value)

                serializer = SVGSerializer(config.replace(status_callback=on_status, **overrides))
                written = serializer.write(output_path, objects)
    except SVGSerializerError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not quiet:
        console.print(f"[green]Wrote[/green] {written}")
