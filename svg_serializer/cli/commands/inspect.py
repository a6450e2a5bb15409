"""Inspect command - summarise an SVG document written by svg-serializer."""

from __future__ import annotations

from pathlib import Path

import click
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException
from rich.console import Console
from rich.table import Table
from svg.path import parse_path

console = Console()

SVG_NS = "{http://www.w3.org/2000/svg}"


def count_points(d: str) -> int:
    """Number of logical points (move targets plus segment ends) in ``d``."""
    if not d:
        return 0
    return len(parse_path(d))


@click.command()
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(svg_file: Path) -> None:
    """Print the groups and paths of SVG_FILE."""
    try:
        root = ET.parse(str(svg_file)).getroot()
    except (ET.ParseError, DefusedXmlException) as e:
        console.print(f"[red]Error:[/red] cannot parse {svg_file}: {e}")
        raise SystemExit(1)

    console.print(
        f"[bold]{svg_file.name}[/bold]: width={root.get('width')} "
        f"height={root.get('height')} viewBox={root.get('viewBox')}"
    )

    table = Table(title="Paths")
    table.add_column("Group", style="cyan", justify="right")
    table.add_column("Points", style="yellow", justify="right")
    table.add_column("Fill", style="green")
    table.add_column("Stroke", style="magenta")
    table.add_column("d", style="dim")

    groups = root.findall(f"{SVG_NS}g")
    path_count = 0
    for group_index, group in enumerate(groups):
        for path in group.findall(f"{SVG_NS}path"):
            d = path.get("d", "")
            table.add_row(
                str(group_index),
                str(count_points(d)),
                path.get("fill", ""),
                path.get("stroke", ""),
                d[:40] + "..." if len(d) > 40 else d,
            )
            path_count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(groups)} groups, {path_count} paths")
