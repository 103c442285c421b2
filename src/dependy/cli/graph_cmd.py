"""``dependy graph [ROOTS...]`` -- Export the resolved graph as DOT.

Resolves ROOTS exactly like ``dependy order`` and writes the resulting
dependency graph to stdout, or to ``--output``.

Exit Codes:
    0 -- Graph written.
    1 -- Resolution failed.
    2 -- Invalid options or duplicate declarations.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import click

from dependy.cli.options import build_resolver, build_units, unit_options
from dependy.exceptions import ResolutionError


@click.command("graph")
@click.argument("roots", nargs=-1)
@unit_options
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write DOT to this file instead of stdout.",
)
@click.option(
    "--name", "graph_name", default="dependencies", show_default=True,
    help="Name of the digraph.",
)
def graph_command(
    roots: tuple[str, ...],
    units: tuple[str, ...],
    requires: tuple[str, ...],
    suggests: tuple[str, ...],
    provides: tuple[str, ...],
    output: str | None,
    graph_name: str,
) -> None:
    """Resolve ROOTS and export the dependency graph in DOT format."""
    declared = build_units(units, requires, suggests, provides)
    resolver = build_resolver(declared)
    targets = list(roots) or [unit.name for unit in declared]

    try:
        resolver.resolve(targets)
    except ResolutionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output:
        out_path = Path(output)
        with out_path.open("w", encoding="utf-8") as fh:
            resolver.export(fh, graph_name=graph_name)
        click.echo(f"Graph written to: {out_path}")
    else:
        buffer = io.StringIO()
        resolver.export(buffer, graph_name=graph_name)
        click.echo(buffer.getvalue(), nl=False)
    sys.exit(0)
