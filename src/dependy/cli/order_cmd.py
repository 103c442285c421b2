"""``dependy order [ROOTS...]`` -- Print the execution order for units.

Declares units from the ``-u/-r/-s/-p`` options, resolves the requested
roots (every declared unit, in declaration order, when none are given) and
prints the resulting order.

Exit Codes:
    0 -- Order computed.
    1 -- Resolution failed (unknown name, circular dependency, ...).
    2 -- Invalid options or duplicate declarations.
"""

from __future__ import annotations

import json
import sys

import click

from dependy.cli.options import build_resolver, build_units, unit_options
from dependy.exceptions import ResolutionError


@click.command("order")
@click.argument("roots", nargs=-1)
@unit_options
@click.option(
    "--json", "as_json", is_flag=True, default=False,
    help="Print the order as a JSON list.",
)
def order_command(
    roots: tuple[str, ...],
    units: tuple[str, ...],
    requires: tuple[str, ...],
    suggests: tuple[str, ...],
    provides: tuple[str, ...],
    as_json: bool,
) -> None:
    """Resolve ROOTS and print the order they must run in."""
    declared = build_units(units, requires, suggests, provides)
    resolver = build_resolver(declared)
    targets = list(roots) or [unit.name for unit in declared]

    try:
        order = resolver.resolve(targets)
    except ResolutionError as exc:
        if as_json:
            click.echo(json.dumps({"error": str(exc)}))
        else:
            from dependy.cli.output import print_resolution_error
            print_resolution_error(str(exc))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(order))
    else:
        from dependy.cli.output import print_execution_order
        print_execution_order(order, resolver)
    sys.exit(0)
