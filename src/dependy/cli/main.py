"""Dependy CLI -- Execution ordering for interdependent units.

Entry point for the ``dependy`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    order  -- Print the execution order for a set of units.
    graph  -- Export the resolved dependency graph as DOT.

Usage::

    dependy order -u single
    dependy order first -r first=deux -p second=deux
    dependy order first second third -u first -u second -u third --json
    dependy graph first -r first=second -u second -o deps.dot
"""

from __future__ import annotations

import logging

import click

from dependy import __version__
from dependy.cli.graph_cmd import graph_command
from dependy.cli.order_cmd import order_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v", is_flag=True, default=False,
    help="Log registration and resolution steps.",
)
def cli(verbose: bool) -> None:
    """Dependy: deterministic execution ordering for interdependent units.

    Declare units with their requirements, suggestions and aliases, then
    print the order they must run in or export the dependency graph.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(order_command)
cli.add_command(graph_command)
