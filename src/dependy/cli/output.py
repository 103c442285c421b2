"""Rich output formatting helpers for the Dependy CLI."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dependy.core.resolver import DependencyResolver

console = Console()


def print_execution_order(
    order: list[str],
    resolver: DependencyResolver[str],
) -> None:
    """Print the execution order with each unit's direct predecessors.

    Args:
        order: Canonical identities in execution order.
        resolver: The resolver that produced ``order``.
    """
    if not order:
        console.print("[dim]Nothing to run.[/dim]")
        return

    table = Table(title="Execution Order", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Unit", style="bold")
    table.add_column("Requires")
    table.add_column("After", style="dim")

    for index, name in enumerate(order, start=1):
        required = resolver.required_parents_of(name)
        others = [p for p in resolver.parents_of(name) if p not in required]
        table.add_row(
            str(index),
            name,
            ", ".join(required) or "-",
            ", ".join(others) or "-",
        )

    console.print(table)
    console.print(f"[bold]{len(order)}[/bold] units ordered")


def print_resolution_error(message: str) -> None:
    """Print a resolution failure panel."""
    console.print(
        Panel(Text(message, style="bold red"), title="Resolution failed")
    )
