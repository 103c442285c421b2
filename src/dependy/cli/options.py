"""Shared unit-declaration options for ``dependy`` subcommands.

Units are declared entirely on the command line::

    dependy order first -u first -u second -r first=deux -p second=deux

``-u NAME`` declares a unit with no relationships. ``-r NAME=DEP``,
``-s NAME=DEP`` and ``-p NAME=ALIAS`` add a requirement, suggestion or alias
to NAME, declaring NAME if it was not declared yet. Units are registered in
order of first mention.
"""

from __future__ import annotations

from typing import Callable

import click

from dependy.core.resolver import DependencyResolver
from dependy.core.units import SimpleDependency
from dependy.exceptions import RegistrationError


def _split_pair(option: str, value: str) -> tuple[str, str]:
    """Split ``NAME=OTHER`` into its two non-empty halves."""
    name, sep, other = value.partition("=")
    name, other = name.strip(), other.strip()
    if not sep or not name or not other:
        raise click.BadParameter(
            f"expected NAME=VALUE, got {value!r}", param_hint=option
        )
    return name, other


def build_units(
    units: tuple[str, ...],
    requires: tuple[str, ...],
    suggests: tuple[str, ...],
    provides: tuple[str, ...],
) -> list[SimpleDependency[str]]:
    """Assemble unit declarations from raw option values.

    Raises:
        click.BadParameter: If a NAME=VALUE option is malformed.
    """
    fields: dict[str, dict[str, list[str]]] = {}

    def _declare(name: str) -> dict[str, list[str]]:
        return fields.setdefault(
            name, {"requirements": [], "suggestions": [], "provides": []}
        )

    for name in units:
        _declare(name.strip())
    for option, values, key in (
        ("--requires", requires, "requirements"),
        ("--suggests", suggests, "suggestions"),
        ("--provides", provides, "provides"),
    ):
        for value in values:
            name, other = _split_pair(option, value)
            _declare(name)[key].append(other)

    return [
        SimpleDependency(
            name,
            requirements=tuple(decl["requirements"]),
            suggestions=tuple(decl["suggestions"]),
            provides=tuple(decl["provides"]),
        )
        for name, decl in fields.items()
    ]


def build_resolver(
    units: list[SimpleDependency[str]],
) -> DependencyResolver[str]:
    """Register every unit with a fresh resolver.

    Raises:
        click.UsageError: If a unit or alias is declared twice.
    """
    resolver: DependencyResolver[str] = DependencyResolver()
    for unit in units:
        try:
            resolver.add_dependency(unit)
        except RegistrationError as exc:
            raise click.UsageError(str(exc)) from exc
    return resolver


def unit_options(func: Callable) -> Callable:
    """Attach the ``-u/-r/-s/-p`` unit options to a command."""
    decorators = [
        click.option(
            "--unit", "-u", "units", multiple=True, metavar="NAME",
            help="Declare a unit with no relationships.",
        ),
        click.option(
            "--requires", "-r", multiple=True, metavar="NAME=DEP",
            help="NAME requires DEP (name or alias).",
        ),
        click.option(
            "--suggests", "-s", multiple=True, metavar="NAME=DEP",
            help="NAME suggests DEP (name or alias).",
        ),
        click.option(
            "--provides", "-p", multiple=True, metavar="NAME=ALIAS",
            help="NAME is also known as ALIAS.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func
