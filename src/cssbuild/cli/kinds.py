"""CLI command: cssbuild kinds -- list selector part kinds in order."""

from __future__ import annotations

import click

from cssbuild.model.part import PartKind


@click.command()
def kinds() -> None:
    """List selector part kinds in the order they must be written.

    Repeatable kinds are marked with ``*``.
    """
    for kind in PartKind:
        marker = "*" if kind.repeatable else " "
        click.echo(f"{kind.value}  {kind.label:<15}{marker} {kind.render('x')}")
