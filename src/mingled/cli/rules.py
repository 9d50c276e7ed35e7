"""CLI command: mingled rules -- list the rule table in match order."""

from __future__ import annotations

import click

from mingled.rules import RULES


@click.command()
def rules() -> None:
    """List every rule in match order with its pattern and autocomplete hint."""
    width = max(len(r.name) for r in RULES)
    for index, r in enumerate(RULES, start=1):
        line = f"{index:3d}  {r.name:<{width}}  {r.pattern.pattern}"
        if r.autocomplete:
            line += f"  [{r.autocomplete}]"
        click.echo(line)
