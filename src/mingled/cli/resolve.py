"""CLI command: mingled resolve -- resolve tokens and print their CSS."""

from __future__ import annotations

import json
import sys

import click

from mingled.cli._options import breakpoint_option, build_theme
from mingled.render import render_resolution
from mingled.resolver import Resolver


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any token is unresolved.")
@breakpoint_option
def resolve(
    tokens: tuple[str, ...], as_json: bool, strict: bool, breakpoints: dict[str, str]
) -> None:
    """Resolve utility TOKENS and print the resulting CSS.

    Tokens that match no rule are reported on stderr.
    """
    resolver = Resolver(theme=build_theme(breakpoints))

    results = []
    unresolved = []
    for token in tokens:
        resolution = resolver.resolve(token)
        if resolution is None:
            unresolved.append(token)
            click.echo(f"Unresolved: {token}", err=True)
            continue
        results.append(resolution)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for resolution in results:
            click.echo(render_resolution(resolution))

    if strict and unresolved:
        sys.exit(1)
