"""Options shared by the resolve and build commands."""

from __future__ import annotations

import click

from mingled.theme import DEFAULT_THEME, Theme


def _parse_breakpoint(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    breakpoints: dict[str, str] = {}
    for raw in values:
        name, sep, length = raw.partition("=")
        if not sep or not name or not length:
            raise click.BadParameter(f"expected NAME=LENGTH, got {raw!r}")
        breakpoints[name.strip()] = length.strip()
    return breakpoints


breakpoint_option = click.option(
    "--breakpoint",
    "breakpoints",
    multiple=True,
    metavar="NAME=LENGTH",
    callback=_parse_breakpoint,
    help="Override a breakpoint length, e.g. --breakpoint md=800px.",
)


def build_theme(breakpoints: dict[str, str]) -> Theme:
    """Return the default theme with *breakpoints* applied over it."""
    if not breakpoints:
        return DEFAULT_THEME
    return DEFAULT_THEME.with_breakpoints(**breakpoints)
