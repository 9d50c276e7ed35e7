"""Mingled CLI entry point: Click group with subcommands."""

import logging

import click

from mingled import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mingled")
@click.option("-v", "--verbose", is_flag=True, help="Log rule matching to stderr.")
def cli(verbose: bool) -> None:
    """Mingled - resolve utility class tokens into CSS declarations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from mingled.cli.build import build  # noqa: E402
from mingled.cli.resolve import resolve  # noqa: E402
from mingled.cli.rules import rules  # noqa: E402

cli.add_command(resolve)
cli.add_command(rules)
cli.add_command(build)
