"""CLI command: mingled build -- generate a stylesheet from markup files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from mingled.cli._options import breakpoint_option, build_theme
from mingled.extract import extract_tokens
from mingled.render import render_stylesheet
from mingled.resolver import Resolver

logger = logging.getLogger(__name__)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the stylesheet here instead of stdout.",
)
@breakpoint_option
def build(files: tuple[str, ...], output: str | None, breakpoints: dict[str, str]) -> None:
    """Scan class attributes in FILES and emit CSS for every utility token."""
    tokens: list[str] = []
    for name in files:
        tokens.extend(extract_tokens(Path(name).read_text(encoding="utf-8")))

    resolver = Resolver(theme=build_theme(breakpoints))
    resolutions = resolver.resolve_all(tokens)
    logger.info("resolved %d of %d candidate tokens", len(resolutions), len(set(tokens)))
    css = render_stylesheet(resolutions)

    if output is None:
        click.echo(css, nl=False)
        return
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(css, encoding="utf-8")
    click.echo(f"Wrote {len(resolutions)} rule(s) to {out_path}", err=True)
