"""CLI command: restyle generate -- emit a stylesheet for a prompt."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from restyle.cli.options import load_config, style_options
from restyle.errors import ConfigError, InvalidPromptError
from restyle.session import GenerationStatus, StyleSession


@click.command()
@click.argument("prompt")
@style_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write to a file")
@click.option("--no-header", is_flag=True, help="Omit the leading template comment")
@click.option("--no-validate", is_flag=True, help="Skip validating the emitted stylesheet")
def generate(
    prompt: str,
    scope: str | None,
    important: str | None,
    output: str | None,
    no_header: bool,
    no_validate: bool,
) -> None:
    """Generate an override stylesheet from a natural-language PROMPT."""
    config = load_config(
        scope=scope,
        important=important,
        header=False if no_header else None,
        validate_output=False if no_validate else None,
    )
    try:
        session = StyleSession(config=config)
        state = session.generate(prompt)
    except InvalidPromptError as exc:
        click.echo(f"Empty prompt: {exc}", err=True)
        sys.exit(1)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    if state.status is not GenerationStatus.APPLIED:
        click.echo(f"Generation failed: {state.error}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(state.stylesheet, encoding="utf-8")
        click.echo(f"Wrote {state.template} stylesheet to {output}")
    else:
        click.echo(state.stylesheet, nl=False)
