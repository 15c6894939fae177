"""CLI command: restyle check -- validate a stylesheet file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from restyle.cli.options import load_config, style_options
from restyle.errors import StylesheetParseError
from restyle.validation import validate


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@style_options
@click.option("--injection-id", default=None, help="Id of the injected <style> element")
def check(cssfile: str, scope: str | None, important: str | None, injection_id: str | None) -> None:
    """Validate a stylesheet file against the injection policy."""
    config = load_config(scope=scope, important=important, injection_id=injection_id)
    source = Path(cssfile).read_text(encoding="utf-8")

    try:
        diagnostics = validate(source, config.validation_policy())
    except StylesheetParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)

    name = Path(cssfile).name
    if not diagnostics:
        click.echo(f"OK: {name} is valid (0 diagnostics)")
        return

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")
    if errors:
        sys.exit(1)
