"""Options shared by several commands."""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import Any, Callable

import click

from restyle.config import RestyleConfig
from restyle.errors import ConfigError
from restyle.stylesheet.emitter import ImportantPolicy


def style_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --scope and --important to a command."""
    fn = click.option(
        "--important",
        type=click.Choice([p.value for p in ImportantPolicy]),
        default=None,
        help="Which declarations may carry !important",
    )(fn)
    fn = click.option(
        "--scope",
        default=None,
        help="Selector prefix that raises rule specificity",
    )(fn)
    return fn


def load_config(**overrides: Any) -> RestyleConfig:
    """Config from RESTYLE_* variables with non-None CLI overrides applied."""
    try:
        config = RestyleConfig.from_env()
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(config, **changes) if changes else config
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
