"""restyle CLI entry point: Click group with subcommands."""

import logging

import click

from restyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="restyle")
@click.option("-v", "--verbose", is_flag=True, help="Log classification and resolution details")
def cli(verbose: bool) -> None:
    """restyle - turn natural-language style prompts into override stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from restyle.cli.check import check  # noqa: E402
from restyle.cli.generate import generate  # noqa: E402
from restyle.cli.inspect import classify, inspect, suggestions, templates  # noqa: E402

cli.add_command(generate)
cli.add_command(classify)
cli.add_command(inspect)
cli.add_command(templates)
cli.add_command(suggestions)
cli.add_command(check)
