"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selectors and play with small value objects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from selectorkit.cli.selector import combine, selector  # noqa: E402
from selectorkit.cli.objects import area, json_cmd  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(area)
cli.add_command(json_cmd)
