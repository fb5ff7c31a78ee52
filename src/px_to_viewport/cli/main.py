"""px-to-viewport CLI entry point: Click group with subcommands."""

import click

from px_to_viewport import __version__


@click.group()
@click.version_option(version=__version__, prog_name="px-to-viewport")
def cli() -> None:
    """px-to-viewport - convert absolute CSS lengths into viewport units."""


# Import and register subcommands
from px_to_viewport.cli.convert import convert  # noqa: E402
from px_to_viewport.cli.inspect import inspect  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
