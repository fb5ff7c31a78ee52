"""CLI command: px-to-viewport inspect -- show the effective option sets."""

from __future__ import annotations

import json
import sys

import click

from px_to_viewport.cli.config_file import load_option_sets
from px_to_viewport.errors import ConfigError


@click.command()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None, help="JSON option set, or array of sets")
def inspect(config_path: str | None) -> None:
    """Print every option set, fully defaulted, as JSON."""
    try:
        option_sets = load_option_sets(config_path, {})
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    click.echo(json.dumps([o.to_dict() for o in option_sets], indent=2))
