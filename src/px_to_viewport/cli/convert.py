"""CLI command: px-to-viewport convert -- rewrite a style sheet."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from px_to_viewport.cli.config_file import load_option_sets
from px_to_viewport.errors import ConfigError, CssSyntaxError
from px_to_viewport.processor import process_css


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write here instead of stdout")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None, help="JSON option set, or array of sets")
@click.option("--unit-to-convert", default=None, help="Source unit (default px)")
@click.option("--viewport-width", type=float, default=None, help="Design width the source was drawn at")
@click.option("--unit-precision", type=int, default=None, help="Fractional digits to keep")
@click.option("--viewport-unit", default=None, help="Target unit for general properties")
@click.option("--font-viewport-unit", default=None, help="Target unit for font properties")
@click.option("--min-pixel-value", type=float, default=None, help="Values at or below this are left alone")
@click.option("--media-query/--no-media-query", default=None, help="Also convert inside media queries")
@click.option("--replace/--no-replace", default=None, help="Replace in place instead of adding a fallback")
@click.option("--landscape/--no-landscape", default=None, help="Emit an orientation: landscape block")
@click.option("--landscape-unit", default=None, help="Target unit inside the landscape block")
@click.option("--landscape-width", type=float, default=None, help="Viewport width for landscape")
@click.option("--selector-black-list", multiple=True, help="Skip selectors containing this text")
@click.option("--prop-list", multiple=True, help="Property pattern to convert (repeatable)")
@click.option("--include", multiple=True, help="Only convert files matching this regex")
@click.option("--exclude", multiple=True, help="Never convert files matching this regex")
@click.option("-v", "--verbose", is_flag=True, help="Log each conversion")
def convert(
    source: str,
    output: str | None,
    config_path: str | None,
    verbose: bool,
    **overrides: object,
) -> None:
    """Convert absolute lengths in SOURCE into viewport units.

    Warnings are printed to stderr.  Exits with code 1 on a syntax or
    configuration error.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    src_path = Path(source)
    try:
        option_sets = load_option_sets(config_path, overrides)
        result = process_css(
            src_path.read_text(encoding="utf-8"),
            option_sets,
            from_path=str(src_path.resolve()),
        )
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    except CssSyntaxError as exc:
        click.echo(f"Syntax error: {exc}", err=True)
        sys.exit(1)

    for warning in result.warnings():
        click.echo(str(warning), err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css, nl=False)
