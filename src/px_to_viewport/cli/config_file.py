"""Load option sets for the CLI from a JSON file plus command-line flags."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import click

from px_to_viewport.errors import ConfigError
from px_to_viewport.options import ViewportOptions, build_options

# Keys whose string values are compiled as regular expressions, whether
# they come from a flag or from the JSON config.
_REGEX_KEYS = ("include", "exclude")


def read_config(path: str | None) -> Any:
    if path is None:
        return None
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON in {path}: {exc}") from exc


def _compile(name: str, value: Any) -> Any:
    """Compile the string entries of *value*; other shapes are left for validation."""
    try:
        if isinstance(value, str):
            return re.compile(value)
        if isinstance(value, (list, tuple)):
            return [re.compile(p) if isinstance(p, str) else p for p in value]
    except re.error as exc:
        raise ConfigError(f"options.{name}: invalid pattern: {exc}", option=name) from exc
    return value


def _compile_patterns(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    compiled = dict(data)
    for name in _REGEX_KEYS:
        if name in compiled:
            compiled[name] = _compile(name, compiled[name])
    return compiled


def load_option_sets(config_path: str | None, overrides: dict[str, Any]) -> list[ViewportOptions]:
    """Merge CLI *overrides* (``None`` meaning "not given") into the config.

    Overrides only make sense for a single option set; combining them with
    an array config is rejected.
    """
    config = read_config(config_path)
    given = _compile_patterns({k: v for k, v in overrides.items() if v is not None and v != ()})
    if isinstance(config, list):
        if given:
            raise ConfigError("Command-line options cannot be combined with an array config")
        return build_options([_compile_patterns(item) for item in config])
    merged = dict(_compile_patterns(config) or {})
    merged.update(given)
    return build_options(merged)
