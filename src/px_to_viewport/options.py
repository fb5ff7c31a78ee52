"""Option sets for the px-to-viewport transform."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Sequence, Union

from px_to_viewport.errors import ConfigError

logger = logging.getLogger(__name__)

# A file-path or selector pattern: substring for str, ``search`` for regexes.
Pattern = Union[str, "re.Pattern[str]"]


@dataclass(frozen=True)
class ViewportOptions:
    unit_to_convert: str = "px"
    viewport_width: float = 320
    viewport_height: float = 568  # accepted for compatibility, not used
    unit_precision: int = 5
    viewport_unit: str = "vw"
    font_viewport_unit: str = "vw"
    selector_black_list: tuple[Pattern, ...] = ()
    prop_list: tuple[str, ...] = ("*",)
    min_pixel_value: float = 1
    media_query: bool = False
    replace: bool = True
    landscape: bool = False
    landscape_unit: str = "vw"
    landscape_width: float = 568
    include: tuple[Pattern, ...] | None = None
    exclude: tuple[Pattern, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = [v.pattern if isinstance(v, re.Pattern) else v for v in value]
            data[f.name] = value
        return data


_FIELD_NAMES = {f.name for f in fields(ViewportOptions)}

# camelCase spellings used by JavaScript-style config files.
_ALIASES = {
    "unitToConvert": "unit_to_convert",
    "viewportWidth": "viewport_width",
    "viewportHeight": "viewport_height",
    "unitPrecision": "unit_precision",
    "viewportUnit": "viewport_unit",
    "fontViewportUnit": "font_viewport_unit",
    "selectorBlackList": "selector_black_list",
    "propList": "prop_list",
    "minPixelValue": "min_pixel_value",
    "mediaQuery": "media_query",
    "landscapeUnit": "landscape_unit",
    "landscapeWidth": "landscape_width",
}


def _is_pattern(value: object) -> bool:
    return isinstance(value, (str, re.Pattern))


def _normalize_patterns(name: str, value: object) -> tuple[Pattern, ...] | None:
    """Validate an include/exclude value into a tuple of patterns."""
    if value is None or value == "" or value == [] or value == ():
        return None
    if _is_pattern(value):
        return (value,)  # type: ignore[return-value]
    if isinstance(value, (list, tuple)) and all(_is_pattern(v) for v in value):
        return tuple(value)
    raise ConfigError(
        f"options.{name} should be a pattern or a sequence of patterns, "
        f"got {type(value).__name__}",
        option=name,
    )


def _normalize_sequence(name: str, value: object) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, re.Pattern)):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    raise ConfigError(f"options.{name} should be a sequence, got {type(value).__name__}", option=name)


def _validate(opts: ViewportOptions) -> ViewportOptions:
    for name in ("viewport_width", "landscape_width"):
        value = getattr(opts, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"options.{name} should be a positive number, got {value!r}", option=name)
    if isinstance(opts.min_pixel_value, bool) or not isinstance(opts.min_pixel_value, (int, float)):
        raise ConfigError(
            f"options.min_pixel_value should be a number, got {opts.min_pixel_value!r}",
            option="min_pixel_value",
        )
    if isinstance(opts.unit_precision, bool) or not isinstance(opts.unit_precision, int) or opts.unit_precision < 0:
        raise ConfigError(
            f"options.unit_precision should be a non-negative integer, got {opts.unit_precision!r}",
            option="unit_precision",
        )
    if not opts.unit_to_convert:
        raise ConfigError("options.unit_to_convert must not be empty", option="unit_to_convert")
    return opts


def options_from_mapping(data: Mapping[str, Any]) -> ViewportOptions:
    """Build one option set from a mapping; unknown keys are ignored."""
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.debug("Ignoring unknown option %r", key)
            continue
        kwargs[name] = value
    for name in ("include", "exclude"):
        if name in kwargs:
            kwargs[name] = _normalize_patterns(name, kwargs[name])
    for name in ("selector_black_list", "prop_list"):
        if name in kwargs:
            kwargs[name] = _normalize_sequence(name, kwargs[name])
    return _validate(ViewportOptions(**kwargs))


def _coerce(item: object) -> ViewportOptions:
    if isinstance(item, ViewportOptions):
        # Re-run normalization in case the dataclass was built by hand.
        return _validate(
            replace(
                item,
                include=_normalize_patterns("include", item.include),
                exclude=_normalize_patterns("exclude", item.exclude),
                selector_black_list=_normalize_sequence("selector_black_list", item.selector_black_list),
                prop_list=_normalize_sequence("prop_list", item.prop_list),
            )
        )
    if isinstance(item, Mapping):
        return options_from_mapping(item)
    raise ConfigError(f"Option set should be a mapping, got {type(item).__name__}")


def build_options(
    options: Mapping[str, Any] | ViewportOptions | Sequence[Mapping[str, Any] | ViewportOptions] | None = None,
) -> list[ViewportOptions]:
    """Default and validate one or more option sets.

    A sequence means "run the pass once per entry", in order.
    """
    if options is None:
        return [ViewportOptions()]
    if isinstance(options, (Mapping, ViewportOptions)):
        return [_coerce(options)]
    if isinstance(options, (list, tuple)):
        return [_coerce(item) for item in options]
    raise ConfigError(f"Options should be a mapping or a sequence of mappings, got {type(options).__name__}")
