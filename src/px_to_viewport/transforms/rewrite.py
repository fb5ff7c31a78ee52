"""Unit arithmetic: turn one ``<number><unit>`` token into viewport units."""

from __future__ import annotations

import math
import re

__all__ = ["to_fixed", "format_number", "rewrite_number", "rewrite_value"]


def to_fixed(number: float, precision: int) -> float:
    """Round *number* to *precision* digits, truncating then rounding half up.

    The value is first floored one digit past the requested precision and
    only then rounded, so ``to_fixed(1.005, 2)`` gives ``1.0`` rather than
    whatever binary rounding of 1.005 would produce.
    """
    multiplier = 10 ** (precision + 1)
    whole_number = math.floor(number * multiplier)
    return math.floor(whole_number / 10 + 0.5) * 10 / multiplier


def format_number(number: float, precision: int) -> str:
    """Render a rounded number the way it should appear in CSS."""
    if float(number).is_integer():
        return str(int(number))
    text = f"{number:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def rewrite_number(
    number_text: str,
    unit: str,
    size: float,
    precision: int,
    min_pixel_value: float,
    original: str | None = None,
) -> str:
    """Convert one matched magnitude; return *original* when below threshold.

    *original* is the full matched token (number plus source unit) and
    defaults to *number_text*.
    """
    if original is None:
        original = number_text
    pixels = float(number_text)
    if pixels <= min_pixel_value:
        return original
    parsed = to_fixed(pixels / size * 100, precision)
    if parsed == 0:
        return "0"
    return format_number(parsed, precision) + unit


def rewrite_value(
    value: str,
    pattern: re.Pattern[str],
    unit: str,
    size: float,
    precision: int,
    min_pixel_value: float,
) -> str:
    """Rewrite every convertible token of a declaration value."""
    pieces: list[str] = []
    cursor = 0
    for match in pattern.finditer(value):
        start, end = match.span()
        pieces.append(value[cursor:start])
        number = match.group("number")
        if number is None:
            # Quoted string or url(): copied through untouched.
            pieces.append(match.group(0))
        else:
            pieces.append(
                rewrite_number(number, unit, size, precision, min_pixel_value, original=match.group(0))
            )
        cursor = end
    pieces.append(value[cursor:])
    return "".join(pieces)
