"""Build the pattern that finds convertible numbers in a declaration value."""

from __future__ import annotations

import re
from functools import lru_cache

__all__ = ["get_unit_regexp"]


@lru_cache(maxsize=32)
def get_unit_regexp(unit: str) -> re.Pattern[str]:
    """Return a pattern matching ``<number><unit>`` tokens.

    Quoted strings and ``url(...)`` are matched as whole alternatives so
    their contents are never converted; for those matches the ``number``
    group is ``None``.  The number may not be glued to a preceding
    identifier (``h1px``) and the unit may not continue into a longer one
    (``10pxs``).
    """
    return re.compile(
        r"""
        "[^"]+"                       # double-quoted string
        | '[^']+'                     # single-quoted string
        | url\([^)]+\)                # url(...)
        | (?<![\w.])
          (?P<number>\d*\.?\d+)       # the magnitude
        """
        + re.escape(unit)
        + r"(?![A-Za-z_])",
        re.VERBOSE,
    )
