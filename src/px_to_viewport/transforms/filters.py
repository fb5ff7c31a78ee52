"""Rule eligibility: include/exclude file patterns and the selector blacklist."""

from __future__ import annotations

import re
from typing import Iterable

from px_to_viewport.css.nodes import Rule
from px_to_viewport.options import Pattern, ViewportOptions

__all__ = [
    "admits",
    "blacklisted_selector",
    "excluded_file",
    "included_file",
    "source_file",
]


def _matches(pattern: Pattern, text: str) -> bool:
    if isinstance(pattern, str):
        return pattern in text
    return re.search(pattern, text) is not None


def source_file(rule: Rule) -> str | None:
    if rule.source is None:
        return None
    return rule.source.input.file


def included_file(include: Iterable[Pattern] | None, file: str | None) -> bool:
    """True unless an include list is set, the file is known and none match."""
    if not include or not file:
        return True
    return any(_matches(p, file) for p in include)


def excluded_file(exclude: Iterable[Pattern] | None, file: str | None) -> bool:
    if not exclude or not file:
        return False
    return any(_matches(p, file) for p in exclude)


def blacklisted_selector(blacklist: Iterable[Pattern], selector: object) -> bool:
    if not isinstance(selector, str):
        return False
    return any(_matches(p, selector) for p in blacklist)


def admits(rule: Rule, options: ViewportOptions) -> bool:
    """Decide whether *rule* takes part in conversion for *options*.

    Filters run in order and stop at the first rejection: include, exclude,
    selector blacklist.
    """
    file = source_file(rule)
    if not included_file(options.include, file):
        return False
    if excluded_file(options.exclude, file):
        return False
    if blacklisted_selector(options.selector_black_list, rule.selector):
        return False
    return True
