"""Property-name predicate built from a list of glob-like patterns.

Pattern forms:
    ``width``        exact name
    ``*``            every property
    ``*position*``   name contains ``position``
    ``*-width``      name ends with ``-width``
    ``font*``        name starts with ``font``
    ``!``-prefixed   any of the above, negated; negations win over matches
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

__all__ = ["PropList", "create_prop_list_matcher"]

_EXACT = re.compile(r"^[^*!]+$")
_CONTAIN = re.compile(r"^\*.+\*$")
_END_WITH = re.compile(r"^\*[^*]+$")
_START_WITH = re.compile(r"^[^*!]+\*$")
_NOT_EXACT = re.compile(r"^![^*].*$")
_NOT_CONTAIN = re.compile(r"^!\*.+\*$")
_NOT_END_WITH = re.compile(r"^!\*[^*]+$")
_NOT_START_WITH = re.compile(r"^![^*]+\*$")


@dataclass(frozen=True)
class PropList:
    """The prop list split into its pattern families."""

    exact: tuple[str, ...]
    contain: tuple[str, ...]
    end_with: tuple[str, ...]
    start_with: tuple[str, ...]
    not_exact: tuple[str, ...]
    not_contain: tuple[str, ...]
    not_end_with: tuple[str, ...]
    not_start_with: tuple[str, ...]

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "PropList":
        patterns = list(patterns)
        return cls(
            exact=tuple(p for p in patterns if _EXACT.match(p)),
            contain=tuple(p[1:-1] for p in patterns if _CONTAIN.match(p)),
            end_with=tuple(p[1:] for p in patterns if _END_WITH.match(p)),
            start_with=tuple(p[:-1] for p in patterns if _START_WITH.match(p)),
            not_exact=tuple(p[1:] for p in patterns if _NOT_EXACT.match(p)),
            not_contain=tuple(p[2:-1] for p in patterns if _NOT_CONTAIN.match(p)),
            not_end_with=tuple(p[2:] for p in patterns if _NOT_END_WITH.match(p)),
            not_start_with=tuple(p[1:-1] for p in patterns if _NOT_START_WITH.match(p)),
        )

    def matches(self, prop: str) -> bool:
        return (
            prop in self.exact
            or any(m in prop for m in self.contain)
            or any(prop.startswith(m) for m in self.start_with)
            or any(prop.endswith(m) for m in self.end_with)
        )

    def excludes(self, prop: str) -> bool:
        return (
            prop in self.not_exact
            or any(m in prop for m in self.not_contain)
            or any(prop.startswith(m) for m in self.not_start_with)
            or any(prop.endswith(m) for m in self.not_end_with)
        )


def create_prop_list_matcher(prop_list: Iterable[str]) -> Callable[[str], bool]:
    """Return ``satisfies(prop) -> bool`` for the given patterns."""
    patterns = list(prop_list)
    has_wild = "*" in patterns
    match_all = has_wild and len(patterns) == 1
    lists = PropList.from_patterns(patterns)

    def satisfies(prop: str) -> bool:
        if match_all:
            return True
        return (has_wild or lists.matches(prop)) and not lists.excludes(prop)

    return satisfies
