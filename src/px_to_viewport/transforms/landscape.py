"""Landscape duplication: collect converted clones, flush them once per pass."""

from __future__ import annotations

import logging
import re
from collections import deque
from typing import Callable

from px_to_viewport.css.nodes import AtRule, Root, Rule
from px_to_viewport.options import ViewportOptions
from px_to_viewport.transforms.rewrite import rewrite_value

logger = logging.getLogger(__name__)

LANDSCAPE_PARAMS = "(orientation: landscape)"


class LandscapeQueue:
    """Rules waiting to be emitted under ``@media (orientation: landscape)``.

    One queue belongs to one pass; it is drained by :meth:`flush`.
    """

    def __init__(self) -> None:
        self._rules: deque[Rule] = deque()

    def push(self, rule: Rule) -> None:
        self._rules.append(rule)

    def __len__(self) -> int:
        return len(self._rules)

    def flush(self, root: Root) -> AtRule | None:
        """Move every queued rule, in FIFO order, into one new media block.

        Returns the appended at-rule, or ``None`` when nothing was queued.
        """
        if not self._rules:
            return None
        media = AtRule(name="media", params=LANDSCAPE_PARAMS)
        while self._rules:
            rule = self._rules.popleft()
            rule.clean_raws()
            media.append(rule)
        root.append(media)
        logger.debug("Appended landscape block with %d rule(s)", len(media))
        return media


def collect_landscape_rule(
    rule: Rule,
    options: ViewportOptions,
    pattern: re.Pattern[str],
    satisfies: Callable[[str], bool],
) -> Rule | None:
    """Build the landscape copy of *rule*, or ``None`` if nothing converts.

    Ignore comments are not consulted here; they only guard the in-place
    conversion.
    """
    landscape_rule = rule.clone().remove_all()
    for decl in rule.walk_decls():
        if options.unit_to_convert not in decl.value:
            continue
        if not satisfies(decl.prop):
            continue
        value = rewrite_value(
            decl.value,
            pattern,
            options.landscape_unit,
            options.landscape_width,
            options.unit_precision,
            options.min_pixel_value,
        )
        landscape_rule.append(decl.clone(value=value))
    if len(landscape_rule) == 0:
        return None
    return landscape_rule
