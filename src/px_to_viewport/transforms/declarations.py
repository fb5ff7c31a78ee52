"""Per-rule declaration walk: ignore comments, unit choice, replace or insert."""

from __future__ import annotations

import logging
import re
from typing import Callable

from px_to_viewport.css.nodes import Comment, Container, Declaration, Rule
from px_to_viewport.errors import PxToViewportError
from px_to_viewport.model.result import Result
from px_to_viewport.options import ViewportOptions
from px_to_viewport.transforms.rewrite import rewrite_value

logger = logging.getLogger(__name__)

PLUGIN_NAME = "px-to-viewport"
IGNORE_NEXT_COMMENT = "px-to-viewport-ignore-next"
IGNORE_PREV_COMMENT = "px-to-viewport-ignore"

MISPLACED_IGNORE_MESSAGE = (
    f"Unexpected comment /* {IGNORE_PREV_COMMENT} */ must be after declaration at same line."
)


def parent_params(rule: Rule) -> str:
    return getattr(rule.parent, "params", "") or ""


def valid_params(params: str, media_query: bool) -> bool:
    """Rules inside a parameterized at-rule are converted only on opt-in."""
    return not params or media_query


def declaration_exists(container: Container, prop: str, value: str) -> bool:
    return any(
        isinstance(node, Declaration) and node.prop == prop and node.value == value
        for node in container.nodes or []
    )


def target_unit(decl: Declaration, rule: Rule, options: ViewportOptions) -> tuple[str, float]:
    """Pick the (unit, viewport size) pair for *decl*."""
    params = parent_params(rule)
    if options.landscape and "landscape" in params:
        return options.landscape_unit, options.landscape_width
    if "font" in decl.prop:
        return options.font_viewport_unit, options.viewport_width
    return options.viewport_unit, options.viewport_width


def _ignored(decl: Declaration, result: Result) -> bool:
    """Apply the ignore-comment protocol; True means leave *decl* alone."""
    prev = decl.prev()
    if isinstance(prev, Comment) and prev.text == IGNORE_NEXT_COMMENT:
        prev.remove()
        return True
    nxt = decl.next()
    if isinstance(nxt, Comment) and nxt.text == IGNORE_PREV_COMMENT:
        if "\n" in nxt.raws.get("before", ""):
            nxt.warn(result, MISPLACED_IGNORE_MESSAGE, plugin=PLUGIN_NAME)
        else:
            nxt.remove()
            return True
    return False


def _convert(
    decl: Declaration,
    rule: Rule,
    result: Result,
    options: ViewportOptions,
    pattern: re.Pattern[str],
    satisfies: Callable[[str], bool],
) -> None:
    if options.unit_to_convert not in decl.value:
        return
    if not satisfies(decl.prop):
        return
    if _ignored(decl, result):
        return

    unit, size = target_unit(decl, rule, options)
    value = rewrite_value(
        decl.value, pattern, unit, size, options.unit_precision, options.min_pixel_value
    )

    # Declarations of nested rules belong to their own parent, not to *rule*.
    parent = decl.parent
    if declaration_exists(parent, decl.prop, value):
        return

    logger.debug("%s: %s -> %s", decl.prop, decl.value, value)
    if options.replace:
        decl.value = value
    else:
        parent.insert_after(decl, decl.clone(value=value))


def process_declarations(
    rule: Rule,
    result: Result,
    options: ViewportOptions,
    pattern: re.Pattern[str],
    satisfies: Callable[[str], bool],
) -> None:
    """Convert the declarations of one admitted rule for one option set."""
    if not valid_params(parent_params(rule), options.media_query):
        return

    for decl in list(rule.walk_decls()):
        if decl.parent is None:
            continue
        try:
            _convert(decl, rule, result, options, pattern, satisfies)
        except PxToViewportError:
            raise
        except Exception as exc:
            raise decl.error(str(exc), plugin=PLUGIN_NAME) from exc
