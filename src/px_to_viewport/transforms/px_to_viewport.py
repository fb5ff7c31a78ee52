"""The px-to-viewport pass: convert absolute lengths into viewport units."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from px_to_viewport.css.nodes import Root, Rule
from px_to_viewport.matchers import create_prop_list_matcher, get_unit_regexp
from px_to_viewport.model.result import Result
from px_to_viewport.options import ViewportOptions, build_options
from px_to_viewport.transforms.declarations import parent_params, process_declarations
from px_to_viewport.transforms.filters import admits
from px_to_viewport.transforms.landscape import LandscapeQueue, collect_landscape_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionPlan:
    """One option set with its unit pattern and property predicate built."""

    options: ViewportOptions
    pattern: re.Pattern[str]
    satisfies: Callable[[str], bool]

    @classmethod
    def build(cls, options: ViewportOptions) -> "OptionPlan":
        return cls(
            options=options,
            pattern=get_unit_regexp(options.unit_to_convert),
            satisfies=create_prop_list_matcher(options.prop_list),
        )


@dataclass
class PassContext:
    """State shared by both phases of a single pass."""

    root: Root
    result: Result
    landscape: LandscapeQueue = field(default_factory=LandscapeQueue)


class PxToViewportTransform:
    """Rewrite ``px`` (or another unit) declarations into viewport units.

    The pass runs in two phases.  Phase one walks every rule and, for each
    option set in order, filters the rule, queues its landscape copy and
    converts its declarations.  Phase two runs once, after the whole tree
    has been walked, and appends the queued landscape rules as a single
    ``@media (orientation: landscape)`` block.

    Options are validated at construction time, so a bad ``include`` or
    ``exclude`` fails before any tree is touched.
    """

    name = "px-to-viewport"

    def __init__(self, options: Any = None) -> None:
        self.options = build_options(options)
        self._plans = [OptionPlan.build(o) for o in self.options]

    def apply(self, root: Root, result: Result | None = None) -> Root:
        context = PassContext(root=root, result=result or Result(root=root))
        self.walk(context)
        self.flush(context)
        return root

    def walk(self, context: PassContext) -> None:
        """Phase one: filter, collect and convert every rule."""
        for rule in list(context.root.walk_rules()):
            for plan in self._plans:
                self._process(rule, plan, context)

    def flush(self, context: PassContext) -> None:
        """Phase two: emit the queued landscape rules, if any."""
        context.landscape.flush(context.root)

    def _process(self, rule: Rule, plan: OptionPlan, context: PassContext) -> None:
        options = plan.options
        if not admits(rule, options):
            logger.debug("Skipping rule %r", rule.selector)
            return

        if options.landscape and not parent_params(rule):
            landscape_rule = collect_landscape_rule(rule, options, plan.pattern, plan.satisfies)
            if landscape_rule is not None:
                context.landscape.push(landscape_rule)

        process_declarations(rule, context.result, options, plan.pattern, plan.satisfies)
