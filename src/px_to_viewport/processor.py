"""One-call entry point: parse, convert, and return the result."""

from __future__ import annotations

from typing import Any

from px_to_viewport.css.parser import parse_css
from px_to_viewport.model.result import Result
from px_to_viewport.transforms import PxToViewportTransform, apply_transforms


def process_css(css: str, options: Any = None, from_path: str | None = None) -> Result:
    """Convert *css* and return a Result; ``result.css`` holds the output.

    Options are validated before the source is parsed.
    """
    transform = PxToViewportTransform(options)
    root = parse_css(css, from_path=from_path)
    return apply_transforms(root, transforms=[transform])
