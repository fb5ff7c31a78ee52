from __future__ import annotations

from typing import Iterable

from px_to_viewport.css.nodes import Root
from px_to_viewport.model.result import Result
from px_to_viewport.transforms.base import Transform
from px_to_viewport.transforms.px_to_viewport import PxToViewportTransform

__all__ = ["PxToViewportTransform", "Transform", "apply_transforms"]


def apply_transforms(
    root: Root, result: Result | None = None, transforms: Iterable[Transform] = ()
) -> Result:
    """Run *transforms* over *root* in order and return the shared result."""
    result = result or Result(root=root)
    for t in transforms:
        root = t.apply(root, result)
    result.root = root
    return result
