"""Base protocol for tree transforms."""

from __future__ import annotations

from typing import Protocol

from px_to_viewport.css.nodes import Root
from px_to_viewport.model.result import Result


class Transform(Protocol):
    """An in-place tree transformation step."""

    def apply(self, root: Root, result: Result | None = None) -> Root: ...
