"""Result sink handed to transforms alongside the tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from px_to_viewport.model.diagnostic import Diagnostic, Severity

if TYPE_CHECKING:
    from px_to_viewport.css.nodes import Node, Root


@dataclass
class Result:
    """Carries the processed root and the diagnostics collected on the way."""

    root: "Root"
    messages: list[Diagnostic] = field(default_factory=list)

    @property
    def css(self) -> str:
        return self.root.to_string()

    def warn(
        self, message: str, *, node: "Node | None" = None, plugin: str | None = None
    ) -> Diagnostic:
        line = column = None
        if node is not None and node.source is not None and node.source.start is not None:
            line = node.source.start.line
            column = node.source.start.column
        diagnostic = Diagnostic(
            message=message,
            severity=Severity.WARNING,
            plugin=plugin,
            node=node,
            line=line,
            column=column,
        )
        self.messages.append(diagnostic)
        return diagnostic

    def warnings(self) -> list[Diagnostic]:
        return [m for m in self.messages if m.is_warning]

    def __str__(self) -> str:
        return self.css
