"""Diagnostic model: non-fatal messages emitted while transforming a tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from px_to_viewport.css.nodes import Node


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported by a transform.

    Attributes:
        message: Human-readable description of the problem.
        severity: How serious the issue is.
        plugin: Name of the transform that produced this diagnostic.
        node: The tree node involved, if applicable.
        line: Source line of the node, if known.
        column: Source column of the node, if known.
    """

    message: str
    severity: Severity = Severity.WARNING
    plugin: str | None = None
    node: "Node | None" = None
    line: int | None = None
    column: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [{self.line}:{self.column}]"
        plugin = f" {self.plugin}:" if self.plugin else ""
        return f"{self.severity.value}{location}:{plugin} {self.message}"
