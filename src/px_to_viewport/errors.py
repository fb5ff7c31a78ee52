"""Error hierarchy for px-to-viewport."""
from __future__ import annotations


class PxToViewportError(Exception):
    """Base error for all px_to_viewport errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(PxToViewportError, ValueError):
    """Raised when an option set cannot be built."""

    def __init__(self, message: str, *, option: str = "", **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.option = option


class CssSyntaxError(PxToViewportError):
    """Raised for malformed CSS and for failures scoped to a single node.

    ``plugin`` is set when the error was raised by a transform rather than
    the parser.
    """

    def __init__(
        self,
        reason: str,
        *,
        line: int | None = None,
        column: int | None = None,
        file: str | None = None,
        plugin: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        self.file = file
        self.plugin = plugin
        super().__init__(self._format(), cause=cause)

    def _format(self) -> str:
        prefix = f"{self.plugin}: " if self.plugin else ""
        location = self.file or "<css input>"
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return f"{prefix}{location}: {self.reason}"
