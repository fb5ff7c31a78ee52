from px_to_viewport.model.diagnostic import Diagnostic, Severity
from px_to_viewport.model.result import Result

__all__ = ["Diagnostic", "Severity", "Result"]
