"""Convert absolute CSS lengths into viewport units."""

from px_to_viewport.errors import ConfigError, CssSyntaxError, PxToViewportError
from px_to_viewport.model import Diagnostic, Result, Severity
from px_to_viewport.options import ViewportOptions, build_options
from px_to_viewport.processor import process_css
from px_to_viewport.transforms import PxToViewportTransform, apply_transforms

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "CssSyntaxError",
    "Diagnostic",
    "PxToViewportError",
    "PxToViewportTransform",
    "Result",
    "Severity",
    "ViewportOptions",
    "__version__",
    "apply_transforms",
    "build_options",
    "process_css",
]
