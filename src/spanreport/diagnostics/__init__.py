"""Diagnostic model and error types.

Provides the plain data structures handed to the renderer (Diagnostic,
Context, Detail) together with the exceptions raised while building or
rendering them.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    ConstructionError,
    CrossingSpansError,
    EmptyDiagnosticError,
    InvalidRangeError,
    LayoutError,
    OutOfBoundsError,
    RenderError,
)
from .model import Context, Detail, Diagnostic, Severity
from .source import SourceText

__all__ = [
    "ConstructionError",
    "Context",
    "CrossingSpansError",
    "Detail",
    "Diagnostic",
    "EmptyDiagnosticError",
    "InvalidRangeError",
    "LayoutError",
    "OutOfBoundsError",
    "RenderError",
    "Severity",
    "SourceText",
]
