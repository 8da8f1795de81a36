"""spanreport - compiler-style annotated source diagnostics.

Renders structured diagnostics into annotated source-code reports with
underlines, connector lines, chained file contexts and a trailing help
message.

Public API:
    Diagnostic - Code, title, severity, contexts and help of one report
    Context - One annotated excerpt of a named source
    Detail - A (line, column range, message) annotation
    Severity - Error, Warning or Advice
    render - Render a Diagnostic to a text block
    render_plain - Span-free fallback rendering
    RenderConfig - Glyphs, color and tab width

Exceptions:
    RenderError - Base exception class
    ConstructionError - Invalid model value (raised by the builders)
    LayoutError - Line cannot be laid out (raised by render)
    InvalidRangeError - Column range with start > end
    OutOfBoundsError - Line or columns outside the source text
    EmptyDiagnosticError - Neither title nor contexts
    CrossingSpansError - Ranges on one line cross without nesting

Submodules:
    spanreport.diagnostics - Model types and exceptions
    spanreport.render - Layout engine, context renderer, report assembler
    spanreport.reporting - Error wrappers and the excepthook (not imported here)
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ConstructionError,
    Context,
    CrossingSpansError,
    Detail,
    Diagnostic,
    EmptyDiagnosticError,
    InvalidRangeError,
    LayoutError,
    OutOfBoundsError,
    RenderError,
    Severity,
)
from .render import GlyphSet, RenderConfig, ReportRenderer, render, render_plain

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("spanreport")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConstructionError",
    "Context",
    "CrossingSpansError",
    "Detail",
    "Diagnostic",
    "EmptyDiagnosticError",
    "GlyphSet",
    "InvalidRangeError",
    "LayoutError",
    "OutOfBoundsError",
    "RenderConfig",
    "RenderError",
    "ReportRenderer",
    "Severity",
    "__version__",
    "render",
    "render_plain",
]
