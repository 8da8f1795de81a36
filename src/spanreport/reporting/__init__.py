"""Reporting layer: diagnostic error wrappers and the process-wide hook.

Outer collaborators of the rendering core. They build Diagnostic values
from application exceptions and write rendered reports; the core never
imports this package.

Python 3.13+. Zero external dependencies.
"""

from .hook import as_diagnostic, install, is_installed, report, uninstall
from .wrapper import (
    Diagnosable,
    DiagnosticError,
    DiagnosticMetadata,
    FsMetadata,
    NetMetadata,
    ParseMetadata,
    diagnostic,
    into_diagnostic,
)

__all__ = [
    "Diagnosable",
    "DiagnosticError",
    "DiagnosticMetadata",
    "FsMetadata",
    "NetMetadata",
    "ParseMetadata",
    "as_diagnostic",
    "diagnostic",
    "install",
    "into_diagnostic",
    "is_installed",
    "report",
    "uninstall",
]
