"""ANSI styling for finished report rows.

Styling wraps already laid-out text, so enabling color never moves a glyph.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from spanreport.diagnostics.model import Severity

__all__ = [
    "BLUE",
    "CYAN_UNDERLINE",
    "GREEN",
    "RED",
    "YELLOW",
    "Styler",
    "paint",
]

# ANSI color codes
RED = "\033[1;31m"  # bold red
YELLOW = "\033[1;33m"  # bold yellow
CYAN = "\033[1;36m"  # bold cyan
BLUE = "\033[1;34m"  # bold blue
GREEN = "\033[32m"
CYAN_UNDERLINE = "\033[4;36m"
HELP_YELLOW = "\033[33m"
RESET = "\033[0m"

_SEVERITY_COLORS = {
    Severity.ERROR: RED,
    Severity.WARNING: YELLOW,
    Severity.ADVICE: CYAN,
}


def paint(text: str, code: str, *, enabled: bool = True) -> str:
    """Wrap ``text`` in ``code`` and a reset sequence when enabled."""
    if not enabled or not text:
        return text
    return f"{code}{text}{RESET}"


@dataclass(frozen=True, slots=True)
class Styler:
    """Applies ANSI codes when enabled, returns text unchanged otherwise.

    Attributes:
        enabled: Emit escape sequences
        severity: Picks the header and annotation color
    """

    enabled: bool = False
    severity: Severity = Severity.ERROR

    def header(self, text: str) -> str:
        return paint(text, _SEVERITY_COLORS[self.severity], enabled=self.enabled)

    def gutter(self, text: str) -> str:
        return paint(text, BLUE, enabled=self.enabled)

    def annotation(self, text: str) -> str:
        return paint(text, _SEVERITY_COLORS[self.severity], enabled=self.enabled)

    def help_label(self, text: str) -> str:
        return paint(text, HELP_YELLOW, enabled=self.enabled)
