"""Span-annotation layout and report rendering.

Leaves first:
    cells   - column-to-cell mapping (tabs, wide characters)
    layout  - per-line underline and rail layout
    context - one annotated source excerpt
    report  - complete diagnostic text block

Python 3.13+. Zero external dependencies.
"""

from .config import GlyphSet, RenderConfig
from .context import ContextRenderer, Gutter
from .layout import LineLayout, Placement, layout_line, sort_details
from .report import ReportRenderer, render, render_plain, title_line

__all__ = [
    "ContextRenderer",
    "GlyphSet",
    "Gutter",
    "LineLayout",
    "Placement",
    "RenderConfig",
    "ReportRenderer",
    "layout_line",
    "render",
    "render_plain",
    "sort_details",
    "title_line",
]
