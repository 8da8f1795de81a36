"""Context renderer.

Renders one Context (one annotated source excerpt) as gutter-prefixed rows:

     ╭─[src/main.rs:3:8]
   3 │ let x: i32 = "hello";
     ·        ─┬─   ───┬───
     ·         │       ╰── found &str
     ·         ╰── expected i32

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from spanreport.diagnostics.model import Context, Severity

from .config import GlyphSet, RenderConfig
from .layout import LineLayout, layout_line
from .style import Styler

__all__ = ["ContextRenderer", "Gutter"]


@dataclass(frozen=True, slots=True)
class Gutter:
    """Left-hand gutter shared by every row of a report.

    The vertical rule sits ``width + 2`` cells from the left edge: one
    space, the right-aligned line number, one space.

    Attributes:
        width: Digits reserved for line numbers
        glyphs: Structural glyph set
        styler: ANSI styler (no-op when color is off)
    """

    width: int
    glyphs: GlyphSet = field(default_factory=GlyphSet)
    styler: Styler = field(default_factory=Styler)

    @property
    def indent(self) -> str:
        return " " * (self.width + 2)

    def header(self, location: str, *, first: bool) -> str:
        """``╭─[location]`` for the first context, ``├─[location]`` afterwards."""
        corner = self.glyphs.top_left if first else self.glyphs.branch
        return self.indent + self.styler.gutter(f"{corner}{self.glyphs.horizontal}") + f"[{location}]"

    def source(self, number: int, text: str) -> str:
        prefix = self.styler.gutter(f" {number:>{self.width}} {self.glyphs.vertical}")
        return f"{prefix} {text}" if text else prefix

    def annotation(self, text: str) -> str:
        prefix = self.indent + self.styler.gutter(self.glyphs.continuation)
        return f"{prefix} {self.styler.annotation(text)}" if text else prefix

    def rule(self, text: str = "") -> str:
        prefix = self.indent + self.styler.gutter(self.glyphs.vertical)
        return f"{prefix} {text}" if text else prefix

    def closing(self) -> str:
        return self.styler.gutter(self.glyphs.horizontal * (self.width + 2) + self.glyphs.close)


@dataclass(frozen=True, slots=True)
class ContextRenderer:
    """Renders a single Context to a list of rows.

    Thread Safety:
        Thread-safe. Instances are immutable and rendering keeps no state
        between calls.

    Attributes:
        config: Glyphs, color and tab width
        severity: Severity of the owning Diagnostic (annotation color)
    """

    config: RenderConfig = field(default_factory=RenderConfig)
    severity: Severity = Severity.ERROR

    @staticmethod
    def gutter_width(context: Context) -> int:
        """Digits needed for the largest line number ``context`` references."""
        return len(str(max(context.lines(), default=1)))

    def gutter(self, width: int) -> Gutter:
        return Gutter(width, self.config.glyphs, Styler(self.config.color, self.severity))

    def layout(self, context: Context) -> tuple[LineLayout, ...]:
        """Lay out every referenced line of ``context`` in ascending order.

        Raises:
            CrossingSpansError: If any line holds crossing ranges
        """
        source = context.source
        return tuple(
            layout_line(
                source.line(number),
                number,
                context.details_on(number),
                glyphs=self.config.glyphs,
                tab_width=self.config.tab_width,
            )
            for number in context.lines()
        )

    def render(
        self,
        context: Context,
        *,
        first: bool = True,
        gutter_width: int | None = None,
    ) -> list[str]:
        """Render ``context`` as rows without a trailing closing row.

        Args:
            context: Context to render
            first: Open with ``╭─`` (True) or continue with ``├─`` (False)
            gutter_width: Shared gutter width; defaults to this context's own

        Returns:
            Header row, then per referenced line the source row followed by
            its underline and connector rows. Non-adjacent lines are
            separated by a bare rule row.

        Raises:
            CrossingSpansError: If any line holds crossing ranges
        """
        layouts = self.layout(context)
        gutter = self.gutter(gutter_width if gutter_width is not None else self.gutter_width(context))

        rows = [gutter.header(_location(context), first=first)]
        previous: int | None = None
        for layout in layouts:
            if previous is not None and layout.line != previous + 1:
                rows.append(gutter.rule())
            rows.append(gutter.source(layout.line, layout.text))
            rows.extend(gutter.annotation(row) for row in layout.annotation_rows())
            previous = layout.line
        return rows


def _location(context: Context) -> str:
    primary = context.primary
    if primary is None:
        return context.source_id
    return f"{context.source_id}:{primary.line}:{primary.start}"
