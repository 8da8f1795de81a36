"""Report assembler.

Chains every Context of a Diagnostic under one continuous gutter rule,
prepends the severity/code/title line and appends the help row:

    Error[E0308] mismatched types
       ╭─[src/main.rs:3:8]
     3 │ let x: i32 = "hello";
       ·        ─┬─   ───┬───
       ·         │       ╰── found &str
       ·         ╰── expected i32
       │
       ├─[src/lib.rs:1:4]
     1 │ fn parse() -> i32
       ·    ───── declared here
       │
       │ Help: convert with str::parse
    ───╯

Rendering is atomic: rows are collected locally and joined only once every
Context has been laid out, so a LayoutError leaves no partial text behind.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from spanreport.constants import HELP_LABEL, PLAIN_LOCATION_PREFIX
from spanreport.diagnostics.model import Diagnostic

from .cells import display_text
from .config import RenderConfig
from .context import ContextRenderer
from .style import Styler

__all__ = ["ReportRenderer", "render", "render_plain"]


@dataclass(frozen=True, slots=True)
class ReportRenderer:
    """Renders complete Diagnostics to text blocks.

    Thread Safety:
        Thread-safe. A single instance may render any number of
        Diagnostics concurrently; nothing is cached between calls.

    Attributes:
        config: Glyphs, color and tab width

    Example:
        >>> from spanreport import Context, Diagnostic
        >>> ctx = Context("demo.txt", "abc").add_detail(1, (1, 3), "x")
        >>> print(ReportRenderer().render(Diagnostic("E1", "bad", contexts=[ctx])))
        Error[E1] bad
           ╭─[demo.txt:1:1]
         1 │ abc
           · ─── x
        ───╯
    """

    config: RenderConfig = field(default_factory=RenderConfig)

    def render(self, diagnostic: Diagnostic) -> str:
        """Render ``diagnostic`` with annotated source excerpts.

        Returns:
            Lines joined by ``\\n``, without a trailing newline

        Raises:
            CrossingSpansError: If any Context holds crossing ranges on a line
        """
        styler = Styler(self.config.color, diagnostic.severity)
        rows = [title_line(diagnostic, styler)]
        contexts = diagnostic.contexts

        if not contexts:
            rows.extend(f"  {piece}" for piece in _help_lines(diagnostic.help, styler))
            return "\n".join(rows)

        renderer = ContextRenderer(self.config, diagnostic.severity)
        width = max(ContextRenderer.gutter_width(context) for context in contexts)
        gutter = renderer.gutter(width)

        for index, context in enumerate(contexts):
            if index:
                rows.append(gutter.rule())
            rows.extend(renderer.render(context, first=index == 0, gutter_width=width))

        if diagnostic.help:
            rows.append(gutter.rule())
            rows.extend(gutter.rule(piece) for piece in _help_lines(diagnostic.help, styler))

        rows.append(gutter.closing())
        return "\n".join(rows)

    def render_plain(self, diagnostic: Diagnostic) -> str:
        """Render ``diagnostic`` without source excerpts.

        Never lays out spans, so it cannot raise LayoutError. Intended as
        the fallback when ``render`` fails.

        Example output:
            Error[E0308] mismatched types
              --> src/main.rs:3:8: expected i32
              --> src/main.rs:3:14: found &str
              Help: convert with str::parse
        """
        styler = Styler(self.config.color, diagnostic.severity)
        rows = [title_line(diagnostic, styler)]
        for context in diagnostic.contexts:
            if not context.details:
                rows.append(f"  {PLAIN_LOCATION_PREFIX} {context.source_id}")
            for detail in context.details:
                location = f"{context.source_id}:{detail.line}:{detail.start}"
                suffix = f": {display_text(detail.message)}" if detail.message else ""
                rows.append(f"  {PLAIN_LOCATION_PREFIX} {location}{suffix}")
        rows.extend(f"  {piece}" for piece in _help_lines(diagnostic.help, styler))
        return "\n".join(rows)


def title_line(diagnostic: Diagnostic, styler: Styler | None = None) -> str:
    """First report line: ``Error[code] title``.

    The bracketed code is dropped when empty (``Error: title``), and so is
    the title (``Error[code]``).
    """
    styler = styler or Styler()
    label = diagnostic.severity.label
    title = display_text(diagnostic.title)
    if diagnostic.code:
        head = styler.header(f"{label}[{display_text(diagnostic.code)}]")
        return f"{head} {title}" if title else head
    if title:
        return f"{styler.header(label)}: {title}"
    return styler.header(label)


def _help_lines(text: str | None, styler: Styler) -> list[str]:
    """Split help text into rows, continuation lines aligned after ``Help: ``.

    Empty or missing help yields no rows.
    """
    if not text:
        return []
    indent = " " * (len(HELP_LABEL) + 1)
    rows: list[str] = []
    for line in text.splitlines():
        head = f"{styler.help_label(HELP_LABEL)} " if not rows else indent
        rows.append(f"{head}{display_text(line)}".rstrip())
    return rows


def render(diagnostic: Diagnostic, config: RenderConfig | None = None) -> str:
    """Render ``diagnostic`` to a text block.

    Convenience wrapper around ``ReportRenderer(config).render``.

    Raises:
        CrossingSpansError: If any Context holds crossing ranges on a line
    """
    return ReportRenderer(config or RenderConfig()).render(diagnostic)


def render_plain(diagnostic: Diagnostic, config: RenderConfig | None = None) -> str:
    """Render ``diagnostic`` without source excerpts (never raises LayoutError)."""
    return ReportRenderer(config or RenderConfig()).render_plain(diagnostic)
