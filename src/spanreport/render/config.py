"""Render configuration.

Frozen configuration objects for the report renderer. Instances validate
themselves at construction so a bad value fails where it was written, not
in the middle of a render.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from spanreport.constants import DEFAULT_TAB_WIDTH, MAX_TAB_WIDTH

__all__ = ["GlyphSet", "RenderConfig"]


@dataclass(frozen=True, slots=True)
class GlyphSet:
    """Characters used to draw the report structure.

    Every glyph must be exactly one character wide; the layout engine
    assumes one cell per glyph.

    Attributes:
        top_left: Opens the first context header (``╭─[file:1:1]``)
        branch: Opens a chained context header and marks a connector that
            resolves while another connector continues below it
        corner: Turns a connector towards its label
        close: Ends the closing row of the report
        horizontal: Header, label leader and closing row strokes
        vertical: Gutter rule and descending connectors
        continuation: Gutter rule on underline and connector rows
        underline: Marker repeated under every annotated column
        anchor: Marks where a connector leaves the underline
    """

    top_left: str = "╭"
    branch: str = "├"
    corner: str = "╰"
    close: str = "╯"
    horizontal: str = "─"
    vertical: str = "│"
    continuation: str = "·"
    underline: str = "─"
    anchor: str = "┬"

    def __post_init__(self) -> None:
        """Validate glyph widths.

        Raises:
            ValueError: If any glyph is not exactly one character.
        """
        for glyph_field in fields(self):
            value = getattr(self, glyph_field.name)
            if len(value) != 1:
                msg = f"Glyph '{glyph_field.name}' must be a single character, got {value!r}"
                raise ValueError(msg)

    @classmethod
    def unicode(cls) -> GlyphSet:
        """Box-drawing glyphs (the default)."""
        return cls()

    @classmethod
    def ascii(cls) -> GlyphSet:
        """Plain ASCII glyphs for terminals without box-drawing fonts."""
        return cls(
            top_left=",",
            branch="|",
            corner="`",
            close="'",
            horizontal="-",
            vertical="|",
            continuation=":",
            underline="^",
            anchor="|",
        )


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for ReportRenderer and ContextRenderer.

    All fields have sensible defaults; ``RenderConfig()`` produces plain
    box-drawing output without color.

    Attributes:
        glyphs: Structural glyph set (default: box drawing)
        color: Wrap header, gutter and annotations in ANSI color codes.
            Layout is computed before coloring, so the character grid is
            identical either way.
        tab_width: Tab stop interval used when expanding tabs in source lines

    Example:
        >>> config = RenderConfig(glyphs=GlyphSet.ascii(), tab_width=8)
        >>> config.glyphs.underline
        '^'
    """

    glyphs: GlyphSet = field(default_factory=GlyphSet)
    color: bool = False
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If tab_width is outside 1..MAX_TAB_WIDTH.
        """
        if not 1 <= self.tab_width <= MAX_TAB_WIDTH:
            msg = f"tab_width must be between 1 and {MAX_TAB_WIDTH}, got {self.tab_width}"
            raise ValueError(msg)
