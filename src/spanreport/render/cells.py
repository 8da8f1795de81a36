"""Column-to-cell mapping for monospace display.

Details address characters (1-indexed columns); the terminal grid addresses
cells. The two differ for tabs (expanded to the next tab stop), East Asian
wide characters (two cells) and combining marks (zero cells).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

__all__ = ["LineCells", "char_width", "display_text", "text_width"]

# Shown in place of control characters that would move the terminal cursor.
REPLACEMENT_CHAR = "\ufffd"


def char_width(char: str) -> int:
    """Number of terminal cells occupied by a single character."""
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def text_width(text: str) -> int:
    """Number of terminal cells occupied by ``text`` (no tabs expected)."""
    return sum(char_width(char) for char in text)


def display_text(text: str) -> str:
    """Single-row form of free text such as labels, titles and help lines.

    Line breaks and tabs become single spaces; any other control character
    is replaced with U+FFFD so the printed width matches ``text_width``.

    Example:
        >>> display_text("first\\nsecond\\tthird")
        'first second third'
    """
    joined = " ".join(text.splitlines())
    return "".join(_display_char(char) for char in joined)


def _display_char(char: str) -> str:
    if char == "\t":
        return " "
    if unicodedata.category(char) == "Cc":
        return REPLACEMENT_CHAR
    return char


@dataclass(frozen=True, slots=True)
class LineCells:
    """Display form of one source line plus its column-to-cell index.

    Attributes:
        text: Line with tabs expanded to spaces
        starts: Cell offset of each column; ``starts[c - 1]`` is where
            column ``c`` begins and the final entry is the total width

    Example:
        >>> cells = LineCells.from_line("\\tx = 1", tab_width=4)
        >>> cells.text
        '    x = 1'
        >>> cells.span(2, 2)
        (4, 5)
    """

    text: str
    starts: tuple[int, ...]

    @classmethod
    def from_line(cls, line: str, tab_width: int) -> LineCells:
        pieces: list[str] = []
        starts: list[int] = []
        cell = 0
        for char in line:
            starts.append(cell)
            if char == "\t":
                advance = tab_width - (cell % tab_width)
                pieces.append(" " * advance)
            else:
                advance = char_width(char)
                pieces.append(char)
            cell += advance
        starts.append(cell)
        return cls("".join(pieces), tuple(starts))

    def span(self, start: int, end: int) -> tuple[int, int]:
        """Half-open cell range covered by inclusive columns ``start..=end``.

        Zero-width columns (lone combining marks) still get one cell so
        every Detail stays visible.
        """
        first = self.starts[start - 1]
        last = max(self.starts[end], first + 1)
        return (first, last)
