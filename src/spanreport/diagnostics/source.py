"""Read-only source text addressed by line and column.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (the trailing \\r is not part of the line)
    - CR-only (Classic Mac, \\r): NOT supported

A single trailing newline does not open an extra empty line, matching what
text editors display.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["SourceText"]


class SourceText:
    """Immutable line index over a source string.

    Splits the text once; line lookups are O(1) afterwards.

    Example:
        >>> source = SourceText("let x = 1;\\nlet y = x;\\n")
        >>> source.line_count
        2
        >>> source.line(2)
        'let y = x;'

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_lines", "_text")

    def __init__(self, text: str) -> None:
        raw_lines = text.split("\n")
        if len(raw_lines) > 1 and raw_lines[-1] == "":
            raw_lines.pop()

        self._text = text
        self._lines: tuple[str, ...] = tuple(raw.removesuffix("\r") for raw in raw_lines)

    @property
    def text(self) -> str:
        """The full source string."""
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def has_line(self, number: int) -> bool:
        return 1 <= number <= len(self._lines)

    def line(self, number: int) -> str:
        """Return 1-indexed line ``number`` without its line terminator.

        Raises:
            IndexError: If the line does not exist
        """
        if not self.has_line(number):
            msg = f"Line {number} does not exist (source has {len(self._lines)} line(s))"
            raise IndexError(msg)
        return self._lines[number - 1]

    def line_length(self, number: int) -> int:
        """Character count of line ``number``."""
        return len(self.line(number))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceText):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"SourceText(lines={len(self._lines)})"
