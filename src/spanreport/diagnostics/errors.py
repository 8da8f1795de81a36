"""Exception hierarchy for diagnostic construction and rendering.

Hierarchy:
    RenderError (base)
    ├─ ConstructionError (invalid model values, raised eagerly)
    │  ├─ InvalidRangeError (column range start > end)
    │  ├─ OutOfBoundsError (line or columns outside the source text)
    │  └─ EmptyDiagnosticError (no title and no contexts)
    └─ LayoutError (raised from render, once all Details of a line are known)
       └─ CrossingSpansError (two Details on one line cross without nesting)

Every exception carries the structured values that caused it so callers
can decide how to recover (merge spans, fall back to plain output) without
parsing the message text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "ConstructionError",
    "CrossingSpansError",
    "EmptyDiagnosticError",
    "InvalidRangeError",
    "LayoutError",
    "OutOfBoundsError",
    "RenderError",
]


class RenderError(Exception):
    """Base exception for all spanreport errors."""


class ConstructionError(RenderError):
    """A Detail, Context or Diagnostic could not be built.

    Raised at construction time so an invalid value never reaches the
    renderer.
    """


class LayoutError(RenderError):
    """The Details of a source line cannot be laid out.

    Only detectable once every Detail anchored to a line is known, so these
    surface from ``render()`` rather than from the builders.
    """


class InvalidRangeError(ConstructionError):
    """Column range whose start lies after its end.

    Attributes:
        start: First column of the offending range (1-indexed)
        end: Last column of the offending range (1-indexed, inclusive)
    """

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        msg = f"Invalid column range {start}..={end}: start must not exceed end"
        super().__init__(msg)


class OutOfBoundsError(ConstructionError):
    """Line or column range outside the addressed source text.

    Columns past the end of a line are never clamped; the builder rejects
    them with this error instead.

    Attributes:
        line: Requested line number (1-indexed)
        column_range: Requested inclusive column range (1-indexed)
        line_count: Number of lines in the source text, or None when the
            position was rejected before any source was consulted
        line_length: Character count of the requested line, or None when
            the line itself does not exist
    """

    def __init__(
        self,
        line: int,
        column_range: tuple[int, int],
        *,
        line_count: int | None = None,
        line_length: int | None = None,
    ) -> None:
        self.line = line
        self.column_range = column_range
        self.line_count = line_count
        self.line_length = line_length
        start, end = column_range
        if line_count is None:
            msg = (
                f"Position line {line}, columns {start}..={end} is out of bounds: "
                "lines and columns are 1-indexed"
            )
        elif line_length is None:
            msg = f"Line {line} is out of bounds: source has {line_count} line(s)"
        else:
            msg = (
                f"Column range {start}..={end} is out of bounds for line {line} "
                f"({line_length} character(s))"
            )
        super().__init__(msg)


class EmptyDiagnosticError(ConstructionError):
    """Diagnostic with neither a title nor any context."""

    def __init__(self, code: str) -> None:
        self.code = code
        label = f" '{code}'" if code else ""
        msg = f"Diagnostic{label} needs a non-empty title or at least one context"
        super().__init__(msg)


class CrossingSpansError(LayoutError):
    """Two Details on one line overlap without one nesting inside the other.

    Such ranges (start1 < start2 <= end1 < end2) cannot be connected to
    their labels without crossing lines. Merge or split the Details before
    rendering.

    Attributes:
        line: Source line both Details are anchored to (1-indexed)
        first: Column range that starts first
        second: Column range that starts inside ``first`` and ends after it
    """

    def __init__(
        self,
        line: int,
        first: tuple[int, int],
        second: tuple[int, int],
    ) -> None:
        self.line = line
        self.first = first
        self.second = second
        msg = (
            f"Column ranges {first[0]}..={first[1]} and {second[0]}..={second[1]} "
            f"on line {line} cross without nesting"
        )
        super().__init__(msg)
