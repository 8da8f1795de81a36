"""Diagnostic model: Severity, Detail, Context and Diagnostic.

Plain data holders with eager validation. Invalid values (reversed or
out-of-bounds column ranges, empty diagnostics) are rejected when they are
built, so the renderer only ever sees well-formed input.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .errors import EmptyDiagnosticError, InvalidRangeError, OutOfBoundsError
from .source import SourceText

__all__ = [
    "Context",
    "Detail",
    "Diagnostic",
    "Severity",
]


class Severity(StrEnum):
    """Diagnostic severity.

    StrEnum provides automatic string conversion: str(Severity.ERROR) == "error"
    """

    ERROR = "error"
    WARNING = "warning"
    ADVICE = "advice"

    @property
    def label(self) -> str:
        """Capitalized name used in the report header (``Error``, ``Warning``, ``Advice``)."""
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Detail:
    """A single annotation: an inclusive column range on one line plus a message.

    Attributes:
        line: Line number (1-indexed)
        column_range: Inclusive (start, end) column pair (1-indexed)
        message: Label text; empty means underline only
    """

    line: int
    column_range: tuple[int, int]
    message: str = ""

    def __post_init__(self) -> None:
        """Validate Detail invariants that do not need the source text.

        Raises:
            InvalidRangeError: If start exceeds end.
            OutOfBoundsError: If line or start column is below 1.
        """
        start, end = self.column_range
        if start > end:
            raise InvalidRangeError(start, end)
        if self.line < 1 or start < 1:
            raise OutOfBoundsError(self.line, self.column_range)

    @property
    def start(self) -> int:
        return self.column_range[0]

    @property
    def end(self) -> int:
        return self.column_range[1]

    @property
    def width(self) -> int:
        """Number of columns covered."""
        return self.end - self.start + 1

    def contains(self, other: Detail) -> bool:
        """True if ``other`` lies on the same line within this Detail's range."""
        return self.line == other.line and self.start <= other.start and other.end <= self.end

    def overlaps(self, other: Detail) -> bool:
        """True if both Details share at least one column of the same line."""
        return self.line == other.line and self.start <= other.end and other.start <= self.end


class Context:
    """One annotated excerpt of a named source.

    Built progressively: create it with the source, then chain
    ``add_detail`` calls. Each call validates the Detail against the source
    text immediately.

    Example:
        >>> ctx = Context("src/main.rs", 'let x: i32 = "hello";')
        >>> ctx.add_detail(1, (8, 10), "expected i32").add_detail(1, (14, 20), "found &str")
        Context(source_id='src/main.rs', details=2)
    """

    __slots__ = ("_details", "_source", "_source_id")

    def __init__(
        self,
        source_id: str,
        source_text: str | SourceText,
        details: Iterable[Detail] = (),
    ) -> None:
        self._source_id = source_id
        self._source = (
            source_text if isinstance(source_text, SourceText) else SourceText(source_text)
        )
        self._details: list[Detail] = []
        for detail in details:
            self._append(detail)

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def source(self) -> SourceText:
        """Read-only view of the excerpted source text."""
        return self._source

    @property
    def details(self) -> tuple[Detail, ...]:
        return tuple(self._details)

    @property
    def primary(self) -> Detail | None:
        """First appended Detail; the header location points at it."""
        return self._details[0] if self._details else None

    def add_detail(
        self,
        line: int,
        column_range: tuple[int, int],
        message: str = "",
    ) -> Context:
        """Append a Detail and return this Context for chaining.

        Args:
            line: Line number (1-indexed)
            column_range: Inclusive (start, end) columns (1-indexed)
            message: Label text; empty for an unlabeled underline

        Returns:
            self

        Raises:
            InvalidRangeError: If start exceeds end
            OutOfBoundsError: If the line does not exist or the range runs
                past the end of the line
        """
        self._append(Detail(line, tuple(column_range), message))  # type: ignore[arg-type]
        return self

    detail = add_detail

    def lines(self) -> tuple[int, ...]:
        """Distinct referenced line numbers in ascending order."""
        return tuple(sorted({d.line for d in self._details}))

    def details_on(self, line: int) -> tuple[Detail, ...]:
        """Details anchored to ``line`` in append order."""
        return tuple(d for d in self._details if d.line == line)

    def _append(self, detail: Detail) -> None:
        source = self._source
        if not source.has_line(detail.line):
            raise OutOfBoundsError(
                detail.line,
                detail.column_range,
                line_count=source.line_count,
                line_length=None,
            )
        length = source.line_length(detail.line)
        if detail.end > length:
            raise OutOfBoundsError(
                detail.line,
                detail.column_range,
                line_count=source.line_count,
                line_length=length,
            )
        self._details.append(detail)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return (
            self._source_id == other._source_id
            and self._source == other._source
            and self._details == other._details
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Context(source_id={self._source_id!r}, details={len(self._details)})"


class Diagnostic:
    """A complete diagnostic: header, ordered contexts and optional help.

    Fields are read-only once built; add_context is the only mutator.

    Attributes:
        code: Stable machine identifier, unique per error kind
        title: One-line summary
        severity: Error, Warning or Advice
        contexts: Annotated source excerpts in rendering order
        help: Free text rendered last (None or empty to omit)

    Raises:
        EmptyDiagnosticError: If the title is blank and no context is given
    """

    __slots__ = ("_code", "_contexts", "_help", "_severity", "_title")

    def __init__(
        self,
        code: str,
        title: str = "",
        severity: Severity = Severity.ERROR,
        contexts: Iterable[Context] = (),
        help: str | None = None,  # noqa: A002 - mirrors the rendered "Help:" row
    ) -> None:
        self._code = code
        self._title = title
        self._severity = Severity(severity)
        self._contexts: list[Context] = list(contexts)
        self._help = help
        if not self._contexts and not title.strip():
            raise EmptyDiagnosticError(code)

    @property
    def code(self) -> str:
        return self._code

    @property
    def title(self) -> str:
        return self._title

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def help(self) -> str | None:
        return self._help

    @property
    def contexts(self) -> tuple[Context, ...]:
        return tuple(self._contexts)

    def add_context(self, context: Context) -> Diagnostic:
        """Append a context (append order is rendering order) and return self."""
        self._contexts.append(context)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (
            self.code == other.code
            and self.title == other.title
            and self.severity == other.severity
            and self._contexts == other._contexts
            and self.help == other.help
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Diagnostic(code={self.code!r}, title={self.title!r}, "
            f"severity={self.severity.value!r}, contexts={len(self._contexts)})"
        )
