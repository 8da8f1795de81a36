"""Error wrappers that carry diagnostic metadata.

Application code rarely builds Diagnostics by hand. This module lets it
attach a stable label, a help text and optional location metadata to its
own exceptions, then turn them into renderable Diagnostics:

    @diagnostic(label="config::missing_key", help="Add the key to app.toml")
    class MissingKeyError(Exception):
        pass

    with into_diagnostic("config::read_failure"):
        text = Path("app.toml").read_text()

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from spanreport.diagnostics.model import Context, Diagnostic
from spanreport.render.style import CYAN_UNDERLINE, GREEN, HELP_YELLOW, RED, paint

__all__ = [
    "Diagnosable",
    "DiagnosticError",
    "DiagnosticMetadata",
    "FsMetadata",
    "NetMetadata",
    "ParseMetadata",
    "diagnostic",
    "into_diagnostic",
]

# Source id used when ParseMetadata has no path.
_ANONYMOUS_INPUT = "<input>"


# ============================================================================
# METADATA
# ============================================================================


@dataclass(frozen=True, slots=True)
class NetMetadata:
    """The error concerns a network resource."""

    url: str


@dataclass(frozen=True, slots=True)
class FsMetadata:
    """The error concerns a file system path."""

    path: Path


@dataclass(frozen=True, slots=True)
class ParseMetadata:
    """The error points into parsed input.

    Attributes:
        input: Full text that was being parsed
        row: Line of the failure (1-indexed)
        col: Column of the failure (1-indexed)
        path: File the input came from, if any
    """

    input: str
    row: int
    col: int
    path: Path | None = None


type DiagnosticMetadata = NetMetadata | FsMetadata | ParseMetadata


@runtime_checkable
class Diagnosable(Protocol):
    """Exceptions that describe themselves with a label, help and metadata."""

    def label(self) -> str: ...

    def help(self) -> str | None: ...

    def meta(self) -> DiagnosticMetadata | None: ...


def diagnostic[E: type[BaseException]](
    label: str,
    help: str | None = None,  # noqa: A002 - mirrors Diagnosable.help
) -> Callable[[E], E]:
    """Class decorator that makes an exception class Diagnosable.

    Adds ``label()`` and ``help()`` returning the given values, and a
    ``meta()`` returning None unless the class already defines one.

    Args:
        label: Stable identifier, e.g. ``"color::struct"``
        help: Optional help text

    Raises:
        ValueError: If label is empty

    Example:
        >>> @diagnostic(label="color::struct", help="Color.")
        ... class ColorError(Exception):
        ...     pass
        >>> ColorError().label(), ColorError().help()
        ('color::struct', 'Color.')
    """
    if not label:
        msg = "Diagnostic label must not be empty"
        raise ValueError(msg)

    def _label(self: BaseException) -> str:
        return label

    def _help(self: BaseException) -> str | None:
        return help

    def _meta(self: BaseException) -> DiagnosticMetadata | None:
        return None

    def decorate(cls: E) -> E:
        cls.label = _label  # type: ignore[attr-defined]
        cls.help = _help  # type: ignore[attr-defined]
        if not hasattr(cls, "meta"):
            cls.meta = _meta  # type: ignore[attr-defined]
        return cls

    return decorate


# ============================================================================
# WRAPPER EXCEPTION
# ============================================================================


class DiagnosticError(Exception):
    """Wraps any exception together with a label, help text and metadata.

    Attributes:
        error: The wrapped exception
        label: Stable identifier used as the diagnostic code
        help: Optional help text
        meta: Optional location metadata
    """

    def __init__(
        self,
        error: BaseException,
        label: str,
        help: str | None = None,  # noqa: A002 - mirrors Diagnosable.help
        meta: DiagnosticMetadata | None = None,
    ) -> None:
        self.error = error
        self.label = label
        self.help = help
        self.meta = meta
        super().__init__(self.format())

    def __reduce__(self) -> tuple[type[DiagnosticError], tuple[object, ...]]:
        # args holds the formatted text, not the constructor arguments.
        return (type(self), (self.error, self.label, self.help, self.meta))

    @classmethod
    def from_error(cls, error: BaseException) -> DiagnosticError:
        """Build a DiagnosticError from a Diagnosable exception.

        DiagnosticErrors are returned unchanged.

        Raises:
            TypeError: If ``error`` is neither Diagnosable nor a DiagnosticError
        """
        if isinstance(error, DiagnosticError):
            return error
        if not isinstance(error, Diagnosable):
            msg = f"{type(error).__name__} does not implement label()/help()/meta()"
            raise TypeError(msg)
        return cls(error, error.label(), error.help(), error.meta())

    def format(self, *, color: bool = False) -> str:
        """Compact text form: label and location, the error, then help.

        Example output:
            config::parse - line: 3, col: 7 @ app.toml

            expected '=' after key

            help: keys are followed by '='
        """
        parts = [paint(self.label, RED, enabled=color)]
        match self.meta:
            case NetMetadata(url=url):
                parts.append(f" @ {paint(url, CYAN_UNDERLINE, enabled=color)}")
            case FsMetadata(path=path):
                parts.append(f" @ {paint(str(path), CYAN_UNDERLINE, enabled=color)}")
            case ParseMetadata(row=row, col=col, path=path):
                row_text = paint(str(row), GREEN, enabled=color)
                col_text = paint(str(col), GREEN, enabled=color)
                parts.append(f" - line: {row_text}, col: {col_text}")
                if path is not None:
                    parts.append(f" @ {paint(str(path), CYAN_UNDERLINE, enabled=color)}")
            case None:
                pass
        parts.append(f"\n\n{self.error}")
        if self.help:
            parts.append(f"\n\n{paint('help', HELP_YELLOW, enabled=color)}: {self.help}")
        return "".join(parts)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a renderable Diagnostic.

        ParseMetadata becomes a Context over its input, with a one-column
        Detail when ``row``/``col`` address an existing character. Other
        metadata is folded into the title.
        """
        title = str(self.error) or type(self.error).__name__
        contexts: list[Context] = []
        match self.meta:
            case ParseMetadata(input=text, row=row, col=col, path=path):
                context = Context(str(path) if path is not None else _ANONYMOUS_INPUT, text)
                source = context.source
                if source.has_line(row) and 1 <= col <= source.line_length(row):
                    context.add_detail(row, (col, col), "here")
                contexts.append(context)
            case NetMetadata(url=url):
                title = f"{title} @ {url}"
            case FsMetadata(path=path):
                title = f"{title} @ {path}"
            case None:
                pass
        return Diagnostic(self.label, title, contexts=contexts, help=self.help)


@contextmanager
def into_diagnostic(
    label: str,
    help: str | None = None,  # noqa: A002 - mirrors Diagnosable.help
) -> Iterator[None]:
    """Re-raise any exception escaping the block as a DiagnosticError.

    The original exception is chained as ``__cause__``. DiagnosticErrors
    raised inside the block pass through unchanged.

    Example:
        with into_diagnostic("mytool::config::read_failure"):
            Path("./missing.toml").read_text()
        # raises DiagnosticError(label="mytool::config::read_failure")
        # whose __cause__ is the FileNotFoundError
    """
    try:
        yield
    except DiagnosticError:
        raise
    except Exception as exc:
        raise DiagnosticError(exc, label, help) from exc
