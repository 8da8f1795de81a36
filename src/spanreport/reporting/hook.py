"""Process-wide reporting hook.

Explicit registration of a ``sys.excepthook`` that renders uncaught
diagnostic exceptions as annotated reports. Nothing is installed on import;
call ``install()`` from the application's entry point.

Handled exceptions:
    - DiagnosticError
    - Diagnosable exceptions (label()/help()/meta())
    - Any exception whose ``diagnostic`` attribute holds a Diagnostic
Everything else is passed to the hook that was active before ``install()``.

Thread Safety:
    install() and uninstall() serialize on a module lock. The installed
    hook itself only reads the state captured at install time.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import TextIO

from spanreport.diagnostics.errors import RenderError
from spanreport.diagnostics.model import Diagnostic
from spanreport.render.config import RenderConfig
from spanreport.render.report import render, render_plain

from .wrapper import Diagnosable, DiagnosticError

__all__ = ["as_diagnostic", "install", "is_installed", "report", "uninstall"]

logger = logging.getLogger(__name__)

type ExceptHook = Callable[[type[BaseException], BaseException, TracebackType | None], object]


@dataclass(frozen=True, slots=True)
class _Installation:
    hook: ExceptHook
    previous: ExceptHook
    stream: TextIO | None
    config: RenderConfig


_lock = threading.Lock()
_installation: _Installation | None = None


def as_diagnostic(error: BaseException) -> Diagnostic | None:
    """Extract a renderable Diagnostic from ``error``, or None if it has none."""
    attached = getattr(error, "diagnostic", None)
    if isinstance(attached, Diagnostic):
        return attached
    if isinstance(error, DiagnosticError):
        return error.to_diagnostic()
    if isinstance(error, Diagnosable):
        return DiagnosticError.from_error(error).to_diagnostic()
    return None


def report(diagnostic: Diagnostic, config: RenderConfig | None = None) -> str:
    """Render ``diagnostic``, falling back to plain output on layout failure."""
    try:
        return render(diagnostic, config)
    except RenderError as e:
        logger.warning("Falling back to plain diagnostic output for %r: %s", diagnostic.code, e)
        return render_plain(diagnostic, config)


def install(stream: TextIO | None = None, config: RenderConfig | None = None) -> None:
    """Install the reporting excepthook.

    Args:
        stream: Where reports are written (default: sys.stderr at report time)
        config: Render configuration (default: RenderConfig())

    Installing while already installed is a no-op.
    """
    global _installation  # noqa: PLW0603 - excepthook registration is process-wide
    with _lock:
        if _installation is not None:
            logger.debug("Diagnostic hook already installed")
            return

        settings = config or RenderConfig()
        previous = sys.excepthook

        def hook(
            exc_type: type[BaseException],
            exc: BaseException,
            tb: TracebackType | None,
        ) -> None:
            diagnostic = as_diagnostic(exc)
            if diagnostic is None:
                previous(exc_type, exc, tb)
                return
            print(report(diagnostic, settings), file=stream or sys.stderr)

        sys.excepthook = hook
        _installation = _Installation(hook, previous, stream, settings)
        logger.debug("Diagnostic hook installed")


def uninstall() -> None:
    """Remove the reporting excepthook and restore the previous one.

    If another hook replaced ours after install(), it is left in place and
    only the registration is cleared.
    """
    global _installation  # noqa: PLW0603 - excepthook registration is process-wide
    with _lock:
        if _installation is None:
            return
        if sys.excepthook is _installation.hook:
            sys.excepthook = _installation.previous
            logger.debug("Diagnostic hook removed")
        else:
            logger.warning("sys.excepthook was replaced after install(); leaving it in place")
        _installation = None


def is_installed() -> bool:
    return _installation is not None
