#!/usr/bin/env python3
"""Report Rendering Fuzzer (Atheris).

Targets: spanreport.render.report.render, render_plain
Builds Contexts from random source text and random column ranges and checks
that rendering either succeeds or raises a documented RenderError.

Run:
    pip install -e ".[fuzz]"
    python fuzz/fuzz_render.py -max_total_time=60

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

import atheris

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {
    "status": "incomplete",
    "iterations": 0,
    "findings": 0,
    "rendered": 0,
    "crossing": 0,
    "rejected": 0,
}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

logging.getLogger("spanreport").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["spanreport"]):
    from spanreport import (
        ConstructionError,
        Context,
        CrossingSpansError,
        Diagnostic,
        RenderConfig,
        Severity,
        render,
        render_plain,
    )

_MAX_LINES = 6
_MAX_DETAILS = 8


def _bump(key: str) -> None:
    _fuzz_stats[key] = int(_fuzz_stats[key]) + 1


def _build_context(fdp: atheris.FuzzedDataProvider) -> Context:
    line_count = fdp.ConsumeIntInRange(1, _MAX_LINES)
    lines = [fdp.ConsumeUnicodeNoSurrogates(30) for _ in range(line_count)]
    context = Context(fdp.ConsumeUnicodeNoSurrogates(12) or "fuzz.txt", "\n".join(lines))

    for _ in range(fdp.ConsumeIntInRange(0, _MAX_DETAILS)):
        line = fdp.ConsumeIntInRange(0, line_count + 1)
        start = fdp.ConsumeIntInRange(0, 32)
        end = fdp.ConsumeIntInRange(0, 32)
        message = fdp.ConsumeUnicodeNoSurrogates(16)
        try:
            context.add_detail(line, (start, end), message)
        except ConstructionError:
            _bump("rejected")
    return context


def test_one_input(data: bytes) -> None:
    """Atheris entry point: render random Diagnostics."""
    _bump("iterations")
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    config = RenderConfig(color=fdp.ConsumeBool(), tab_width=fdp.ConsumeIntInRange(1, 16))
    severity = fdp.PickValueInList(list(Severity))

    try:
        contexts = [_build_context(fdp) for _ in range(fdp.ConsumeIntInRange(1, 3))]
        diagnostic = Diagnostic(
            fdp.ConsumeUnicodeNoSurrogates(8),
            fdp.ConsumeUnicodeNoSurrogates(40),
            severity,
            contexts,
            fdp.ConsumeUnicodeNoSurrogates(20) or None,
        )

        try:
            report = render(diagnostic, config)
        except CrossingSpansError:
            _bump("crossing")
        else:
            _bump("rendered")
            # Output must be deterministic
            if render(diagnostic, config) != report:
                msg = "render() produced different output for the same Diagnostic"
                raise RuntimeError(msg)

        # The plain fallback must never fail
        render_plain(diagnostic, config)

    except Exception:
        _bump("findings")
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
