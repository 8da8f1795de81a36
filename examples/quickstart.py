"""Quickstart example for spanreport.

This example builds a few diagnostics by hand and from application
exceptions, then prints them.

Note: Examples render without color so the output can be pasted into docs.
Pass RenderConfig(color=True) when writing to a terminal.
"""

from pathlib import Path

from spanreport import (
    Context,
    CrossingSpansError,
    Diagnostic,
    GlyphSet,
    RenderConfig,
    Severity,
    render,
    render_plain,
)
from spanreport.reporting import DiagnosticError, ParseMetadata, diagnostic, into_diagnostic

# Example 1: One labelled span
print("=" * 50)
print("Example 1: Single Detail")
print("=" * 50)

context = Context("demo.txt", "let total = price * qty;").add_detail(1, (13, 17), "unknown name")
print(render(Diagnostic("E0425", "cannot find value `price`", contexts=[context])))
# Output:
# Error[E0425] cannot find value `price`
#    ╭─[demo.txt:1:13]
#  1 │ let total = price * qty;
#    ·             ───── unknown name
# ───╯

# Example 2: Two spans on one line, a second file and help
print("\n" + "=" * 50)
print("Example 2: Connector Rails and Chained Contexts")
print("=" * 50)

main = (
    Context("src/main.rs", 'fn main() {\n    let x: i32 = "hello";\n}\n')
    .add_detail(2, (12, 14), "expected i32")
    .add_detail(2, (18, 24), "found &str")
)
lib = Context("src/lib.rs", "fn parse() -> i32").add_detail(1, (4, 8), "declared here")
mismatch = Diagnostic(
    "E0308",
    "mismatched types",
    contexts=[main, lib],
    help="convert with str::parse",
)
print(render(mismatch))
# Output:
# Error[E0308] mismatched types
#    ╭─[src/main.rs:2:12]
#  2 │     let x: i32 = "hello";
#    ·            ─┬─   ───┬───
#    ·             │       ╰── found &str
#    ·             ╰── expected i32
#    │
#    ├─[src/lib.rs:1:4]
#  1 │ fn parse() -> i32
#    ·    ───── declared here
#    │
#    │ Help: convert with str::parse
# ───╯

# Example 3: Warnings, ASCII glyphs
print("\n" + "=" * 50)
print("Example 3: ASCII Glyphs")
print("=" * 50)

unused = Context("app.py", "import os").add_detail(1, (8, 9), "never used")
warning = Diagnostic("W0611", "unused import", Severity.WARNING, [unused])
print(render(warning, RenderConfig(glyphs=GlyphSet.ascii())))
# Output:
# Warning[W0611] unused import
#    ,-[app.py:1:8]
#  1 | import os
#    :        ^^ never used
# ---'

# Example 4: Crossing spans and the plain fallback
print("\n" + "=" * 50)
print("Example 4: Crossing Spans")
print("=" * 50)

crossed = Context("expr.txt", "a + b * c").add_detail(1, (1, 5), "sum").add_detail(1, (5, 9), "product")
broken = Diagnostic("E0001", "ambiguous precedence", contexts=[crossed])
try:
    print(render(broken))
except CrossingSpansError as e:
    print(f"render failed: {e}")
    print(render_plain(broken))
# Output:
# render failed: Column ranges 1..=5 and 5..=9 on line 1 cross without nesting
# Error[E0001] ambiguous precedence
#   --> expr.txt:1:1: sum
#   --> expr.txt:1:5: product

# Example 5: Diagnostics from application exceptions
print("\n" + "=" * 50)
print("Example 5: Reporting Application Errors")
print("=" * 50)


@diagnostic(label="config::parse", help="keys are followed by '='")
class ConfigParseError(Exception):
    def __init__(self, text: str, row: int, col: int) -> None:
        super().__init__("expected '=' after key")
        self.text = text
        self.row = row
        self.col = col

    def meta(self) -> ParseMetadata:
        return ParseMetadata(self.text, self.row, self.col, Path("app.toml"))


try:
    raise ConfigParseError("[server]\nport 8080\n", 2, 6)
except ConfigParseError as e:
    wrapped = DiagnosticError.from_error(e)
    print(wrapped.format())
    print()
    print(render(wrapped.to_diagnostic()))

try:
    with into_diagnostic("config::read_failure", help="check the path"):
        Path("missing.toml").read_text(encoding="utf-8")
except DiagnosticError as e:
    print()
    print(render(e.to_diagnostic()))
# Output:
# Error[config::read_failure] [Errno 2] No such file or directory: 'missing.toml'
#   Help: check the path

# To render uncaught diagnostic errors at exit, call once at startup:
#     from spanreport.reporting import install
#     install()
