"""Line annotation layout engine.

Computes, for one source line and the Details anchored to it, the underline
row and the connector rows that route every label to its message without
any two connectors crossing.

Layout Rules:
    1. Details are ordered by start column, widest first on ties.
    2. Ranges must be nested or disjoint. A pair that starts inside another
       range and ends after it raises CrossingSpansError.
    3. Every Detail underlines its cells. A line with exactly one labelled
       Detail puts the label on the underline row itself, provided nothing
       else is underlined to the right of that Detail.
    4. With several labelled Details each one leaves the underline at its
       anchor cell and descends to a rail (a row under the underline):
       - connectors resolve right to left; for a shared anchor the inner
         Detail resolves first (last opened, first resolved)
       - overlapping Details never share a rail
       - a label never covers the anchor of a connector that is still
         descending, so such a Detail moves below it
       - otherwise the nearest free rail is used, which lets disjoint
         Details with short labels share one row

Pattern Reference:
    - rustc / miette style label rendering
    - Interval graph coloring (overlapping spans need distinct rails)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from spanreport.constants import DEFAULT_TAB_WIDTH, LABEL_GAP, LABEL_LEADER_WIDTH
from spanreport.diagnostics.errors import CrossingSpansError
from spanreport.diagnostics.model import Detail

from .cells import LineCells, char_width, display_text, text_width
from .config import GlyphSet

__all__ = ["LineLayout", "Placement", "layout_line", "sort_details"]


@dataclass(frozen=True, slots=True)
class Placement:
    """Resolved geometry of one Detail, in display cells (0-indexed).

    Attributes:
        detail: The Detail being placed
        start: First underlined cell
        end: One past the last underlined cell
        anchor: Cell where the connector leaves the underline
        rail: Connector row (1 = nearest the underline); 0 when the Detail
            has no connector (unlabelled, or labelled inline)
    """

    detail: Detail
    start: int
    end: int
    anchor: int
    rail: int = 0

    @property
    def message(self) -> str:
        return display_text(self.detail.message)

    @property
    def label_end(self) -> int:
        """One past the last cell of the label drawn on this Placement's rail."""
        return self.anchor + LABEL_LEADER_WIDTH + text_width(self.message)

    def footprint(self) -> range:
        """Cells a descending connector must stay out of on this rail."""
        return range(self.anchor, self.label_end + LABEL_GAP)


@dataclass(frozen=True, slots=True)
class LineLayout:
    """Finished layout of one annotated source line.

    Attributes:
        line: Line number (1-indexed)
        text: Source line as displayed (tabs expanded)
        underline: Underline row, trailing spaces stripped
        rows: Connector rows nearest first, one per occupied rail
        placements: Geometry of every Detail in layout order
    """

    line: int
    text: str
    underline: str
    rows: tuple[str, ...]
    placements: tuple[Placement, ...]

    @property
    def rail_count(self) -> int:
        return len(self.rows)

    def annotation_rows(self) -> tuple[str, ...]:
        """Underline row followed by every connector row."""
        return (self.underline, *self.rows)


def sort_details(details: Iterable[Detail]) -> list[Detail]:
    """Order Details by start column ascending, outermost first on ties."""
    return sorted(details, key=lambda d: (d.start, -d.end))


def layout_line(
    text: str,
    line: int,
    details: Iterable[Detail],
    *,
    glyphs: GlyphSet | None = None,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> LineLayout:
    """Lay out every Detail anchored to one source line.

    Args:
        text: The source line, without its line terminator
        line: Line number (1-indexed), used in error reports
        details: Details anchored to ``line``; columns must fit ``text``
        glyphs: Glyph set (default: box drawing)
        tab_width: Tab stop interval for expanding ``text``

    Returns:
        LineLayout with the underline row and connector rows

    Raises:
        CrossingSpansError: If two ranges overlap without nesting

    Example:
        >>> layout = layout_line("let x = 10;", 1, [Detail(1, (5, 5), "x")])
        >>> layout.underline
        '    ─ x'
    """
    glyphs = glyphs or GlyphSet()
    ordered = sort_details(details)
    _check_nesting(line, ordered)

    cells = LineCells.from_line(text, tab_width)
    placements = [_place(detail, cells) for detail in ordered]

    labelled = [i for i, p in enumerate(placements) if p.message]
    inline = len(labelled) == 1 and _fits_inline(placements, placements[labelled[0]])
    if labelled and not inline:
        placements = _assign_rails(placements, labelled)

    underline = _paint_underline(placements, glyphs, inline=inline)
    rows = () if inline else _paint_rows(placements, glyphs)

    return LineLayout(
        line=line,
        text=cells.text,
        underline=underline,
        rows=rows,
        placements=tuple(placements),
    )


# ============================================================================
# VALIDATION
# ============================================================================


def _check_nesting(line: int, ordered: list[Detail]) -> None:
    """Reject partially crossing ranges with a bracket-matching stack.

    ``ordered`` must come from sort_details. The stack holds ranges that are
    still open at the current start column; each one nests inside the one
    below it, so only the top can be crossed.
    """
    open_ranges: list[Detail] = []
    for detail in ordered:
        while open_ranges and open_ranges[-1].end < detail.start:
            open_ranges.pop()
        if open_ranges and not open_ranges[-1].contains(detail):
            raise CrossingSpansError(line, open_ranges[-1].column_range, detail.column_range)
        open_ranges.append(detail)


# ============================================================================
# GEOMETRY
# ============================================================================


def _place(detail: Detail, cells: LineCells) -> Placement:
    start, end = cells.span(detail.start, detail.end)
    anchor = start + (end - start - 1) // 2
    return Placement(detail=detail, start=start, end=end, anchor=anchor)


def _fits_inline(placements: list[Placement], labelled: Placement) -> bool:
    """True if no underline cell lies right of ``labelled``, so its label can follow it."""
    return all(p.end <= labelled.end for p in placements)


def _assign_rails(placements: list[Placement], labelled: list[int]) -> list[Placement]:
    """Give every labelled Placement the nearest rail that keeps connectors apart.

    Complexity:
        O(k^2) in the number k of labelled Details on the line.
    """
    resolve_order = sorted(labelled, key=lambda i: (-placements[i].anchor, -i))
    rails: dict[int, int] = {}

    for index in resolve_order:
        current = placements[index]
        footprint = current.footprint()
        taken: set[int] = set()
        floor = 0
        for other_index, other_rail in rails.items():
            other = placements[other_index]
            if other.detail.overlaps(current.detail):
                taken.add(other_rail)
            if other.anchor in footprint:
                floor = max(floor, other_rail)
        rail = floor + 1
        while rail in taken:
            rail += 1
        rails[index] = rail

    return [
        Placement(p.detail, p.start, p.end, p.anchor, rails.get(i, 0))
        for i, p in enumerate(placements)
    ]


# ============================================================================
# PAINTING
# ============================================================================


class _Row:
    """Growable row of cells. A wide character is followed by an empty cell."""

    __slots__ = ("cells",)

    def __init__(self) -> None:
        self.cells: list[str] = []

    def put(self, cell: int, glyph: str) -> None:
        if cell >= len(self.cells):
            self.cells.extend(" " * (cell - len(self.cells) + 1))
        self.cells[cell] = glyph

    def write(self, cell: int, text: str) -> None:
        for char in text:
            width = char_width(char)
            if not width and cell:
                # Combining mark: attach to the preceding cell.
                self.cells[cell - 1] += char
                continue
            self.put(cell, char)
            if width == 2:
                self.put(cell + 1, "")
            cell += width

    def render(self) -> str:
        return "".join(self.cells).rstrip()


def _paint_underline(placements: list[Placement], glyphs: GlyphSet, *, inline: bool) -> str:
    row = _Row()
    for placement in placements:
        for cell in range(placement.start, placement.end):
            row.put(cell, glyphs.underline)

    if inline:
        labelled = next(p for p in placements if p.message)
        row.write(labelled.end + 1, labelled.message)
        return row.render()

    for placement in placements:
        if placement.rail:
            row.put(placement.anchor, glyphs.anchor)
    return row.render()


def _paint_rows(placements: list[Placement], glyphs: GlyphSet) -> tuple[str, ...]:
    routed = [p for p in placements if p.rail]
    depth = max((p.rail for p in routed), default=0)
    rows: list[str] = []

    for rail in range(1, depth + 1):
        row = _Row()
        for placement in routed:
            if placement.rail > rail:
                row.put(placement.anchor, glyphs.vertical)
        for placement in routed:
            if placement.rail != rail:
                continue
            continues = any(
                other.anchor == placement.anchor and other.rail > rail for other in routed
            )
            row.put(placement.anchor, glyphs.branch if continues else glyphs.corner)
            row.put(placement.anchor + 1, glyphs.horizontal)
            row.put(placement.anchor + 2, glyphs.horizontal)
            row.write(placement.anchor + LABEL_LEADER_WIDTH, placement.message)
        rows.append(row.render())

    return tuple(rows)
