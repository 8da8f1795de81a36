"""Hypothesis strategies for the layout engine and diagnostic model.

Events emitted:
    - layout_range_count={1|few|many}: Number of ranges on the line
    - layout_depth={flat|nested|deep}: Maximum nesting depth
    - layout_crossing={shared_end|inside}: Shape of a crossing pair
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from spanreport.diagnostics.model import Detail

__all__ = [
    "LINE_WIDTH",
    "crossing_pairs",
    "label_messages",
    "labelled_details",
    "laminar_ranges",
    "nesting_depth",
    "separated_ranges",
]

# Width of the synthetic ASCII source line every strategy targets.
LINE_WIDTH = 80

label_messages = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=10)


def nesting_depth(ranges: list[tuple[int, int]]) -> int:
    """Maximum number of ranges covering a single column."""
    columns = {column for start, end in ranges for column in range(start, end + 1)}
    return max(
        (sum(1 for start, end in ranges if start <= column <= end) for column in columns),
        default=0,
    )


@st.composite
def laminar_ranges(draw: st.DrawFn, max_depth: int = 4, max_ranges: int = 10) -> list[tuple[int, int]]:
    """Inclusive column ranges that are pairwise nested or disjoint.

    Builds a random forest: each range may hold disjoint children inside
    its own bounds (a child may equal its parent).
    """
    ranges: list[tuple[int, int]] = []

    def fill(low: int, high: int, depth: int) -> None:
        cursor = low
        while cursor <= high and len(ranges) < max_ranges and draw(st.booleans()):
            start = draw(st.integers(min_value=cursor, max_value=high))
            end = draw(st.integers(min_value=start, max_value=min(high, start + 20)))
            ranges.append((start, end))
            if depth < max_depth:
                fill(start, end, depth + 1)
            cursor = end + 1

    fill(1, LINE_WIDTH, 1)
    if not ranges:
        start = draw(st.integers(min_value=1, max_value=LINE_WIDTH))
        ranges.append((start, start))

    count = len(ranges)
    event(f"layout_range_count={'1' if count == 1 else 'few' if count < 5 else 'many'}")
    depth = nesting_depth(ranges)
    event(f"layout_depth={'flat' if depth == 1 else 'nested' if depth < 4 else 'deep'}")
    return ranges


@st.composite
def labelled_details(draw: st.DrawFn) -> list[Detail]:
    """Details with messages on line 1 over a laminar range family."""
    ranges = draw(laminar_ranges())
    return [Detail(1, column_range, draw(label_messages)) for column_range in ranges]


@st.composite
def separated_ranges(draw: st.DrawFn) -> list[tuple[int, int]]:
    """Disjoint ranges far enough apart that labels of up to 5 cells fit between them."""
    count = draw(st.integers(min_value=2, max_value=5))
    ranges = []
    for index in range(count):
        start = 1 + index * 14
        width = draw(st.integers(min_value=1, max_value=3))
        ranges.append((start, start + width - 1))
    return ranges


@st.composite
def crossing_pairs(draw: st.DrawFn) -> tuple[tuple[int, int], tuple[int, int]]:
    """Two ranges with start1 < start2 <= end1 < end2."""
    start1 = draw(st.integers(min_value=1, max_value=LINE_WIDTH - 2))
    start2 = draw(st.integers(min_value=start1 + 1, max_value=LINE_WIDTH - 1))
    end1 = draw(st.integers(min_value=start2, max_value=LINE_WIDTH - 1))
    end2 = draw(st.integers(min_value=end1 + 1, max_value=LINE_WIDTH))
    event(f"layout_crossing={'shared_end' if start2 == end1 else 'inside'}")
    return ((start1, end1), (start2, end2))
