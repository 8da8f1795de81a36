"""Property-based tests for the layout engine.

Properties tested:
- Determinism: the same Details always produce the same rows
- Rail lower bound: overlapping labelled Details need distinct rails
- Chains: strictly nested Details use exactly one rail per Detail
- Separation: far-apart Details with short labels share one rail
- Connectors: a label never paints over a connector still descending
- Crossing: partially overlapping ranges always raise
"""

from itertools import combinations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from spanreport.diagnostics import CrossingSpansError, Detail
from spanreport.render.config import GlyphSet
from spanreport.render.layout import layout_line
from tests.strategies import (
    LINE_WIDTH,
    crossing_pairs,
    label_messages,
    labelled_details,
    nesting_depth,
    separated_ranges,
)

LINE = "x" * LINE_WIDTH
GLYPHS = GlyphSet()


class TestLayoutProperties:
    """Invariants of layout_line over random nested-or-disjoint Details."""

    @given(labelled_details())
    def test_layout_is_deterministic(self, details: list[Detail]):
        """PROPERTY: laying out the same Details twice gives identical rows."""
        first = layout_line(LINE, 1, details)
        second = layout_line(LINE, 1, tuple(details))

        assert first.underline == second.underline
        assert first.rows == second.rows

    @given(labelled_details())
    def test_rails_at_least_nesting_depth(self, details: list[Detail]):
        """PROPERTY: rail count >= deepest nesting among labelled Details."""
        layout = layout_line(LINE, 1, details)

        if len(details) == 1:
            event("outcome=inline")
            assert layout.rail_count == 0
            return

        depth = nesting_depth([d.column_range for d in details])
        event(f"outcome=rails_over_depth_{min(layout.rail_count - depth, 3)}")
        assert layout.rail_count >= depth
        assert layout.rail_count == max(p.rail for p in layout.placements)

    @given(labelled_details())
    def test_overlapping_details_never_share_a_rail(self, details: list[Detail]):
        """PROPERTY: two overlapping labelled Details sit on different rails."""
        layout = layout_line(LINE, 1, details)

        for first, second in combinations(layout.placements, 2):
            if first.detail.overlaps(second.detail) and first.rail:
                assert first.rail != second.rail

    @given(labelled_details())
    def test_descending_connectors_stay_visible(self, details: list[Detail]):
        """PROPERTY: on every rail, deeper connectors show a vertical or a branch."""
        layout = layout_line(LINE, 1, details)

        for rail, row in enumerate(layout.rows, start=1):
            for placement in layout.placements:
                if placement.rail > rail:
                    assert row[placement.anchor] in (GLYPHS.vertical, GLYPHS.branch)

    @given(labelled_details())
    def test_labels_start_at_their_anchor(self, details: list[Detail]):
        """PROPERTY: each label row shows its leader and message at its anchor."""
        layout = layout_line(LINE, 1, details)

        for placement in layout.placements:
            if not placement.rail:
                continue
            row = layout.rows[placement.rail - 1]
            assert row[placement.anchor] in (GLYPHS.corner, GLYPHS.branch)
            label = row[placement.anchor + 1 : placement.label_end]
            assert label == f"── {placement.message}"

    @given(labelled_details())
    def test_underline_covers_exactly_the_ranges(self, details: list[Detail]):
        """PROPERTY: with rails in use, the underline marks only annotated cells."""
        layout = layout_line(LINE, 1, details)
        if not layout.rail_count:
            return

        covered = {c - 1 for d in details for c in range(d.start, d.end + 1)}
        marked = {i for i, char in enumerate(layout.underline) if char != " "}
        assert marked == covered

    @given(st.integers(min_value=2, max_value=6), st.data())
    def test_strict_chain_uses_one_rail_per_detail(self, count: int, data: st.DataObject):
        """PROPERTY: strictly nested chains need exactly depth rails."""
        details = [
            Detail(1, (1 + i, LINE_WIDTH - i), data.draw(label_messages)) for i in range(count)
        ]

        layout = layout_line(LINE, 1, details)

        assert layout.rail_count == count

    @given(separated_ranges(), st.data())
    def test_separated_details_share_one_rail(
        self, ranges: list[tuple[int, int]], data: st.DataObject
    ):
        """PROPERTY: disjoint Details with room for their labels use one rail."""
        short = st.text(alphabet="abc", min_size=1, max_size=5)
        details = [Detail(1, r, data.draw(short)) for r in ranges]

        layout = layout_line(LINE, 1, details)

        assert layout.rail_count == 1
        assert {p.rail for p in layout.placements} == {1}


class TestCrossingProperties:
    """Crossing detection over random range pairs."""

    @given(crossing_pairs(), st.booleans())
    def test_crossing_pairs_always_raise(
        self, pair: tuple[tuple[int, int], tuple[int, int]], swap: bool
    ):
        """PROPERTY: start1 < start2 <= end1 < end2 raises regardless of input order."""
        first, second = pair
        details = [Detail(1, first, "a"), Detail(1, second, "b")]
        if swap:
            details.reverse()

        with pytest.raises(CrossingSpansError) as exc_info:
            layout_line(LINE, 1, details)

        assert exc_info.value.first == first
        assert exc_info.value.second == second

    @given(labelled_details())
    def test_laminar_families_never_raise(self, details: list[Detail]):
        """PROPERTY: nested-or-disjoint families always lay out."""
        layout_line(LINE, 1, details)
