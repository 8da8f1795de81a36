"""Hypothesis strategies for spanreport property-based testing.

Usage:
    from tests.strategies import laminar_ranges, crossing_pairs, nesting_depth

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - laminar_ranges, labelled_details, crossing_pairs
"""

from .diagnostics import (
    LINE_WIDTH,
    crossing_pairs,
    labelled_details,
    laminar_ranges,
    label_messages,
    nesting_depth,
    separated_ranges,
)

__all__ = [
    "LINE_WIDTH",
    "crossing_pairs",
    "label_messages",
    "labelled_details",
    "laminar_ranges",
    "nesting_depth",
    "separated_ranges",
]
