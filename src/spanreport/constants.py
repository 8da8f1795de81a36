"""Shared constants for spanreport.

Centralized defaults used across the diagnostics model and the rendering
packages. Placing them here avoids circular imports between
``spanreport.render.config`` and the modules that consume it.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Source text
    "DEFAULT_TAB_WIDTH",
    "MAX_TAB_WIDTH",
    # Layout geometry
    "LABEL_LEADER_WIDTH",
    "LABEL_GAP",
    # Report text
    "HELP_LABEL",
    "PLAIN_LOCATION_PREFIX",
]

# ============================================================================
# SOURCE TEXT
# ============================================================================

# Tabs are expanded to the next multiple of the tab width before painting so
# underline cells line up with what a monospace terminal shows.
DEFAULT_TAB_WIDTH: int = 4

# Upper bound for RenderConfig.tab_width. Larger values only waste columns.
MAX_TAB_WIDTH: int = 16

# ============================================================================
# LAYOUT GEOMETRY
# ============================================================================

# Cells occupied by a label before its message text: corner, two horizontal
# strokes, one space ("╰── ").
LABEL_LEADER_WIDTH: int = 4

# Blank cells required between the end of a label and the next connector
# that shares its rail.
LABEL_GAP: int = 1

# ============================================================================
# REPORT TEXT
# ============================================================================

HELP_LABEL: str = "Help:"

PLAIN_LOCATION_PREFIX: str = "-->"
