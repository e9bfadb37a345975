"""
Centralized constants for diffing and markup rendering.

This module consolidates the diff window, CSS class names, inline styles and
other magic values used by the renderers. Import from here to ensure
consistency and make updates easier.
"""

# =============================================================================
# Diff Engine
# =============================================================================

# Lookahead distance (in tokens) before the diff engine gives up on
# resynchronizing and records a direct substitution
DIFF_WINDOW = 10

# Names accepted by compute_diff(algorithm=...)
DIFF_ALGORITHM_WINDOW = "window"
DIFF_ALGORITHM_SEQUENCE = "sequence"
DIFF_ALGORITHMS = (DIFF_ALGORITHM_WINDOW, DIFF_ALGORITHM_SEQUENCE)


# =============================================================================
# Colours
# =============================================================================

REMOVED_COLOR = "#dc2626"  # red-600
ADDED_COLOR = "#16a34a"  # green-600


# =============================================================================
# Correction Highlights (render_with_corrections)
# =============================================================================

CORRECTION_CLASS = "essay-correction"
CORRECTION_TOOLTIP = "Click to see correction details"


# =============================================================================
# Replace-and-Annotate View (render_with_edits)
# =============================================================================

REMOVED_CLASS = "edit-removed"
REMOVED_STYLE = f"color: {REMOVED_COLOR}; text-decoration: line-through;"
ADDED_CLASS = "edit-added"
ADDED_STYLE = f"color: {ADDED_COLOR}; font-weight: 500;"

EDIT_WRAPPER_CLASS = "edit-wrapper"
EDIT_WRAPPER_STYLE = "position: relative; display: inline-block;"

COMMENT_ICON_CLASS = "edit-comment-icon"
COMMENT_ICON_STYLE = (
    f"color: {ADDED_COLOR}; margin-left: 4px; cursor: help; "
    "font-size: 0.9em; vertical-align: super;"
)
COMMENT_ICON = "ℹ️"  # information source emoji
COMMENT_LABEL = "Teacher: "


# =============================================================================
# Revision Diff View (render_diff)
# =============================================================================

DIFF_ADDED_CLASS = "diff-added"
DIFF_REMOVED_CLASS = "diff-removed"


# =============================================================================
# Markup Dialect
# =============================================================================

# Only these elements/attributes may appear in rendered markup
ALLOWED_TAGS = frozenset({"span"})
ALLOWED_ATTRIBUTES = frozenset({"style", "class", "title"})
ALLOWED_ATTRIBUTE_PREFIX = "data-"
MAX_NESTING_DEPTH = 1
