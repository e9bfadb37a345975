"""
prose_redline - Word-level diffs and reviewer corrections for student prose.

This package compares two versions of a piece of writing, applies
character-offset edits made by a reviewer against the original, and renders
either as escaped, annotated markup for display.

Example:
    >>> from prose_redline import Edit, apply_edits, compute_diff
    >>> segments = compute_diff("The quick brown fox", "The quick red fox")
    >>> apply_edits("The quick brown fox", [Edit.create(4, 9, "slow")])
    'The slow brown fox'
"""

__version__ = "0.1.0"
__all__ = [
    "tokenize",
    "count_words",
    "compute_diff",
    "reconstruct_original",
    "reconstruct_modified",
    "has_changes",
    "apply_edits",
    "sort_edits",
    "find_overlaps",
    "ensure_no_overlaps",
    "stale_corrections",
    "annotate_edits",
    "render_segments",
    "render_with_corrections",
    "render_with_edits",
    "render_diff",
    "validate_markup",
    "ensure_valid_markup",
    "markup_text",
    "diff_to_criticmarkup",
    "edits_to_criticmarkup",
    "strip_criticmarkup",
    "load_edit_file",
    "load_corrections",
    "dump_edits",
    "DiffStats",
    "diff_stats",
    "TextSpan",
    "Edit",
    "Correction",
    "DiffSegment",
    "SegmentKind",
    "AnnotatedSegment",
    "RedlineError",
    "InvalidSpanError",
    "OverlapError",
    "ValidationError",
]

# Import CriticMarkup export
from .criticmarkup import diff_to_criticmarkup, edits_to_criticmarkup, strip_criticmarkup

# Import diff engine
from .diff import compute_diff, has_changes, reconstruct_modified, reconstruct_original

# Import edit files
from .edit_file import dump_edits, load_corrections, load_edit_file

# Import edit application
from .edits import apply_edits, ensure_no_overlaps, find_overlaps, sort_edits, stale_corrections
from .errors import InvalidSpanError, OverlapError, RedlineError, ValidationError

# Import model classes
from .models import AnnotatedSegment, Correction, DiffSegment, Edit, SegmentKind, TextSpan

# Import rendering
from .rendering import (
    annotate_edits,
    render_diff,
    render_segments,
    render_with_corrections,
    render_with_edits,
)

# Import result types
from .results import DiffStats, diff_stats
from .tokenizer import count_words, tokenize

# Import markup validation
from .validation import ensure_valid_markup, markup_text, validate_markup
