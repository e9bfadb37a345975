"""
Rendering of annotated markup for reviewer corrections and revision diffs.

Three views are provided, all pure functions of their inputs:

- render_with_corrections(): the original text unchanged, with each
  correction's span wrapped in a clickable highlight
- render_with_edits(): removed text struck through and replacement text
  shown inline, with an optional comment affordance
- render_diff(): the segments produced by compute_diff()

Every piece of text and every attribute value is HTML-escaped. The output
uses only ``span`` elements carrying ``style``, ``class``, ``title`` and
``data-*`` attributes, nested at most one level deep.
"""

import html
import logging
import re
from collections.abc import Iterable

from .constants import (
    ADDED_CLASS,
    ADDED_STYLE,
    COMMENT_ICON,
    COMMENT_ICON_CLASS,
    COMMENT_ICON_STYLE,
    COMMENT_LABEL,
    CORRECTION_CLASS,
    CORRECTION_TOOLTIP,
    DIFF_ADDED_CLASS,
    DIFF_REMOVED_CLASS,
    EDIT_WRAPPER_CLASS,
    EDIT_WRAPPER_STYLE,
    REMOVED_CLASS,
    REMOVED_STYLE,
)
from .edits import clamp_span, sort_edits
from .models.edit import Correction, Edit
from .models.segment import AnnotatedSegment, DiffSegment, SegmentKind

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r\n|\r|\n")


def _escape(text: str) -> str:
    """Escape text for use as element content or a quoted attribute value."""
    return html.escape(text, quote=True)


def _flatten(text: str) -> str:
    """Replace line breaks with spaces so text fits on one attribute line."""
    return _NEWLINES.sub(" ", text)


def _correction_span(correction: Edit, snippet: str) -> str:
    """Build the highlight element for a single correction."""
    note = _flatten(correction.note) if correction.note else ""
    return (
        f'<span class="{CORRECTION_CLASS}"'
        f' data-correction-id="{_escape(correction.id)}"'
        f' data-corrected="{_escape(correction.replacement)}"'
        f' data-original="{_escape(snippet)}"'
        f' data-note="{_escape(note)}"'
        f' title="{_escape(CORRECTION_TOOLTIP)}">'
        f"{_escape(snippet)}</span>"
    )


def render_with_corrections(
    original: str | None, corrections: Iterable[Correction] | None
) -> str:
    """Render the original text with each correction's span highlighted.

    The text itself is never changed; markup is only inserted around spans.
    Corrections are processed from the end of the text towards the start
    (ties: larger span first), splitting off the text after each span before
    wrapping it, so earlier offsets stay valid.

    Each highlight carries the correction id, the proposed replacement, the
    original snippet and the reviewer note (newlines flattened) as escaped
    ``data-*`` attributes for interactive review.

    Args:
        original: The student's original text (None is treated as empty)
        corrections: Corrections whose offsets refer to ``original``

    Returns:
        Escaped markup; the escaped original when there are no corrections

    Note:
        Overlapping spans are unsupported. Where two spans overlap, the
        earlier one is cut short at the start of the later one so the markup
        stays well formed.

    Example:
        >>> c = Correction.from_text("I has a cat", 2, 5, "have", id="c1")
        >>> markup = render_with_corrections("I has a cat", [c])
        >>> markup.startswith('I <span class="essay-correction" data-correction-id="c1"')
        True
    """
    text = original or ""
    correction_list = list(corrections or [])
    if not text or not correction_list:
        return _escape(text)

    length = len(text)
    remaining = text
    pieces: list[str] = []

    for correction in sort_edits(correction_list, reverse=True):
        span = clamp_span(correction, length)
        # Text after this span has already been wrapped by a later correction
        end = min(span.end, len(remaining))
        start = min(span.start, end)

        pieces.append(_escape(remaining[end:]))
        pieces.append(_correction_span(correction, remaining[start:end]))
        remaining = remaining[:start]

    pieces.append(_escape(remaining))

    logger.debug("Rendered %d corrections over %d characters", len(correction_list), length)
    return "".join(reversed(pieces))


def annotate_edits(original: str | None, edits: Iterable[Edit] | None) -> list[AnnotatedSegment]:
    """Split the original text into unchanged, removed and added runs.

    Edits are walked in ascending ``(start, end)`` order. For each edit this
    emits the unchanged text since the previous edit, the removed slice of the
    original (if the span is non-empty) and the replacement (if non-empty,
    carrying the edit's note as its comment). Text after the last edit is
    emitted as a trailing unchanged run.

    Args:
        original: The original text (None is treated as empty)
        edits: Edits whose offsets refer to ``original``

    Returns:
        List of AnnotatedSegment objects in reading order
    """
    text = original or ""
    length = len(text)
    segments: list[AnnotatedSegment] = []
    current = 0

    for edit in sort_edits(edits or []):
        span = clamp_span(edit, length)

        if span.start > current:
            segments.append(AnnotatedSegment(text=text[current : span.start]))

        # Never show the same original text as removed twice
        removed_start = max(span.start, current)
        if span.end > removed_start:
            segments.append(AnnotatedSegment(text=text[removed_start : span.end], removed=True))

        if edit.replacement:
            segments.append(
                AnnotatedSegment(text=edit.replacement, added=True, comment=edit.note)
            )

        current = max(current, span.end)

    if current < length:
        segments.append(AnnotatedSegment(text=text[current:]))

    return segments


def render_segments(segments: Iterable[AnnotatedSegment]) -> str:
    """Render annotated segments as escaped markup.

    Removed runs are struck through in red, added runs are green. An added
    run with a comment is wrapped together with a small icon whose ``title``
    shows the comment.
    """
    parts: list[str] = []

    for segment in segments:
        escaped = _escape(segment.text)

        if segment.removed:
            parts.append(f'<span class="{REMOVED_CLASS}" style="{REMOVED_STYLE}">{escaped}</span>')
        elif segment.added:
            added = f'<span class="{ADDED_CLASS}" style="{ADDED_STYLE}">{escaped}</span>'
            if segment.comment:
                title = _escape(COMMENT_LABEL + _flatten(segment.comment))
                parts.append(
                    f'<span class="{EDIT_WRAPPER_CLASS}" style="{EDIT_WRAPPER_STYLE}">'
                    f"{added}"
                    f'<span class="{COMMENT_ICON_CLASS}" style="{COMMENT_ICON_STYLE}"'
                    f' title="{title}">{COMMENT_ICON}</span>'
                    "</span>"
                )
            else:
                parts.append(added)
        else:
            parts.append(escaped)

    return "".join(parts)


def render_with_edits(original: str | None, edits: Iterable[Edit] | None) -> str:
    """Render the original text with edits shown as replacements.

    Args:
        original: The original text (None is treated as empty)
        edits: Edits whose offsets refer to ``original``

    Returns:
        Escaped markup; the escaped original when there are no edits
    """
    return render_segments(annotate_edits(original, edits))


def render_diff(segments: Iterable[DiffSegment]) -> str:
    """Render diff segments as escaped markup.

    ADDED runs are wrapped in a ``diff-added`` span, REMOVED runs in a
    ``diff-removed`` span; UNCHANGED runs are emitted as plain escaped text.
    """
    parts: list[str] = []

    for segment in segments:
        escaped = _escape(segment.text)
        if segment.kind is SegmentKind.ADDED:
            parts.append(f'<span class="{DIFF_ADDED_CLASS}">{escaped}</span>')
        elif segment.kind is SegmentKind.REMOVED:
            parts.append(f'<span class="{DIFF_REMOVED_CLASS}">{escaped}</span>')
        else:
            parts.append(escaped)

    return "".join(parts)
