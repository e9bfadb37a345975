"""
Applying reviewer edits to an original text.

Every edit's offsets refer to the original, untouched text. Edits are applied
from the end of the text towards the start, so splicing one edit never moves
the offsets of an edit that has not been applied yet.

Overlapping edits are outside the contract of apply_edits(): they are not
validated unless the caller asks, and their combined result is unspecified.
Callers that need a guarantee pass ``check_overlaps=True`` (or call
ensure_no_overlaps() themselves) to have them rejected with OverlapError.
"""

import logging
from collections.abc import Iterable, Sequence

from .errors import OverlapError
from .models.edit import Correction, Edit
from .models.span import TextSpan

logger = logging.getLogger(__name__)


def sort_edits(edits: Iterable[Edit], reverse: bool = False) -> list[Edit]:
    """Sort edits by ``(start, end)``.

    Args:
        edits: Edits in any order
        reverse: If True, sort descending (the order apply_edits() uses:
            nearest the end first, larger span first among equal starts)

    Returns:
        A new sorted list
    """
    return sorted(edits, key=lambda e: (e.start, e.end), reverse=reverse)


def clamp_span(edit: Edit, length: int) -> TextSpan:
    """Fit an edit's span to a text of ``length`` characters, logging when it shrinks."""
    span = edit.span.clamp(length)
    if span is not edit.span:
        logger.warning(
            "Edit %s span %s exceeds text length %d; clamped to %s",
            edit.id,
            edit.span,
            length,
            span,
        )
    return span


def find_overlaps(edits: Iterable[Edit]) -> list[tuple[Edit, Edit]]:
    """Find every pair of edits whose spans conflict.

    Pairs are reported in ascending ``(start, end)`` order of their first
    member.

    Args:
        edits: Edits in any order

    Returns:
        List of (earlier, later) edit tuples; empty when the edits are disjoint
    """
    ordered = sort_edits(edits)
    pairs: list[tuple[Edit, Edit]] = []

    for index, first in enumerate(ordered):
        for second in ordered[index + 1 :]:
            # Sorted by start, so nothing later can reach back into `first`
            if second.start > first.end:
                break
            if first.span.overlaps(second.span):
                pairs.append((first, second))

    return pairs


def ensure_no_overlaps(edits: Iterable[Edit]) -> None:
    """Raise OverlapError if any two edits conflict."""
    pairs = find_overlaps(edits)
    if pairs:
        raise OverlapError(pairs)


def apply_edits(
    original: str | None,
    edits: Iterable[Edit] | None,
    *,
    check_overlaps: bool = False,
) -> str:
    """Apply edits to the original text and return the corrected text.

    Edits may arrive in any order. They are sorted descending by
    ``(start, end)`` and spliced in one at a time as
    ``text[:start] + replacement + text[end:]``. For non-overlapping edits the
    result does not depend on input order.

    Offsets past the end of the text (e.g. edits made against an older
    snapshot) are clamped rather than rejected.

    Args:
        original: The original text (None is treated as empty)
        edits: Edits whose offsets refer to ``original``
        check_overlaps: If True, reject overlapping edits instead of applying
            them with an unspecified result

    Returns:
        The text with every edit applied

    Raises:
        OverlapError: If check_overlaps is True and two edits conflict

    Example:
        >>> apply_edits("The quick brown fox", [Edit.create(4, 9, "slow")])
        'The slow brown fox'
    """
    text = original or ""
    edit_list = list(edits or [])
    if not edit_list:
        return text

    if check_overlaps:
        ensure_no_overlaps(edit_list)
    else:
        for first, second in find_overlaps(edit_list):
            logger.warning(
                "Edit %s %s overlaps edit %s %s; result is unspecified",
                first.id,
                first.span,
                second.id,
                second.span,
            )

    length = len(text)
    for edit in sort_edits(edit_list, reverse=True):
        span = clamp_span(edit, length)
        text = text[: span.start] + edit.replacement + text[span.end :]

    logger.debug("Applied %d edits to text of length %d", len(edit_list), length)
    return text


def stale_corrections(text: str, corrections: Sequence[Correction]) -> list[Correction]:
    """List corrections whose cached snippet no longer matches ``text``.

    A stale correction still renders (its span is clamped), but it was made
    against a different version of the text than the one being shown.
    """
    stale = [c for c in corrections if c.is_stale(text)]
    for correction in stale:
        logger.warning(
            "Correction %s expected %r at %s but found %r",
            correction.id,
            correction.original_text,
            correction.span,
            correction.span.slice(text),
        )
    return stale
