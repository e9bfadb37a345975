"""
Word-level diffing between two versions of a piece of prose.

This module produces a human-readable segmentation of two texts into
unchanged, removed and added runs, suitable for showing a student what
changed between two revisions of an essay.

The key components:
1. compute_diff() - segments two texts, by default with a bounded-window
   heuristic that runs in O(n * window)
2. _window_diff() - the heuristic: resynchronize within a fixed lookahead,
   otherwise record a direct substitution
3. _sequence_diff() - token-level SequenceMatcher alternative for callers
   who prefer tighter diffs over speed

Both algorithms guarantee that the segments reconstruct both inputs exactly.
The heuristic does not guarantee a minimal edit script.
"""

import logging
from difflib import SequenceMatcher

from .constants import (
    DIFF_ALGORITHM_SEQUENCE,
    DIFF_ALGORITHM_WINDOW,
    DIFF_ALGORITHMS,
    DIFF_WINDOW,
)
from .models.segment import DiffSegment, SegmentKind
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class _SegmentBuilder:
    """Accumulates segments, dropping empty text and merging same-kind neighbours."""

    def __init__(self) -> None:
        self.segments: list[DiffSegment] = []

    def add(self, text: str, kind: SegmentKind) -> None:
        if not text:
            return
        if self.segments and self.segments[-1].kind is kind:
            last = self.segments.pop()
            text = last.text + text
        self.segments.append(DiffSegment(text=text, kind=kind))


def compute_diff(
    original: str | None,
    modified: str | None,
    *,
    window: int = DIFF_WINDOW,
    algorithm: str = DIFF_ALGORITHM_WINDOW,
) -> list[DiffSegment]:
    """Compute a word-level diff between two texts.

    Trivial inputs short-circuit: two empty texts give no segments, one empty
    side gives a single ADDED or REMOVED segment, and identical texts give a
    single UNCHANGED segment.

    Args:
        original: The earlier version (None is treated as empty)
        modified: The later version (None is treated as empty)
        window: Lookahead distance in tokens for the window heuristic
        algorithm: "window" (default) for the bounded-window heuristic, or
            "sequence" for a SequenceMatcher-based diff

    Returns:
        List of DiffSegment objects in reading order

    Raises:
        ValueError: If the algorithm name or window size is invalid

    Example:
        >>> [(s.kind.value, s.text) for s in compute_diff("a big cat", "a fat cat")]
        [('unchanged', 'a '), ('removed', 'big'), ('added', 'fat'), ('unchanged', ' cat')]
    """
    if algorithm not in DIFF_ALGORITHMS:
        raise ValueError(
            f"Unknown diff algorithm {algorithm!r}; expected one of {', '.join(DIFF_ALGORITHMS)}"
        )
    if window < 1:
        raise ValueError(f"Diff window must be at least 1, got {window}")

    original = original or ""
    modified = modified or ""

    if not original and not modified:
        return []
    if not original:
        return [DiffSegment(text=modified, kind=SegmentKind.ADDED)]
    if not modified:
        return [DiffSegment(text=original, kind=SegmentKind.REMOVED)]
    if original == modified:
        return [DiffSegment(text=original, kind=SegmentKind.UNCHANGED)]

    orig_tokens = tokenize(original)
    mod_tokens = tokenize(modified)

    if algorithm == DIFF_ALGORITHM_SEQUENCE:
        segments = _sequence_diff(orig_tokens, mod_tokens)
    else:
        segments = _window_diff(orig_tokens, mod_tokens, window)

    logger.debug(
        "Diffed %d original tokens against %d modified tokens into %d segments (%s)",
        len(orig_tokens),
        len(mod_tokens),
        len(segments),
        algorithm,
    )
    return segments


def _find_ahead(tokens: list[str], start: int, target: str, window: int) -> int | None:
    """Find the distance from ``start`` to the next ``target`` within the window.

    Only positions strictly after ``start`` and less than ``window`` tokens
    away are considered.

    Returns:
        Distance to the nearest match, or None if there is none in range
    """
    for index in range(start + 1, min(start + window, len(tokens))):
        if tokens[index] == target:
            return index - start
    return None


def _window_diff(orig_tokens: list[str], mod_tokens: list[str], window: int) -> list[DiffSegment]:
    """Bounded-window diff over two token streams.

    At each mismatch, look up to ``window`` tokens ahead on each side for the
    token under the other cursor. The side with the nearer match skips ahead
    (the original side wins ties); if neither finds one, the two tokens are
    recorded as a substitution.
    """
    builder = _SegmentBuilder()
    i = j = 0

    while i < len(orig_tokens) or j < len(mod_tokens):
        if i >= len(orig_tokens):
            # Remaining tokens in modified are additions
            builder.add("".join(mod_tokens[j:]), SegmentKind.ADDED)
            break

        if j >= len(mod_tokens):
            # Remaining tokens in original are removals
            builder.add("".join(orig_tokens[i:]), SegmentKind.REMOVED)
            break

        if orig_tokens[i] == mod_tokens[j]:
            builder.add(orig_tokens[i], SegmentKind.UNCHANGED)
            i += 1
            j += 1
            continue

        orig_distance = _find_ahead(orig_tokens, i, mod_tokens[j], window)
        mod_distance = _find_ahead(mod_tokens, j, orig_tokens[i], window)

        if orig_distance is not None and (mod_distance is None or orig_distance <= mod_distance):
            builder.add("".join(orig_tokens[i : i + orig_distance]), SegmentKind.REMOVED)
            i += orig_distance
        elif mod_distance is not None:
            builder.add("".join(mod_tokens[j : j + mod_distance]), SegmentKind.ADDED)
            j += mod_distance
        else:
            # No resync point in range, treat as replacement
            builder.add(orig_tokens[i], SegmentKind.REMOVED)
            builder.add(mod_tokens[j], SegmentKind.ADDED)
            i += 1
            j += 1

    return builder.segments


def _sequence_diff(orig_tokens: list[str], mod_tokens: list[str]) -> list[DiffSegment]:
    """Token-level diff using difflib's SequenceMatcher opcodes.

    Replacements are emitted as deletion then insertion.
    """
    builder = _SegmentBuilder()
    matcher = SequenceMatcher(None, orig_tokens, mod_tokens, autojunk=False)

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            builder.add("".join(orig_tokens[i1:i2]), SegmentKind.UNCHANGED)
            continue
        builder.add("".join(orig_tokens[i1:i2]), SegmentKind.REMOVED)
        builder.add("".join(mod_tokens[j1:j2]), SegmentKind.ADDED)

    return builder.segments


def reconstruct_original(segments: list[DiffSegment]) -> str:
    """Rebuild the original text from diff segments."""
    return "".join(s.text for s in segments if not s.is_added)


def reconstruct_modified(segments: list[DiffSegment]) -> str:
    """Rebuild the modified text from diff segments."""
    return "".join(s.text for s in segments if not s.is_removed)


def has_changes(segments: list[DiffSegment]) -> bool:
    """Check whether any segment is an addition or removal."""
    return any(not s.is_unchanged for s in segments)
