"""CriticMarkup export for diffs and reviewer edits.

This module renders the same views as prose_redline.rendering, but as plain
text using CriticMarkup syntax, for terminals, e-mail and Markdown files.

CriticMarkup Syntax Reference:
    - Insertion: {++inserted text++}
    - Deletion: {--deleted text--}
    - Substitution: {~~old~>new~~}
    - Comment: {>>comment text<<}

See: http://criticmarkup.com/
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models.edit import Edit
from .models.segment import DiffSegment, SegmentKind
from .rendering import annotate_edits

# Regex patterns for CriticMarkup operations
_INSERTION_PATTERN = re.compile(r"\{\+\+(.+?)\+\+\}", re.DOTALL)
_DELETION_PATTERN = re.compile(r"\{--(.+?)--\}", re.DOTALL)
_SUBSTITUTION_PATTERN = re.compile(r"\{~~(.+?)~>(.+?)~~\}", re.DOTALL)
_COMMENT_PATTERN = re.compile(r"\{>>(.+?)<<\}", re.DOTALL)


def _insertion(text: str) -> str:
    return f"{{++{text}++}}"


def _deletion(text: str) -> str:
    return f"{{--{text}--}}"


def _substitution(old: str, new: str) -> str:
    return f"{{~~{old}~>{new}~~}}"


def _comment(text: str) -> str:
    return f"{{>>{text}<<}}"


def diff_to_criticmarkup(segments: Iterable[DiffSegment]) -> str:
    """Render diff segments as CriticMarkup.

    A REMOVED segment immediately followed by an ADDED segment becomes a
    single substitution.

    Example:
        >>> diff_to_criticmarkup(compute_diff("The quick brown fox", "The quick red fox"))
        'The quick {~~brown~>red~~} fox'
    """
    segment_list = list(segments)
    parts: list[str] = []
    index = 0

    while index < len(segment_list):
        segment = segment_list[index]
        following = segment_list[index + 1] if index + 1 < len(segment_list) else None

        if segment.kind is SegmentKind.REMOVED and following is not None and following.is_added:
            parts.append(_substitution(segment.text, following.text))
            index += 2
            continue

        if segment.kind is SegmentKind.ADDED:
            parts.append(_insertion(segment.text))
        elif segment.kind is SegmentKind.REMOVED:
            parts.append(_deletion(segment.text))
        else:
            parts.append(segment.text)
        index += 1

    return "".join(parts)


def edits_to_criticmarkup(original: str | None, edits: Iterable[Edit] | None) -> str:
    """Render the original text with edits as CriticMarkup.

    A removal directly followed by its replacement becomes a substitution.
    Reviewer notes follow the replacement as a comment.

    Example:
        >>> edits_to_criticmarkup("I has a cat", [Edit.create(2, 5, "have", note="Agreement")])
        'I {~~has~>have~~}{>>Agreement<<} a cat'
    """
    segments = annotate_edits(original, edits)
    parts: list[str] = []
    index = 0

    while index < len(segments):
        segment = segments[index]
        following = segments[index + 1] if index + 1 < len(segments) else None

        if segment.removed and following is not None and following.added:
            parts.append(_substitution(segment.text, following.text))
            if following.comment:
                parts.append(_comment(following.comment))
            index += 2
            continue

        if segment.removed:
            parts.append(_deletion(segment.text))
        elif segment.added:
            parts.append(_insertion(segment.text))
            if segment.comment:
                parts.append(_comment(segment.comment))
        else:
            parts.append(segment.text)
        index += 1

    return "".join(parts)


def strip_criticmarkup(text: str) -> str:
    """Remove CriticMarkup syntax, keeping the resulting text.

    For insertions, keeps the inserted text.
    For deletions, removes the deleted text.
    For substitutions, keeps the new text.
    For comments, removes them entirely.

    Args:
        text: Text potentially containing CriticMarkup

    Returns:
        Clean text with CriticMarkup resolved

    Example:
        >>> strip_criticmarkup("Hello {++world++}!")
        'Hello world!'
        >>> strip_criticmarkup("Say {--goodbye--}hello")
        'Say hello'
        >>> strip_criticmarkup("{~~old~>new~~}")
        'new'
    """
    result = _SUBSTITUTION_PATTERN.sub(r"\2", text)
    result = _INSERTION_PATTERN.sub(r"\1", result)
    result = _DELETION_PATTERN.sub("", result)
    result = _COMMENT_PATTERN.sub("", result)
    return result
