"""
Result classes summarizing diffs.

This module provides summary types for the output of compute_diff(), used
for "changes highlighted" badges and the CLI's stats output.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .models.segment import DiffSegment, SegmentKind
from .tokenizer import count_words


@dataclass
class DiffStats:
    """Statistics from a diff between two texts.

    Attributes:
        insertions: Number of ADDED segments
        deletions: Number of REMOVED segments
        words_added: Number of words inside ADDED segments
        words_removed: Number of words inside REMOVED segments
        unchanged_words: Number of words inside UNCHANGED segments

    Example:
        >>> stats = diff_stats(compute_diff("The quick brown fox", "The quick red fox"))
        >>> print(stats)
        1 insertion (1 word), 1 deletion (1 word)
    """

    insertions: int = 0
    deletions: int = 0
    words_added: int = 0
    words_removed: int = 0
    unchanged_words: int = 0

    @property
    def total(self) -> int:
        """Total number of changed segments."""
        return self.insertions + self.deletions

    @property
    def has_changes(self) -> bool:
        return self.total > 0

    def to_dict(self) -> dict[str, int]:
        return {
            "insertions": self.insertions,
            "deletions": self.deletions,
            "words_added": self.words_added,
            "words_removed": self.words_removed,
            "unchanged_words": self.unchanged_words,
        }

    def __str__(self) -> str:
        """Get string representation of the statistics."""
        parts = []
        if self.insertions:
            parts.append(
                f"{self.insertions} insertion{'s' if self.insertions != 1 else ''} "
                f"({self.words_added} word{'s' if self.words_added != 1 else ''})"
            )
        if self.deletions:
            parts.append(
                f"{self.deletions} deletion{'s' if self.deletions != 1 else ''} "
                f"({self.words_removed} word{'s' if self.words_removed != 1 else ''})"
            )
        if not parts:
            return "No changes"
        return ", ".join(parts)


def diff_stats(segments: Iterable[DiffSegment]) -> DiffStats:
    """Summarize a list of diff segments."""
    stats = DiffStats()

    for segment in segments:
        words = count_words(segment.text)
        if segment.kind is SegmentKind.ADDED:
            stats.insertions += 1
            stats.words_added += words
        elif segment.kind is SegmentKind.REMOVED:
            stats.deletions += 1
            stats.words_removed += words
        else:
            stats.unchanged_words += words

    return stats
