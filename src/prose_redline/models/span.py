"""
TextSpan model for half-open character ranges.

Offsets are Python ``str`` indices (code points). Whoever produces offsets
must use the same granularity as whoever consumes them.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidSpanError


@dataclass(frozen=True)
class TextSpan:
    """A half-open range ``[start, end)`` into a fixed reference string.

    The upper bound is not checked here because the reference string is not
    known yet. Use :meth:`clamp` (or :meth:`slice`) to fit a span to a
    specific text.

    Attributes:
        start: Index of the first character in the span
        end: Index one past the last character in the span

    Example:
        >>> span = TextSpan(4, 9)
        >>> span.slice("The quick brown fox")
        'quick'
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span shape."""
        for value in (self.start, self.end):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSpanError(self.start, self.end, "offsets must be integers")
        if self.start < 0:
            raise InvalidSpanError(self.start, self.end, "start must not be negative")
        if self.end < self.start:
            raise InvalidSpanError(self.start, self.end, "end must not precede start")

    @property
    def length(self) -> int:
        """Number of characters covered by the span."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True for a zero-width span (a pure insertion point)."""
        return self.start == self.end

    def clamp(self, length: int) -> "TextSpan":
        """Fit the span inside a text of the given length.

        Offsets past the end are truncated rather than rejected, so spans
        computed against an older snapshot still produce a usable range.

        Args:
            length: Length of the text the span will be used against

        Returns:
            This span if it already fits, otherwise a truncated copy
        """
        start = min(self.start, length)
        end = min(self.end, length)
        if start == self.start and end == self.end:
            return self
        return TextSpan(start, end)

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span (clamped)."""
        span = self.clamp(len(text))
        return text[span.start : span.end]

    def overlaps(self, other: "TextSpan") -> bool:
        """Check whether two spans conflict.

        Spans conflict when they share at least one character, when an
        insertion point falls strictly inside the other span, or when both
        are insertion points at the same offset (their relative order would
        be undefined).
        """
        if self.is_empty and other.is_empty:
            return self.start == other.start
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextSpan":
        start = data.get("start", data.get("start_index"))
        end = data.get("end", data.get("end_index"))
        return cls(start=start, end=end)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
