"""
Custom exception classes for prose_redline package.

These exceptions provide helpful error messages for the few inputs the
library refuses outright: malformed spans, overlapping edits when the caller
asked for them to be rejected, and unreadable edit files or markup.
"""

from typing import Any


class RedlineError(Exception):
    """Base exception for all prose_redline errors."""

    pass


class InvalidSpanError(RedlineError, ValueError):
    """Raised when a text span cannot describe any range of any string.

    Spans past the end of a text are not an error (they are clamped when
    used); this is only raised for negative offsets, reversed ranges and
    non-integer offsets.

    Attributes:
        start: The offending start offset
        end: The offending end offset
        reason: Why the span was rejected
    """

    def __init__(self, start: Any, end: Any, reason: str) -> None:
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format an error message naming the rejected span."""
        return f"Invalid span [{self.start!r}, {self.end!r}): {self.reason}"


class OverlapError(RedlineError):
    """Raised when overlapping edits are rejected.

    Overlapping edits are never rejected implicitly. This is raised only when
    the caller opts in with ``check_overlaps=True`` or calls
    ``ensure_no_overlaps()``.

    Attributes:
        pairs: List of (edit, edit) tuples whose spans conflict
    """

    def __init__(self, pairs: list[tuple[Any, Any]]) -> None:
        self.pairs = pairs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format an error message listing each conflicting pair."""
        msg = f"Found {len(self.pairs)} overlapping edit pair"
        msg += "s\n\n" if len(self.pairs) != 1 else "\n\n"

        for first, second in self.pairs:
            msg += (
                f"  • {first.id} [{first.start}, {first.end}) overlaps "
                f"{second.id} [{second.start}, {second.end})\n"
            )

        msg += "\nOverlapping edits have no defined result. Either:\n"
        msg += "  • Merge the conflicting edits into a single edit\n"
        msg += "  • Drop one edit of each pair"
        return msg


class ValidationError(RedlineError):
    """Raised when an edit file or rendered markup fails validation.

    Attributes:
        errors: List of specific validation error messages (optional)
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error with all validation details."""
        if not self.errors:
            return super().__str__()

        error_details = "\n  - " + "\n  - ".join(self.errors)
        return f"{super().__str__()}{error_details}"
