"""
Edit and Correction models for reviewer-authored changes.

Both are immutable. An Edit describes replacing one span of a fixed original
text; a Correction is a display-only Edit that also remembers the snippet of
the original it was made against.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from .span import TextSpan

_UNSET: Any = object()


def _normalize_note(note: str | None) -> str | None:
    """Collapse blank notes to None."""
    if note is None or not note.strip():
        return None
    return note


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _first_present(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class Edit:
    """A reviewer instruction to replace a span of the original text.

    Offsets always refer to the original, untouched text, never to text that
    already has other edits applied.

    Attributes:
        id: Stable identifier of the edit
        span: Range of the original text being replaced
        replacement: New text for the span (empty for a pure deletion)
        note: Optional reviewer comment shown next to the replacement
        author: Who created the edit
        created_at: When the edit was created, if known

    Example:
        >>> edit = Edit.create(4, 9, "slow", note="Tone it down")
        >>> edit.span
        TextSpan(start=4, end=9)
        >>> edit.with_changes(replacement="lazy").replacement
        'lazy'
    """

    id: str
    span: TextSpan
    replacement: str = ""
    note: str | None = None
    author: str = ""
    created_at: datetime | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Ensure proper field types."""
        object.__setattr__(self, "id", str(self.id))
        if not isinstance(self.span, TextSpan):
            raise TypeError(f"span must be a TextSpan, got {type(self.span).__name__}")
        if self.replacement is None:
            object.__setattr__(self, "replacement", "")
        object.__setattr__(self, "note", _normalize_note(self.note))

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    @classmethod
    def create(
        cls,
        start: int,
        end: int,
        replacement: str,
        *,
        id: str | None = None,
        note: str | None = None,
        author: str = "",
        created_at: datetime | None = None,
        **kwargs: Any,
    ):
        """Build an edit from raw offsets, generating an id if none is given."""
        return cls(
            id=id or uuid.uuid4().hex,
            span=TextSpan(start, end),
            replacement=replacement,
            note=note,
            author=author,
            created_at=created_at,
            **kwargs,
        )

    def with_changes(self, replacement: str = _UNSET, note: str | None = _UNSET):
        """Return a copy with new replacement text and/or note.

        The id and span are kept, so the result stands in for this edit.
        Passing an empty note clears it.
        """
        changes: dict[str, Any] = {}
        if replacement is not _UNSET:
            changes["replacement"] = replacement
        if note is not _UNSET:
            changes["note"] = note
        return replace(self, **changes)

    @staticmethod
    def _fields_from_dict(data: dict[str, Any]) -> dict[str, Any]:
        """Map a stored record (either naming convention) to constructor kwargs."""
        if "span" in data and isinstance(data["span"], dict):
            span = TextSpan.from_dict(data["span"])
        else:
            span = TextSpan.from_dict(data)

        note = _first_present(data, "note", "comment", "teacher_note")

        # YAML happily turns "42" or "yes" into non-strings
        return {
            "id": _first_present(data, "id", default=None) or uuid.uuid4().hex,
            "span": span,
            "replacement": str(
                _first_present(data, "replacement", "new_text", "corrected_text", default="")
            ),
            "note": None if note is None else str(note),
            "author": str(_first_present(data, "author", "created_by", default="")),
            "created_at": _parse_datetime(data.get("created_at")),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create an edit from a mapping.

        Accepts ``start``/``end`` or ``start_index``/``end_index`` (or a nested
        ``span`` mapping), ``replacement``/``new_text``/``corrected_text``,
        ``note``/``comment``/``teacher_note`` and ``author``/``created_by``.
        """
        return cls(**cls._fields_from_dict(data))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "start": self.start,
            "end": self.end,
            "replacement": self.replacement,
        }
        if self.note is not None:
            data["note"] = self.note
        if self.author:
            data["author"] = self.author
        if self.created_at is not None:
            data["created_at"] = self.created_at.isoformat()
        return data


@dataclass(frozen=True)
class Correction(Edit):
    """A display-only edit that caches the original snippet it refers to.

    Corrections annotate the original text for review; they are never applied
    to produce new stored text.

    Attributes:
        original_text: The snippet of the original covered by the span when the
            correction was made
    """

    original_text: str = ""

    @classmethod
    def from_text(
        cls,
        text: str,
        start: int,
        end: int,
        replacement: str,
        **kwargs: Any,
    ) -> "Correction":
        """Create a correction, capturing the snippet at ``[start, end)`` of ``text``."""
        span = TextSpan(start, end)
        return cls.create(start, end, replacement, original_text=span.slice(text), **kwargs)

    @classmethod
    def from_edit(cls, edit: Edit, text: str) -> "Correction":
        """Convert an edit into a correction against ``text``."""
        if isinstance(edit, Correction):
            return edit
        return cls(
            id=edit.id,
            span=edit.span,
            replacement=edit.replacement,
            note=edit.note,
            author=edit.author,
            created_at=edit.created_at,
            original_text=edit.span.slice(text),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Correction":
        fields = cls._fields_from_dict(data)
        fields["original_text"] = data.get("original_text") or ""
        return cls(**fields)

    def is_stale(self, text: str) -> bool:
        """True if ``text`` no longer holds the cached snippet at this span."""
        if self.end > len(text):
            return True
        return self.span.slice(text) != self.original_text

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["original_text"] = self.original_text
        return data
