"""Tests for TextSpan, Edit and Correction models."""

import dataclasses
from datetime import datetime, timezone

import pytest

from prose_redline import Correction, Edit, InvalidSpanError, TextSpan


class TestTextSpan:
    """Tests for span validation and helpers."""

    def test_basic_properties(self):
        """Test length and emptiness."""
        span = TextSpan(4, 9)
        assert span.length == 5
        assert not span.is_empty
        assert TextSpan(3, 3).is_empty

    def test_negative_start_rejected(self):
        """Test a negative start is rejected."""
        with pytest.raises(InvalidSpanError, match="start must not be negative"):
            TextSpan(-1, 3)

    def test_reversed_span_rejected(self):
        """Test end before start is rejected."""
        with pytest.raises(InvalidSpanError, match="end must not precede start"):
            TextSpan(5, 2)

    def test_non_integer_rejected(self):
        """Test non-integer offsets are rejected."""
        with pytest.raises(InvalidSpanError, match="integers"):
            TextSpan("1", 3)
        with pytest.raises(InvalidSpanError, match="integers"):
            TextSpan(True, 3)

    def test_invalid_span_is_value_error(self):
        """Test InvalidSpanError can be caught as ValueError."""
        with pytest.raises(ValueError):
            TextSpan(2, 1)

    def test_clamp_within_bounds(self):
        """Test a span that fits is returned unchanged."""
        span = TextSpan(2, 5)
        assert span.clamp(10) is span

    def test_clamp_past_end(self):
        """Test offsets past the end are truncated."""
        assert TextSpan(8, 20).clamp(10) == TextSpan(8, 10)
        assert TextSpan(15, 20).clamp(10) == TextSpan(10, 10)

    def test_slice(self):
        """Test slicing text with a span."""
        assert TextSpan(4, 9).slice("The quick brown fox") == "quick"
        assert TextSpan(16, 40).slice("The quick brown fox") == "fox"

    def test_overlaps(self):
        """Test overlap detection for various span pairs."""
        assert TextSpan(0, 5).overlaps(TextSpan(3, 8))
        assert TextSpan(3, 8).overlaps(TextSpan(0, 5))
        assert not TextSpan(0, 3).overlaps(TextSpan(3, 6))
        assert TextSpan(2, 6).overlaps(TextSpan(4, 4))
        assert not TextSpan(2, 6).overlaps(TextSpan(2, 2))
        assert not TextSpan(2, 6).overlaps(TextSpan(6, 6))
        assert TextSpan(4, 4).overlaps(TextSpan(4, 4))
        assert not TextSpan(4, 4).overlaps(TextSpan(5, 5))

    def test_dict_round_trip(self):
        """Test span serialization."""
        span = TextSpan(1, 4)
        assert TextSpan.from_dict(span.to_dict()) == span
        assert TextSpan.from_dict({"start_index": 1, "end_index": 4}) == span

    def test_str(self):
        """Test half-open range formatting."""
        assert str(TextSpan(1, 4)) == "[1, 4)"


class TestEdit:
    """Tests for the Edit model."""

    def test_create_generates_id(self):
        """Test create() fills in a unique id."""
        first = Edit.create(0, 3, "A")
        second = Edit.create(0, 3, "A")

        assert first.id
        assert first.id != second.id
        assert first.span == TextSpan(0, 3)
        assert (first.start, first.end) == (0, 3)

    def test_create_with_id(self):
        """Test create() keeps an explicit id."""
        assert Edit.create(0, 3, "A", id="e1").id == "e1"

    def test_id_is_string(self):
        """Test numeric ids are converted to strings."""
        assert Edit(id=7, span=TextSpan(0, 1)).id == "7"

    def test_span_must_be_text_span(self):
        """Test a raw tuple is not accepted as a span."""
        with pytest.raises(TypeError, match="TextSpan"):
            Edit(id="e1", span=(0, 3))

    def test_blank_note_becomes_none(self):
        """Test empty and whitespace-only notes are dropped."""
        assert Edit.create(0, 1, "x", note="").note is None
        assert Edit.create(0, 1, "x", note="   ").note is None

    def test_immutable(self):
        """Test edits cannot be mutated in place."""
        edit = Edit.create(0, 3, "A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            edit.replacement = "B"

    def test_with_changes_keeps_identity(self):
        """Test updating an edit keeps its id and span."""
        edit = Edit.create(4, 9, "slow", id="e1", note="tone", author="ms.rivera")
        updated = edit.with_changes(replacement="lazy")

        assert updated.id == "e1"
        assert updated.span == edit.span
        assert updated.replacement == "lazy"
        assert updated.note == "tone"
        assert edit.replacement == "slow"

    def test_with_changes_clears_note(self):
        """Test passing an empty note clears it."""
        edit = Edit.create(4, 9, "slow", note="tone")
        assert edit.with_changes(note="").note is None

    def test_from_dict(self):
        """Test building an edit from a mapping."""
        edit = Edit.from_dict(
            {"id": "e1", "start": 4, "end": 9, "replacement": "slow", "note": "n", "author": "t"}
        )

        assert edit == Edit(id="e1", span=TextSpan(4, 9), replacement="slow", note="n", author="t")

    def test_from_dict_stored_column_names(self):
        """Test building an edit from a stored review record."""
        edit = Edit.from_dict(
            {
                "id": "e1",
                "start_index": 4,
                "end_index": 9,
                "new_text": "slow",
                "comment": None,
                "created_by": "teacher-1",
                "created_at": "2024-03-01T10:00:00Z",
            }
        )

        assert edit.span == TextSpan(4, 9)
        assert edit.replacement == "slow"
        assert edit.note is None
        assert edit.author == "teacher-1"
        assert edit.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_from_dict_nested_span(self):
        """Test a nested span mapping is accepted."""
        edit = Edit.from_dict({"id": "e1", "span": {"start": 1, "end": 2}, "replacement": "x"})
        assert edit.span == TextSpan(1, 2)

    def test_from_dict_missing_offsets(self):
        """Test a record without offsets is rejected."""
        with pytest.raises(InvalidSpanError):
            Edit.from_dict({"id": "e1", "replacement": "x"})

    def test_from_dict_coerces_strings(self):
        """Test non-string values from loose formats become strings."""
        edit = Edit.from_dict({"id": 3, "start": 0, "end": 1, "replacement": 42})
        assert edit.id == "3"
        assert edit.replacement == "42"

    def test_to_dict(self):
        """Test serialization omits empty optional fields."""
        assert Edit.create(0, 3, "A", id="e1").to_dict() == {
            "id": "e1",
            "start": 0,
            "end": 3,
            "replacement": "A",
        }


class TestCorrection:
    """Tests for the display-only Correction model."""

    def test_from_text_caches_snippet(self):
        """Test the original snippet is captured."""
        correction = Correction.from_text("I has a cat", 2, 5, "have", id="c1")

        assert correction.original_text == "has"
        assert correction.replacement == "have"
        assert isinstance(correction, Edit)

    def test_from_edit(self):
        """Test converting an edit to a correction."""
        edit = Edit.create(2, 5, "have", id="c1", note="agreement")
        correction = Correction.from_edit(edit, "I has a cat")

        assert correction.id == "c1"
        assert correction.note == "agreement"
        assert correction.original_text == "has"

    def test_from_edit_passes_corrections_through(self):
        """Test an existing correction is returned as-is."""
        correction = Correction.from_text("I has a cat", 2, 5, "have")
        assert Correction.from_edit(correction, "something else") is correction

    def test_is_stale(self):
        """Test stale detection against a changed text."""
        correction = Correction.from_text("I has a cat", 2, 5, "have")

        assert not correction.is_stale("I has a cat")
        assert correction.is_stale("I had a cat")
        assert correction.is_stale("I h")

    def test_with_changes_keeps_snippet(self):
        """Test updating a correction keeps the cached snippet."""
        correction = Correction.from_text("I has a cat", 2, 5, "have")
        updated = correction.with_changes(replacement="had")

        assert isinstance(updated, Correction)
        assert updated.original_text == "has"

    def test_dict_round_trip(self):
        """Test correction serialization keeps the snippet."""
        correction = Correction.from_text("I has a cat", 2, 5, "have", id="c1", note="n")
        assert Correction.from_dict(correction.to_dict()) == correction
