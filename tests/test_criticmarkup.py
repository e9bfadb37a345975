"""Tests for CriticMarkup export of diffs and edits."""

from prose_redline import Edit, compute_diff
from prose_redline.criticmarkup import (
    diff_to_criticmarkup,
    edits_to_criticmarkup,
    strip_criticmarkup,
)
from prose_redline.edits import apply_edits

TEXT = "The quick brown fox"


class TestDiffToCriticMarkup:
    """Tests for diff_to_criticmarkup()."""

    def test_substitution(self):
        """Test a removal followed by an addition becomes a substitution."""
        segments = compute_diff("The quick brown fox", "The quick red fox")
        assert diff_to_criticmarkup(segments) == "The quick {~~brown~>red~~} fox"

    def test_insertion(self):
        """Test an added run becomes an insertion."""
        segments = compute_diff("The fox", "The quick fox")
        assert diff_to_criticmarkup(segments) == "The {++quick ++}fox"

    def test_deletion(self):
        """Test a removed run becomes a deletion."""
        segments = compute_diff("The quick fox", "The fox")
        assert diff_to_criticmarkup(segments) == "The {--quick --}fox"

    def test_no_changes(self):
        """Test identical texts are returned as-is."""
        assert diff_to_criticmarkup(compute_diff(TEXT, TEXT)) == TEXT

    def test_empty(self):
        """Test no segments give an empty string."""
        assert diff_to_criticmarkup([]) == ""


class TestEditsToCriticMarkup:
    """Tests for edits_to_criticmarkup()."""

    def test_substitution_with_note(self):
        """Test a replacement with a note adds a trailing comment."""
        edits = [Edit.create(2, 5, "have", note="Agreement")]
        assert edits_to_criticmarkup("I has a cat", edits) == "I {~~has~>have~~}{>>Agreement<<} a cat"

    def test_insertion_and_deletion(self):
        """Test zero-width and empty-replacement edits."""
        edits = [Edit.create(4, 4, "very "), Edit.create(15, 19, "")]
        assert edits_to_criticmarkup(TEXT, edits) == "The {++very ++}quick brown{-- fox--}"

    def test_insertion_with_note(self):
        """Test a note on an insertion follows it."""
        edits = [Edit.create(19, 19, ".", note="End the sentence")]
        assert edits_to_criticmarkup(TEXT, edits) == TEXT + "{++.++}{>>End the sentence<<}"

    def test_no_edits(self):
        """Test the text is returned unchanged."""
        assert edits_to_criticmarkup(TEXT, []) == TEXT


class TestStripCriticMarkup:
    """Tests for strip_criticmarkup()."""

    def test_resolves_all_operations(self):
        """Test every operation is resolved to its accepted text."""
        text = "A {++new++} {--old--}{~~bad~>good~~} day{>>nice<<}"
        assert strip_criticmarkup(text) == "A new good day"

    def test_matches_applied_edits(self):
        """Test stripping exported edits gives the same text as applying them."""
        edits = [
            Edit.create(0, 3, "A", note="Article"),
            Edit.create(10, 10, "dark "),
            Edit.create(15, 19, ""),
        ]

        assert strip_criticmarkup(edits_to_criticmarkup(TEXT, edits)) == apply_edits(TEXT, edits)

    def test_matches_diff(self):
        """Test stripping an exported diff gives the revised text."""
        modified = "The slow brown dog jumped"
        segments = compute_diff(TEXT, modified)

        assert strip_criticmarkup(diff_to_criticmarkup(segments)) == modified

    def test_multiline(self):
        """Test markup spanning lines is resolved."""
        assert strip_criticmarkup("a{++b\nc++}d") == "ab\ncd"
