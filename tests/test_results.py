"""Tests for diff statistics."""

from prose_redline import compute_diff
from prose_redline.results import DiffStats, diff_stats


class TestDiffStats:
    """Tests for DiffStats and diff_stats()."""

    def test_substitution(self):
        """Test counts for a single changed word."""
        stats = diff_stats(compute_diff("The quick brown fox", "The quick red fox"))

        assert stats.to_dict() == {
            "insertions": 1,
            "deletions": 1,
            "words_added": 1,
            "words_removed": 1,
            "unchanged_words": 3,
        }
        assert stats.total == 2
        assert stats.has_changes

    def test_str(self):
        """Test the human-readable summary."""
        stats = diff_stats(compute_diff("The quick brown fox", "The quick red fox"))
        assert str(stats) == "1 insertion (1 word), 1 deletion (1 word)"

    def test_str_plural(self):
        """Test plural forms in the summary."""
        stats = DiffStats(insertions=2, words_added=5)
        assert str(stats) == "2 insertions (5 words)"

    def test_no_changes(self):
        """Test identical texts have no changes."""
        stats = diff_stats(compute_diff("same text", "same text"))

        assert not stats.has_changes
        assert stats.unchanged_words == 2
        assert str(stats) == "No changes"

    def test_empty(self):
        """Test an empty segment list."""
        assert diff_stats([]) == DiffStats()
