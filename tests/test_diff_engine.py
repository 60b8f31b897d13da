"""Tests for hunk calculation and diff summaries."""

from __future__ import annotations

from diffpanes.core.diff_engine import (
    Hunk,
    compute_hunks,
    get_diff_summary,
    get_line_diff_classes,
)


class TestComputeHunks:
    """Tests for compute_hunks()."""

    def test_identical(self):
        assert compute_hunks(["a", "b"], ["a", "b"]) == []

    def test_changed(self):
        hunks = compute_hunks(["a", "b", "c"], ["a", "B", "c"])
        assert hunks == [Hunk("changed", 1, 2, 1, 2)]

    def test_removed(self):
        hunks = compute_hunks(["a", "b", "c"], ["a", "c"])
        assert hunks == [Hunk("removed", 1, 2, 1, 1)]

    def test_added(self):
        hunks = compute_hunks(["a", "c"], ["a", "b", "c"])
        assert hunks == [Hunk("added", 1, 1, 1, 2)]

    def test_empty_sides(self):
        assert compute_hunks([], ["x"]) == [Hunk("added", 0, 0, 0, 1)]
        assert compute_hunks(["x"], []) == [Hunk("removed", 0, 1, 0, 0)]

    def test_document_order(self):
        hunks = compute_hunks(["1", "2", "3", "4"], ["1", "x", "3", "y"])
        assert [h.a_start for h in hunks] == [1, 3]


class TestHunk:
    """Tests for Hunk helpers."""

    def test_lengths(self):
        hunk = Hunk("changed", 2, 5, 2, 3)
        assert hunk.a_length == 3
        assert hunk.b_length == 1

    def test_shift_one_side(self):
        hunk = Hunk("changed", 2, 5, 2, 3)
        hunk.shift("b", 4)
        assert (hunk.a_start, hunk.a_end, hunk.b_start, hunk.b_end) == (2, 5, 6, 7)


class TestLineClasses:
    """Tests for get_line_diff_classes()."""

    def test_classes_per_side(self):
        hunks = compute_hunks(["a", "b", "c"], ["a", "c", "d"])
        assert get_line_diff_classes(hunks, "a") == {1: "diff-removed"}
        assert get_line_diff_classes(hunks, "b") == {2: "diff-added"}

    def test_current_hunk(self):
        hunks = compute_hunks(["a", "b"], ["A", "b", "c"])
        classes = get_line_diff_classes(hunks, "b", current=1)
        assert classes == {0: "diff-changed", 2: "diff-current"}


class TestDiffSummary:
    """Tests for get_diff_summary()."""

    def test_counts(self):
        hunks = [
            Hunk("changed", 0, 1, 0, 1),
            Hunk("changed", 2, 3, 2, 3, merged="b"),
            Hunk("removed", 4, 5, 4, 4),
        ]
        assert get_diff_summary(hunks) == {
            "changed": 2,
            "removed": 1,
            "added": 0,
            "merged": 1,
        }

    def test_empty(self):
        assert get_diff_summary([]) == {"changed": 0, "removed": 0, "added": 0, "merged": 0}
