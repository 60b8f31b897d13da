"""
Difference calculation for two line sequences.

This module turns two lists of lines into an ordered list of hunks, the
regions the coordinator steps through and merges.

Diff Types:
    - changed: lines differ on both sides
    - removed: lines exist only in A
    - added: lines exist only in B
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Sequence

# difflib opcode tag -> diff type
_TAG_TO_DIFF_TYPE = {
    "replace": "changed",
    "delete": "removed",
    "insert": "added",
}


@dataclass
class Hunk:
    """One difference region, as half-open line ranges on both sides."""

    diff_type: str
    a_start: int
    a_end: int
    b_start: int
    b_end: int
    merged: str | None = None
    """Side the hunk was copied to ('a' or 'b'), None if untouched."""

    @property
    def a_length(self) -> int:
        return self.a_end - self.a_start

    @property
    def b_length(self) -> int:
        return self.b_end - self.b_start

    def shift(self, side: str, delta: int) -> None:
        """Move this hunk's range on one side by delta lines."""
        if side == "a":
            self.a_start += delta
            self.a_end += delta
        else:
            self.b_start += delta
            self.b_end += delta


def compute_hunks(a_lines: Sequence[str], b_lines: Sequence[str]) -> list[Hunk]:
    """
    Calculate the difference regions between two line sequences.

    Equal runs are skipped; every other difflib opcode becomes one Hunk.

    Args:
        a_lines: Lines of the left-hand text.
        b_lines: Lines of the right-hand text.

    Returns:
        Hunks in document order.

    Examples:
        >>> hunks = compute_hunks(["x", "y"], ["x", "z"])
        >>> hunks[0].diff_type
        'changed'
    """
    matcher = difflib.SequenceMatcher(None, list(a_lines), list(b_lines), autojunk=False)
    hunks: list[Hunk] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        hunks.append(Hunk(_TAG_TO_DIFF_TYPE[tag], i1, i2, j1, j2))
    return hunks


def get_line_diff_classes(
    hunks: Sequence[Hunk], side: str, current: int | None = None
) -> dict[int, str]:
    """
    Map line numbers on one side to the CSS class used to highlight them.

    Args:
        hunks: Hunks from compute_hunks().
        side: 'a' or 'b'.
        current: Index of the current hunk, highlighted as 'diff-current'.

    Returns:
        A dictionary of line number -> class name such as "diff-changed".
    """
    classes: dict[int, str] = {}
    for index, hunk in enumerate(hunks):
        start, end = (hunk.a_start, hunk.a_end) if side == "a" else (hunk.b_start, hunk.b_end)
        css_class = "diff-current" if index == current else f"diff-{hunk.diff_type}"
        for line in range(start, end):
            classes[line] = css_class
    return classes


def get_diff_summary(hunks: Sequence[Hunk]) -> dict[str, int]:
    """
    Get a summary of hunk counts by type.

    Examples:
        >>> get_diff_summary(hunks)
        {"changed": 2, "removed": 1, "added": 0, "merged": 1}
    """
    summary = {
        "changed": 0,
        "removed": 0,
        "added": 0,
        "merged": 0,
    }

    for hunk in hunks:
        summary[hunk.diff_type] += 1
        if hunk.merged:
            summary["merged"] += 1

    return summary
