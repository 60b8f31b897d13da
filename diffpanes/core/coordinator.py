"""
Comparison coordinator.

The Coordinator owns everything that is session-wide: the two texts, the
hunks between them, the current difference, merge bookkeeping, the split
orientation and the closed flag. All comparison commands live here and are
looked up by id through COMMANDS, which is what the key table and the
dispatcher refer to.

The coordinator's view (control_view) is assigned by the host once the view
exists. Content views only ever hold a weak reference to the coordinator.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from diffpanes.core.diff_engine import Hunk, compute_hunks, get_diff_summary
from diffpanes.errors import UnknownCommandError

logger = logging.getLogger(__name__)


class Coordinator:
    """Session-wide comparison state and commands."""

    COMMANDS: dict[str, str] = {
        "next_difference": "Next difference",
        "previous_difference": "Previous difference",
        "first_difference": "First difference",
        "last_difference": "Last difference",
        "copy_a_to_b": "Copy A to B",
        "copy_b_to_a": "Copy B to A",
        "restore_difference": "Restore difference",
        "recompute_differences": "Recompute differences",
        "toggle_split": "Toggle split",
        "quit": "Quit",
    }
    """Command id -> human readable description."""

    def __init__(
        self,
        a_lines: list[str],
        b_lines: list[str],
        *,
        a_label: str = "A",
        b_label: str = "B",
    ) -> None:
        self.a_lines = list(a_lines)
        self.b_lines = list(b_lines)
        self.a_label = a_label
        self.b_label = b_label
        self.hunks: list[Hunk] = compute_hunks(self.a_lines, self.b_lines)
        self.current_index: int = -1
        self.split_vertical: bool = False
        self.message: str = ""
        self.control_view: Any = None
        self._closed: bool = False
        # hunk index -> (side, lines replaced by the merge)
        self._saved: dict[int, tuple[str, list[str]]] = {}
        self._listeners: list[Callable[[Coordinator], None]] = []

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def current_hunk(self) -> Hunk | None:
        if 0 <= self.current_index < len(self.hunks):
            return self.hunks[self.current_index]
        return None

    def add_listener(self, callback: Callable[[Coordinator], None]) -> None:
        """Register a callback run after every command."""
        self._listeners.append(callback)

    def run(self, command_id: str) -> None:
        """Run a command by id and notify listeners.

        Raises:
            UnknownCommandError: If command_id is not in COMMANDS.
        """
        if command_id not in self.COMMANDS:
            raise UnknownCommandError(command_id)
        self.message = ""
        getattr(self, command_id)()
        logger.debug("Ran %s, current difference %d", command_id, self.current_index)
        for callback in list(self._listeners):
            callback(self)

    def status_line(self) -> str:
        """Summarize the session for the control panel."""
        total = len(self.hunks)
        if total == 0:
            position = "No differences"
        elif self.current_hunk is None:
            position = f"{total} differences"
        else:
            position = f"Difference {self.current_index + 1} of {total}"
        summary = get_diff_summary(self.hunks)
        return (
            f"{position}  |  {summary['changed']} changed, {summary['removed']} removed, "
            f"{summary['added']} added, {summary['merged']} merged"
        )

    # Navigation

    def next_difference(self) -> None:
        if not self.hunks:
            self.message = "No differences"
        elif self.current_index >= len(self.hunks) - 1:
            self.message = "At end of the difference list"
        else:
            self.current_index += 1

    def previous_difference(self) -> None:
        if not self.hunks:
            self.message = "No differences"
        elif self.current_index <= 0:
            self.message = "At beginning of the difference list"
        else:
            self.current_index -= 1

    def first_difference(self) -> None:
        if self.hunks:
            self.current_index = 0
        else:
            self.message = "No differences"

    def last_difference(self) -> None:
        if self.hunks:
            self.current_index = len(self.hunks) - 1
        else:
            self.message = "No differences"

    # Merging

    def copy_a_to_b(self) -> None:
        self._copy("a", "b")

    def copy_b_to_a(self) -> None:
        self._copy("b", "a")

    def restore_difference(self) -> None:
        hunk = self.current_hunk
        if hunk is None:
            self.message = "No current difference"
            return
        saved = self._saved.pop(self.current_index, None)
        if saved is None:
            self.message = "Difference has not been merged"
            return
        side, lines = saved
        self._replace(side, hunk, lines)
        hunk.merged = None

    def _copy(self, source: str, target: str) -> None:
        hunk = self.current_hunk
        if hunk is None:
            self.message = "No current difference"
            return
        if self.current_index in self._saved:
            # Undo the earlier merge first so restore always returns the original.
            self.restore_difference()
        source_lines = self._lines(source)
        start, end = self._range(source, hunk)
        self._saved[self.current_index] = (target, self._slice(target, hunk))
        self._replace(target, hunk, source_lines[start:end])
        hunk.merged = target

    def _lines(self, side: str) -> list[str]:
        return self.a_lines if side == "a" else self.b_lines

    @staticmethod
    def _range(side: str, hunk: Hunk) -> tuple[int, int]:
        return (hunk.a_start, hunk.a_end) if side == "a" else (hunk.b_start, hunk.b_end)

    def _slice(self, side: str, hunk: Hunk) -> list[str]:
        start, end = self._range(side, hunk)
        return self._lines(side)[start:end]

    def _replace(self, side: str, hunk: Hunk, new_lines: list[str]) -> None:
        """Replace hunk's lines on one side and shift later hunks."""
        start, end = self._range(side, hunk)
        self._lines(side)[start:end] = new_lines
        delta = len(new_lines) - (end - start)
        if side == "a":
            hunk.a_end += delta
        else:
            hunk.b_end += delta
        index = self.hunks.index(hunk)
        for later in self.hunks[index + 1 :]:
            later.shift(side, delta)

    # Session

    def recompute_differences(self) -> None:
        self.hunks = compute_hunks(self.a_lines, self.b_lines)
        self._saved.clear()
        self.current_index = min(self.current_index, len(self.hunks) - 1)
        self.message = f"{len(self.hunks)} differences"

    def toggle_split(self) -> None:
        self.split_vertical = not self.split_vertical

    def quit(self) -> None:
        self._closed = True
        self.message = "Comparison session closed"
        logger.info("Comparison of %s and %s closed", self.a_label, self.b_label)
