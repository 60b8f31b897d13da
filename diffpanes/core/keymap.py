"""
Keys redirected from the content panes to the coordinator.

Pure data: each entry maps a key to a coordinator command id. Content panes
turn this table into Textual bindings when redirect mode is on.
"""

from __future__ import annotations

from typing import NamedTuple


class RedirectKey(NamedTuple):
    key: str
    command_id: str
    description: str
    show: bool = True


REDIRECT_KEYMAP: list[RedirectKey] = [
    RedirectKey("n", "next_difference", "Next"),
    RedirectKey("space", "next_difference", "Next", show=False),
    RedirectKey("p", "previous_difference", "Prev"),
    RedirectKey("less_than_sign", "first_difference", "First", show=False),
    RedirectKey("greater_than_sign", "last_difference", "Last", show=False),
    RedirectKey("a", "copy_a_to_b", "A→B"),
    RedirectKey("b", "copy_b_to_a", "B→A"),
    RedirectKey("r", "restore_difference", "Restore"),
    RedirectKey("exclamation_mark", "recompute_differences", "Recompute", show=False),
    RedirectKey("vertical_line", "toggle_split", "Split"),
    RedirectKey("q", "quit", "Quit"),
]


def redirected_commands() -> list[str]:
    """Return the distinct command ids in REDIRECT_KEYMAP, in table order."""
    seen: list[str] = []
    for entry in REDIRECT_KEYMAP:
        if entry.command_id not in seen:
            seen.append(entry.command_id)
    return seen
