"""
Content pane showing one side of the comparison.

The pane carries the per-view session state (a weak reference to the
coordinator) and the redirect key overlay. While redirect_mode is off the
overlay bindings are disabled and the pane behaves like a plain scroll
container.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Static

from diffpanes.core.keymap import REDIRECT_KEYMAP
from diffpanes.core.session import CoordinatorBindingMixin

# Diff class -> rich style for the line background
DIFF_STYLES = {
    "diff-changed": "on #4d4000",
    "diff-removed": "on #4d1a1a",
    "diff-added": "on #1a4d1a",
    "diff-current": "bold on #264f78",
}


class ContentPane(CoordinatorBindingMixin, VerticalScroll):
    """Scrollable view of one compared file."""

    can_focus = True

    BINDINGS = [
        Binding(entry.key, f"redirect('{entry.command_id}')", entry.description, show=entry.show)
        for entry in REDIRECT_KEYMAP
    ]

    class Activated(Message):
        """Posted when the pane receives focus."""

        def __init__(self, pane: ContentPane) -> None:
            self.pane = pane
            super().__init__()

    def __init__(
        self,
        side: str,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the pane.

        Args:
            side: 'a' or 'b'.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes for the widget.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.side = side

    def compose(self) -> ComposeResult:
        yield Static(classes="pane-text")

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action == "redirect":
            return self.redirect_mode
        return True

    def action_redirect(self, command_id: str) -> None:
        """Run a coordinator command on behalf of this pane."""
        self.screen.run_redirected(command_id, self)

    def on_focus(self) -> None:
        self.post_message(self.Activated(self))

    def show_lines(
        self,
        lines: Sequence[str],
        line_classes: dict[int, str],
        current_line: int | None = None,
    ) -> None:
        """Render lines with diff highlighting.

        Args:
            lines: The file's lines.
            line_classes: Line number -> diff class from get_line_diff_classes().
            current_line: First line of the current difference to scroll to.
        """
        text = Text(no_wrap=True, end="")
        width = len(str(len(lines)))
        for number, line in enumerate(lines):
            style = DIFF_STYLES.get(line_classes.get(number, ""), "")
            text.append(f"{number + 1:>{width}} ", style="dim")
            text.append(f"{line}\n", style=style)
        self.query_one(".pane-text", Static).update(text)

        if current_line is not None:
            self.scroll_to(y=max(current_line - 2, 0), animate=False)
