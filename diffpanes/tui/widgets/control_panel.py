"""
Control panel: the coordinator's view.

Shows where the session is in the difference list and runs coordinator
commands. Content panes reach it through the dispatcher; it can also be
focused directly, in which case its own bindings run the same commands.
"""

from __future__ import annotations

from rich.markup import escape
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from diffpanes.config import Settings
from diffpanes.core.coordinator import Coordinator
from diffpanes.core.keymap import REDIRECT_KEYMAP


class ControlPanel(Static):
    """Status display and command target for one comparison session."""

    can_focus = True

    BINDINGS = [
        Binding(entry.key, f"run('{entry.command_id}')", entry.description, show=entry.show)
        for entry in REDIRECT_KEYMAP
    ]

    class CommandExecuted(Message):
        """Posted after a coordinator command has run."""

        def __init__(self, command_id: str) -> None:
            self.command_id = command_id
            super().__init__()

    def __init__(
        self,
        coordinator: Coordinator,
        settings: Settings,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.coordinator = coordinator
        self._settings = settings
        self.executed: list[str] = []
        """Command ids run through this panel, oldest first."""

    def on_mount(self) -> None:
        self.refresh_status()

    def execute(self, command_id: str) -> None:
        """Run a coordinator command with this panel as its context."""
        self.coordinator.run(command_id)
        self.executed.append(command_id)
        self.refresh_status()
        self.post_message(self.CommandExecuted(command_id))

    def action_run(self, command_id: str) -> None:
        self.execute(command_id)

    def refresh_status(self) -> None:
        coordinator = self.coordinator
        purge = "on" if self._settings.purge_control_view else "off"
        split = "stacked" if coordinator.split_vertical else "side by side"
        lines = [
            f"[b]{escape(coordinator.a_label)}[/b] ↔ [b]{escape(coordinator.b_label)}[/b]",
            coordinator.status_line(),
            f"Split: {split}  |  Purge control panel: {purge}",
        ]
        if coordinator.message:
            lines.append(f"[i]{escape(coordinator.message)}[/i]")
        self.update("\n".join(lines))
