"""
Textual implementation of the host operations used by the dispatcher.

Views are widgets on one ComparisonScreen. Focus changes go through
Screen.set_focus, which updates Screen.focused immediately, so a redirected
command can switch to the control panel and back inside a single action
handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diffpanes.core.host import DisplayMode

if TYPE_CHECKING:
    from textual.screen import Screen
    from textual.widget import Widget

    from diffpanes.tui.widgets.control_panel import ControlPanel


class TextualHost:
    """ComparisonHost backed by a Textual screen.

    Args:
        screen: The screen holding the content panes and the control panel.
        display_mode: Layout the screen was composed with. Fixed for the
            lifetime of the session.
    """

    def __init__(self, screen: Screen, display_mode: DisplayMode) -> None:
        self._screen = screen
        self._display_mode = display_mode

    def execute_command(self, context: ControlPanel, command_id: str) -> None:
        context.execute(command_id)

    def get_active_view(self) -> Widget | None:
        return self._screen.focused

    def set_active_view(self, view: Widget) -> None:
        if not view.display:
            view.display = True
        self._screen.set_focus(view, scroll_visible=False)

    def close_view(self, view: Widget) -> None:
        view.display = False

    def get_display_mode(self) -> DisplayMode:
        return self._display_mode

    def raise_window_for(self, view: Widget) -> None:
        """Refocus view after a command ran against the control panel's frame."""
        self._screen.set_focus(view)
        view.scroll_visible(animate=False)
