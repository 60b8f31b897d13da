"""
Dual Pane Mixin for left/right pane switching.

Provides consistent pane switching behavior on the comparison screen:
- action_switch_panel(): Toggle between left and right panes
- action_vim_left(): Switch focus to the left pane (vim h key)
- action_vim_right(): Switch focus to the right pane (vim l key)
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    # DualPaneMixin MUST come before VimNavigationMixin in the MRO.
    class MyDualPaneScreen(DualPaneMixin, VimNavigationMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for screens with left/right pane switching.

    Subclasses must implement _focus_active_widget() to move focus into
    the active panel.

    Class Attributes:
        DUAL_PANE_BINDINGS: Vim navigation plus pane switching. The
            comparison commands themselves are bound on the panes.
    """

    DUAL_PANE_BINDINGS = [
        # Vim navigation (j/k/g/G from VimNavigationMixin)
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
        # Pane switching (h/l vim-style + tab)
        Binding("h", "vim_left", "Left Pane", show=False),
        Binding("l", "vim_right", "Right Pane", show=False),
        Binding("tab", "switch_panel", "Switch Pane", show=True),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    def action_switch_panel(self) -> None:
        """Toggle between left and right panes."""
        self._set_active_panel("right" if self._active_panel == "left" else "left")

    def action_vim_left(self) -> None:
        """Switch to the left pane (vim h key)."""
        if self._active_panel != "left":
            self._set_active_panel("left")

    def action_vim_right(self) -> None:
        """Switch to the right pane (vim l key)."""
        if self._active_panel != "right":
            self._set_active_panel("right")

    def _set_active_panel(self, side: str) -> None:
        self._active_panel = side
        self._update_panel_styles()
        self._focus_active_widget()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on #left-panel and #right-panel.

        Does nothing before the panels are composed.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [
            (left, self._active_panel == "left"),
            (right, self._active_panel == "right"),
        ]:
            panel.set_class(is_active, "active")
            panel.set_class(not is_active, "inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel.

        Subclasses must implement this method.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )
