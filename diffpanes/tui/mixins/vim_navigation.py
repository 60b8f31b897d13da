"""
Vim Navigation Mixin for vim-style scrolling.

Provides j/k/g/G keys that scroll the focused content pane.

Note: h/l bindings for pane switching are defined in DualPaneMixin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import ScrollableContainer

if TYPE_CHECKING:
    from textual.widget import Widget


class VimNavigationMixin:
    """Mixin providing vim-style scrolling keybindings.

    - j/k: Scroll down/up one line
    - g: Jump to the top
    - G: Jump to the bottom
    """

    def _get_navigable_widget(self) -> Widget | None:
        """Get the focused widget if it can scroll, otherwise None."""
        focused = self.focused
        if isinstance(focused, ScrollableContainer):
            return focused
        return None

    def action_vim_down(self) -> None:
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_down(animate=False)

    def action_vim_up(self) -> None:
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_up(animate=False)

    def action_vim_top(self) -> None:
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_home(animate=False)

    def action_vim_bottom(self) -> None:
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_end(animate=False)
