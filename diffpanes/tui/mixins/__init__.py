"""Mixins for the TUI application."""

from diffpanes.tui.mixins.command_redirect import CommandRedirectMixin
from diffpanes.tui.mixins.dual_pane import DualPaneMixin
from diffpanes.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "CommandRedirectMixin",
    "DualPaneMixin",
    "VimNavigationMixin",
]
