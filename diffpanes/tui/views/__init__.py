"""TUI views for the two-pane comparison."""

from diffpanes.tui.views.comparison_screen import ComparisonScreen

__all__ = ["ComparisonScreen"]
