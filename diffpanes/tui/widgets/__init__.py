"""TUI widgets for the two-pane comparison."""

from diffpanes.tui.widgets.content_pane import DIFF_STYLES, ContentPane
from diffpanes.tui.widgets.control_panel import ControlPanel

__all__ = [
    "ContentPane",
    "ControlPanel",
    "DIFF_STYLES",
]
