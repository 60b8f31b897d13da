"""
Main Textual application for diffpanes.

This is the entry point for the TUI that compares two text files side by
side. All comparison commands belong to the control panel, but they can be
issued from either content pane.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding

from diffpanes.config import Settings, settings as default_settings
from diffpanes.core.coordinator import Coordinator
from diffpanes.core.host import DisplayMode
from diffpanes.logging_config import configure_logging
from diffpanes.tui.data_loader import load_lines
from diffpanes.tui.views.comparison_screen import ComparisonScreen

logger = logging.getLogger(__name__)


class DiffPanesApp(App):
    """A Textual app comparing two text files."""

    TITLE = "diffpanes"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    .panel-header {
        dock: top;
        height: 1;
        background: $surface;
        text-align: center;
        text-style: bold;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("P", "toggle_purge", "Purge", show=True),
        Binding("ctrl+q", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        path_a: str,
        path_b: str,
        settings: Settings | None = None,
    ):
        """Initialize the app with the two files to compare.

        Args:
            path_a: Path to the left-hand file.
            path_b: Path to the right-hand file.
            settings: Settings to use. Defaults to the process-wide settings.
        """
        super().__init__()
        self._path_a = path_a
        self._path_b = path_b
        self.diff_settings = settings if settings is not None else default_settings
        self.coordinator: Coordinator | None = None

    def on_mount(self) -> None:
        """Load both files and push the comparison screen."""
        try:
            a_lines = load_lines(self._path_a)
            b_lines = load_lines(self._path_b)
        except (OSError, ValueError) as e:
            logger.error("Could not load files: %s", e)
            self.exit(message=f"Error loading file: {e}")
            return

        a_label = os.path.basename(self._path_a)
        b_label = os.path.basename(self._path_b)
        self.title = f"diffpanes - {a_label} ↔ {b_label}"

        self.coordinator = Coordinator(a_lines, b_lines, a_label=a_label, b_label=b_label)
        # The layout is fixed here; later purge changes only affect new sessions.
        display_mode = self.diff_settings.layout_strategy
        logger.info(
            "Comparing %s and %s, %d differences, %s layout",
            a_label,
            b_label,
            len(self.coordinator.hunks),
            display_mode.value,
        )
        self.push_screen(ComparisonScreen(self.coordinator, display_mode, self.diff_settings))

    def action_toggle_purge(self) -> None:
        """Toggle whether the control panel is removed after each command."""
        enabled = self.diff_settings.toggle_purge_policy()
        status = "enabled" if enabled else "disabled"
        self.notify(f"Purge control panel {status}")
        if isinstance(self.screen, ComparisonScreen):
            self.screen.refresh_control_panel()


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare two text files side by side in a terminal UI. "
        "Comparison commands can be issued from either pane."
    )
    parser.add_argument("path_a", help="Left-hand file")
    parser.add_argument("path_b", help="Right-hand file")
    parser.add_argument(
        "--purge",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Remove the control panel from the layout after every command "
        "(also selects the single-window layout)",
    )
    parser.add_argument(
        "--layout",
        choices=[mode.value for mode in DisplayMode],
        default=None,
        help="Control panel layout: its own frame (multi) or a row below the panes (single)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    for path in (args.path_a, args.path_b):
        if not os.path.isfile(path):
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)
        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    default_settings.log_level = args.log_level
    default_settings.log_file = args.log_file
    if args.purge is not None:
        default_settings.set_purge_policy(args.purge)
    if args.layout is not None:
        default_settings.layout_strategy = DisplayMode(args.layout)

    configure_logging(default_settings.log_level, default_settings.log_file)

    app = DiffPanesApp(args.path_a, args.path_b)
    app.run()


if __name__ == "__main__":
    main()
