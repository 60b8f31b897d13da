"""
Host interface used by the command-redirection layer.

The core never touches widgets directly. Everything it needs from the
comparison tool goes through the six operations of ComparisonHost, so the
same dispatcher drives the Textual application and the in-memory host used
by the tests.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class DisplayMode(Enum):
    """Where the coordinator's view lives relative to the content panes."""

    MULTI_WINDOW = "multi"
    SINGLE_WINDOW = "single"


class ComparisonHost(Protocol):
    """Operations the comparison tool exposes to the dispatcher."""

    def execute_command(self, context: Any, command_id: str) -> None:
        """Run command_id with context as the active command target."""
        ...

    def get_active_view(self) -> Any:
        """Return the view that currently has focus."""
        ...

    def set_active_view(self, view: Any) -> None:
        """Make view the active view, showing it first if it is hidden."""
        ...

    def close_view(self, view: Any) -> None:
        """Remove view from the visible layout."""
        ...

    def get_display_mode(self) -> DisplayMode:
        """Return the display mode of the current session."""
        ...

    def raise_window_for(self, view: Any) -> None:
        """Bring the window holding view to the front and refocus it."""
        ...
