"""
Comparison Screen for side-by-side text comparison.

Displays file A and file B in two content panes plus the control panel.
Keys pressed in either pane are redirected to the control panel through a
CommandDispatcher, so the control panel never needs to be focused by hand.

Layouts:
    - single window: the control panel is an ordinary row below the panes
    - multi window: the control panel is docked in its own frame
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from diffpanes.config import Settings
from diffpanes.core.coordinator import Coordinator
from diffpanes.core.diff_engine import get_line_diff_classes
from diffpanes.core.host import DisplayMode
from diffpanes.core.session import ComparisonSession, start_session
from diffpanes.errors import InitializationOrderError
from diffpanes.tui.host import TextualHost
from diffpanes.tui.mixins import CommandRedirectMixin, DualPaneMixin, VimNavigationMixin
from diffpanes.tui.widgets import ContentPane, ControlPanel

logger = logging.getLogger(__name__)


class ComparisonScreen(CommandRedirectMixin, DualPaneMixin, VimNavigationMixin, Screen):
    """Side-by-side comparison view for one coordinator."""

    CSS = """
    ComparisonScreen {
        layout: vertical;
    }

    #comparison-container {
        height: 1fr;
        layout: horizontal;
    }

    #comparison-container.stacked {
        layout: vertical;
    }

    #left-panel, #right-panel {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    #left-panel.active, #right-panel.active {
        border: solid $secondary;
    }

    #comparison-container.stacked #left-panel,
    #comparison-container.stacked #right-panel {
        width: 100%;
    }

    ContentPane {
        height: 1fr;
    }

    ControlPanel {
        height: auto;
        border: solid $accent;
        padding: 0 1;
    }

    ControlPanel.frame {
        dock: right;
        width: 40;
        height: 100%;
        border: double $accent;
    }

    ControlPanel:focus {
        border: solid $warning;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS

    def __init__(
        self,
        coordinator: Coordinator,
        display_mode: DisplayMode,
        settings: Settings,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ComparisonScreen.

        Args:
            coordinator: Coordinator of the session shown on this screen.
            display_mode: Layout for the control panel, fixed for the session.
            settings: Settings holding the purge policy.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.coordinator = coordinator
        self.display_mode = display_mode
        self._settings = settings
        self.session: ComparisonSession | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="comparison-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static(self.coordinator.a_label, classes="panel-header")
                yield ContentPane("a", id="left-pane")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static(self.coordinator.b_label, classes="panel-header")
                yield ContentPane("b", id="right-pane")
        frame = "frame" if self.display_mode is DisplayMode.MULTI_WINDOW else "pane"
        yield ControlPanel(
            self.coordinator, self._settings, id="control-panel", classes=frame
        )
        yield Footer()

    def on_mount(self) -> None:
        """Start the comparison session once the panes exist."""
        control = self.query_one("#control-panel", ControlPanel)
        self.coordinator.control_view = control
        try:
            self.session = start_session(
                self.coordinator,
                self.query_one("#left-pane", ContentPane),
                self.query_one("#right-pane", ContentPane),
            )
        except InitializationOrderError as e:
            logger.error("Comparison session setup failed: %s", e)
            self.app.exit(message=f"Comparison session setup failed: {e}")
            return

        self._setup_redirection(TextualHost(self, self.display_mode), self._settings)
        self._refresh_panes()
        self.set_focus(self.left_pane)
        self._update_panel_styles()

    @property
    def left_pane(self) -> ContentPane:
        return self.query_one("#left-pane", ContentPane)

    @property
    def right_pane(self) -> ContentPane:
        return self.query_one("#right-pane", ContentPane)

    @property
    def control_panel(self) -> ControlPanel:
        return self.query_one("#control-panel", ControlPanel)

    def refresh_control_panel(self) -> None:
        """Redraw the control panel, e.g. after the purge policy changed.

        A panel hidden by an earlier purge is shown again once purge is off.
        """
        if not self._settings.purge_control_view:
            self.control_panel.display = True
        self.control_panel.refresh_status()

    def _refresh_panes(self) -> None:
        coordinator = self.coordinator
        hunk = coordinator.current_hunk
        current = coordinator.current_index if hunk is not None else None
        self.left_pane.show_lines(
            coordinator.a_lines,
            get_line_diff_classes(coordinator.hunks, "a", current),
            hunk.a_start if hunk else None,
        )
        self.right_pane.show_lines(
            coordinator.b_lines,
            get_line_diff_classes(coordinator.hunks, "b", current),
            hunk.b_start if hunk else None,
        )

    def on_control_panel_command_executed(
        self, message: ControlPanel.CommandExecuted
    ) -> None:
        """Update the panes after a coordinator command.

        Args:
            message: The CommandExecuted message from the ControlPanel.
        """
        if self.coordinator.is_closed:
            self.app.exit()
            return

        container = self.query_one("#comparison-container")
        container.set_class(self.coordinator.split_vertical, "stacked")
        self._refresh_panes()

    def on_content_pane_activated(self, message: ContentPane.Activated) -> None:
        """Track which pane the user is in, whatever moved the focus there."""
        self._active_panel = "left" if message.pane.side == "a" else "right"
        self._update_panel_styles()

    def _focus_active_widget(self) -> None:
        """Focus the content pane in the active panel."""
        if self._active_panel == "left":
            self.set_focus(self.left_pane)
        else:
            self.set_focus(self.right_pane)
