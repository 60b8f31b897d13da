"""
Command Redirect Mixin for screens hosting a comparison session.

Owns the CommandDispatcher for the screen and the wrapped command for every
id in the redirect key table. Content panes call run_redirected() from
their key overlay; failures are shown to the user as error notifications.
"""

from __future__ import annotations

import logging
from typing import Any

from diffpanes.config import Settings
from diffpanes.core.dispatcher import CommandDispatcher, WrappedCommand
from diffpanes.core.host import ComparisonHost
from diffpanes.core.keymap import redirected_commands
from diffpanes.errors import BrokenBindingError, DiffPanesError

logger = logging.getLogger(__name__)


class CommandRedirectMixin:
    """Mixin wiring content pane keys to the coordinator through a dispatcher.

    Usage:
        class MyScreen(CommandRedirectMixin, Screen):
            def on_mount(self) -> None:
                self._setup_redirection(TextualHost(self, mode), settings)
    """

    _dispatcher: CommandDispatcher | None = None
    _redirected: dict[str, WrappedCommand] | None = None

    def _setup_redirection(self, host: ComparisonHost, settings: Settings) -> None:
        """Create the dispatcher and wrap every redirected command."""
        self._dispatcher = CommandDispatcher(host, settings)
        self._redirected = self._dispatcher.wrap_all(redirected_commands())

    def run_redirected(self, command_id: str, view: Any) -> bool:
        """Run command_id on behalf of view.

        Returns:
            True if the command ran, False if it failed and was reported.
        """
        try:
            if self._dispatcher is None or self._redirected is None:
                raise BrokenBindingError(view, "comparison session has not started")
            command = self._redirected.get(command_id)
            if command is None:
                command = self._dispatcher.wrap(command_id)
            command(view)
        except DiffPanesError as e:
            logger.warning("Redirected command %s failed: %s", command_id, e)
            self.notify(str(e), title="Command failed", severity="error")
            return False
        return True
