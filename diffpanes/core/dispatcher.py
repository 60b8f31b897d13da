"""
Command Dispatcher.

Turns a coordinator command id into a callable that can be bound on a
content view. When called, the wrapper runs the command in the
coordinator's context and hands focus back to the view it came from:

- Multi-window: the control panel has its own frame, so the command runs
  against it directly and the originating view is raised/refocused after.
- Single-window: the control panel is an ordinary pane, so it is made
  active for the duration of the command and the originating view is made
  active again after.

With the purge policy on, the control panel is then removed from the
layout. That always comes last because commands may read the panel while
they run.

Usage:
    dispatcher = CommandDispatcher(host)
    next_difference = dispatcher.wrap("next_difference")
    next_difference(pane_a)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from diffpanes import config
from diffpanes.config import Settings
from diffpanes.core.host import ComparisonHost, DisplayMode
from diffpanes.core.session import coordinator_for
from diffpanes.errors import BrokenBindingError, DiffPanesError

logger = logging.getLogger(__name__)

WrappedCommand = Callable[..., None]


class CommandDispatcher:
    """Runs coordinator commands on behalf of content views."""

    def __init__(self, host: ComparisonHost, settings: Settings | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            host: The comparison tool the commands run in.
            settings: Settings holding the purge policy. Defaults to the
                process-wide diffpanes.config.settings, read at dispatch time.
        """
        self._host = host
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is not None:
            return self._settings
        return config.settings

    def wrap(self, command_id: str) -> WrappedCommand:
        """Return a callable that runs command_id from a content view.

        The callable takes the originating view, or None for the host's
        active view.
        """

        def wrapped(view: Any = None) -> None:
            self.dispatch(command_id, view)

        wrapped.__name__ = f"redirect_{command_id}"
        wrapped.__qualname__ = wrapped.__name__
        wrapped.__doc__ = f"Run {command_id!r} in the coordinator's context."
        wrapped.command_id = command_id  # type: ignore[attr-defined]
        return wrapped

    def wrap_all(self, command_ids: Iterable[str]) -> dict[str, WrappedCommand]:
        """Wrap every command id, keyed by id."""
        return {command_id: self.wrap(command_id) for command_id in command_ids}

    def dispatch(self, command_id: str, view: Any = None) -> None:
        """Run command_id in the coordinator context of view.

        Raises:
            BrokenBindingError: If view has no live coordinator. Nothing is
                switched in that case.
        """
        host = self._host
        origin = view if view is not None else host.get_active_view()
        coordinator = coordinator_for(origin)
        control_view = getattr(coordinator, "control_view", None)
        if control_view is None:
            raise BrokenBindingError(origin, "coordinator has no control view")

        mode = host.get_display_mode()
        logger.debug("Dispatching %s (%s)", command_id, mode.value)

        try:
            if mode is DisplayMode.MULTI_WINDOW:
                try:
                    host.execute_command(control_view, command_id)
                finally:
                    host.raise_window_for(origin)
            else:
                host.set_active_view(control_view)
                try:
                    host.execute_command(control_view, command_id)
                finally:
                    host.set_active_view(origin)
        except DiffPanesError as e:
            logger.warning("Command %s failed: %s", command_id, e)
            raise

        if self.settings.purge_control_view:
            host.close_view(control_view)


def wrap(
    command_id: str, host: ComparisonHost, settings: Settings | None = None
) -> WrappedCommand:
    """Shortcut for CommandDispatcher(host, settings).wrap(command_id)."""
    return CommandDispatcher(host, settings).wrap(command_id)
