"""
Session State Manager.

Binds the two content views of a comparison session to the coordinator that
governs them, and resolves that binding again when a redirected command
runs.

Each content view carries its own weak reference to the coordinator
(CoordinatorBindingMixin), so a view never keeps a finished session alive
and never needs a global lookup to find its coordinator.

Usage:
    session = start_session(coordinator, pane_a, pane_b)
    coordinator_for(pane_a) is coordinator  # True
"""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Any, Callable

from diffpanes.errors import BrokenBindingError, InitializationOrderError

logger = logging.getLogger(__name__)


class CoordinatorBindingMixin:
    """Per-view state holding a weak reference to the session coordinator.

    Mixed into content view classes. The reference is written once by
    attach() and read by coordinator_for().
    """

    _coordinator_ref: weakref.ReferenceType | None = None
    """Weak reference to the coordinator, None until the session attaches."""

    redirect_mode: bool = False
    """Whether the command-redirection key overlay is active on this view."""

    def bind_coordinator(self, coordinator: Any) -> None:
        """Store a weak reference to coordinator on this view.

        Raises:
            InitializationOrderError: If the view already belongs to a
                different coordinator.
        """
        current = self._coordinator_ref() if self._coordinator_ref is not None else None
        if current is coordinator:
            return
        if self._coordinator_ref is not None:
            raise InitializationOrderError(
                f"{type(self).__name__} is already bound to another comparison session"
            )
        self._coordinator_ref = weakref.ref(coordinator)


@dataclass
class ComparisonSession:
    """One coordinator governing exactly two content views."""

    coordinator: Any
    view_a: Any
    view_b: Any

    @property
    def views(self) -> tuple[Any, Any]:
        return (self.view_a, self.view_b)


def attach(session: ComparisonSession) -> None:
    """Bind both content views of session to its coordinator.

    Also turns on redirect_mode on each view so its key presses route to
    the dispatcher instead of the view's default bindings.

    Raises:
        InitializationOrderError: If a view is missing or not mounted yet.
    """
    for name, view in (("A", session.view_a), ("B", session.view_b)):
        if view is None:
            raise InitializationOrderError(f"Content view {name} does not exist yet")
        if not getattr(view, "is_mounted", True):
            raise InitializationOrderError(f"Content view {name} is not mounted yet")

    for view in session.views:
        view.bind_coordinator(session.coordinator)
        view.redirect_mode = True

    logger.debug("Attached coordinator %r to both content views", session.coordinator)


def coordinator_for(view: Any) -> Any:
    """Return the live coordinator bound to view.

    Raises:
        BrokenBindingError: If the view was never bound, the coordinator has
            been garbage collected, or the session has been closed.
    """
    ref = getattr(view, "_coordinator_ref", None)
    if ref is None:
        raise BrokenBindingError(view, "view is not part of a comparison session")
    coordinator = ref()
    if coordinator is None:
        raise BrokenBindingError(view, "coordinator no longer exists")
    if getattr(coordinator, "is_closed", False):
        raise BrokenBindingError(view, "comparison session has been closed")
    return coordinator


SessionHook = Callable[[ComparisonSession], None]

session_hooks: list[SessionHook] = [attach]
"""Callables run once, in order, for every new comparison session."""


def add_session_hook(hook: SessionHook) -> None:
    """Append hook to the session hooks if it is not registered yet."""
    if hook not in session_hooks:
        session_hooks.append(hook)


def remove_session_hook(hook: SessionHook) -> None:
    """Remove hook from the session hooks if present."""
    if hook in session_hooks:
        session_hooks.remove(hook)


def run_session_hooks(session: ComparisonSession) -> None:
    """Run every session hook for a newly created session."""
    for hook in list(session_hooks):
        hook(session)


def start_session(coordinator: Any, view_a: Any, view_b: Any) -> ComparisonSession:
    """Create a session for coordinator and its two views and run the hooks."""
    session = ComparisonSession(coordinator, view_a, view_b)
    run_session_hooks(session)
    logger.info("Comparison session started")
    return session
