"""
Exceptions raised by the command-redirection layer.

Error Kinds:
    - BrokenBindingError: a content view cannot reach its coordinator
    - InitializationOrderError: session setup ran before its views existed
    - UnknownCommandError: a command id the coordinator does not define
"""

from __future__ import annotations


class DiffPanesError(Exception):
    """Base class for all diffpanes errors."""


class BrokenBindingError(DiffPanesError):
    """The coordinator reference of a content view is missing or stale."""

    def __init__(self, view: object, reason: str) -> None:
        self.view = view
        self.reason = reason
        super().__init__(f"No live comparison session for {_describe(view)}: {reason}")


class InitializationOrderError(DiffPanesError):
    """A session was attached before its content views were ready."""


class UnknownCommandError(DiffPanesError, KeyError):
    """The coordinator has no command with the given id."""

    def __init__(self, command_id: str) -> None:
        self.command_id = command_id
        super().__init__(f"Unknown comparison command: {command_id!r}")

    def __str__(self) -> str:
        return self.args[0]


def _describe(view: object) -> str:
    view_id = getattr(view, "id", None)
    if view_id:
        return f"view {view_id!r}"
    return type(view).__name__
