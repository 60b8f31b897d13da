"""
Process-wide settings for diffpanes.

The purge policy and the layout strategy are separate fields. Turning the
purge policy on or off through set_purge_policy() also re-derives the layout
strategy used for new sessions: a control panel that is removed after every
command only makes sense when it shares the single window with the panes.
Assigning layout_strategy afterwards overrides the derived value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from diffpanes.core.host import DisplayMode

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """User-settable options read by the dispatcher and session setup.

    Attributes:
        purge_control_view: Hide the control panel after every redirected
            command.
        layout_strategy: Display mode given to sessions created from now on.
        log_level: Level name passed to configure_logging().
        log_file: Optional path of a rotating log file.
    """

    purge_control_view: bool = False
    layout_strategy: DisplayMode = field(init=False)
    log_level: str = "INFO"
    log_file: str | None = None

    def __post_init__(self) -> None:
        self.update_default_layout()

    def set_purge_policy(self, enabled: bool) -> None:
        """Set the purge policy and re-derive the layout for new sessions."""
        self.purge_control_view = enabled
        self.update_default_layout()
        logger.info(
            "Purge policy %s, new sessions use %s layout",
            "enabled" if enabled else "disabled",
            self.layout_strategy.value,
        )

    def toggle_purge_policy(self) -> bool:
        """Flip the purge policy and return the new value."""
        self.set_purge_policy(not self.purge_control_view)
        return self.purge_control_view

    def update_default_layout(self) -> None:
        """Pick the layout strategy that matches the purge policy."""
        if self.purge_control_view:
            self.layout_strategy = DisplayMode.SINGLE_WINDOW
        else:
            self.layout_strategy = DisplayMode.MULTI_WINDOW


settings = Settings()
"""Shared settings instance used when no explicit Settings is passed."""
