"""Integration tests for the Textual comparison app.

These drive DiffPanesApp with Textual's pilot and check that keys pressed
in a content pane run coordinator commands without moving the focus.
"""

from __future__ import annotations

import pytest

from diffpanes.config import Settings
from diffpanes.core.host import DisplayMode
from diffpanes.core.session import coordinator_for
from diffpanes.tui.app import DiffPanesApp
from diffpanes.tui.views import ComparisonScreen


def make_app(text_files, settings: Settings) -> DiffPanesApp:
    path_a, path_b = text_files
    return DiffPanesApp(str(path_a), str(path_b), settings=settings)


@pytest.mark.asyncio
async def test_session_attached_on_mount(text_files):
    """Both panes are bound to the app's coordinator once the screen mounts."""
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert isinstance(screen, ComparisonScreen)
        assert coordinator_for(screen.left_pane) is app.coordinator
        assert coordinator_for(screen.right_pane) is app.coordinator
        assert screen.left_pane.redirect_mode
        assert app.coordinator.control_view is screen.control_panel
        assert screen.focused is screen.left_pane


@pytest.mark.asyncio
async def test_next_difference_from_left_pane_single_window(text_files):
    settings = Settings()
    settings.layout_strategy = DisplayMode.SINGLE_WINDOW
    app = make_app(text_files, settings)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("n")
        await pilot.pause()

        assert app.coordinator.current_index == 0
        assert screen.control_panel.executed == ["next_difference"]
        assert screen.focused is screen.left_pane
        assert screen.control_panel.display is True


@pytest.mark.asyncio
async def test_next_difference_from_right_pane_multi_window(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.display_mode is DisplayMode.MULTI_WINDOW
        assert screen.control_panel.has_class("frame")

        await pilot.press("tab")
        await pilot.press("n", "n")
        await pilot.pause()

        assert app.coordinator.current_index == 1
        assert screen.focused is screen.right_pane


@pytest.mark.asyncio
async def test_purge_removes_control_panel(text_files):
    settings = Settings()
    settings.set_purge_policy(True)
    app = make_app(text_files, settings)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.display_mode is DisplayMode.SINGLE_WINDOW

        await pilot.press("n")
        await pilot.pause()

        assert app.coordinator.current_index == 0
        assert screen.control_panel.display is False
        assert screen.focused is screen.left_pane


@pytest.mark.asyncio
async def test_toggling_purge_keeps_session_layout(text_files):
    settings = Settings()
    app = make_app(text_files, settings)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("P")
        await pilot.pause()

        assert settings.purge_control_view is True
        assert settings.layout_strategy is DisplayMode.SINGLE_WINDOW
        assert screen.display_mode is DisplayMode.MULTI_WINDOW

        await pilot.press("n")
        await pilot.pause()
        assert screen.control_panel.display is False


@pytest.mark.asyncio
async def test_disabling_purge_brings_back_control_panel(text_files):
    """A panel purged in multi-window mode returns once purge is off."""
    settings = Settings()
    app = make_app(text_files, settings)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("P", "n")
        await pilot.pause()
        assert screen.control_panel.display is False

        await pilot.press("P", "n")
        await pilot.pause()

        assert settings.purge_control_view is False
        assert screen.control_panel.display is True
        assert app.coordinator.current_index == 1
        assert screen.focused is screen.left_pane


@pytest.mark.asyncio
async def test_merge_from_pane(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("n", "a")
        await pilot.pause()
        assert app.coordinator.b_lines[1] == "two"
        assert app.screen.focused is app.screen.left_pane


@pytest.mark.asyncio
async def test_toggle_split_stacks_panes(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("vertical_line")
        await pilot.pause()
        container = app.screen.query_one("#comparison-container")
        assert container.has_class("stacked")


@pytest.mark.asyncio
async def test_broken_binding_is_reported(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        # Close the session behind the panes' back.
        app.coordinator.quit()

        ran = screen.run_redirected("next_difference", screen.left_pane)

        assert ran is False
        assert app.coordinator.current_index == -1
        assert screen.focused is screen.left_pane


@pytest.mark.asyncio
async def test_quit_from_pane(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("q")
    assert app.coordinator.is_closed


@pytest.mark.asyncio
async def test_missing_file_exits(tmp_path):
    app = DiffPanesApp(str(tmp_path / "nope.txt"), str(tmp_path / "also-nope.txt"))
    async with app.run_test():
        pass
    assert app.coordinator is None


@pytest.mark.asyncio
async def test_h_and_l_switch_panes(text_files):
    app = make_app(text_files, Settings())
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        await pilot.press("l")
        await pilot.pause()
        assert screen.focused is screen.right_pane
        assert screen.query_one("#right-panel").has_class("active")

        await pilot.press("h")
        await pilot.pause()
        assert screen.focused is screen.left_pane
        assert screen.query_one("#left-panel").has_class("active")
