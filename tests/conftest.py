"""Pytest configuration and shared fixtures for diffpanes tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from diffpanes.config import Settings
from diffpanes.core.coordinator import Coordinator
from diffpanes.core.session import ComparisonSession, session_hooks, start_session

from fakes import FakeControlView, FakeView

A_LINES = ["one", "two", "three", "four"]
B_LINES = ["one", "TWO", "three", "five", "six"]


@pytest.fixture(autouse=True)
def restore_session_hooks() -> Generator[None, None, None]:
    """Keep the process-wide session hook list unchanged across tests."""
    saved = list(session_hooks)
    yield
    session_hooks[:] = saved


@pytest.fixture
def coordinator() -> Coordinator:
    """Coordinator over two short texts with two changed hunks."""
    return Coordinator(A_LINES, B_LINES, a_label="a.txt", b_label="b.txt")


@pytest.fixture
def control_view(coordinator: Coordinator) -> FakeControlView:
    view = FakeControlView(coordinator)
    coordinator.control_view = view
    return view


@pytest.fixture
def view_a() -> FakeView:
    return FakeView("A")


@pytest.fixture
def view_b() -> FakeView:
    return FakeView("B")


@pytest.fixture
def session(
    coordinator: Coordinator,
    control_view: FakeControlView,
    view_a: FakeView,
    view_b: FakeView,
) -> ComparisonSession:
    """A started session: both views bound, control view assigned."""
    return start_session(coordinator, view_a, view_b)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def text_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write A_LINES and B_LINES to two files."""
    path_a = tmp_path / "a.txt"
    path_b = tmp_path / "b.txt"
    path_a.write_text("\n".join(A_LINES) + "\n", encoding="utf-8")
    path_b.write_text("\n".join(B_LINES) + "\n", encoding="utf-8")
    return path_a, path_b
