"""
TUI two-pane text comparison.

A Textual-based terminal UI that shows two files side by side with a
control panel owning the comparison commands. Keys pressed in either pane
are redirected to the control panel, so the panel never needs focus.

Usage:
    uv run python -m diffpanes.tui.app old.txt new.txt

Components:
    - DiffPanesApp: Main application class
    - ComparisonScreen: Side-by-side comparison view
    - ContentPane: One compared file, with the redirect key overlay
    - ControlPanel: The coordinator's view
    - TextualHost: Host operations used by the dispatcher
"""
