"""
Command-redirection core.

Components:
    - host: ComparisonHost protocol and DisplayMode
    - session: Session State Manager (attach, coordinator_for, session hooks)
    - dispatcher: CommandDispatcher and wrap()
    - coordinator: Coordinator holding comparison state and commands
    - diff_engine: hunk calculation
    - keymap: keys redirected from the content panes
"""
