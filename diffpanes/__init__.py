"""
diffpanes: a two-pane text comparison tool driven from its content panes.

Usage:
    diffpanes old.txt new.txt
    diffpanes old.txt new.txt --purge

Packages:
    - diffpanes.core: command redirection (session binding, dispatcher)
    - diffpanes.tui: Textual application hosting the comparison
"""

__version__ = "0.1.0"
