"""
File loading for the comparison view.

Reads the two compared files as lists of lines. Files are read from disk on
every call.
"""

from __future__ import annotations

import os

# Files above this size are refused; the panes render every line.
MAX_FILE_SIZE: int = 20 * 1024 * 1024


def load_lines(path: str) -> list[str]:
    """Load a text file as a list of lines without line endings.

    Args:
        path: Path to the file.

    Returns:
        The file's lines. Undecodable bytes are replaced.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is larger than MAX_FILE_SIZE.
    """
    size = os.path.getsize(path)
    if size > MAX_FILE_SIZE:
        raise ValueError(
            f"{path} is {size:,} bytes, larger than the {MAX_FILE_SIZE:,} byte limit"
        )

    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read().splitlines()
