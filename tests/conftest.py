from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the per-user data directory so tests never touch the real one.
3. Helpers to lay out image folder trees on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def user_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Redirect the home directory (and LOCALAPPDATA on Windows) to a temp dir.

    Returns:
        Path: The fake home directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home


@pytest.fixture
def make_image_folder() -> Callable[..., Path]:
    """
    Return a helper that creates a folder holding the given files.

    Usage: make_image_folder(base / "a" / "b", "x.jpg", "notes.txt")
    """
    def _make(folder: Path, *file_names: str) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        for name in file_names:
            (folder / name).write_bytes(b"\x00")
        return folder

    return _make
