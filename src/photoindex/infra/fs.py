from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, user data directory resolution,
and component-level path splitting used by the directory index. Acts as an
abstraction over the 'os' module to ensure uniform behavior across Windows
and Unix-like systems.
"""

import json
import os
import re
from typing import Any, List, Optional, Sequence, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "PhotoIndex"
UNIX_APP_DIR_NAME = ".photoindex"

PATH_SEPARATOR = "/"
_SPLIT_RX = re.compile(r"[\\/]+")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/PhotoIndex
    - Linux/Mac: ~/.photoindex

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_pictures_dir() -> str:
    """Return the conventional per-user Pictures folder (it may not exist)."""
    return os.path.join(os.path.expanduser("~"), "Pictures")


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# PATH COMPONENTS API
# -----------------------------------------------------------------------------

def split_path(path: str) -> List[str]:
    """
    Break a path into its non-empty components.

    Both '/' and '\\' act as separators so that cache keys are identical
    regardless of which convention produced the path.

    Args:
        path: Absolute or relative path.

    Returns:
        List[str]: Components in root-to-leaf order.
    """
    return [c for c in _SPLIT_RX.split(path or "") if c]


def join_components(components: Sequence[str]) -> str:
    """
    Rebuild an absolute path from components produced by split_path.

    A leading drive component ('C:') is kept as-is; every other path is
    anchored at the filesystem root.
    """
    if not components:
        return PATH_SEPARATOR
    if _is_drive(components[0]):
        return PATH_SEPARATOR.join(components)
    return PATH_SEPARATOR + PATH_SEPARATOR.join(components)


def join_child(base: str, name: str) -> str:
    """Append a single component to a base path without doubling separators."""
    return base.rstrip("\\/") + PATH_SEPARATOR + name


def display_name(path: str) -> str:
    """Return the last component of a path, or the path itself for a root."""
    parts = split_path(path)
    return parts[-1] if parts else (path or PATH_SEPARATOR)


def _is_drive(component: str) -> bool:
    return len(component) == 2 and component[1] == ":" and component[0].isalpha()

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def path_exists(path: str) -> bool:
    """Report whether a path exists, treating any OS error as absence."""
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_json_atomic(path: str, data: Any, indent: Optional[int] = None) -> Tuple[bool, Optional[str]]:
    """
    Serialize data next to path and swap it into place.

    The document is written to a sibling temporary file first and moved over
    the target with os.replace, so the previous file stays intact when
    encoding or writing fails. Non-ASCII text (including the surrogate
    escapes os.fsdecode produces for undecodable names) is stored as
    \\uXXXX escapes, which json.load restores unchanged.

    Args:
        path: Target file.
        data: JSON-compatible document.
        indent: Optional pretty-print indentation.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    parent = os.path.dirname(os.path.abspath(path))
    ok, err = safe_mkdir(parent)
    if not ok:
        return False, err

    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent)
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        return False, str(e)

    return True, None
