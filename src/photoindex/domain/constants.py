from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: recognized image
extensions, scan bounds, the default exclusion list, and persistence
identifiers.
"""

from typing import FrozenSet, List

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# SCANNING
# -----------------------------------------------------------------------------

# Compared against the lower-cased suffix without the leading dot
IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({
    "jpg", "jpeg", "png", "gif", "bmp", "tiff", "tif",
    "heic", "webp", "ico", "svg",
})

DEFAULT_MAX_DEPTH = 50
SCAN_BATCH_SIZE = 100

DEFAULT_EXCLUSION_LIST: List[str] = [
    "/System",
    "/Library",
    "/Applications",
    "/Volumes",
    "/private",
    "/dev",
    "/usr",
    "/bin",
]

# Directories presented to the user as a single document. They are
# inspected for images but never descended into.
PACKAGE_SUFFIXES: FrozenSet[str] = frozenset({
    ".app", ".appex", ".bundle", ".framework", ".kext", ".plugin",
    ".photoslibrary", ".aplibrary", ".migratedphotolibrary", ".pkg", ".xpc",
})

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

TRIE_CACHE_FILENAME = "TrieCache.json"
CONFIG_FILENAME = "config.json"

MAX_RECENT_FOLDERS = 5

DISPLAY_MODES = ("list", "tree")
DEFAULT_DISPLAY_MODE = "list"
