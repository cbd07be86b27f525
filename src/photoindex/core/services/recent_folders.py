from __future__ import annotations

"""
Recently Opened Folders.

Keeps a short most-recent-first list of folders the user opened, persisted
in the application state file. The user's Pictures folder is seeded into
the list so that a fresh installation has something to offer.
"""

import logging
from typing import List, Optional

from photoindex.domain.config import load_app_state, save_app_state
from photoindex.domain.constants import MAX_RECENT_FOLDERS
from photoindex.infra.fs import get_pictures_dir

logger = logging.getLogger(__name__)


class RecentFolders:
    """
    Bounded most-recent-first folder list.

    Args:
        config_file: Application state file. Defaults to the user data dir.
        pictures_dir: Folder seeded at the front when absent.
        max_entries: Capacity of the list.
    """

    def __init__(
            self,
            config_file: Optional[str] = None,
            pictures_dir: Optional[str] = None,
            max_entries: int = MAX_RECENT_FOLDERS,
    ) -> None:
        self._config_file = config_file
        self._max_entries = max_entries
        self._folders: List[str] = list(load_app_state(config_file).get("recent_folders", []))

        loaded = list(self._folders)
        pictures = pictures_dir if pictures_dir is not None else get_pictures_dir()
        if pictures and pictures not in self._folders:
            self._folders.insert(0, pictures)
        del self._folders[self._max_entries:]

        if self._folders != loaded:
            self._save()

    def add(self, folder: str) -> None:
        """
        Move folder to the front, evicting the oldest entry when full.
        """
        if folder in self._folders:
            self._folders.remove(folder)
        elif len(self._folders) >= self._max_entries:
            dropped = self._folders.pop()
            logger.debug(f"RecentFolders: Evicted {dropped}")
        self._folders.insert(0, folder)
        self._save()

    def folders(self) -> List[str]:
        return list(self._folders)

    def folder_at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._folders):
            return self._folders[index]
        return None

    def _save(self) -> None:
        state = load_app_state(self._config_file)
        state["recent_folders"] = list(self._folders)
        save_app_state(state, self._config_file)
