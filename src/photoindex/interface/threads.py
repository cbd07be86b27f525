from __future__ import annotations

"""
Background Worker Threads for Scan Operations.

Directory walks over large or networked volumes can take a long time, so
front ends run them on a daemon thread and receive the outcome through a
callback. Only one scan may be outstanding at a time: the index is not safe
for concurrent mutation, and a walk cannot be cancelled once started.
"""

import logging
import threading
from typing import Any, Callable, Optional

from photoindex.core.services.folder_index import FolderIndex

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SCAN WORKERS
# -----------------------------------------------------------------------------

def run_scan_task(
        index: FolderIndex,
        root: str,
        on_complete: Callable[[Any], None],
) -> None:
    """
    Execute a scan and hand the outcome to the caller.

    Args:
        index: Folder index to query.
        root: Folder to scan.
        on_complete: Receives the list of image folders, or the exception if
                     the scan failed unexpectedly.
    """
    try:
        result = index.scan(root)
    except Exception as e:
        logger.critical(f"Scan Thread: Critical failure while scanning {root}: {e}", exc_info=True)
        on_complete(e)
        return

    on_complete(result)


class ScanTaskRunner:
    """
    Serializes scan requests onto a single background thread.
    """

    def __init__(self, index: FolderIndex) -> None:
        self._index = index
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_busy(self) -> bool:
        with self._lock:
            return self._thread is not None and self._thread.is_alive()

    def start(self, root: str, on_complete: Callable[[Any], None]) -> bool:
        """
        Launch a scan unless one is already running.

        Returns:
            bool: False if the request was refused because a scan is in flight.
        """
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                logger.info(f"Scan Thread: Ignoring request for {root}, a scan is in progress.")
                return False

            self._thread = threading.Thread(
                target=run_scan_task,
                args=(self._index, root, on_complete),
                name="photoindex-scan",
                daemon=True,
            )
            self._thread.start()
            return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the current scan finishes.

        Returns:
            bool: True if no scan is running any more.
        """
        with self._lock:
            thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()
