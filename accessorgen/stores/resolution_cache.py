"""In-process cache of directory type resolutions."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Callable, Dict, List

from ..golang.loader import DirectoryResolution, load_directory
from ..logging import get_logger

Loader = Callable[[Path], DirectoryResolution]


class ResolutionCache:
    """Stores one resolution per absolute directory path for the lifetime of a run.

    Entries are never evicted.  Concurrent callers asking for the same path
    share a per-path lock, so the loader runs at most once per path; callers
    asking for different paths do not block each other.  A failed load is not
    stored and the ``LoadError`` reaches the caller that triggered it.
    """

    def __init__(self, loader: Loader | None = None) -> None:
        self._loader: Loader = loader or load_directory
        self._entries: Dict[str, DirectoryResolution] = {}
        self._lock = threading.Lock()
        self._path_locks: Dict[str, threading.Lock] = {}
        self._loads = 0
        self.logger = get_logger("stores.resolution_cache")

    def resolve(self, directory: Path | str) -> DirectoryResolution:
        key = _normalise(directory)
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        with self._lock:
            path_lock = self._path_locks.setdefault(key, threading.Lock())

        with path_lock:
            entry = self._entries.get(key)
            if entry is not None:
                self.logger.debug("Joined resolution of %s", key)
                return entry
            self.logger.debug("Resolving %s", key)
            entry = self._loader(Path(key))
            with self._lock:
                self._entries[key] = entry
                self._loads += 1
            return entry

    @property
    def loads(self) -> int:
        """Number of loader invocations that completed successfully."""
        return self._loads

    def paths(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, directory: object) -> bool:
        if not isinstance(directory, (str, os.PathLike)):
            return False
        return _normalise(directory) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _normalise(directory: Path | str | os.PathLike[str]) -> str:
    return os.path.abspath(os.fspath(directory))


__all__ = ["Loader", "ResolutionCache"]
