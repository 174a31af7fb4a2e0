"""Reference-counted cache of open archives."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict

from . import sdk
from .exceptions import ArchiveUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class _ArchiveEntry:
    archive: Any
    ref_count: int = 0


class ArchiveRegistry:
    """Share open archives between callers that reference the same file.

    The archive is opened on the first ``add_ref`` and dropped once every
    reference has been released.
    """

    def __init__(self, opener: Callable[[str], Any] = sdk.open_archive) -> None:
        self._opener = opener
        self._entries: Dict[str, _ArchiveEntry] = {}

    @staticmethod
    def _key(path: str) -> str:
        return os.path.abspath(path)

    def __contains__(self, path: str) -> bool:
        return self._key(path) in self._entries

    def add_ref(self, path: str) -> Any:
        key = self._key(path)
        entry = self._entries.get(key)
        if entry is None:
            entry = _ArchiveEntry(archive=self._opener(path))
            self._entries[key] = entry
            logger.debug("Cached archive %s", key)
        entry.ref_count += 1
        return entry.archive

    def get(self, path: str) -> Any:
        entry = self._entries.get(self._key(path))
        if entry is None:
            raise ArchiveUnavailableError(f"Archive '{path}' has not been opened.")
        return entry.archive

    def del_ref(self, path: str) -> None:
        key = self._key(path)
        entry = self._entries.get(key)
        if entry is None:
            return
        entry.ref_count -= 1
        if entry.ref_count <= 0:
            del self._entries[key]
            logger.debug("Released archive %s", key)

    def ref_count(self, path: str) -> int:
        entry = self._entries.get(self._key(path))
        return entry.ref_count if entry is not None else 0


default_registry = ArchiveRegistry()
