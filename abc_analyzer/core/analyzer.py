"""High level analyzer orchestration."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from .archive_cache import ArchiveRegistry, default_registry
from .node_source import AlembicNodeSource, NodeSource


class SceneInspector(Protocol):
    """Protocol defining how inspectors gather data from an archive."""

    id: str

    def collect(self, context: "SceneContext") -> Any:
        """Return extracted information from the archive."""


@dataclass
class SceneContext:
    """Holds the open archive, its top object and the node accessors."""

    path: str
    archive: Any
    root: Any
    source: NodeSource


class AlembicAnalyzer(contextlib.AbstractContextManager["AlembicAnalyzer"]):
    """Holds a reference on an archive and coordinates data extraction."""

    def __init__(
        self,
        path: str,
        registry: Optional[ArchiveRegistry] = None,
        source_factory: Callable[[], NodeSource] = AlembicNodeSource,
    ) -> None:
        self._path = path
        self._registry = registry if registry is not None else default_registry
        self._source_factory = source_factory
        self._archive: Optional[Any] = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def context(self) -> SceneContext:
        if self._archive is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing context.")
        return SceneContext(
            path=self._path,
            archive=self._archive,
            root=self._archive.getTop(),
            source=self._source_factory(),
        )

    def load(self) -> "AlembicAnalyzer":
        if self._archive is not None:
            return self

        self._archive = self._registry.add_ref(self._path)
        return self

    def close(self) -> None:
        if self._archive is not None:
            self._registry.del_ref(self._path)
            self._archive = None

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    # Allow usage as context manager via `with AlembicAnalyzer(path) as analyzer:`
    def __enter__(self) -> "AlembicAnalyzer":
        return self.load()

    def run(self, inspectors: Iterable[SceneInspector]) -> Dict[str, Any]:
        """Execute inspectors and return their aggregated results."""

        results: Dict[str, Any] = {}
        ctx = self.context
        for inspector in inspectors:
            results[inspector.id] = inspector.collect(ctx)
        return results
