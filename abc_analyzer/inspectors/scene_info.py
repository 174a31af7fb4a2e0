"""Flat per-object report of an archive hierarchy."""

from __future__ import annotations

import logging
from typing import Optional

from ..core.analyzer import AlembicAnalyzer, SceneContext, SceneInspector
from ..core.archive_cache import ArchiveRegistry
from ..core.encoding import encode_records
from ..core.exceptions import TraversalHalted
from ..core.progress import NullProgress, ProgressSink
from ..core.traversal import flatten
from ..models import SceneInfo

logger = logging.getLogger(__name__)


class SceneInfoInspector(SceneInspector):
    """Flatten the archive breadth-first and encode one line per object."""

    id = "scene_info"

    def __init__(self, progress: Optional[ProgressSink] = None) -> None:
        self.progress = progress or NullProgress()

    def collect(self, context: SceneContext) -> SceneInfo:
        try:
            records = flatten(context.root, context.source, self.progress)
            lines = encode_records(records, self.progress)
        except TraversalHalted:
            logger.info("Alembic import halted!")
            return SceneInfo(path=context.path, lines=[], halted=True)
        return SceneInfo(path=context.path, lines=lines)


def get_info(
    path: str,
    progress: Optional[ProgressSink] = None,
    registry: Optional[ArchiveRegistry] = None,
) -> SceneInfo:
    """Open ``path``, report every object in it and release the archive."""

    inspector = SceneInfoInspector(progress)
    with AlembicAnalyzer(path, registry=registry) as analyzer:
        results = analyzer.run([inspector])
    return results[inspector.id]
