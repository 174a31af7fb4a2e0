"""Breadth-first flattening of an archive hierarchy."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, List, Optional, Set, Tuple

from ..models import AlembicType, NodeRecord
from .exceptions import TraversalHalted
from .metadata import collect_metadata
from .node_source import NodeSource
from .progress import NullProgress, ProgressSink

logger = logging.getLogger(__name__)


def flatten(
    root: Any,
    source: NodeSource,
    progress: Optional[ProgressSink] = None,
) -> List[NodeRecord]:
    """Flatten the hierarchy below ``root`` into index-ordered records.

    The returned list is indexed by ``NodeRecord.index``. Entry 0 is the
    synthetic record for ``root`` itself and is never marked valid. Every
    other record points at a parent with a smaller index, and the first
    record seen with a given full path is the only one that keeps it as its
    identifier.

    Raises ``TraversalHalted`` as soon as ``progress`` reports cancellation.
    """

    progress = progress or NullProgress()
    records: List[NodeRecord] = [NodeRecord(index=0)]
    pending: Deque[Tuple[Any, int]] = deque([(root, 0)])
    seen_paths: Set[str] = set()

    while pending:
        if progress.is_cancelled():
            logger.debug("Traversal cancelled after %d records", len(records) - 1)
            raise TraversalHalted()
        progress.advance(1)

        node, parent_index = pending.popleft()
        parent = records[parent_index]
        for child in source.get_children(node):
            record = NodeRecord(index=len(records), parent_index=parent_index)
            records.append(record)

            full_path = source.get_full_path(child)
            if full_path not in seen_paths:
                seen_paths.add(full_path)
                record.identifier = full_path

            record.type = source.get_type(child)
            record.name = source.get_local_name(child)
            record.sample_count = source.get_sample_count(child)

            # A transform holding other transforms is reported as a group.
            if record.type is AlembicType.XFORM and parent.type is AlembicType.XFORM:
                parent.type = AlembicType.GROUP
            parent.child_indices.append(record.index)

            pending.append((child, record.index))
            record.metadata = collect_metadata(source, child, record.type)
            record.valid = True

    logger.debug("Flattened %d records", len(records) - 1)
    return records
