"""Text encoding of flattened records."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import NodeRecord
from .exceptions import TraversalHalted
from .progress import NullProgress, ProgressSink

FIELD_SEPARATOR = "|"
CHILD_SEPARATOR = "."
NO_CHILDREN = "-1"
ENCODE_POLL_INTERVAL = 20


def encode_record(record: NodeRecord) -> str:
    """Encode ``record`` as ``identifier|type|name|samples|parent|children[|metadata]``.

    Fields are not escaped, so a ``|`` inside a name or identifier is emitted
    as-is.
    """

    if record.child_indices:
        children = CHILD_SEPARATOR.join(str(index) for index in record.child_indices)
    else:
        children = NO_CHILDREN

    fields = [
        record.identifier,
        str(record.type),
        record.name,
        str(record.sample_count),
        str(record.parent_index),
        children,
    ]
    if record.metadata:
        fields.append(record.metadata)
    return FIELD_SEPARATOR.join(fields)


def encode_records(
    records: Iterable[NodeRecord],
    progress: Optional[ProgressSink] = None,
) -> List[str]:
    """Encode every valid record in order, skipping the synthetic root.

    Cancellation is polled every ``ENCODE_POLL_INTERVAL`` records and raises
    ``TraversalHalted``; no partial output is returned in that case.
    """

    progress = progress or NullProgress()
    lines: List[str] = []
    for position, record in enumerate(records, start=1):
        if position % ENCODE_POLL_INTERVAL == 0 and progress.is_cancelled():
            raise TraversalHalted()
        progress.advance(1)
        if record.valid:
            lines.append(encode_record(record))
    return lines
