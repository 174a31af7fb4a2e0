"""Read-only access to archive objects."""

from __future__ import annotations

import contextlib
from typing import Any, Iterator, List, Optional, Protocol, Sequence, Tuple

from . import sdk
from .exceptions import ArchiveUnavailableError
from ..models import AlembicType


class NodeSource(Protocol):
    """Accessors the traversal needs from an archive object."""

    def get_children(self, node: Any) -> Sequence[Any]:
        ...

    def get_full_path(self, node: Any) -> str:
        ...

    def get_local_name(self, node: Any) -> str:
        ...

    def get_type(self, node: Any) -> AlembicType:
        ...

    def get_sample_count(self, node: Any) -> int:
        ...

    def is_dynamic_topology(self, node: Any) -> bool:
        ...

    def is_point_cache_only(self, node: Any) -> bool:
        ...

    def has_multiple_curve_samples(self, node: Any) -> bool:
        ...


# Checked in order; the first schema whose ``matches`` accepts the metadata wins.
_SCHEMA_TYPES: Tuple[Tuple[str, AlembicType], ...] = (
    ("IXform", AlembicType.XFORM),
    ("IPolyMesh", AlembicType.POLY_MESH),
    ("ISubD", AlembicType.SUBD),
    ("ICurves", AlembicType.CURVES),
    ("IPoints", AlembicType.POINTS),
    ("ICamera", AlembicType.CAMERA),
    ("INuPatch", AlembicType.NU_PATCH),
    ("IFaceSet", AlembicType.FACE_SET),
    ("ILight", AlembicType.LIGHT),
)


@contextlib.contextmanager
def _reading(node: Any) -> Iterator[None]:
    try:
        yield
    except RuntimeError as exc:
        raise ArchiveUnavailableError(f"Failed to read archive object {node!r}: {exc}") from exc


class AlembicNodeSource:
    """``NodeSource`` backed by PyAlembic ``IObject`` handles."""

    def __init__(self) -> None:
        _, self._geom = sdk.import_alembic_module()

    def _schema_class(self, node_type: AlembicType) -> Optional[Any]:
        for class_name, candidate in _SCHEMA_TYPES:
            if candidate is node_type:
                return getattr(self._geom, class_name, None)
        return None

    def _schema(self, node: Any, node_type: AlembicType) -> Any:
        schema_class = self._schema_class(node_type)
        if schema_class is None:
            return None
        typed = sdk.wrap_existing(schema_class, node)
        if not typed.valid():
            return None
        return typed.getSchema()

    def get_children(self, node: Any) -> List[Any]:
        if node is None or not node.valid():
            raise ArchiveUnavailableError("Archive object handle is not valid.")
        with _reading(node):
            return [node.getChild(idx) for idx in range(node.getNumChildren())]

    def get_full_path(self, node: Any) -> str:
        with _reading(node):
            return node.getFullName()

    def get_local_name(self, node: Any) -> str:
        with _reading(node):
            return node.getName()

    def get_type(self, node: Any) -> AlembicType:
        with _reading(node):
            metadata = node.getMetaData()
            for class_name, node_type in _SCHEMA_TYPES:
                schema_class = getattr(self._geom, class_name, None)
                if schema_class is not None and schema_class.matches(metadata):
                    return node_type
        return AlembicType.UNKNOWN

    def get_sample_count(self, node: Any) -> int:
        with _reading(node):
            schema = self._schema(node, self.get_type(node))
            if schema is None:
                return 0
            return int(schema.getNumSamples())

    def is_dynamic_topology(self, node: Any) -> bool:
        with _reading(node):
            schema = self._schema(node, self.get_type(node))
            if schema is None or not hasattr(schema, "getFaceIndicesProperty"):
                return False
            return not schema.getFaceIndicesProperty().isConstant()

    def is_point_cache_only(self, node: Any) -> bool:
        with _reading(node):
            schema = self._schema(node, self.get_type(node))
            if schema is None or schema.getNumSamples() == 0:
                return False
            sample = schema.getValue(sdk.sample_selector(0))
            face_counts = sample.getFaceCounts()
            return face_counts is None or sum(face_counts) == 0

    def has_multiple_curve_samples(self, node: Any) -> bool:
        with _reading(node):
            schema = self._schema(node, AlembicType.CURVES)
            if schema is None:
                return False
            for index in range(schema.getNumSamples()):
                sample = schema.getValue(sdk.sample_selector(index))
                if sample.getNumCurves() > 1:
                    return True
            return False
