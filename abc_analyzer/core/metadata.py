"""Per-object metadata flags reported alongside the structural fields."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from ..models import AlembicType
from .node_source import NodeSource

METADATA_SEPARATOR = ";"

# (flag key, NodeSource predicate) pairs, evaluated in order.
METADATA_PREDICATES: Dict[AlembicType, Tuple[Tuple[str, str], ...]] = {
    AlembicType.POLY_MESH: (
        ("dynamictopology", "is_dynamic_topology"),
        ("purepointcache", "is_point_cache_only"),
    ),
    AlembicType.SUBD: (
        ("dynamictopology", "is_dynamic_topology"),
        ("purepointcache", "is_point_cache_only"),
    ),
    AlembicType.CURVES: (
        ("hair", "has_multiple_curve_samples"),
    ),
}


def collect_metadata(source: NodeSource, node: Any, node_type: AlembicType) -> str:
    """Return the ``key=1`` flags that apply to ``node`` joined by ``METADATA_SEPARATOR``."""

    flags: List[str] = []
    for key, predicate in METADATA_PREDICATES.get(node_type, ()):
        if getattr(source, predicate)(node):
            flags.append(f"{key}=1")
    return METADATA_SEPARATOR.join(flags)
