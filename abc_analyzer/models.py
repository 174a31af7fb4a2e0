"""Domain models used across the analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class AlembicType(Enum):
    XFORM = "Xform"
    POLY_MESH = "PolyMesh"
    CURVES = "Curves"
    NU_PATCH = "NuPatch"
    POINTS = "Points"
    SUBD = "SubD"
    CAMERA = "Camera"
    FACE_SET = "FaceSet"
    LIGHT = "Light"
    GROUP = "Group"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class NodeRecord:
    """One flattened archive object.

    Index 0 is reserved for the synthetic root, which keeps the defaults
    below (and ``valid=False``) for its whole life.
    """

    index: int
    identifier: str = ""
    type: AlembicType = AlembicType.UNKNOWN
    name: str = ""
    sample_count: int = 0
    parent_index: int = -1
    child_indices: List[int] = field(default_factory=list)
    metadata: str = ""
    valid: bool = False


@dataclass
class SceneInfo:
    path: str
    lines: List[str] = field(default_factory=list)
    halted: bool = False
