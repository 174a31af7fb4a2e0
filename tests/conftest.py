from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from abc_analyzer.core import sdk
from abc_analyzer.core.exceptions import ArchiveUnavailableError
from abc_analyzer.models import AlembicType


@dataclass
class FakeNode:
    name: str
    path: str
    type: AlembicType = AlembicType.UNKNOWN
    samples: int = 0
    children: List["FakeNode"] = field(default_factory=list)
    dynamic: bool = False
    point_cache: bool = False
    hair: bool = False
    valid: bool = True


def node(name: str, type: AlembicType = AlembicType.XFORM, *children: FakeNode, path: Optional[str] = None, **kwargs) -> FakeNode:
    """Build a node whose path is filled in by ``tree`` unless given explicitly."""

    return FakeNode(name=name, path=path or "", type=type, children=list(children), **kwargs)


def tree(*children: FakeNode) -> FakeNode:
    """Return a root holding ``children``, assigning full paths where missing."""

    root = FakeNode(name="ABC", path="/", children=list(children))

    def assign(parent: FakeNode) -> None:
        for child in parent.children:
            if not child.path:
                prefix = "" if parent.path == "/" else parent.path
                child.path = f"{prefix}/{child.name}"
            assign(child)

    assign(root)
    return root


class FakeSource:
    """In-memory ``NodeSource`` over ``FakeNode`` trees."""

    def __init__(self) -> None:
        self.predicate_calls: List[str] = []

    def get_children(self, node: FakeNode) -> List[FakeNode]:
        if not node.valid:
            raise ArchiveUnavailableError("invalid handle")
        return list(node.children)

    def get_full_path(self, node: FakeNode) -> str:
        return node.path

    def get_local_name(self, node: FakeNode) -> str:
        return node.name

    def get_type(self, node: FakeNode) -> AlembicType:
        return node.type

    def get_sample_count(self, node: FakeNode) -> int:
        return node.samples

    def is_dynamic_topology(self, node: FakeNode) -> bool:
        self.predicate_calls.append(f"dynamic:{node.path}")
        return node.dynamic

    def is_point_cache_only(self, node: FakeNode) -> bool:
        self.predicate_calls.append(f"pointcache:{node.path}")
        return node.point_cache

    def has_multiple_curve_samples(self, node: FakeNode) -> bool:
        self.predicate_calls.append(f"hair:{node.path}")
        return node.hair


@pytest.fixture
def source() -> FakeSource:
    return FakeSource()


# --- Fake PyAlembic bindings -------------------------------------------------


class FakeProperty:
    def __init__(self, constant: bool) -> None:
        self._constant = constant

    def isConstant(self) -> bool:
        return self._constant


class FakeSample:
    def __init__(self, face_counts=None, num_curves: int = 0) -> None:
        self._face_counts = face_counts
        self._num_curves = num_curves

    def getFaceCounts(self):
        return self._face_counts

    def getNumCurves(self) -> int:
        return self._num_curves


class FakeSchema:
    def __init__(self, samples: List[FakeSample], constant_topology: bool = True) -> None:
        self._samples = samples
        self._constant_topology = constant_topology

    def getNumSamples(self) -> int:
        return len(self._samples)

    def getValue(self, selector: int) -> FakeSample:
        return self._samples[selector]

    def getFaceIndicesProperty(self) -> FakeProperty:
        return FakeProperty(self._constant_topology)


class FakeObject:
    """Stand-in for ``Abc.IObject``."""

    def __init__(
        self,
        full_name: str,
        schema_name: Optional[str] = None,
        schema: Optional[FakeSchema] = None,
        children: Optional[List["FakeObject"]] = None,
        valid: bool = True,
        broken: bool = False,
    ) -> None:
        self.full_name = full_name
        self.schema_name = schema_name
        self.schema = schema
        self.children = children or []
        self._valid = valid
        self.broken = broken

    def valid(self) -> bool:
        return self._valid

    def getNumChildren(self) -> int:
        if self.broken:
            raise RuntimeError("corrupt object header")
        return len(self.children)

    def getChild(self, index: int) -> "FakeObject":
        return self.children[index]

    def getFullName(self) -> str:
        return self.full_name

    def getName(self) -> str:
        return self.full_name.rsplit("/", 1)[-1] or "ABC"

    def getMetaData(self) -> Dict[str, Optional[str]]:
        return {"schema": self.schema_name}


def _schema_class(name: str):
    class Typed:
        schema_name = name

        def __init__(self, obj: FakeObject, flag: str) -> None:
            assert flag == "kWrapExisting"
            self._obj = obj

        @classmethod
        def matches(cls, metadata: Dict[str, Optional[str]]) -> bool:
            return metadata.get("schema") == cls.schema_name

        def valid(self) -> bool:
            return self._obj.schema is not None

        def getSchema(self) -> FakeSchema:
            return self._obj.schema

    Typed.__name__ = name
    return Typed


class FakeArchive:
    def __init__(self, path: str, top: Optional[FakeObject] = None) -> None:
        self.path = path
        self.top = top or FakeObject("/")

    def valid(self) -> bool:
        return True

    def getTop(self) -> FakeObject:
        return self.top


@pytest.fixture
def fake_bindings(monkeypatch: pytest.MonkeyPatch):
    abc_module = types.SimpleNamespace(
        WrapExistingFlag=types.SimpleNamespace(kWrapExisting="kWrapExisting"),
        ISampleSelector=lambda index: index,
        IArchive=FakeArchive,
    )
    geom_module = types.SimpleNamespace(
        **{
            name: _schema_class(name)
            for name in ("IXform", "IPolyMesh", "ISubD", "ICurves", "IPoints", "ICamera")
        }
    )
    monkeypatch.setattr(sdk, "import_alembic_module", lambda: (abc_module, geom_module))
    return abc_module, geom_module
