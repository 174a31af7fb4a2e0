"""Flat text reports of Alembic archive hierarchies."""

from .inspectors import SceneInfoInspector, get_info
from .models import AlembicType, NodeRecord, SceneInfo

__all__ = ["AlembicType", "NodeRecord", "SceneInfo", "SceneInfoInspector", "get_info"]
__version__ = "0.1.0"
