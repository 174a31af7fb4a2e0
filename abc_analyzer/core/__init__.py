"""Core infrastructure for archive access, traversal and encoding."""

from .analyzer import AlembicAnalyzer, SceneContext
from .exceptions import AlembicBindingsNotAvailableError, ArchiveUnavailableError

__all__ = [
    "AlembicAnalyzer",
    "SceneContext",
    "AlembicBindingsNotAvailableError",
    "ArchiveUnavailableError",
]
