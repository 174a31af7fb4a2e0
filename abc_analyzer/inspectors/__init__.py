"""Inspector implementations for extracting targeted data."""

from .scene_info import SceneInfoInspector, get_info

__all__ = [
    "SceneInfoInspector",
    "get_info",
]
