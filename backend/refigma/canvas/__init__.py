"""Scene node model and host canvas contract."""

from .host import (
    CanvasHost,
    CanvasPage,
    FontLoadError,
    FontNotLoadedError,
    HostCapabilities,
    InMemoryCanvas,
)
from .nodes import MIXED, LayoutDirection, NodeKind, NodeTreeError, SceneNode, ShapeKind, TextRun

__all__ = [
    "MIXED",
    "CanvasHost",
    "CanvasPage",
    "FontLoadError",
    "FontNotLoadedError",
    "HostCapabilities",
    "InMemoryCanvas",
    "LayoutDirection",
    "NodeKind",
    "NodeTreeError",
    "SceneNode",
    "ShapeKind",
    "TextRun",
]
