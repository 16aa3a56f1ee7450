"""Host canvas contract and an in-memory implementation.

The builders and the content engine only talk to a CanvasHost. A real design
tool bridge implements the same methods; InMemoryCanvas backs the HTTP surface
and the tests.

Optional host features are declared once through HostCapabilities instead of
being probed per call. Methods behind a disabled capability are no-ops.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence, Set, Union

from refigma.tokens.resolver import FontName

from .nodes import MIXED, LayoutDirection, NodeKind, SceneNode, ShapeKind

logger = logging.getLogger(__name__)


class FontLoadError(RuntimeError):
    """Raised when the host cannot provide a requested font."""


class FontNotLoadedError(RuntimeError):
    """Raised when text is mutated before its font was loaded."""


@dataclass(frozen=True)
class HostCapabilities:
    """Features a host may or may not offer, resolved once at startup.

    ranged_text_style: per-range line height / letter spacing
    viewport: selection and scroll-into-view
    notifications: transient toast messages
    """

    ranged_text_style: bool = True
    viewport: bool = True
    notifications: bool = True


@dataclass(eq=False)
class CanvasPage:
    """Top-level page; owns the roots of every build appended to it."""

    name: str = "Page 1"
    children: List[SceneNode] = field(default_factory=list)
    selection: List[SceneNode] = field(default_factory=list)

    def append_child(self, node: SceneNode) -> None:
        if node.parent is not None or any(child is node for child in self.children):
            raise ValueError(f"Node {node.name or node.id} is already attached")
        self.children.append(node)


Parent = Union[SceneNode, CanvasPage]


class CanvasHost(ABC):
    """Primitives the scene-graph builder and content engine consume."""

    @property
    @abstractmethod
    def capabilities(self) -> HostCapabilities: ...

    @property
    @abstractmethod
    def current_page(self) -> CanvasPage: ...

    @abstractmethod
    def create_container(self, direction: Optional[LayoutDirection] = None) -> SceneNode: ...

    @abstractmethod
    def create_text(self) -> SceneNode: ...

    @abstractmethod
    def create_shape(self, kind: ShapeKind) -> SceneNode: ...

    @abstractmethod
    def append_child(self, parent: Parent, child: SceneNode) -> None: ...

    @abstractmethod
    def set_style(self, node: SceneNode, **attrs: Any) -> None: ...

    @abstractmethod
    async def load_font(self, font: FontName) -> None: ...

    def find_descendant(
        self, root: SceneNode, predicate: Callable[[SceneNode], bool]
    ) -> Optional[SceneNode]:
        """First match in depth-first pre-order, excluding root."""
        return root.find_one(predicate)

    def set_selection(self, nodes: Sequence[SceneNode]) -> None:
        """May be a no-op when capabilities.viewport is False."""

    def scroll_into_view(self, nodes: Sequence[SceneNode]) -> None:
        """May be a no-op when capabilities.viewport is False."""

    def notify(self, message: str) -> None:
        """May be a no-op when capabilities.notifications is False."""


class InMemoryCanvas(CanvasHost):
    """CanvasHost that keeps the whole document in process memory.

    Args:
        capabilities: Declared optional features.
        available_fonts: Fonts the host can load. None means any font.
        font_load_delay: Seconds each load_font call awaits (simulates I/O).
    """

    def __init__(
        self,
        capabilities: Optional[HostCapabilities] = None,
        available_fonts: Optional[Iterable[FontName]] = None,
        font_load_delay: float = 0.0,
    ):
        self._capabilities = capabilities or HostCapabilities()
        self._page = CanvasPage()
        self._ids = itertools.count(1)
        self._available_fonts: Optional[Set[FontName]] = (
            set(available_fonts) if available_fonts is not None else None
        )
        self._font_load_delay = font_load_delay
        self.loaded_fonts: Set[FontName] = set()
        self.font_load_log: List[FontName] = []
        self.notifications: List[str] = []
        self.scrolled_to: List[SceneNode] = []

    @property
    def capabilities(self) -> HostCapabilities:
        return self._capabilities

    @property
    def current_page(self) -> CanvasPage:
        return self._page

    def _next_id(self) -> str:
        return f"0:{next(self._ids)}"

    def create_container(self, direction: Optional[LayoutDirection] = None) -> SceneNode:
        node = SceneNode(id=self._next_id(), kind=NodeKind.CONTAINER, fills=[
            {"type": "SOLID", "color": {"r": 1.0, "g": 1.0, "b": 1.0}},
        ])
        node.layout_mode = direction
        return node

    def create_text(self) -> SceneNode:
        return SceneNode(
            id=self._next_id(),
            kind=NodeKind.TEXT,
            fills=[{"type": "SOLID", "color": {"r": 0.0, "g": 0.0, "b": 0.0}}],
        )

    def create_shape(self, kind: ShapeKind) -> SceneNode:
        node = SceneNode(id=self._next_id(), kind=NodeKind.SHAPE, fills=[
            {"type": "SOLID", "color": {"r": 0.85, "g": 0.85, "b": 0.85}},
        ])
        node.shape_type = kind
        return node

    def append_child(self, parent: Parent, child: SceneNode) -> None:
        parent.append_child(child)

    def set_style(self, node: SceneNode, **attrs: Any) -> None:
        for key, value in attrs.items():
            if key in ("characters", "font_name"):
                self._check_text_fonts(node, key, value)
            elif not hasattr(node, key) or key in ("children", "parent", "id", "kind"):
                raise AttributeError(f"{node.kind.value} node has no style attribute '{key}'")
            setattr(node, key, value)

    def _check_text_fonts(self, node: SceneNode, key: str, value: Any) -> None:
        if node.kind is not NodeKind.TEXT:
            raise AttributeError(f"'{key}' only applies to text nodes")
        if key == "font_name":
            required = {value}
        elif node.font_name is MIXED:
            required = {run.font for run in node.font_runs()}
        else:
            required = {node.font_name} if node.font_name else set()
        missing = required - self.loaded_fonts
        if missing:
            raise FontNotLoadedError(
                f"Font(s) {sorted(missing)} must be loaded before setting {key} on {node.name!r}"
            )

    async def load_font(self, font: FontName) -> None:
        if self._font_load_delay:
            await asyncio.sleep(self._font_load_delay)
        if self._available_fonts is not None and font not in self._available_fonts:
            raise FontLoadError(f"Font {font.family} {font.style} is not available")
        self.font_load_log.append(font)
        self.loaded_fonts.add(font)

    def set_selection(self, nodes: Sequence[SceneNode]) -> None:
        if self._capabilities.viewport:
            self._page.selection = list(nodes)

    def scroll_into_view(self, nodes: Sequence[SceneNode]) -> None:
        if self._capabilities.viewport:
            self.scrolled_to = list(nodes)

    def notify(self, message: str) -> None:
        if self._capabilities.notifications:
            logger.info("notify: %s", message)
            self.notifications.append(message)
