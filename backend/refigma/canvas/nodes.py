"""Scene node model — containers, text and shapes in an owned, ordered tree.

Paints, strokes and effects are plain dicts in the host's wire shape
({"type": "SOLID", "color": {...}}, {"type": "GRADIENT_LINEAR", ...},
{"type": "DROP_SHADOW", ...}) so a node can be exported as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from refigma.tokens.resolver import FontName


class NodeKind(str, Enum):
    CONTAINER = "container"
    TEXT = "text"
    SHAPE = "shape"


class LayoutDirection(str, Enum):
    ROW = "HORIZONTAL"
    COLUMN = "VERTICAL"


class ShapeKind(str, Enum):
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"


class _Mixed:
    """Sentinel returned when a text range spans more than one font."""

    _instance: Optional["_Mixed"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MIXED"


MIXED = _Mixed()


class NodeTreeError(ValueError):
    """Raised when an append would share a node or create a cycle."""


@dataclass
class TextRun:
    """Contiguous character range [start, end) carrying one font."""

    start: int
    end: int
    font: FontName


@dataclass(eq=False)
class SceneNode:
    id: str
    kind: NodeKind
    name: str = ""
    visible: bool = True
    opacity: float = 1.0

    # Geometry
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0

    # Style
    fills: List[Dict[str, Any]] = field(default_factory=list)
    strokes: List[Dict[str, Any]] = field(default_factory=list)
    stroke_weight: float = 0.0
    corner_radius: float = 0.0
    effects: List[Dict[str, Any]] = field(default_factory=list)

    # Auto layout (containers only; layout_mode None = fixed-size frame)
    layout_mode: Optional[LayoutDirection] = None
    primary_axis_sizing_mode: str = "FIXED"
    counter_axis_sizing_mode: str = "FIXED"
    primary_axis_align_items: str = "MIN"
    counter_axis_align_items: str = "MIN"
    padding_left: float = 0.0
    padding_right: float = 0.0
    padding_top: float = 0.0
    padding_bottom: float = 0.0
    item_spacing: float = 0.0
    layout_grids: List[Dict[str, Any]] = field(default_factory=list)
    clips_content: bool = False

    # Participation in the parent's auto layout
    layout_grow: float = 0.0
    layout_align: str = "INHERIT"

    # Shapes
    shape_type: Optional[ShapeKind] = None

    # Text
    font_size: float = 12.0
    line_height: Optional[Dict[str, Any]] = None
    letter_spacing: Optional[Dict[str, Any]] = None
    text_auto_resize: str = "NONE"

    children: List["SceneNode"] = field(default_factory=list)
    parent: Optional["SceneNode"] = field(default=None, repr=False)

    _characters: str = field(default="", repr=False)
    _runs: List[TextRun] = field(default_factory=list, repr=False)
    _default_font: Optional[FontName] = field(default=None, repr=False)

    # ------------------------------------------------------------------
    # Text body and font runs
    # ------------------------------------------------------------------

    @property
    def characters(self) -> str:
        return self._characters

    @characters.setter
    def characters(self, value: str) -> None:
        # Replacing the whole body keeps the font of the first character
        font = self._font_at(0) or self._default_font
        self._characters = value
        self._default_font = font
        self._runs = [TextRun(0, len(value), font)] if font and value else []

    @property
    def font_name(self) -> Union[FontName, _Mixed, None]:
        if not self._runs:
            return self._default_font
        return self.get_range_font_name(0, len(self._characters))

    @font_name.setter
    def font_name(self, font: FontName) -> None:
        self._default_font = font
        self._runs = [TextRun(0, len(self._characters), font)] if self._characters else []

    def _font_at(self, index: int) -> Optional[FontName]:
        for run in self._runs:
            if run.start <= index < run.end:
                return run.font
        return None

    def get_range_font_name(self, start: int, end: int) -> Union[FontName, _Mixed, None]:
        fonts = {run.font for run in self._runs if run.start < end and run.end > start}
        if not fonts:
            return self._default_font
        if len(fonts) > 1:
            return MIXED
        return next(iter(fonts))

    def set_range_font_name(self, start: int, end: int, font: FontName) -> None:
        """Apply font to [start, end), splitting and re-merging runs."""
        end = min(end, len(self._characters))
        if start >= end:
            return
        per_char = [self._font_at(i) or self._default_font for i in range(len(self._characters))]
        for i in range(start, end):
            per_char[i] = font
        self._runs = _merge_runs(per_char)

    def font_runs(self) -> List[TextRun]:
        return list(self._runs)

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def append_child(self, child: "SceneNode") -> None:
        if self.kind is not NodeKind.CONTAINER:
            raise NodeTreeError(f"{self.kind.value} node {self.name or self.id} cannot hold children")
        if child.parent is not None:
            raise NodeTreeError(f"Node {child.name or child.id} already has a parent")
        if child is self or any(node is child for node in self.ancestors()):
            raise NodeTreeError(f"Appending {child.name or child.id} would create a cycle")
        child.parent = self
        self.children.append(child)

    def ancestors(self) -> Iterator["SceneNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["SceneNode"]:
        """Depth-first pre-order traversal, self first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_one(self, predicate: Callable[["SceneNode"], bool]) -> Optional["SceneNode"]:
        for node in self.walk():
            if node is not self and predicate(node):
                return node
        return None

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def to_dict(self) -> Dict[str, Any]:
        """Export the subtree as JSON-compatible data."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "visible": self.visible,
        }
        if self.opacity != 1.0:
            data["opacity"] = self.opacity
        if self.fills:
            data["fills"] = self.fills
        if self.strokes:
            data["strokes"] = self.strokes
            data["stroke_weight"] = self.stroke_weight
        if self.corner_radius:
            data["corner_radius"] = self.corner_radius
        if self.effects:
            data["effects"] = self.effects
        if self.kind is NodeKind.CONTAINER:
            data["layout"] = {
                "mode": self.layout_mode.value if self.layout_mode else None,
                "padding": [self.padding_top, self.padding_right, self.padding_bottom, self.padding_left],
                "item_spacing": self.item_spacing,
                "primary_align": self.primary_axis_align_items,
                "counter_align": self.counter_axis_align_items,
            }
            data["children"] = [child.to_dict() for child in self.children]
        elif self.kind is NodeKind.TEXT:
            font = self.font_name
            data["characters"] = self.characters
            data["font"] = "mixed" if font is MIXED else (list(font) if font else None)
            data["font_size"] = self.font_size
        else:
            data["shape"] = self.shape_type.value if self.shape_type else None
            data["size"] = [self.width, self.height]
        return data


def _merge_runs(per_char: List[Optional[FontName]]) -> List[TextRun]:
    runs: List[TextRun] = []
    for index, font in enumerate(per_char):
        if font is None:
            continue
        if runs and runs[-1].font == font and runs[-1].end == index:
            runs[-1].end = index + 1
        else:
            runs.append(TextRun(index, index + 1, font))
    return runs
