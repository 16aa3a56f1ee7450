"""Building blocks shared by every section builder.

LayoutKit binds a CanvasHost to a TokenResolver and one theme, and turns token
names into paints, effects, auto-layout containers, text nodes and buttons.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from refigma.canvas import CanvasHost, LayoutDirection, NodeKind, SceneNode, ShapeKind
from refigma.tokens import TokenResolver, hex_to_rgb, hex_to_rgba, parse_rgba
from refigma.tokens.resolver import DEFAULT_THEME

logger = logging.getLogger(__name__)

Paint = Dict[str, Any]
Transform = Tuple[Tuple[float, float, float], Tuple[float, float, float]]
Padding = Union[float, Tuple[float, float], Tuple[float, float, float, float]]

IDENTITY: Transform = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))

ROW = LayoutDirection.ROW
COLUMN = LayoutDirection.COLUMN

DEFAULT_TEXT_FILL = "neutral/900"


def rotation(cos: float, sin: float) -> Transform:
    """2x3 gradient transform for a rotation given as (cos, sin)."""
    return ((cos, sin, 0.0), (-sin, cos, 0.0))


def _expand_padding(padding: Padding) -> Tuple[float, float, float, float]:
    """Normalize to (top, right, bottom, left)."""
    if isinstance(padding, (int, float)):
        return (padding, padding, padding, padding)
    if len(padding) == 2:
        vertical, horizontal = padding
        return (vertical, horizontal, vertical, horizontal)
    top, right, bottom, left = padding
    return (top, right, bottom, left)


class LayoutKit:
    """Token-aware node factory used by the section builders."""

    def __init__(self, host: CanvasHost, tokens: TokenResolver, theme: str = DEFAULT_THEME):
        self.host = host
        self.tokens = tokens
        self.theme = theme

    # ------------------------------------------------------------------
    # Token shortcuts
    # ------------------------------------------------------------------

    def color(self, token: str) -> str:
        return self.tokens.get_color(self.theme, token)

    def spacing(self, step: int) -> float:
        return self.tokens.spacing(step)

    def radius(self, value: Union[str, float]) -> float:
        return self.tokens.radius(value) if isinstance(value, str) else value

    def solid(self, token: str) -> Paint:
        return {"type": "SOLID", "color": hex_to_rgb(self.color(token))}

    def gradient(self, *stops: Tuple[str, float], transform: Transform = IDENTITY) -> Paint:
        """Linear gradient with (token, alpha) stops spread evenly over [0, 1]."""
        last = max(1, len(stops) - 1)
        return {
            "type": "GRADIENT_LINEAR",
            "gradientStops": [
                {"position": index / last, "color": hex_to_rgba(self.color(token), alpha)}
                for index, (token, alpha) in enumerate(stops)
            ],
            "gradientTransform": [list(row) for row in transform],
        }

    def shadow(self, preset: str) -> Paint:
        shadow = self.tokens.shadow(preset)
        return {
            "type": "DROP_SHADOW",
            "color": parse_rgba(shadow.color),
            "offset": {"x": shadow.offset_x, "y": shadow.offset_y},
            "radius": shadow.blur,
            "spread": shadow.spread,
            "visible": True,
            "blendMode": "NORMAL",
        }

    # ------------------------------------------------------------------
    # Node factories
    # ------------------------------------------------------------------

    def auto_layout(
        self,
        direction: LayoutDirection,
        *,
        name: Optional[str] = None,
        counter_align: Optional[str] = None,
        primary_align: Optional[str] = None,
        spacing: float = 0,
        padding: Padding = 0,
        radius: Union[str, float, None] = None,
        fills: Optional[List[Paint]] = None,
        stroke: Optional[str] = None,
        effects: Optional[List[Paint]] = None,
        opacity: Optional[float] = None,
        grow: bool = False,
        stretch: bool = False,
    ) -> SceneNode:
        """Hug-content container with no fill, no stroke and zero padding unless given."""
        frame = self.host.create_container(direction)
        top, right, bottom, left = _expand_padding(padding)
        style: Dict[str, Any] = {
            "primary_axis_sizing_mode": "AUTO",
            "counter_axis_sizing_mode": "AUTO",
            "fills": fills or [],
            "strokes": [self.solid(stroke)] if stroke else [],
            "stroke_weight": 1 if stroke else 0,
            "padding_top": top,
            "padding_right": right,
            "padding_bottom": bottom,
            "padding_left": left,
            "item_spacing": spacing,
        }
        if counter_align:
            style["counter_axis_align_items"] = counter_align
        if primary_align:
            style["primary_axis_align_items"] = primary_align
        if radius is not None:
            style["corner_radius"] = self.radius(radius)
        if effects:
            style["effects"] = effects
        if opacity is not None:
            style["opacity"] = opacity
        if grow:
            style["layout_grow"] = 1
        if stretch:
            style["layout_align"] = "STRETCH"
        self.host.set_style(frame, **style)
        if name:
            frame.name = name
        return frame

    def shape(
        self,
        kind: ShapeKind,
        width: float,
        height: float,
        *,
        fills: Optional[List[Paint]] = None,
        radius: Optional[float] = None,
        opacity: Optional[float] = None,
    ) -> SceneNode:
        node = self.host.create_shape(kind)
        node.resize(width, height)
        style: Dict[str, Any] = {"fills": fills or [], "stroke_weight": 0}
        if radius is not None:
            style["corner_radius"] = radius
        if opacity is not None:
            style["opacity"] = opacity
        self.host.set_style(node, **style)
        return node

    def dot(self, token: str, size: float) -> SceneNode:
        return self.shape(ShapeKind.ELLIPSE, size, size, fills=[self.solid(token)])

    def marker(self, token: str) -> SceneNode:
        return self.shape(ShapeKind.RECTANGLE, 10, 10, fills=[self.solid(token)], radius=3)

    async def text(
        self,
        content: str,
        variant: str,
        fill: Optional[str] = None,
        max_width: Optional[float] = None,
        *,
        name: Optional[str] = None,
    ) -> SceneNode:
        """Text node styled from a typography variant.

        The variant's font is loaded before any text attribute is touched.
        """
        style = self.tokens.text_style(variant)
        font = self.tokens.resolve_font(style.font_weight)
        node = self.host.create_text()
        await self.host.load_font(font)
        self.host.set_style(
            node,
            font_name=font,
            font_size=style.font_size,
            fills=[self.solid(fill or DEFAULT_TEXT_FILL)],
        )
        self.host.set_style(node, characters=content)

        if content and self.host.capabilities.ranged_text_style:
            self.host.set_style(
                node,
                line_height={"value": style.line_height, "unit": "PIXELS"},
                letter_spacing={"value": 0, "unit": "PERCENT"},
            )

        if max_width is not None:
            self.host.set_style(node, text_auto_resize="HEIGHT")
            node.resize(max_width, style.line_height)
        else:
            self.host.set_style(node, text_auto_resize="WIDTH_AND_HEIGHT")

        if name:
            node.name = name
        return node

    async def button(
        self,
        label: str,
        variant: str,
        *,
        name: Optional[str] = None,
        label_name: Optional[str] = None,
    ) -> SceneNode:
        """Pill-ish action button; variant is 'primary' or 'ghost'."""
        if variant == "primary":
            button = self.auto_layout(
                ROW, counter_align="CENTER", spacing=self.spacing(1),
                padding=(self.spacing(1), self.spacing(3)), radius="md",
                fills=[self.gradient(("primary/500", 1), ("accent/500", 1),
                                     transform=rotation(0.92, 0.38))],
                effects=[self.shadow("soft")],
            )
            self.append(button, await self.text(label, "captionBold", "neutral/50"))
        elif variant == "ghost":
            button = self.auto_layout(
                ROW, counter_align="CENTER", spacing=self.spacing(1),
                padding=(self.spacing(1), self.spacing(3)), radius="md",
                fills=[self.solid("neutral/50")], stroke="neutral/300",
            )
            self.append(button, await self.text(label, "captionBold", "neutral/700"))
        else:
            raise ValueError(f"Unknown button variant: {variant}")

        if name:
            button.name = name
        if label_name:
            label_node = self.host.find_descendant(button, lambda n: n.kind is NodeKind.TEXT)
            if label_node is not None:
                label_node.name = label_name
        return button

    def append(self, parent: SceneNode, *children: SceneNode) -> SceneNode:
        for child in children:
            self.host.append_child(parent, child)
        return parent

    def card(self, *, padding_step: int, radius: str = "md", **kwargs: Any) -> SceneNode:
        """Column card with token padding, the common white fill and hairline stroke."""
        kwargs.setdefault("fills", [self.solid("neutral/50")])
        kwargs.setdefault("stroke", "neutral/200")
        kwargs.setdefault("counter_align", "MIN")
        return self.auto_layout(
            COLUMN, padding=self.spacing(padding_step), radius=radius, **kwargs,
        )


def stack(kit: LayoutKit, direction: LayoutDirection, children: Sequence[SceneNode], **kwargs: Any) -> SceneNode:
    """Auto-layout container pre-filled with children."""
    return kit.append(kit.auto_layout(direction, **kwargs), *children)
