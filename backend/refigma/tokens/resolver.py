"""Token resolution — theme/color/typography/spacing/radius/shadow lookups.

Every lookup is deterministic. Color and spacing lookups fall back instead of
raising; typography, radius and shadow lookups raise UnknownTokenError since
an unknown name there is a bug in a section builder.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .schema import ShadowPreset, TokenSchema, TypographyStyle

DEFAULT_THEME = "light"
DEFAULT_COLOR = "#000000"
DEFAULT_SHADE = "500"

# Descending weight thresholds; the last entry (0) always matches
FONT_STYLE_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (700, "Bold"),
    (600, "Semi Bold"),
    (500, "Medium"),
    (0, "Regular"),
)


class FontName(NamedTuple):
    family: str
    style: str


class UnknownTokenError(KeyError):
    """Raised for a typography variant, radius or shadow name not in the schema."""


class TokenResolver:
    """Resolves abstract style tokens against an immutable TokenSchema."""

    def __init__(self, schema: TokenSchema, default_theme: str = DEFAULT_THEME):
        self._schema = schema
        self._default_theme = default_theme

    @property
    def schema(self) -> TokenSchema:
        return self._schema

    @property
    def default_theme(self) -> str:
        return self._default_theme

    @property
    def font_family(self) -> str:
        return self._schema.typography.font_family

    def get_color(self, theme: str, token: str) -> str:
        """Resolve 'group/shade' (shade defaults to 500) to a hex string.

        Unknown themes fall back to the default theme. A group defined as a
        single string is returned as-is whatever the shade. Anything else that
        cannot be resolved yields DEFAULT_COLOR.
        """
        group_name, _, shade = token.partition("/")
        colors = self._schema.colors
        resolved_theme = theme if theme in colors else self._default_theme
        group = colors.get(resolved_theme, {}).get(group_name)

        if not group:
            return DEFAULT_COLOR
        if isinstance(group, str):
            return group
        if shade in group:
            return group[shade]
        if not shade and DEFAULT_SHADE in group:
            return group[DEFAULT_SHADE]
        return DEFAULT_COLOR

    def spacing(self, step: int) -> float:
        """Spacing scale value for step, saturating at both ends."""
        scale = self._schema.spacing.base.scale
        index = max(0, min(len(scale) - 1, step))
        return scale[index]

    def resolve_font_style(self, weight: float) -> str:
        chosen = FONT_STYLE_THRESHOLDS[-1][1]
        for threshold, style in FONT_STYLE_THRESHOLDS:
            if weight >= threshold:
                chosen = style
                break
        return chosen

    def resolve_font(self, weight: float) -> FontName:
        return FontName(self.font_family, self.resolve_font_style(weight))

    def text_style(self, variant: str) -> TypographyStyle:
        try:
            return self._schema.typography.scale[variant]
        except KeyError:
            raise UnknownTokenError(f"Unknown typography variant: {variant}") from None

    def radius(self, name: str) -> float:
        try:
            return self._schema.radii[name]
        except KeyError:
            raise UnknownTokenError(f"Unknown radius: {name}") from None

    def shadow(self, name: str) -> ShadowPreset:
        try:
            return self._schema.shadows[name]
        except KeyError:
            raise UnknownTokenError(f"Unknown shadow preset: {name}") from None
