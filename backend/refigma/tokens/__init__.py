"""Design token schema, resolution and color conversion."""

from .color import hex_to_rgb, hex_to_rgba, parse_rgba, rgb_to_hex
from .resolver import (
    DEFAULT_COLOR,
    DEFAULT_THEME,
    FontName,
    TokenResolver,
    UnknownTokenError,
)
from .schema import TokenSchema, TokenSchemaError, load_token_schema

__all__ = [
    "DEFAULT_COLOR",
    "DEFAULT_THEME",
    "FontName",
    "TokenResolver",
    "TokenSchema",
    "TokenSchemaError",
    "UnknownTokenError",
    "hex_to_rgb",
    "hex_to_rgba",
    "load_token_schema",
    "parse_rgba",
    "rgb_to_hex",
]
