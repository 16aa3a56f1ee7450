"""Token schema model and loader.

The schema is read once at startup from tokens.json (or REFIGMA_TOKENS_PATH)
and handed to TokenResolver as an immutable value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

BUNDLED_TOKENS_PATH = Path(__file__).resolve().parent / "tokens.json"

# A color group is either a single hex value or a shade -> hex mapping
ColorGroup = Union[str, Dict[str, str]]


class TokenSchemaError(Exception):
    """Raised when the token schema file is missing or malformed."""


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TypographyStyle(_Frozen):
    font_size: float = Field(..., alias="fontSize")
    font_weight: int = Field(..., alias="fontWeight")
    line_height: float = Field(..., alias="lineHeight")


class Typography(_Frozen):
    font_family: str = Field(..., alias="fontFamily")
    scale: Dict[str, TypographyStyle]


class SpacingBase(_Frozen):
    unit: Optional[float] = None
    scale: List[float] = Field(..., min_length=1)


class Spacing(_Frozen):
    base: SpacingBase


class ShadowPreset(_Frozen):
    color: str
    offset_x: float = Field(0, validation_alias=AliasChoices("offsetX", "offset_x", "x"))
    offset_y: float = Field(0, validation_alias=AliasChoices("offsetY", "offset_y", "y"))
    blur: float = 0
    spread: float = 0


class TokenSchema(_Frozen):
    """The style vocabulary consumed by the scene-graph builder."""

    colors: Dict[str, Dict[str, ColorGroup]]
    typography: Typography
    spacing: Spacing
    radii: Dict[str, float]
    shadows: Dict[str, ShadowPreset]


def load_token_schema(path: Optional[Union[str, Path]] = None) -> TokenSchema:
    """Load and validate a token schema file.

    Args:
        path: JSON file to read. Defaults to the bundled tokens.json.

    Raises:
        TokenSchemaError: file unreadable, not JSON, or not schema-shaped.
    """
    source = Path(path) if path else BUNDLED_TOKENS_PATH
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except OSError as e:
        raise TokenSchemaError(f"Cannot read token schema {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise TokenSchemaError(f"Token schema {source} is not valid JSON: {e}") from e

    try:
        schema = TokenSchema.model_validate(raw)
    except PydanticValidationError as e:
        raise TokenSchemaError(f"Token schema {source} is malformed: {e}") from e

    logger.info(
        "Loaded token schema from %s (themes=%s, variants=%d, spacing steps=%d)",
        source, sorted(schema.colors), len(schema.typography.scale),
        len(schema.spacing.base.scale),
    )
    return schema
