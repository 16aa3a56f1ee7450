"""Color conversion between token hex strings and normalized paint colors."""

from __future__ import annotations

import re
from typing import Dict

RGB = Dict[str, float]
RGBA = Dict[str, float]

# Shadow colors that fail to parse fall back to a faint black
FALLBACK_RGBA: RGBA = {"r": 0.0, "g": 0.0, "b": 0.0, "a": 0.16}

_RGBA_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.?\d+)\s*\)",
    re.IGNORECASE,
)


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert '#RRGGBB' to {r, g, b} floats in [0, 1]."""
    value = int(hex_color.replace("#", ""), 16)
    r = (value >> 16) & 255
    g = (value >> 8) & 255
    b = value & 255
    return {"r": r / 255, "g": g / 255, "b": b / 255}


def hex_to_rgba(hex_color: str, alpha: float = 1.0) -> RGBA:
    rgb = hex_to_rgb(hex_color)
    return {**rgb, "a": alpha}


def parse_rgba(text: str) -> RGBA:
    """Parse an 'rgba(r, g, b, a)' string into normalized channels.

    Unparseable input returns FALLBACK_RGBA instead of raising.
    """
    match = _RGBA_RE.search(text or "")
    if not match:
        return dict(FALLBACK_RGBA)
    r, g, b, a = match.groups()
    return {
        "r": int(r) / 255,
        "g": int(g) / 255,
        "b": int(b) / 255,
        "a": float(a),
    }


def rgb_to_hex(color: Dict[str, float]) -> str:
    """Convert {r, g, b} floats back to an uppercase '#RRGGBB' string."""
    r = round(color.get("r", 0) * 255)
    g = round(color.get("g", 0) * 255)
    b = round(color.get("b", 0) * 255)
    return f"#{r:02X}{g:02X}{b:02X}"
