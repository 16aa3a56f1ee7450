"""Refigma runtime settings — tunable parameters for building and generation.

All values read from environment variables; the defaults reproduce the
landing template as designed. Import from here instead of hardcoding.

Infrastructure config (API host, provider key, model, token path) stays
in refigma/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# Gemini request
# =====================================================================

GEMINI_TEMPERATURE = _float("GEMINI_TEMPERATURE", 0.4)
GEMINI_MAX_OUTPUT_TOKENS = _int("GEMINI_MAX_OUTPUT_TOKENS", 2048)

# HTTP timeout for the generateContent call (seconds)
GEMINI_HTTP_TIMEOUT = _float("GEMINI_HTTP_TIMEOUT", 60.0)


# =====================================================================
# Landing template placement
# =====================================================================

# Canvas position of a freshly built landing frame
LANDING_X = _float("LANDING_X", 480.0)
LANDING_Y = _float("LANDING_Y", 160.0)

# Desktop frame width
LANDING_WIDTH = _float("LANDING_WIDTH", 1440.0)

# Theme used by every section builder
DEFAULT_THEME = _str("REFIGMA_DEFAULT_THEME", "light")


# =====================================================================
# Content application
# =====================================================================

# Number of repeatable rows (highlights, bullets, metrics) in the template
CONTENT_MAX_ROWS = _int("CONTENT_MAX_ROWS", 3)
