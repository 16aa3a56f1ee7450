"""Refigma configuration constants — single source of truth for all env vars."""

import os

# Server binding — used by entrypoint / uvicorn
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Gemini — content generation provider
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_BASE = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com")

# Token schema — empty means the bundled refigma/tokens/tokens.json
REFIGMA_TOKENS_PATH = os.getenv("REFIGMA_TOKENS_PATH", "")
