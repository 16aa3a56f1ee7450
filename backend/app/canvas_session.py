"""Canvas session

Owns the process-wide canvas host, token resolver, Gemini client and
orchestrator. Created once in the FastAPI lifespan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from refigma import config, settings
from refigma.canvas import InMemoryCanvas
from refigma.generation import GeminiClient, GenerationOrchestrator
from refigma.tokens import TokenResolver, load_token_schema

from .event_bus import push_status

logger = logging.getLogger(__name__)


@dataclass
class CanvasSession:
    host: InMemoryCanvas
    tokens: TokenResolver
    client: GeminiClient
    orchestrator: GenerationOrchestrator


# Singleton session (initialized via lifespan)
_session: Optional[CanvasSession] = None


def create_session(
    host: Optional[InMemoryCanvas] = None,
    client: Optional[GeminiClient] = None,
) -> CanvasSession:
    """Build a session; the token schema is validated here, once.

    Raises:
        TokenSchemaError: the configured token file is missing or malformed.
    """
    schema = load_token_schema(config.REFIGMA_TOKENS_PATH or None)
    tokens = TokenResolver(schema, settings.DEFAULT_THEME)
    host = host or InMemoryCanvas()
    client = client or GeminiClient()
    orchestrator = GenerationOrchestrator(host, tokens, client, listener=push_status)
    return CanvasSession(host=host, tokens=tokens, client=client, orchestrator=orchestrator)


def init_canvas_session() -> CanvasSession:
    global _session
    if _session is None:
        _session = create_session()
        if not _session.client.configured:
            logger.warning(
                "GEMINI_API_KEY not set; /api/v1/landing/generate will report a "
                "validation error until it is configured."
            )
    return _session


async def close_canvas_session() -> None:
    global _session
    if _session is not None:
        await _session.client.close()
        _session = None


def get_session() -> CanvasSession:
    """FastAPI dependency; initializes lazily when the lifespan did not run."""
    if _session is None:
        return init_canvas_session()
    return _session
