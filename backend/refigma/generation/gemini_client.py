"""Gemini generateContent client.

Sends one prompt and returns the candidate text. Everything about how the
model reasons is opaque to us: prompt in, JSON-shaped text out.

Environment:
    GEMINI_API_KEY — API key (required for generation)
    GEMINI_MODEL — model id, default gemini-2.5-flash

Usage:
    client = GeminiClient()
    text = await client.generate_content(build_prompt("Bakery in Bandung"))
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from refigma import config, settings

from .errors import ContentFormatError, ProviderError

logger = logging.getLogger("refigma.generation.gemini")


def extract_candidate_text(data: Dict[str, Any]) -> str:
    """Join the text parts of the first candidate with newlines."""
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    texts: List[str] = [
        part["text"] if isinstance(part, dict) and isinstance(part.get("text"), str) else ""
        for part in parts
    ]
    return "\n".join(texts).strip()


def _error_message(resp: httpx.Response) -> str:
    message = f"Gemini API error: {resp.reason_phrase}"
    try:
        body = resp.json()
    except ValueError:
        return message
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return message


class GeminiClient:
    """Async Gemini REST client.

    Args:
        api_key: Gemini API key. Falls back to GEMINI_API_KEY.
        model: Model id. Falls back to GEMINI_MODEL.
        base_url: API origin. Falls back to GEMINI_API_BASE.
        timeout: HTTP request timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = settings.GEMINI_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = config.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or config.GEMINI_MODEL
        self._base_url = base_url or config.GEMINI_API_BASE
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": settings.GEMINI_TEMPERATURE,
                "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
            },
        }

    async def generate_content(self, prompt: str) -> str:
        """POST the prompt and return the concatenated candidate text.

        Raises:
            ProviderError: non-2xx status, timeout or connection failure.
            ContentFormatError: the response carried no candidate text.
        """
        client = await self._get_client()
        path = f"/v1beta/models/{self.model}:generateContent"
        logger.info("generate_content: model=%s, prompt_chars=%d", self.model, len(prompt))
        try:
            resp = await client.post(path, params={"key": self._api_key}, json=self.request_body(prompt))
        except httpx.TimeoutException as e:
            raise ProviderError("Gemini API timeout") from e
        except httpx.TransportError as e:
            raise ProviderError(f"Gemini API connection error: {e}") from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("generate_content: status=%d, error=%s", resp.status_code, message)
            raise ProviderError(message, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise ContentFormatError("Gemini returned a response that is not JSON.") from e

        text = extract_candidate_text(data)
        if not text:
            raise ContentFormatError("Gemini returned no content.")
        logger.info("generate_content: received %d chars", len(text))
        return text
