"""Pull the content payload out of free-form provider text."""

from __future__ import annotations

import json
import re
from typing import Optional

from refigma.content import ContentPayload

from .errors import ContentFormatError

NO_JSON_MESSAGE = "Gemini did not produce valid JSON."
PARSE_FAILED_MESSAGE = "Failed to parse JSON from Gemini."

# Greedy: leftmost '{' to rightmost '}' across the whole text
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> Optional[str]:
    match = _JSON_OBJECT_RE.search(text)
    return match.group(0) if match else None


def parse_content_payload(text: str) -> ContentPayload:
    """Parse provider text into a ContentPayload.

    Fields of the wrong shape are dropped by the payload model; only a
    missing or unparseable JSON object is an error.

    Raises:
        ContentFormatError: no brace-delimited region, or invalid JSON.
    """
    raw = extract_json_object(text)
    if raw is None:
        raise ContentFormatError(NO_JSON_MESSAGE)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ContentFormatError(PARSE_FAILED_MESSAGE) from e
    return ContentPayload.model_validate(data)
