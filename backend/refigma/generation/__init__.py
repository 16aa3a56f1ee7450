"""Content generation: Gemini client, prompt, response parsing and orchestration."""

from .errors import ContentFormatError, GenerationError, ProviderError, ValidationError
from .gemini_client import GeminiClient, extract_candidate_text
from .orchestrator import (
    GenerationOrchestrator,
    GenerationResult,
    GenerationState,
    StatusUpdate,
)
from .parsing import extract_json_object, parse_content_payload
from .prompt import build_prompt

__all__ = [
    "ContentFormatError",
    "GeminiClient",
    "GenerationError",
    "GenerationOrchestrator",
    "GenerationResult",
    "GenerationState",
    "ProviderError",
    "StatusUpdate",
    "ValidationError",
    "build_prompt",
    "extract_candidate_text",
    "extract_json_object",
    "parse_content_payload",
]
