"""Generation error taxonomy.

All three are caught at the orchestrator boundary and turned into an `error`
status; none of them is fatal to the process.
"""

from __future__ import annotations

from typing import Optional


class GenerationError(Exception):
    """Base class for errors surfaced as a generation status message."""


class ValidationError(GenerationError):
    """Prompt empty or provider credential missing; raised before any network call."""


class ProviderError(GenerationError):
    """The content provider answered with a non-success status or was unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ContentFormatError(GenerationError):
    """The provider text held no JSON object, or the object failed to parse."""
