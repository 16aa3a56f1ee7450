"""Generation orchestrator — prompt → Gemini → fresh landing build → content.

States:

    IDLE → LOADING → REQUESTING → APPLYING → SUCCESS
      ↘────────────────┴────────────┴──────→ ERROR

Every transition is pushed to the status listener as a StatusUpdate. Errors
never escape generate(): they end in the ERROR state with a display message
and a host notification. Mutations made before an error are kept.

Only one generation runs at a time; a second generate() while one is in
flight ends at once with an error status and leaves the running one alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from refigma.builder import LandingPageBuilder
from refigma.canvas import CanvasHost, SceneNode
from refigma.content import ApplyReport, ContentApplicationEngine
from refigma.logging_config import get_generation_logger
from refigma.tokens import TokenResolver

from .errors import GenerationError, ValidationError
from .gemini_client import GeminiClient
from .parsing import parse_content_payload
from .prompt import build_prompt

logger = get_generation_logger()

GENERIC_ERROR_MESSAGE = "Something went wrong while calling Gemini."


class GenerationState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    REQUESTING = "requesting"
    APPLYING = "applying"
    SUCCESS = "success"
    ERROR = "error"


TERMINAL_STATES = frozenset({GenerationState.SUCCESS, GenerationState.ERROR})


@dataclass(frozen=True)
class StatusUpdate:
    state: GenerationState
    text: str
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict:
        return {"status": self.state.value, "text": self.text, "timestamp": self.timestamp}


StatusListener = Callable[[StatusUpdate], None]


@dataclass
class GenerationResult:
    state: GenerationState
    text: str
    root: Optional[SceneNode] = None
    report: Optional[ApplyReport] = None


class GenerationOrchestrator:
    """Runs the generate command and the token demo command against one host."""

    def __init__(
        self,
        host: CanvasHost,
        tokens: TokenResolver,
        client: GeminiClient,
        listener: Optional[StatusListener] = None,
    ):
        self.host = host
        self.tokens = tokens
        self.client = client
        self.listener = listener
        self.engine = ContentApplicationEngine(host)
        self._state = GenerationState.IDLE
        self._busy = False

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    def _emit(self, state: GenerationState, text: str) -> StatusUpdate:
        update = StatusUpdate(state, text)
        logger.info("[%s] %s", state.value, text)
        if self.listener is not None:
            self.listener(update)
        return update

    def _transition(self, state: GenerationState, text: str) -> None:
        self._state = state
        self._emit(state, text)

    def _fail(self, message: str, notice: str) -> GenerationResult:
        self._transition(GenerationState.ERROR, message)
        self.host.notify(notice)
        return GenerationResult(GenerationState.ERROR, message)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def apply_tokens_demo(self) -> SceneNode:
        """Build the landing template with its default copy."""
        root = await LandingPageBuilder(self.host, self.tokens).build()
        self.host.notify("Refigma tokens applied to new frame.")
        return root

    def _validate(self, prompt: object) -> str:
        if not isinstance(prompt, str) or not prompt.strip():
            raise ValidationError("Enter a clear prompt for Gemini.")
        if not self.client.configured:
            raise ValidationError("Gemini API is not configured (GEMINI_API_KEY).")
        return prompt.strip()

    async def generate(self, prompt: object) -> GenerationResult:
        if self._busy:
            message = "A generation is already running. Wait for it to finish."
            logger.warning("Rejected generate(): orchestrator busy")
            # Status updates belong to the running generation
            self.host.notify(message)
            return GenerationResult(GenerationState.ERROR, message)

        try:
            cleaned = self._validate(prompt)
        except ValidationError as e:
            return self._fail(str(e), str(e))

        self._busy = True
        try:
            return await self._run(cleaned)
        finally:
            self._busy = False

    async def _run(self, prompt: str) -> GenerationResult:
        notice = "Failed to generate the website from Gemini."
        try:
            self._transition(GenerationState.LOADING, "Preparing the Gemini request...")
            request_prompt = build_prompt(prompt)

            self._transition(GenerationState.REQUESTING, "Contacting Gemini to draft content...")
            text = await self.client.generate_content(request_prompt)
            payload = parse_content_payload(text)

            self._transition(
                GenerationState.APPLYING, "Preparing the Refigma layout from Gemini content...",
            )
            root = await LandingPageBuilder(self.host, self.tokens).build()
            report = await self.engine.apply(root, payload)
        except GenerationError as e:
            logger.warning("Generation failed: %s", e)
            return self._fail(str(e), notice)
        except Exception:
            logger.exception("Generation failed unexpectedly")
            return self._fail(GENERIC_ERROR_MESSAGE, notice)

        message = "Website generated on the canvas."
        self._transition(GenerationState.SUCCESS, message)
        self.host.notify("Your Gemini website is ready!")
        return GenerationResult(GenerationState.SUCCESS, message, root=root, report=report)
