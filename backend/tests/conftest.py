"""Root conftest for refigma and API tests.

Provides:
- Token schema / resolver loaded from the bundled tokens.json
- In-memory canvas host and a landing page built on it
- Gemini client factory backed by httpx.MockTransport
- FastAPI AsyncClient over ASGITransport with an isolated canvas session
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any, AsyncGenerator, Callable, Dict, List

# Keep test runs from writing into backend/logs
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="refigma-logs-"))

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from refigma.builder import LandingPageBuilder  # noqa: E402
from refigma.canvas import InMemoryCanvas, SceneNode  # noqa: E402
from refigma.generation import GeminiClient  # noqa: E402
from refigma.tokens import TokenResolver, TokenSchema, load_token_schema  # noqa: E402


# ---------------------------------------------------------------------------
# Tokens and canvas
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def token_schema() -> TokenSchema:
    return load_token_schema()


@pytest.fixture
def tokens(token_schema: TokenSchema) -> TokenResolver:
    return TokenResolver(token_schema)


@pytest.fixture
def host() -> InMemoryCanvas:
    return InMemoryCanvas()


@pytest_asyncio.fixture
async def landing(host: InMemoryCanvas, tokens: TokenResolver) -> SceneNode:
    """A landing page built with the default copy."""
    return await LandingPageBuilder(host, tokens).build()


# ---------------------------------------------------------------------------
# Gemini
# ---------------------------------------------------------------------------

def gemini_body(*texts: str) -> Dict[str, Any]:
    """generateContent success body with one candidate holding the given parts."""
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


SAMPLE_PAYLOAD: Dict[str, Any] = {
    "hero": {
        "title": "Fresh bread every morning",
        "subtitle": "A neighbourhood bakery in Bandung baking since 1998.",
        "primaryCta": "Order now",
        "secondaryCta": "See the menu",
        "assurance": "Loved by 2,000 regulars",
        "highlights": ["Sourdough baked daily", "Local flour only"],
    },
    "metrics": [
        {"value": "25", "label": "Years baking"},
        {"value": "40+", "label": "Recipes"},
    ],
    "testimonial": {
        "heading": "What our regulars say",
        "subtitle": "Real words from real customers.",
        "quote": '"The best croissant in town."',
        "bullets": ["Warm service"],
        "attribution": "Dewi",
        "attributionRole": "Customer since 2010",
        "callout": "Rated 4.9/5",
    },
    "cta": {
        "title": "Come by today",
        "subtitle": "Open every day from 6am.",
        "primaryCta": "Get directions",
        "secondaryCta": "Call us",
    },
}


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return json.loads(json.dumps(SAMPLE_PAYLOAD))


@pytest.fixture
def gemini_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_gemini_client(gemini_requests: List[httpx.Request]) -> Callable[..., GeminiClient]:
    """Build a GeminiClient whose transport answers with the given response.

    Usage:
        client = make_gemini_client(json=gemini_body("{...}"))
        client = make_gemini_client(status_code=429, json={"error": {...}})
        client = make_gemini_client(handler=custom_handler)
    """

    def factory(
        status_code: int = 200,
        json: Any = None,
        text: str = "",
        handler: Callable[[httpx.Request], httpx.Response] = None,
        api_key: str = "test-key",
    ) -> GeminiClient:
        def respond(request: httpx.Request) -> httpx.Response:
            gemini_requests.append(request)
            if handler is not None:
                return handler(request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, text=text)

        return GeminiClient(
            api_key=api_key,
            model="gemini-test",
            base_url="https://gemini.test",
            transport=httpx.MockTransport(respond),
        )

    return factory


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------

@pytest.fixture
def event_bus(monkeypatch):
    """Fresh EventBus singleton per test."""
    import app.event_bus as bus_module

    bus = bus_module.EventBus()
    monkeypatch.setattr(bus_module, "_bus", bus)
    return bus


@pytest.fixture
def gemini_client(make_gemini_client, sample_payload) -> GeminiClient:
    return make_gemini_client(json=gemini_body(json.dumps(sample_payload)))


@pytest.fixture
def canvas_session(host: InMemoryCanvas, gemini_client: GeminiClient):
    from app.canvas_session import create_session

    return create_session(host=host, client=gemini_client)


@pytest_asyncio.fixture
async def client(canvas_session, event_bus) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the FastAPI routes with an isolated canvas session."""
    from app.canvas_session import get_session
    from app.main import app

    app.dependency_overrides[get_session] = lambda: canvas_session
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_session, None)
        await canvas_session.client.close()
