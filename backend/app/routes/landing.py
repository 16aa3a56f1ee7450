"""Landing page API endpoints.

Commands:
- POST /api/v1/landing/apply-tokens — build the template with default copy
- POST /api/v1/landing/generate — prompt → Gemini → new landing with content
- GET  /api/v1/landing/status — SSE stream of generation status updates
- GET  /api/v1/landing/pages — scene trees currently on the page
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from refigma.builder import anchor_names

from app.canvas_session import CanvasSession, get_session
from app.event_bus import LANDING_CHANNEL, get_event_bus

logger = logging.getLogger("refigma.routes.landing")

router = APIRouter(prefix="/api/v1/landing", tags=["landing"])


# --- Schemas ---


class ApplyTokensResponse(BaseModel):
    """Response for POST /api/v1/landing/apply-tokens."""

    root_id: str
    root_name: str
    node_count: int
    anchors: List[str] = Field(default_factory=list, description="Sorted anchor names")


class GenerateRequest(BaseModel):
    """Request for POST /api/v1/landing/generate."""

    prompt: str = Field(..., description="Free-form description of the business or product")


class GenerateResponse(BaseModel):
    """Final orchestrator state. `error` is a state, not a transport failure."""

    status: str
    text: str
    root_id: Optional[str] = None
    report: Optional[Dict[str, Any]] = None


class PageResponse(BaseModel):
    """Response for GET /api/v1/landing/pages."""

    name: str
    selection: List[str] = Field(default_factory=list)
    roots: List[Dict[str, Any]] = Field(default_factory=list)


# --- Endpoints ---


@router.post("/apply-tokens", response_model=ApplyTokensResponse)
async def apply_tokens(session: CanvasSession = Depends(get_session)):
    root = await session.orchestrator.apply_tokens_demo()
    return ApplyTokensResponse(
        root_id=root.id,
        root_name=root.name,
        node_count=sum(1 for _ in root.walk()),
        anchors=sorted(anchor_names(root)),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(body: GenerateRequest, session: CanvasSession = Depends(get_session)):
    """Run one generation and return its terminal state.

    Progress is also pushed to GET /api/v1/landing/status while this runs.
    """
    if not session.orchestrator.busy:
        get_event_bus().reset(LANDING_CHANNEL)
    result = await session.orchestrator.generate(body.prompt)
    logger.info(f"generate finished: {result.state.value} ({result.text})")
    return GenerateResponse(
        status=result.state.value,
        text=result.text,
        root_id=result.root.id if result.root else None,
        report=result.report.to_dict() if result.report else None,
    )


@router.get("/status")
async def stream_status():
    """Stream generation status updates via SSE.

    Ends after a `success` or `error` status.

    Usage:
        const sse = new EventSource('/api/v1/landing/status');
        sse.addEventListener('status', (e) => console.log(JSON.parse(e.data)));
    """
    return StreamingResponse(
        get_event_bus().subscribe(LANDING_CHANNEL),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.get("/pages", response_model=PageResponse)
async def list_pages(session: CanvasSession = Depends(get_session)):
    page = session.host.current_page
    return PageResponse(
        name=page.name,
        selection=[node.id for node in page.selection],
        roots=[node.to_dict() for node in page.children],
    )
