"""FastAPI Application Entry Point.

Configures the app, lifespan, CORS, and includes the landing routes.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .canvas_session import close_canvas_session, init_canvas_session

logger = logging.getLogger("refigma.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the token schema and create the canvas session once."""
    session = init_canvas_session()
    logger.info(
        "Canvas session ready: theme=%s, model=%s",
        session.tokens.default_theme, session.client.model,
    )
    yield
    await close_canvas_session()


app = FastAPI(title="Refigma Landing API", version="1.0.0", lifespan=lifespan)

# CORS configuration — configurable via CORS_ORIGINS env var (comma-separated)
_default_origins = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _default_origins).split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from .routes.landing import router as landing_router  # noqa: E402

app.include_router(landing_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}
