"""FastAPI application for the Campus Connect moderation API.

Provides REST API endpoints wrapping the campus package for:
- Moderation checks (full pipeline and lightweight check)
- The flagged-content audit trail
- Post, comment and lightweight content creation behind moderation
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campus import __version__
from campus.errors import CampusError
from campus.settings import get_settings
from campus.utils.log import configure_logging
from web.backend.app.routers import content, moderation

configure_logging(get_settings().LOG_LEVEL)
log = logging.getLogger("campus.api")

app = FastAPI(
    title="Campus Connect API",
    description=(
        "REST API for Campus Connect content moderation. "
        "Provides endpoints for moderation checks, the flagged-content "
        "audit trail, and moderated content creation."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Consistent error responses
# ---------------------------------------------------------------------------


@app.exception_handler(CampusError)
async def _handle_campus_error(req: Request, exc: CampusError):
    # 4xx -> warn, 5xx -> error
    lvl = logging.WARNING if 400 <= exc.status_code < 500 else logging.ERROR
    log.log(lvl, "CampusError path=%s code=%s msg=%s", req.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code, "details": exc.details},
    )


# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(moderation.router)
app.include_router(content.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "Campus Connect API",
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
