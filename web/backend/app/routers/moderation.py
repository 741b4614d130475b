"""Moderation router -- check texts and inspect the flagged-content trail."""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from campus.moderation.engine import ModerationEngine
from campus.security.audit_log import FlaggedContentLog
from web.backend.app.deps import get_flagged_log, get_moderation_engine
from web.backend.app.models.api import (
    BasicCheckRequest,
    BasicCheckResponse,
    FlaggedContentResponse,
    ModerationCheckRequest,
    ModerationVerdictResponse,
)

router = APIRouter(prefix="/api/moderation", tags=["moderation"])


@router.post(
    "/check",
    response_model=ModerationVerdictResponse,
    summary="Run the full moderation pipeline on a text",
)
async def check_text(
    req: ModerationCheckRequest,
    engine: ModerationEngine = Depends(get_moderation_engine),
):
    """Return the verdict without storing anything."""
    verdict = await engine.run_all_moderation_checks(req.text.strip(), req.content_type)
    return ModerationVerdictResponse(
        flagged=verdict.flagged,
        reason=verdict.reason,
        method=verdict.method.value,
        ai_available=verdict.ai_available,
    )


@router.post(
    "/basic-check",
    response_model=BasicCheckResponse,
    summary="Run the lightweight local check on a text",
)
async def basic_check(
    req: BasicCheckRequest,
    engine: ModerationEngine = Depends(get_moderation_engine),
):
    result = engine.basic_keyword_check(req.text)
    return BasicCheckResponse(flagged=result.flagged, reason=result.reason)


@router.get(
    "/flagged",
    response_model=list[FlaggedContentResponse],
    summary="List flagged content, newest first",
)
async def list_flagged(
    user: Optional[str] = Query(None, description="Filter by user id"),
    content_type: Optional[str] = Query(None, alias="type", description="Filter by content type"),
    limit: int = Query(200, ge=1, le=10000),
    flagged_log: FlaggedContentLog = Depends(get_flagged_log),
):
    records = flagged_log.get_records(user=user, content_type=content_type, limit=limit)
    return [FlaggedContentResponse(**asdict(r)) for r in records]
