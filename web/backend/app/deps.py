"""Shared service singletons for the routers.

Tests replace these through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from campus.content.service import ContentService
from campus.content.store import JsonDocumentStore
from campus.moderation.engine import ModerationEngine, get_engine
from campus.security.audit_log import FlaggedContentLog
from campus.settings import get_settings


def get_moderation_engine() -> ModerationEngine:
    return get_engine()


@lru_cache()
def get_flagged_log() -> FlaggedContentLog:
    return FlaggedContentLog(get_settings().DATA_DIR / "flagged_content")


@lru_cache()
def get_document_store() -> JsonDocumentStore:
    return JsonDocumentStore(get_settings().DATA_DIR / "documents")


def get_content_service(
    engine: ModerationEngine = Depends(get_moderation_engine),
    store: JsonDocumentStore = Depends(get_document_store),
    flagged_log: FlaggedContentLog = Depends(get_flagged_log),
) -> ContentService:
    return ContentService(engine=engine, store=store, flagged_log=flagged_log)
