"""Pydantic models for API request/response serialization.

These models mirror the campus dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

ContentTypeName = Literal[
    "post", "comment", "eventComment", "marketplaceItem", "message", "survey", "event"
]
LightweightTypeName = Literal["eventComment", "marketplaceItem", "message", "survey", "event"]


# ---------------------------------------------------------------------------
# Moderation models
# ---------------------------------------------------------------------------


class ModerationCheckRequest(BaseModel):
    """Text to run through the full pipeline."""

    text: str
    content_type: ContentTypeName = "post"


class ModerationVerdictResponse(BaseModel):
    """Mirrors campus.moderation.models.ModerationVerdict."""

    flagged: bool
    reason: str = ""
    method: str
    ai_available: bool


class BasicCheckRequest(BaseModel):
    text: str


class BasicCheckResponse(BaseModel):
    """Mirrors campus.moderation.models.KeywordCheckResult."""

    flagged: bool
    reason: str = ""


class FlaggedContentResponse(BaseModel):
    """Mirrors campus.moderation.models.FlaggedContentRecord."""

    id: str
    content: str
    user: str
    type: str
    reason: str
    created_at: str


# ---------------------------------------------------------------------------
# Content creation models
# ---------------------------------------------------------------------------


class CreatePostRequest(BaseModel):
    community_id: str
    title: str = Field(..., min_length=1, max_length=300)
    body: str = ""
    image: Optional[str] = None


class CreateCommentRequest(BaseModel):
    post_id: str
    content: str = Field(..., min_length=1)
    parent_comment_id: Optional[str] = None


class CreateContentRequest(BaseModel):
    """Lightly moderated content: messages, surveys, listings, events."""

    content_type: LightweightTypeName
    content: str = Field(..., min_length=1)
    fields: dict[str, Any] = Field(default_factory=dict)


class DocumentResponse(BaseModel):
    """A stored document as returned by the content store."""

    id: str
    type: str
    created_at: str
    document: dict[str, Any] = Field(default_factory=dict)
