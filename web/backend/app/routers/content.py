"""Content router -- create posts, comments and other content.

Every endpoint passes through moderation; a rejected submission answers
422 with the user-facing reason (see the ``CampusError`` handler in
``main.py``) and nothing is stored.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from campus.content.service import ContentService
from web.backend.app.deps import get_content_service
from web.backend.app.middleware.auth import get_current_user_id
from web.backend.app.models.api import (
    CreateCommentRequest,
    CreateContentRequest,
    CreatePostRequest,
    DocumentResponse,
)

router = APIRouter(prefix="/api", tags=["content"])


def _doc_to_response(doc: dict[str, Any]) -> DocumentResponse:
    return DocumentResponse(
        id=doc["_id"],
        type=doc["_type"],
        created_at=doc["_createdAt"],
        document=doc,
    )


@router.post(
    "/posts",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post in a community",
)
async def create_post(
    req: CreatePostRequest,
    user_id: str = Depends(get_current_user_id),
    service: ContentService = Depends(get_content_service),
):
    doc = await service.create_post(
        user_id=user_id,
        community_id=req.community_id,
        title=req.title,
        body=req.body,
        image=req.image,
    )
    return _doc_to_response(doc)


@router.post(
    "/comments",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
)
async def create_comment(
    req: CreateCommentRequest,
    user_id: str = Depends(get_current_user_id),
    service: ContentService = Depends(get_content_service),
):
    doc = await service.create_comment(
        user_id=user_id,
        post_id=req.post_id,
        content=req.content,
        parent_comment_id=req.parent_comment_id,
    )
    return _doc_to_response(doc)


@router.post(
    "/content",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a message, survey, event, event comment or listing",
)
async def create_content(
    req: CreateContentRequest,
    user_id: str = Depends(get_current_user_id),
    service: ContentService = Depends(get_content_service),
):
    doc = service.create_lightweight(req.content_type, user_id, req.content, fields=req.fields)
    return _doc_to_response(doc)
