"""Content creation behind the moderation gate.

Posts and comments go through the full pipeline; other content kinds use
the lightweight keyword check. Rejected content is never stored: a
flagged-content record is appended instead and :class:`ContentBlockedError`
carries the user-facing reason back to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from campus.content.store import DocumentStore
from campus.errors import ContentBlockedError
from campus.moderation.engine import ModerationEngine
from campus.moderation.models import ContentType
from campus.security.audit_log import FlaggedContentLog

logger = logging.getLogger(__name__)

BASIC_CHECK_METHOD = "basic-keyword-check"


def _ref(doc_id: str) -> dict[str, str]:
    return {"_type": "reference", "_ref": doc_id}


class ContentService:
    """Creates user content, rejecting what moderation flags."""

    def __init__(
        self,
        engine: ModerationEngine,
        store: DocumentStore,
        flagged_log: FlaggedContentLog,
    ) -> None:
        self.engine = engine
        self.store = store
        self.flagged_log = flagged_log

    async def create_post(
        self,
        user_id: str,
        community_id: str,
        title: str,
        body: str = "",
        image: Optional[str] = None,
    ) -> dict[str, Any]:
        """Moderate and store a post; raises :class:`ContentBlockedError`."""
        title = title.strip()
        body = body.strip()

        verdict = await self.engine.run_all_moderation_checks(f"{title} {body}", ContentType.post)
        if verdict.flagged:
            self.flagged_log.record(
                content=f"Title: {title}\nContent: {body}",
                user=user_id,
                content_type=ContentType.post,
                reason=verdict.audit_reason(),
            )
            raise ContentBlockedError(
                f"Your post was blocked for inappropriate content. Reason: {verdict.reason}",
                method=verdict.method.value,
            )

        if not verdict.ai_available:
            logger.warning(
                "Post created with basic moderation only (AI unavailable) - User: %s, Title: %s...",
                user_id,
                title[:50],
            )

        return self.store.create(
            {
                "_type": "post",
                "title": title,
                "content": body,
                "author": _ref(user_id),
                "subreddit": _ref(community_id),
                "upvotes": 0,
                "downvotes": 0,
                "image": image,
            }
        )

    async def create_comment(
        self,
        user_id: str,
        post_id: str,
        content: str,
        parent_comment_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Moderate and store a comment; raises :class:`ContentBlockedError`."""
        content = content.strip()

        verdict = await self.engine.run_all_moderation_checks(content, ContentType.comment)
        if verdict.flagged:
            self.flagged_log.record(
                content=content,
                user=user_id,
                content_type=ContentType.comment,
                reason=verdict.audit_reason(),
            )
            raise ContentBlockedError(
                f"Comment blocked: {verdict.reason}", method=verdict.method.value
            )

        if not verdict.ai_available:
            logger.warning(
                "Comment created with basic moderation only (AI unavailable) - User: %s, Content: %s...",
                user_id,
                content[:100],
            )

        return self.store.create(
            {
                "_type": "comment",
                "content": content,
                "author": _ref(user_id),
                "post": _ref(post_id),
                "parentComment": _ref(parent_comment_id) if parent_comment_id else None,
            }
        )

    def create_lightweight(
        self,
        content_type: Union[str, ContentType],
        user_id: str,
        content: str,
        fields: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Store a message, survey, event or listing after the keyword check.

        Extra *fields* are stored on the document; they cannot override the
        type, content or author.
        """
        kind = ContentType(content_type)
        if kind.full_moderation:
            raise ValueError(f"{kind.value} content must go through full moderation")

        content = content.strip()
        result = self.engine.basic_keyword_check(content)
        if result.flagged:
            self.flagged_log.record(
                content=content,
                user=user_id,
                content_type=kind,
                reason=f"{result.reason} (via {BASIC_CHECK_METHOD})",
            )
            raise ContentBlockedError(result.reason, method=BASIC_CHECK_METHOD)

        return self.store.create(
            {**(fields or {}), "_type": kind.value, "content": content, "author": _ref(user_id)}
        )
