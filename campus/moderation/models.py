"""Data models for the content moderation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DetectionMethod(str, Enum):
    """Which stage of the pipeline produced a verdict."""

    keyword_filter = "keyword-filter"
    pattern_filter = "pattern-filter"
    sentiment_scoring = "sentiment-scoring"
    openai_moderation = "openai-moderation"
    ai_moderation = "ai-moderation"  # passed, remote stage ran
    basic_moderation = "basic-moderation"  # passed, remote stage unavailable
    no_moderation_needed = "no-moderation-needed"


class ContentType(str, Enum):
    """Kinds of user-generated content on the platform."""

    post = "post"
    comment = "comment"
    event_comment = "eventComment"
    marketplace_item = "marketplaceItem"
    message = "message"
    survey = "survey"
    event = "event"

    @property
    def full_moderation(self) -> bool:
        """Only posts and comments go through the remote moderation stage."""
        return self in (ContentType.post, ContentType.comment)


@dataclass(frozen=True)
class ModerationVerdict:
    """Outcome of :meth:`ModerationEngine.run_all_moderation_checks`."""

    flagged: bool
    reason: str = ""
    method: DetectionMethod = DetectionMethod.basic_moderation
    ai_available: bool = False

    def audit_reason(self) -> str:
        """Reason string stored on a flagged-content record."""
        return f"{self.reason} (via {self.method.value})"


@dataclass(frozen=True)
class KeywordCheckResult:
    """Outcome of the lightweight, local-only check."""

    flagged: bool
    reason: str = ""


@dataclass(frozen=True)
class RemoteClassification:
    """What a remote moderation classifier reports for one text."""

    flagged: bool
    categories: frozenset[str] = field(default_factory=frozenset)


@dataclass
class FlaggedContentRecord:
    """Audit record persisted by callers when content is rejected."""

    id: str
    content: str
    user: str
    type: str
    reason: str
    created_at: str
