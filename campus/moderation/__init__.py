"""Content moderation pipeline for posts, comments and other user content."""

from campus.moderation.config import ModerationConfig, load_moderation_config
from campus.moderation.engine import (
    ModerationEngine,
    basic_keyword_check,
    reason_for_categories,
    run_all_moderation_checks,
)
from campus.moderation.models import (
    ContentType,
    DetectionMethod,
    FlaggedContentRecord,
    KeywordCheckResult,
    ModerationVerdict,
    RemoteClassification,
)

__all__ = [
    "ContentType",
    "DetectionMethod",
    "FlaggedContentRecord",
    "KeywordCheckResult",
    "ModerationConfig",
    "ModerationEngine",
    "ModerationVerdict",
    "RemoteClassification",
    "basic_keyword_check",
    "load_moderation_config",
    "reason_for_categories",
    "run_all_moderation_checks",
]
