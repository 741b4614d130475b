"""Staged content moderation pipeline.

Checks run in a fixed order and the first stage that flags wins:

1. scope guard (only posts and comments are fully moderated)
2. keyword filter
3. pattern filter (disabled by default)
4. toxicity scoring (disabled by default)
5. remote moderation classifier

A failing remote classifier never blocks a submission: the verdict falls
back to ``basic-moderation`` with ``ai_available=False``. The engine has
no side effects beyond logging; persisting violations is the caller's job.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Optional, Union

from campus.moderation.config import ModerationConfig
from campus.moderation.filters import KeywordFilter, build_pattern_check, build_toxicity_scorer
from campus.moderation.models import (
    ContentType,
    DetectionMethod,
    KeywordCheckResult,
    ModerationVerdict,
)
from campus.moderation.remote import RemoteModerationClient, is_quota_error

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_TIMEOUT = 10.0

KEYWORD_REASON = (
    "Your content contains inappropriate language that violates our community guidelines."
)
PATTERN_REASON = (
    "Your content contains harmful patterns or inappropriate language that "
    "violates our community guidelines."
)
SENTIMENT_REASON = (
    "Your content appears to contain harmful or inappropriate language. "
    "Please review and revise your message."
)
GENERIC_REMOTE_REASON = "Your content was flagged as inappropriate."

# Checked in order; the first category present decides the reason.
CATEGORY_REASONS: tuple[tuple[str, str], ...] = (
    ("hate", "Your content contains hate speech or discriminatory language."),
    ("harassment", "Your content appears to harass or bully others."),
    ("violence", "Your content contains violent or threatening language."),
    ("sexual", "Your content contains inappropriate sexual content."),
    ("self-harm", "Your content promotes self-harm or dangerous behavior."),
)


def reason_for_categories(categories: frozenset[str] | set[str]) -> str:
    """Map flagged remote categories to one user-facing reason.

    Sub-categories such as ``hate/threatening`` count for their parent.
    """
    for category, reason in CATEGORY_REASONS:
        prefix = category + "/"
        if any(c == category or c.startswith(prefix) for c in categories):
            return reason
    return GENERIC_REMOTE_REASON


def _type_label(content_type: Union[str, ContentType]) -> str:
    return content_type.value if isinstance(content_type, ContentType) else str(content_type)


class ModerationEngine:
    """Classifies user-submitted text as acceptable or not.

    Parameters
    ----------
    config : ModerationConfig | None
        Word lists, patterns, thresholds and stage switches.
    remote : RemoteModerationClient | None
        Remote classifier; when *None* the remote stage is skipped and
        verdicts report ``basic-moderation``.
    timeout : float
        Seconds to wait for the remote classifier before degrading.
    """

    def __init__(
        self,
        config: ModerationConfig | None = None,
        remote: RemoteModerationClient | None = None,
        timeout: float = DEFAULT_REMOTE_TIMEOUT,
    ) -> None:
        self.config = config or ModerationConfig()
        self.remote = remote
        self.timeout = timeout

        self._keywords = KeywordFilter(self.config.blocked_keywords)
        self._patterns = build_pattern_check(self.config)
        self._toxicity = build_toxicity_scorer(self.config)

    # -- local stages --------------------------------------------------------

    def _local_checks(self, text: str, threshold: int) -> Optional[tuple[DetectionMethod, str]]:
        # Scored on lower-cased text, so the scorer's caps bonus never applies here.
        text = text.lower()
        if self._keywords(text):
            return DetectionMethod.keyword_filter, KEYWORD_REASON
        if self._patterns(text):
            return DetectionMethod.pattern_filter, PATTERN_REASON
        if self._toxicity(text) >= threshold:
            return DetectionMethod.sentiment_scoring, SENTIMENT_REASON
        return None

    # -- public API ----------------------------------------------------------

    async def run_all_moderation_checks(
        self,
        text: str,
        content_type: Union[str, ContentType] = ContentType.post,
    ) -> ModerationVerdict:
        """Run every stage against *text* and return a verdict."""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

        if content_type not in (ContentType.post, ContentType.comment):
            logger.warning(
                "Moderation called for unsupported content type: %s. Skipping AI moderation.",
                _type_label(content_type),
            )
            return ModerationVerdict(
                flagged=False,
                reason="",
                method=DetectionMethod.no_moderation_needed,
                ai_available=False,
            )

        hit = self._local_checks(text, self.config.strict_toxicity_threshold)
        if hit:
            method, reason = hit
            return ModerationVerdict(flagged=True, reason=reason, method=method, ai_available=True)

        ai_available = self.remote is not None
        if self.remote is not None:
            try:
                result = await asyncio.wait_for(self.remote.classify(text), timeout=self.timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    "Remote moderation timed out after %.1fs - falling back to basic moderation",
                    self.timeout,
                )
                ai_available = False
            except Exception as exc:
                if is_quota_error(exc):
                    logger.warning(
                        "Remote moderation quota exceeded - falling back to basic moderation: %s",
                        exc,
                    )
                else:
                    logger.error("Remote moderation error (non-quota): %s", exc, exc_info=exc)
                ai_available = False
            else:
                # Reported as openai-moderation for either remote provider.
                if result.flagged:
                    return ModerationVerdict(
                        flagged=True,
                        reason=reason_for_categories(result.categories),
                        method=DetectionMethod.openai_moderation,
                        ai_available=True,
                    )

        return ModerationVerdict(
            flagged=False,
            reason="",
            method=DetectionMethod.ai_moderation if ai_available else DetectionMethod.basic_moderation,
            ai_available=ai_available,
        )

    def basic_keyword_check(self, text: str) -> KeywordCheckResult:
        """Local-only check for content kinds excluded from AI moderation.

        Uses the lenient toxicity threshold and never calls the remote
        classifier.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        hit = self._local_checks(text, self.config.lenient_toxicity_threshold)
        if hit:
            return KeywordCheckResult(flagged=True, reason=hit[1])
        return KeywordCheckResult(flagged=False, reason="")


# ---------------------------------------------------------------------------
# Module-level convenience API
# ---------------------------------------------------------------------------


@lru_cache()
def get_engine() -> ModerationEngine:
    """Return the process-wide engine built from :func:`get_settings`."""
    from campus.settings import build_engine, get_settings

    return build_engine(get_settings())


async def run_all_moderation_checks(
    text: str,
    content_type: Union[str, ContentType] = ContentType.post,
) -> ModerationVerdict:
    return await get_engine().run_all_moderation_checks(text, content_type)


def basic_keyword_check(text: str) -> KeywordCheckResult:
    return get_engine().basic_keyword_check(text)
