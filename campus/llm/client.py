"""LLM-backed moderation classifier.

Asks an Anthropic model to classify text into the same category names the
OpenAI moderation endpoint uses, so it can stand in for it behind the
engine's ``classify(text)`` interface.
"""

from __future__ import annotations

import json
import logging
import os
import re
import time

import anthropic

from campus.errors import RemoteModerationError, RemoteQuotaError
from campus.llm.prompts import MODERATION_SYSTEM_PROMPT, MODERATION_USER_PROMPT
from campus.moderation.models import RemoteClassification

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5"

_NOT_CONFIGURED_MSG = "LLM not configured. Set ANTHROPIC_API_KEY."


def _extract_json(text: str) -> str:
    # Best-effort: pick the first {...} block
    m = re.search(r"\{[\s\S]*\}", text)
    return m.group(0) if m else text


def parse_classification(raw: str) -> RemoteClassification:
    """Parse the model's JSON answer into a :class:`RemoteClassification`.

    Unknown category names are kept; the engine maps what it recognises
    and falls back to a generic reason for the rest.
    """
    try:
        data = json.loads(_extract_json(raw))
    except json.JSONDecodeError as exc:
        raise RemoteModerationError(
            "LLM moderation returned invalid JSON", details={"raw": raw[:200]}
        ) from exc
    if not isinstance(data, dict) or "flagged" not in data:
        raise RemoteModerationError(
            "LLM moderation response missing 'flagged'", details={"raw": raw[:200]}
        )

    categories = data.get("categories") or []
    if isinstance(categories, dict):
        categories = [name for name, hit in categories.items() if hit]
    return RemoteClassification(
        flagged=bool(data["flagged"]),
        categories=frozenset(str(c).strip().lower() for c in categories),
    )


class LLMModerationClient:
    """Thin wrapper around the Anthropic async SDK for moderation.

    Parameters
    ----------
    model : str
        Model identifier to use for classification.
    api_key : str | None
        Anthropic API key.  Falls back to the ``ANTHROPIC_API_KEY``
        environment variable when *None*.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        max_tokens: int = 200,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY", "")
        self._configured = bool(self.api_key)

        if self._configured:
            self._async_client = anthropic.AsyncAnthropic(api_key=self.api_key)
        else:
            self._async_client = None  # type: ignore[assignment]

    # -- properties ----------------------------------------------------------

    @property
    def configured(self) -> bool:
        """Return *True* if an API key is available."""
        return self._configured

    # -- classification ------------------------------------------------------

    async def classify(self, text: str) -> RemoteClassification:
        """Classify *text*; raises :class:`RemoteModerationError` on failure."""
        if not self._configured:
            raise RemoteModerationError(_NOT_CONFIGURED_MSG)

        start = time.monotonic()
        try:
            response = await self._async_client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=0.0,
                system=MODERATION_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": MODERATION_USER_PROMPT.format(text=text)}],
            )
        except anthropic.RateLimitError as exc:
            raise RemoteQuotaError(str(exc), details={"provider": "anthropic"}) from exc
        except anthropic.APIError as exc:
            raise RemoteModerationError(str(exc), details={"provider": "anthropic"}) from exc
        latency_ms = int((time.monotonic() - start) * 1000)

        content = response.content[0].text if response.content else ""
        result = parse_classification(content)
        logger.debug(
            "LLM moderation flagged=%s categories=%s latency_ms=%d",
            result.flagged,
            sorted(result.categories),
            latency_ms,
        )
        return result
