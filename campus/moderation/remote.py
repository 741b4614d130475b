"""Remote moderation classifiers.

The engine talks to any object with an async ``classify(text)`` method
returning a :class:`RemoteClassification`. :class:`OpenAIModerationClient`
wraps the OpenAI moderation endpoint; an LLM-backed alternative lives in
:mod:`campus.llm.client`.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Protocol

import openai

from campus.errors import RemoteModerationError, RemoteQuotaError
from campus.moderation.models import RemoteClassification

logger = logging.getLogger(__name__)

DEFAULT_MODERATION_MODEL = "omni-moderation-latest"

_NOT_CONFIGURED_MSG = "OpenAI moderation not configured. Set OPENAI_API_KEY."


class RemoteModerationClient(Protocol):
    """Narrow interface the engine needs from a remote classifier."""

    async def classify(self, text: str) -> RemoteClassification:
        ...


def is_quota_error(error: Any) -> bool:
    """Return True if *error* signals quota exhaustion or rate limiting.

    Looks at the HTTP status (429), the provider error ``code``/``type``
    (``insufficient_quota``), and finally the message text.
    """
    if isinstance(error, (RemoteQuotaError, openai.RateLimitError)):
        return True
    status = getattr(error, "status_code", None) or getattr(error, "status", None)
    if status == 429:
        return True
    if getattr(error, "code", None) == "insufficient_quota":
        return True
    if getattr(error, "type", None) == "insufficient_quota":
        return True
    message = str(getattr(error, "message", "") or error)
    return "quota" in message or "429" in message


class OpenAIModerationClient:
    """Thin wrapper around ``AsyncOpenAI.moderations.create``.

    Parameters
    ----------
    api_key : str | None
        OpenAI API key. Falls back to the ``OPENAI_API_KEY`` environment
        variable when *None*.
    model : str
        Moderation model identifier.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODERATION_MODEL,
    ) -> None:
        self.model = model
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        self._configured = bool(self.api_key)

        if self._configured:
            self._client = openai.AsyncOpenAI(api_key=self.api_key)
        else:
            self._client = None  # type: ignore[assignment]

    @property
    def configured(self) -> bool:
        """Return *True* if an API key is available."""
        return self._configured

    async def classify(self, text: str) -> RemoteClassification:
        """Classify *text*; raises :class:`RemoteModerationError` on failure."""
        if not self._configured:
            raise RemoteModerationError(_NOT_CONFIGURED_MSG)

        try:
            response = await self._client.moderations.create(input=text, model=self.model)
        except openai.APIError as exc:
            if is_quota_error(exc):
                raise RemoteQuotaError(str(exc), details={"provider": "openai"}) from exc
            raise RemoteModerationError(str(exc), details={"provider": "openai"}) from exc

        if not response.results:
            raise RemoteModerationError("OpenAI moderation returned no results")

        result = response.results[0]
        categories = result.categories.model_dump(by_alias=True)
        hits = frozenset(name for name, hit in categories.items() if hit)
        logger.debug("OpenAI moderation flagged=%s categories=%s", result.flagged, sorted(hits))
        return RemoteClassification(flagged=bool(result.flagged), categories=hits)
