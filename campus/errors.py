"""Exception hierarchy for Campus Connect.

Every application error carries a stable ``code`` and the HTTP status the
web layer answers with, so handlers can render them uniformly.
"""

from __future__ import annotations


class CampusError(Exception):
    """Base class for all application-level exceptions."""

    status_code = 500
    code = "CAMPUS_ERROR"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(CampusError):
    """Raised for malformed or invalid configuration."""

    code = "CONFIG_ERROR"


class ContentBlockedError(CampusError):
    """Raised by content creation when moderation rejects the text."""

    status_code = 422
    code = "CONTENT_BLOCKED"

    def __init__(self, reason: str, method: str = "", details: dict | None = None) -> None:
        super().__init__(reason, details={"method": method, **(details or {})})
        self.reason = reason
        self.method = method


class RemoteModerationError(CampusError):
    """The remote moderation service failed or is not configured."""

    status_code = 503
    code = "REMOTE_MODERATION_ERROR"


class RemoteQuotaError(RemoteModerationError):
    """The remote moderation service rejected the call for quota or rate limits."""

    status_code = 429
    code = "REMOTE_QUOTA_EXCEEDED"

