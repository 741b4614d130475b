"""Auth middleware -- FastAPI dependencies for extracting the current user.

Authentication itself belongs to the platform's identity provider, which
sits in front of this API and forwards the verified user id in the
``X-User-Id`` header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, status


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """FastAPI dependency returning the authenticated user's id.

    Raises ``401 Unauthorized`` if the header is missing or blank.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
