"""
Bearer token authentication for the analyze endpoint.
Provides a FastAPI dependency that rejects a request before its body is read.
"""
import logging
from typing import Optional

from fastapi import Header

from swim_yardage_api.config import settings
from swim_yardage_api.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def token_required() -> bool:
    """The local parser always requires a token; the LLM strategy only when one is set."""
    return settings.ANALYZER_STRATEGY == "local" or bool(settings.ANALYZE_API_TOKEN)


def validate_token(token: Optional[str]) -> None:
    expected = settings.ANALYZE_API_TOKEN
    if not expected:
        logger.warning("ANALYZE_API_TOKEN is not configured; rejecting request")
        raise UnauthorizedError()
    if token is None or token != expected:
        raise UnauthorizedError()


async def require_api_token(
    authorization: Optional[str] = Header(None),
) -> None:
    """
    Reject the request with 401 unless it carries the configured token.

    Usage:
        @router.post("/api/analyze")
        def analyze(_: None = Depends(require_api_token)):
            ...
    """
    if not token_required():
        return
    validate_token(extract_bearer_token(authorization))
