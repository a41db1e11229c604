"""
Session guard for protected routes.

Every rejection surfaces as Unauthenticated (HTTP 401). The kind of failure
travels in the error code: missing, malformed, invalid, expired or
forbidden_role.
"""

import logging

from src.domain.entities import TokenClaims
from src.domain.errors import TokenRejected, Unauthenticated
from src.ports.auth import TokenServicePort

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an `Authorization: Bearer <token>` header value."""
    if authorization is None or not authorization.strip():
        raise Unauthenticated("Authorization header missing", code="missing")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme != BEARER_SCHEME or not token:
        raise Unauthenticated("Authorization header malformed", code="malformed")
    return token


class SessionGuard:
    def __init__(self, tokens: TokenServicePort):
        self.tokens = tokens

    def authenticate(self, authorization: str | None) -> TokenClaims:
        token = extract_bearer_token(authorization)
        try:
            return self.tokens.validate(token)
        except TokenRejected as e:
            logger.debug("Rejected bearer token: %s", e.reason)
            raise Unauthenticated(f"Unauthorized: {e.reason}", code=e.reason) from e
