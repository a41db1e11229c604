"""JWT session tokens signed with a single process-wide key."""

import base64
import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JWTError

from src.adapters.clock import SystemClock
from src.domain.entities import TokenClaims
from src.domain.errors import TokenRejected
from src.ports.clock import ClockPort

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=2)


def generate_signing_key() -> str:
    """Random 32-byte key, base64 encoded."""
    return base64.b64encode(secrets.token_bytes(32)).decode("ascii")


class JWTTokenService:
    """
    Issues and validates bearer tokens carrying login ID and role claim.

    There is no revocation: a token is valid until its expiry as long as the
    signing key it was issued with is the one this instance holds. A token
    is rejected at the exact expiry instant.

    `iat` and `exp` are whole seconds: the issue instant is truncated, so a
    token lives between ttl - 1s and ttl of wall time depending on the
    sub-second part of the moment it was issued.
    """

    def __init__(
        self,
        signing_key: str,
        *,
        admin_role: str,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: ClockPort | None = None,
    ):
        if not signing_key:
            raise ValueError("signing_key must not be empty")
        self._key = signing_key
        self.admin_role = admin_role
        self.ttl = ttl
        self.algorithm = algorithm
        self.clock = clock or SystemClock()

    def issue(self, login_id: str, role_tag: str) -> str:
        issued_at = int(self.clock.now_utc().timestamp())
        expires_at = issued_at + int(self.ttl.total_seconds())
        claims = {
            "sub": login_id,
            "role": role_tag,
            "iat": issued_at,
            "exp": expires_at,
        }
        token: str = jwt.encode(claims, self._key, algorithm=self.algorithm)
        logger.debug("Issued token for %s (expires %s)", login_id, expires_at)
        return token

    def validate(self, token: str) -> TokenClaims:
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            raise TokenRejected("malformed") from e

        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise TokenRejected("invalid") from e

        claims = self._parse_claims(payload)

        if self.clock.now_utc() >= claims.expires_at:
            raise TokenRejected("expired")

        if claims.role_tag != self.admin_role:
            raise TokenRejected("forbidden_role")

        return claims

    @staticmethod
    def _parse_claims(payload: dict[str, Any]) -> TokenClaims:
        login_id = payload.get("sub")
        role_tag = payload.get("role")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")

        if not isinstance(login_id, str) or not isinstance(role_tag, str):
            raise TokenRejected("malformed")
        if not isinstance(issued_at, int | float) or not isinstance(expires_at, int | float):
            raise TokenRejected("malformed")

        return TokenClaims(
            login_id=login_id,
            role_tag=role_tag,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
