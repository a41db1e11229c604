"""
Admin login.

Looks the identity up by upper-cased login ID, verifies the password
digest, requires the administrative role tag and issues a session token.
Token issuance errors propagate unchanged.
"""

import logging

from src.domain.entities import normalize_login_id
from src.domain.errors import AuthenticationFailed, AuthorizationFailed

from .models import LoginInput, LoginOutput
from .ports import CredentialHasherPort, TokenIssuerPort, UserLookupPort

logger = logging.getLogger(__name__)


def run_login(
    inp: LoginInput,
    *,
    user_repo: UserLookupPort,
    hasher: CredentialHasherPort,
    tokens: TokenIssuerPort,
    admin_role: str,
) -> LoginOutput:
    login_id = normalize_login_id(inp.login_id or "")
    # Blank IDs never reach the store.
    user = user_repo.find_by_login_id(login_id) if login_id else None
    if user is None:
        logger.info("Login rejected for %s: user not found", login_id)
        raise AuthenticationFailed("user not found")

    if not hasher.verify(inp.password, user.credential_digest):
        logger.info("Login rejected for %s: invalid password", login_id)
        raise AuthenticationFailed("invalid password")

    if user.role_tag != admin_role:
        logger.info("Login rejected for %s: not admin", login_id)
        raise AuthorizationFailed("not admin")

    token = tokens.issue(user.login_id, user.role_tag)
    logger.info("Login succeeded for %s", login_id)
    return LoginOutput(token=token, login_id=user.login_id, role_tag=user.role_tag)
