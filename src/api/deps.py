from typing import Annotated

from fastapi import Depends, Header, Request

from src.api.guard import SessionGuard
from src.app_shell.context import ServiceContext
from src.domain.entities import TokenClaims


def get_context(request: Request) -> ServiceContext:
    context: ServiceContext = request.app.state.context
    return context


def get_session_guard(ctx: ServiceContext = Depends(get_context)) -> SessionGuard:
    return SessionGuard(ctx.token_service)


def require_admin(
    authorization: Annotated[str | None, Header()] = None,
    guard: SessionGuard = Depends(get_session_guard),
) -> TokenClaims:
    """Validate the bearer token; the claims identify the acting admin."""
    return guard.authenticate(authorization)


AdminClaims = Annotated[TokenClaims, Depends(require_admin)]
Context = Annotated[ServiceContext, Depends(get_context)]
