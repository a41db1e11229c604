from fastapi import APIRouter

from src.api.deps import AdminClaims, Context
from src.api.schemas import BaseResponse, LoginRequest, SessionData, TokenData
from src.components.auth import LoginInput, run_login

router = APIRouter()


@router.post("/login", response_model=BaseResponse)
def login(req: LoginRequest, ctx: Context) -> BaseResponse:
    """Exchange admin credentials for a bearer token."""
    result = run_login(
        LoginInput(login_id=req.login_id, password=req.password),
        user_repo=ctx.user_repo,
        hasher=ctx.hasher,
        tokens=ctx.token_service,
        admin_role=ctx.rules.auth.admin_role,
    )
    data = TokenData(
        token=result.token,
        expires_in=int(ctx.token_service.ttl.total_seconds()),
        login_id=result.login_id,
        role_tag=result.role_tag,
    )
    return BaseResponse(status_code=200, message="Login successful", data=data.model_dump())


@router.get("/me", response_model=BaseResponse)
def read_session(claims: AdminClaims) -> BaseResponse:
    data = SessionData(
        login_id=claims.login_id,
        role_tag=claims.role_tag,
        expires_at=int(claims.expires_at.timestamp()),
    )
    return BaseResponse(status_code=200, message="Session valid", data=data.model_dump())
