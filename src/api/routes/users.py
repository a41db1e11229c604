from fastapi import APIRouter, Query

from src.api.deps import AdminClaims, Context
from src.api.schemas import (
    ActionData,
    BaseResponse,
    ResetPasswordRequest,
    ResetPinRequest,
    UserCreateRequest,
    UserData,
    UserListData,
    UserUpdateRequest,
)
from src.components.users import (
    CreateUserInput,
    DeactivateUserInput,
    GetUserInput,
    ListUsersInput,
    ResetPasswordInput,
    ResetPinInput,
    UpdateUserInput,
    run_create_user,
    run_deactivate_user,
    run_get_user,
    run_list_users,
    run_reset_password,
    run_reset_pin,
    run_update_user,
)

router = APIRouter()


@router.get("", response_model=BaseResponse)
def list_users(
    claims: AdminClaims,
    ctx: Context,
    page: str | None = Query(None),
    size: str | None = Query(None),
    keyword: str | None = Query(None),
) -> BaseResponse:
    """List users by creation time, filtered by full name or email."""
    result = run_list_users(
        ListUsersInput(page=page, size=size, keyword=keyword),
        user_repo=ctx.user_repo,
        default_size=ctx.rules.pagination.default_size,
    )
    data = UserListData(
        users=result.users, page=result.page, size=result.size, total=result.total
    )
    return BaseResponse(
        status_code=200, message="Users retrieved successfully", data=data.model_dump(mode="json")
    )


@router.post("", response_model=BaseResponse, status_code=201)
def create_user(req: UserCreateRequest, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_create_user(
        CreateUserInput(
            login_id=req.login_id,
            full_name=req.full_name,
            password=req.password,
            pin=req.pin,
            role_tag=req.role_tag,
            email=req.email,
            phone=req.phone,
            city=req.city,
            actor=claims.login_id,
        ),
        user_repo=ctx.user_repo,
        hasher=ctx.hasher,
        time=ctx.clock,
        min_password_length=ctx.rules.auth.min_password_length,
    )
    return BaseResponse(
        status_code=201,
        message="User created successfully",
        data=UserData(user=result.user).model_dump(mode="json"),
    )


# Fixed paths are declared before /{login_id} so they are not captured by it.
@router.put("/reset-password", response_model=BaseResponse)
def reset_password(req: ResetPasswordRequest, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_reset_password(
        ResetPasswordInput(
            login_id=req.login_id, new_password=req.password, actor=claims.login_id
        ),
        user_repo=ctx.user_repo,
        hasher=ctx.hasher,
        time=ctx.clock,
        min_password_length=ctx.rules.auth.min_password_length,
    )
    return BaseResponse(
        status_code=200,
        message=result.message,
        data=ActionData(login_id=result.login_id).model_dump(),
    )


@router.put("/reset-pin", response_model=BaseResponse)
def reset_pin(req: ResetPinRequest, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_reset_pin(
        ResetPinInput(login_id=req.login_id, new_pin=req.pin, actor=claims.login_id),
        user_repo=ctx.user_repo,
        hasher=ctx.hasher,
        time=ctx.clock,
    )
    return BaseResponse(
        status_code=200,
        message=result.message,
        data=ActionData(login_id=result.login_id).model_dump(),
    )


@router.get("/{login_id}", response_model=BaseResponse)
def get_user(login_id: str, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_get_user(GetUserInput(login_id=login_id), user_repo=ctx.user_repo)
    return BaseResponse(
        status_code=200,
        message="User retrieved successfully",
        data=UserData(user=result.user).model_dump(mode="json"),
    )


@router.put("/{login_id}", response_model=BaseResponse)
def update_user(
    login_id: str, req: UserUpdateRequest, claims: AdminClaims, ctx: Context
) -> BaseResponse:
    result = run_update_user(
        UpdateUserInput(
            login_id=login_id,
            full_name=req.full_name,
            email=req.email,
            phone=req.phone,
            city=req.city,
            actor=claims.login_id,
        ),
        user_repo=ctx.user_repo,
        time=ctx.clock,
    )
    return BaseResponse(
        status_code=200,
        message="User updated successfully",
        data=UserData(user=result.user).model_dump(mode="json"),
    )


@router.put("/{login_id}/deactivate", response_model=BaseResponse)
def deactivate_user(login_id: str, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_deactivate_user(
        DeactivateUserInput(login_id=login_id, actor=claims.login_id),
        user_repo=ctx.user_repo,
        time=ctx.clock,
    )
    return BaseResponse(
        status_code=200,
        message=result.message,
        data=ActionData(login_id=result.login_id).model_dump(),
    )
