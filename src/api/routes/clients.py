from fastapi import APIRouter, Query

from src.api.deps import AdminClaims, Context
from src.api.schemas import BaseResponse, ClientListData, UserClientsData
from src.components.clients import (
    ListUserClientsInput,
    SearchClientsInput,
    run_list_unassigned_clients,
    run_list_user_clients,
    run_search_clients,
)

router = APIRouter()


@router.get("", response_model=BaseResponse)
def search_clients(
    claims: AdminClaims,
    ctx: Context,
    client_id: str | None = Query(None),
) -> BaseResponse:
    """Unassigned clients whose code contains client_id."""
    result = run_search_clients(
        SearchClientsInput(client_code=client_id), client_repo=ctx.client_repo
    )
    return BaseResponse(
        status_code=200,
        message="Clients retrieved successfully",
        data=ClientListData(clients=result.clients).model_dump(mode="json"),
    )


@router.get("/unassigned", response_model=BaseResponse)
def list_unassigned_clients(claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_list_unassigned_clients(client_repo=ctx.client_repo)
    return BaseResponse(
        status_code=200,
        message="Clients retrieved successfully",
        data=ClientListData(clients=result.clients).model_dump(mode="json"),
    )


@router.get("/login/{login_id}", response_model=BaseResponse)
def list_user_clients(login_id: str, claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_list_user_clients(
        ListUserClientsInput(login_id=login_id), client_repo=ctx.client_repo
    )
    data = UserClientsData(login_id=result.login_id, clients=result.clients)
    return BaseResponse(
        status_code=200,
        message="User clients retrieved successfully",
        data=data.model_dump(mode="json"),
    )
