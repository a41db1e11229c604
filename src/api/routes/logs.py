from fastapi import APIRouter, Query

from src.api.deps import AdminClaims, Context
from src.api.schemas import BaseResponse, LogListData
from src.components.logs import ListLogsInput, run_list_logs

router = APIRouter()


@router.get("", response_model=BaseResponse)
def list_logs(
    claims: AdminClaims,
    ctx: Context,
    page: str | None = Query(None),
    size: str | None = Query(None),
    keyword: str | None = Query(None),
) -> BaseResponse:
    """Login history, newest first, filtered by login ID substring."""
    result = run_list_logs(
        ListLogsInput(page=page, size=size, keyword=keyword),
        log_repo=ctx.log_repo,
        default_size=ctx.rules.pagination.default_size,
    )
    data = LogListData(logs=result.entries, page=result.page, size=result.size, total=result.total)
    return BaseResponse(
        status_code=200,
        message="Login logs retrieved successfully",
        data=data.model_dump(mode="json"),
    )
