from fastapi import APIRouter

from src.api.deps import AdminClaims, Context
from src.api.schemas import BaseResponse, CityListData
from src.components.cities import run_list_cities

router = APIRouter()


@router.get("", response_model=BaseResponse)
def list_cities(claims: AdminClaims, ctx: Context) -> BaseResponse:
    result = run_list_cities(city_repo=ctx.city_repo)
    return BaseResponse(
        status_code=200,
        message="Cities retrieved successfully",
        data=CityListData(cities=result.cities).model_dump(mode="json"),
    )
