from fastapi import APIRouter, Query
from cwa_weather.errors import error_response
from cwa_weather.result import Err
from cwa_weather.schema.weather import ErrorResponse, WeatherResponse, WeekWeatherResponse
from cwa_weather.service import weather_service
from cwa_weather.service.place_service import resolve_place

router = APIRouter(prefix="/api/weather", tags=["Weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=WeatherResponse, responses=ERROR_RESPONSES)
async def weather(
        locationName: str | None = Query(None, max_length=20, description="縣市名稱"),
        city: str | None = Query(None, max_length=20, description="locationName 的別名"),
):
    """指定县市的 36 小时预报与紫外线指数"""
    place = resolve_place(locationName or city)
    result = await weather_service.get_weather(place)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"success": True, "data": result.value}


@router.get("/week", response_model=WeekWeatherResponse, responses=ERROR_RESPONSES)
async def week_weather(
        locationName: str | None = Query(None, max_length=20, description="縣市名稱"),
        city: str | None = Query(None, max_length=20, description="locationName 的別名"),
):
    """指定县市的一周预报 (前 5 个时段) 与紫外线指数"""
    place = resolve_place(locationName or city)
    result = await weather_service.get_week_weather(place)
    if isinstance(result, Err):
        return error_response(result.error)
    return {"success": True, "data": result.value}
