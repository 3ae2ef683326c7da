# cwa_weather/service/weather_service.py
import logging

from cwa_weather.errors import WeatherError
from cwa_weather.result import Err, Ok, Result
from cwa_weather.service import weather_parser
from cwa_weather.service.cwa_client import fetch_all
from cwa_weather.service.place_service import FORECAST_36H, FORECAST_WEEK, UV_INDEX, Place

logger = logging.getLogger(__name__)


async def get_weather(place: Place) -> Result:
    """
    36 小时预报 + 紫外线，两个请求同时发出
    返回示例：
    {
        "city": "臺北市",
        "updateTime": "三十六小時天氣預報",
        "currentWeather": {"temperature": "22°C", "weatherDescription": "多雲"},
        "currentUVIndex": "7",
        "uvDescription": "紫外線指數預報",
        "forecasts": [...]
    }
    """
    fetched = await fetch_all(
        (FORECAST_36H, {"locationName": place.forecast_key}),
        (UV_INDEX, None),
    )
    if isinstance(fetched, Err):
        return fetched

    forecast_body, uv_body = fetched.value
    try:
        update_time, forecasts = weather_parser.parse_36h_forecast(forecast_body, place.forecast_key)
        uv_index, uv_description = weather_parser.parse_uv_index(uv_body, place.uv_key)
    except WeatherError as e:
        logger.warning(f"整理 {place.name} 天气资料失败: {e.message}")
        return Err(e)

    return Ok({
        "city": place.name,
        "updateTime": update_time,
        "currentWeather": weather_parser.derive_current_weather(forecasts),
        "currentUVIndex": uv_index,
        "uvDescription": uv_description,
        "forecasts": forecasts,
    })


async def get_week_weather(place: Place) -> Result:
    """一周预报 (气温 + 天气现象) + 紫外线"""
    fetched = await fetch_all(
        (FORECAST_WEEK, {"locationName": place.week_key, "elementName": "T,Wx"}),
        # 紫外线资料集的 locationName 参数无效，不带
        (UV_INDEX, None),
    )
    if isinstance(fetched, Err):
        return fetched

    week_body, uv_body = fetched.value
    try:
        update_time, forecasts = weather_parser.parse_week_forecast(week_body, place.week_key)
        uv_index, uv_description = weather_parser.parse_uv_index(uv_body, place.uv_key)
    except WeatherError as e:
        logger.warning(f"整理 {place.name} 一周预报失败: {e.message}")
        return Err(e)

    return Ok({
        "city": place.name,
        "updateTime": update_time,
        "currentWeather": weather_parser.derive_week_current_weather(forecasts),
        "currentUVIndex": uv_index,
        "uvDescription": uv_description,
        "forecasts": forecasts,
    })
