# cwa_weather/service/weather_parser.py
"""
把气象署回传的巢状 JSON 整理成前端需要的扁平结构

36 小时预报 (F-C0032-001):
    records.location[].weatherElement[].time[].parameter.parameterName
一周预报 (F-D0047-091):
    records.locations[0].location[].weatherElement[].time[].elementValue
紫外线 (F-A0085-005):
    records.locations[0].location[].weatherElement[0].elementValue.value
"""
import logging
import math
from typing import Optional

from cwa_weather.errors import InternalError, NotFoundError
from cwa_weather.service.place_service import FORECAST_36H, FORECAST_WEEK, UV_INDEX

logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"
WEEK_SLOT_LIMIT = 5

# elementName -> (输出栏位, 单位后缀)
ELEMENT_FIELDS = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("minTemp", "°C"),
    "MaxT": ("maxTemp", "°C"),
    "CI": ("comfort", ""),
}


def find_location(locations: list, key: str, dataset_id: str) -> dict:
    if not isinstance(locations, list):
        raise InternalError(f"{dataset_id} 回應的 location 欄位格式錯誤")
    for loc in locations:
        if isinstance(loc, dict) and loc.get("locationName") == key:
            return loc
    raise NotFoundError(f"資料集 {dataset_id} 中找不到 {key} 的資料。")


def _records(body: dict, dataset_id: str) -> dict:
    records = body.get("records") if isinstance(body, dict) else None
    if not isinstance(records, dict):
        raise InternalError(f"{dataset_id} 回應缺少 records 欄位")
    return records


def _first_locations_group(records: dict, dataset_id: str) -> dict:
    groups = records.get("locations")
    if not isinstance(groups, list) or not groups:
        raise InternalError(f"{dataset_id} 回應缺少 locations 欄位")
    return groups[0]


def _time_index(element: dict) -> dict:
    """按 startTime 建索引，用于跨元素对齐时段"""
    return {slot.get("startTime"): slot for slot in element.get("time", [])}


def _element_value(slot: dict) -> Optional[str]:
    # 一周预报 T 是 {value}，Wx 是 [{value, measures}]
    value = slot.get("elementValue")
    if isinstance(value, list):
        return value[0].get("value") if value else None
    if isinstance(value, dict):
        return value.get("value")
    return None


def parse_temperature(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(float(str(text).replace("°C", "").replace("C", "").strip()))
    except (ValueError, OverflowError):
        return None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_36h_forecast(body: dict, key: str) -> tuple[str, list[dict]]:
    """回传 (资料集描述, 预报时段列表)"""
    records = _records(body, FORECAST_36H)
    location = find_location(records.get("location") or [], key, FORECAST_36H)

    try:
        elements = location.get("weatherElement") or []
        if not elements:
            return records.get("datasetDescription") or "", []

        # 第一个元素的时段数即为时段总数
        canonical = elements[0].get("time", [])
        indexed = [(e.get("elementName"), _time_index(e)) for e in elements]

        forecasts = []
        for slot in canonical:
            start = slot.get("startTime")
            row = {
                "startTime": start,
                "endTime": slot.get("endTime"),
                "weather": PLACEHOLDER,
                "rain": PLACEHOLDER,
                "minTemp": PLACEHOLDER,
                "maxTemp": PLACEHOLDER,
                "comfort": PLACEHOLDER,
            }
            for name, by_start in indexed:
                if name not in ELEMENT_FIELDS:
                    continue
                matched = by_start.get(start)
                value = (matched or {}).get("parameter", {}).get("parameterName")
                if value is None:
                    continue
                field, suffix = ELEMENT_FIELDS[name]
                row[field] = f"{value}{suffix}"
            forecasts.append(row)
    except (AttributeError, TypeError) as e:
        raise InternalError(f"{FORECAST_36H} 回應格式錯誤: {e}") from e

    return records.get("datasetDescription") or "", forecasts


def parse_week_forecast(body: dict, key: str, limit: Optional[int] = WEEK_SLOT_LIMIT) -> tuple[str, list[dict]]:
    """
    一周预报把气温 T 和天气现象 Wx 按 startTime 合并
    默认只取前 limit 个时段，传 None 取全部
    """
    records = _records(body, FORECAST_WEEK)
    group = _first_locations_group(records, FORECAST_WEEK)
    description = group.get("datasetDescription") or ""
    location = find_location(group.get("location") or [], key, FORECAST_WEEK)

    try:
        elements = {e.get("elementName"): e for e in location.get("weatherElement") or []}
        temp_element = elements.get("T")
        if temp_element is None:
            return description, []

        wx_by_start = _time_index(elements["Wx"]) if "Wx" in elements else {}
        slots = temp_element.get("time", [])
        if limit is not None:
            slots = slots[:limit]

        forecasts = []
        for slot in slots:
            wx = wx_by_start.get(slot.get("startTime"))
            description_value = _element_value(wx) if wx else None
            temperature = _element_value(slot)
            forecasts.append({
                "startTime": slot.get("startTime"),
                "endTime": slot.get("endTime"),
                "temperature": f"{temperature}°C" if temperature is not None else PLACEHOLDER,
                "weatherDescription": description_value or PLACEHOLDER,
            })
    except (AttributeError, TypeError) as e:
        raise InternalError(f"{FORECAST_WEEK} 回應格式錯誤: {e}") from e

    return description, forecasts


def parse_uv_index(body: dict, key: str) -> tuple[str, str]:
    """回传 (紫外线指数, 资料集描述)，找不到测站时指数为 N/A"""
    records = _records(body, UV_INDEX)
    description = records.get("datasetDescription") or ""

    try:
        groups = records.get("locations") or []
        if not groups:
            return PLACEHOLDER, description

        try:
            location = find_location(groups[0].get("location") or [], key, UV_INDEX)
        except NotFoundError:
            logger.warning(f"紫外线资料中没有 {key}")
            return PLACEHOLDER, description

        elements = location.get("weatherElement") or []
        value = _element_value(elements[0]) if elements else None
    except (AttributeError, TypeError) as e:
        raise InternalError(f"{UV_INDEX} 回應格式錯誤: {e}") from e

    return (str(value) if value else PLACEHOLDER), description


def derive_current_weather(forecasts: list[dict]) -> Optional[dict]:
    """用第一个时段的最高/最低温平均值当作目前气温"""
    if not forecasts:
        return None

    first = forecasts[0]
    low = parse_temperature(first.get("minTemp"))
    high = parse_temperature(first.get("maxTemp"))
    if low is None or high is None:
        logger.warning(f"第一个时段缺少数值气温: minTemp={first.get('minTemp')} maxTemp={first.get('maxTemp')}")
        return None

    return {
        "temperature": f"{round_half_up((low + high) / 2)}°C",
        "weatherDescription": first.get("weather", PLACEHOLDER),
    }


def derive_week_current_weather(forecasts: list[dict]) -> Optional[dict]:
    if not forecasts:
        return None

    first = forecasts[0]
    temperature = parse_temperature(first.get("temperature"))
    if temperature is None:
        logger.warning(f"第一个时段缺少数值气温: temperature={first.get('temperature')}")
        return None

    return {
        "temperature": f"{temperature}°C",
        "weatherDescription": first.get("weatherDescription", PLACEHOLDER),
    }
