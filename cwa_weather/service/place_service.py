# cwa_weather/service/place_service.py
from dataclasses import dataclass
from types import MappingProxyType

from cwa_weather.errors import MissingParameterError, ValidationError

# 资料集代码
FORECAST_36H = "F-C0032-001"
FORECAST_WEEK = "F-D0047-091"
UV_INDEX = "F-A0085-005"

# 支援的县市，顺序即 /api/locations 回传顺序
TAIWAN_LOCATIONS = (
    "宜蘭縣", "花蓮縣", "臺東縣", "澎湖縣", "金門縣", "連江縣",
    "臺北市", "新北市", "桃園市", "臺中市", "臺南市", "高雄市",
    "基隆市", "新竹縣", "新竹市", "苗栗縣", "彰化縣", "南投縣",
    "雲林縣", "嘉義縣", "嘉義市", "屏東縣",
)

# 同名但上游使用不同 key 的城市 (36 小时预报)
CITY_KEY_OVERRIDES = MappingProxyType({
    "新竹市": "新竹縣",
})

# 紫外线资料集使用英文地名
ENGLISH_LOCATION_NAMES = MappingProxyType({
    "宜蘭縣": "Yilan County",
    "花蓮縣": "Hualien County",
    "臺東縣": "Taitung County",
    "澎湖縣": "Penghu County",
    "金門縣": "Kinmen County",
    "連江縣": "Lienchiang County",
    "臺北市": "Taipei City",
    "新北市": "New Taipei City",
    "桃園市": "Taoyuan City",
    "臺中市": "Taichung City",
    "臺南市": "Tainan City",
    "高雄市": "Kaohsiung City",
    "基隆市": "Keelung City",
    "新竹縣": "Hsinchu County",
    "新竹市": "Hsinchu City",
    "苗栗縣": "Miaoli County",
    "彰化縣": "Changhua County",
    "南投縣": "Nantou County",
    "雲林縣": "Yunlin County",
    "嘉義縣": "Chiayi County",
    "嘉義市": "Chiayi City",
    "屏東縣": "Pingtung County",
})

DATASET_KEY_TABLES = MappingProxyType({
    FORECAST_36H: CITY_KEY_OVERRIDES,
    FORECAST_WEEK: MappingProxyType({}),
    UV_INDEX: ENGLISH_LOCATION_NAMES,
})


@dataclass(frozen=True)
class Place:
    name: str
    forecast_key: str
    week_key: str
    uv_key: str


def dataset_key(name: str, dataset_id: str) -> str:
    """没有对照时直接沿用原名"""
    table = DATASET_KEY_TABLES.get(dataset_id, {})
    return table.get(name, name)


def resolve_place(name: str | None) -> Place:
    if name is None or not name.strip():
        raise MissingParameterError("請提供 locationName 查詢參數。")

    name = name.strip()
    if name not in TAIWAN_LOCATIONS:
        raise ValidationError(f"地點 {name} 不在支援列表中。")

    return Place(
        name=name,
        forecast_key=dataset_key(name, FORECAST_36H),
        week_key=dataset_key(name, FORECAST_WEEK),
        uv_key=dataset_key(name, UV_INDEX),
    )
