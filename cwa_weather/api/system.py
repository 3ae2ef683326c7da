from datetime import datetime, timezone
from fastapi import APIRouter
from cwa_weather.schema.weather import LocationsResponse
from cwa_weather.service.place_service import TAIWAN_LOCATIONS

router = APIRouter(tags=["System"])


@router.get("/")
def index():
    return {
        "message": "歡迎使用 CWA 天氣預報 API (支援動態縣市查詢)",
        "endpoints": {
            "weather": "/api/weather?locationName={縣市名稱}",
            "weekWeather": "/api/weather/week?locationName={縣市名稱}",
            "locations": "/api/locations",
            "health": "/api/health",
        },
    }


@router.get("/api/health")
def health():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


@router.get("/api/locations", response_model=LocationsResponse)
def locations():
    return {"success": True, "data": list(TAIWAN_LOCATIONS)}
