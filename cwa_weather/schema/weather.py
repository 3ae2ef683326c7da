from pydantic import BaseModel
from typing import List, Optional


class CurrentWeather(BaseModel):
    temperature: str
    weatherDescription: str


# 36 小时预报的单一时段
class ForecastSlot(BaseModel):
    startTime: str
    endTime: str
    weather: str
    rain: str
    minTemp: str
    maxTemp: str
    comfort: Optional[str] = None


# 一周预报的单一时段
class WeekForecastSlot(BaseModel):
    startTime: str
    endTime: str
    temperature: str
    weatherDescription: str


class WeatherData(BaseModel):
    city: str
    updateTime: str
    currentWeather: Optional[CurrentWeather] = None
    currentUVIndex: str = "N/A"
    uvDescription: str = ""
    forecasts: List[ForecastSlot]


class WeekWeatherData(BaseModel):
    city: str
    updateTime: str
    currentWeather: Optional[CurrentWeather] = None
    currentUVIndex: str = "N/A"
    uvDescription: str = ""
    forecasts: List[WeekForecastSlot]


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherData


class WeekWeatherResponse(BaseModel):
    success: bool = True
    data: WeekWeatherData


class LocationsResponse(BaseModel):
    success: bool = True
    data: List[str]


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
