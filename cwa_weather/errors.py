from fastapi.responses import JSONResponse
from typing import Any, Optional


class WeatherError(Exception):
    """所有对外错误的基类，能直接序列化成 {error, message} 回应"""

    status_code = 500
    error = "伺服器錯誤"

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(WeatherError):
    status_code = 400
    error = "地點無效"


class MissingParameterError(ValidationError):
    error = "缺少參數"


class ConfigurationError(WeatherError):
    status_code = 500
    error = "伺服器設定錯誤"


class UpstreamError(WeatherError):
    error = "CWA API 錯誤"

    def __init__(self, message: str, status_code: int = 502, details: Any = None):
        super().__init__(message, status_code=status_code, details=details)


class NotFoundError(WeatherError):
    status_code = 404
    error = "找不到地點資料"


class InternalError(WeatherError):
    status_code = 500
    error = "伺服器錯誤"


def error_response(error: WeatherError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
