from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from cwa_weather import config
from cwa_weather.api.system import router as system_router
from cwa_weather.api.weather import router as weather_router
from cwa_weather.errors import WeatherError, error_response
import logging
import time

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(title="CWA Weather Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(system_router)
app.include_router(weather_router)


@app.on_event("startup")
async def startup_event():
    """应用启动时执行"""
    logger.info("🚀 伺服器啟動中...")
    logger.info(f"CWA API: {config.CWA_API_BASE_URL} 金钥: {config.mask_key(config.get_api_key())}")
    if not config.get_api_key():
        logger.warning("未设置 CWA_API_KEY，天气查询会回传 500")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    level = logging.WARNING if response.status_code >= 400 else logging.INFO
    logger.log(level, f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


@app.exception_handler(WeatherError)
async def weather_error_handler(request: Request, exc: WeatherError):
    logger.info(f"{request.url.path} -> {exc.status_code} {exc.error}: {exc.message}")
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "參數錯誤", "message": str(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "找不到此路徑"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"未处理的错误: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "伺服器錯誤", "message": "無法取得天氣資料，請稍後再試"},
    )
