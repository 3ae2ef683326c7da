import os
from dotenv import load_dotenv

load_dotenv()

# 气象署开放资料平台
CWA_API_BASE_URL = os.getenv("CWA_API_BASE_URL", "https://opendata.cwa.gov.tw/api").rstrip("/")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def get_api_key() -> str | None:
    """每次请求时读取，缺少金钥时由调用方回报 500"""
    return os.getenv("CWA_API_KEY") or None


def mask_key(key: str | None) -> str:
    if not key:
        return "未设置"
    return key[:4] + "****" if len(key) > 8 else "****"
