# cwa_weather/service/cwa_client.py
import asyncio
import logging

import requests
from fastapi.concurrency import run_in_threadpool

from cwa_weather import config
from cwa_weather.errors import ConfigurationError, InternalError, UpstreamError
from cwa_weather.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def dataset_url(dataset_id: str) -> str:
    return f"{config.CWA_API_BASE_URL}/v1/rest/datastore/{dataset_id}"


def _upstream_error(response: requests.Response) -> UpstreamError:
    try:
        body = response.json()
    except ValueError:
        body = response.text or None

    message = None
    if isinstance(body, dict):
        message = body.get("message")
    return UpstreamError(
        message or "無法取得天氣資料",
        status_code=response.status_code,
        details=body,
    )


async def fetch_dataset(dataset_id: str, params: dict | None = None) -> Result:
    """
    请求一个气象署资料集，回传 Ok(json) 或 Err(错误)
    不重试，不额外设定 timeout
    """
    api_key = config.get_api_key()
    if not api_key:
        return Err(ConfigurationError("請在 .env 檔案中設定 CWA_API_KEY"))

    url = dataset_url(dataset_id)
    # 授权码放最前面，允许呼叫端覆写其余参数
    api_params = {"Authorization": api_key, **(params or {})}
    logger.info(f"请求 CWA 资料集 {dataset_id} 参数: {params or {}}")

    try:
        response = await run_in_threadpool(requests.get, url, params=api_params)
    except requests.RequestException as e:
        logger.error(f"CWA 连线失败 ({dataset_id}): {e}")
        return Err(UpstreamError(f"無法連線至氣象署: {e}"))

    if not response.ok:
        error = _upstream_error(response)
        logger.error(f"CWA API 错误 ({dataset_id}): {response.status_code} {error.message}")
        return Err(error)

    try:
        return Ok(response.json())
    except ValueError as e:
        logger.error(f"CWA 回应不是合法 JSON ({dataset_id}): {e}")
        return Err(InternalError(f"無法解析 {dataset_id} 回應"))


async def fetch_all(*requests_: tuple[str, dict | None]) -> Result:
    """同时发出所有请求再一起等待，任一失败整体失败"""
    results = await asyncio.gather(
        *(fetch_dataset(dataset_id, params) for dataset_id, params in requests_)
    )
    for result in results:
        if isinstance(result, Err):
            return result
    return Ok([result.value for result in results])
