# test/conftest.py
import json
import pytest
from fastapi.testclient import TestClient
from cwa_weather.main import app
import cwa_data


class FakeResponse:
    def __init__(self, status_code: int, body):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    @property
    def text(self):
        return self._body if isinstance(self._body, str) else json.dumps(self._body, ensure_ascii=False)

    def json(self):
        if isinstance(self._body, str):
            raise ValueError("not json")
        return self._body


class FakeCwa:
    """替代 requests.get，按资料集代码回传预设的资料并记录每次调用"""

    def __init__(self):
        self.calls = []
        self.routes = {
            "F-C0032-001": (200, cwa_data.forecast_36h()),
            "F-D0047-091": (200, cwa_data.forecast_week()),
            "F-A0085-005": (200, cwa_data.uv_index()),
        }

    def set(self, dataset_id, body, status_code=200):
        self.routes[dataset_id] = (status_code, body)

    def calls_for(self, dataset_id):
        return [params for url, params in self.calls if url.endswith("/" + dataset_id)]

    def __call__(self, url, params=None, **kwargs):
        self.calls.append((url, dict(params or {})))
        dataset_id = url.rsplit("/", 1)[-1]
        status_code, body = self.routes[dataset_id]
        return FakeResponse(status_code, body)


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """每个测试默认都有金钥"""
    monkeypatch.setenv("CWA_API_KEY", "CWA-TEST-KEY")
    yield "CWA-TEST-KEY"


@pytest.fixture()
def fake_cwa(monkeypatch):
    fake = FakeCwa()
    monkeypatch.setattr("cwa_weather.service.cwa_client.requests.get", fake)
    return fake
