"""Tests for the SMHI API client with mocked httpx."""

import httpx
import pytest
import respx

from smhicast.ingest.smhi_client import SmhiClient
from smhicast.models.errors import SmhiClientError

BASE = "https://test-smhi.example.com"
POINT_URL = (
    f"{BASE}/api/category/pmp3g/version/2/geotype/point"
    "/lon/17.9558/lat/59.3010/data.json"
)


@pytest.fixture
def smhi() -> SmhiClient:
    return SmhiClient(base_url=BASE, timeout=1.0)


class TestPointForecastUrl:
    def test_lon_before_lat_four_decimals(self, smhi: SmhiClient):
        assert smhi.point_forecast_url(59.3009642, 17.9557798) == POINT_URL

    def test_trailing_slash_stripped(self):
        client = SmhiClient(base_url=BASE + "/")
        assert client.point_forecast_url(59.3009642, 17.9557798) == POINT_URL


class TestGetPointForecast:
    @respx.mock
    def test_success(self, smhi: SmhiClient, smhi_payload: dict):
        respx.get(POINT_URL).mock(return_value=httpx.Response(200, json=smhi_payload))

        result = smhi.get_point_forecast(59.3009642, 17.9557798)
        assert len(result["timeSeries"]) == 14

    @respx.mock
    def test_user_agent_header(self, smhi: SmhiClient, smhi_payload: dict):
        route = respx.get(POINT_URL).mock(
            return_value=httpx.Response(200, json=smhi_payload)
        )

        smhi.get_point_forecast(59.3009642, 17.9557798)
        assert route.called
        request = route.calls[0].request
        assert "smhicast" in request.headers["user-agent"]

    @respx.mock
    def test_http_error_not_retried(self, smhi: SmhiClient):
        route = respx.get(POINT_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(SmhiClientError) as exc_info:
            smhi.get_point_forecast(59.3009642, 17.9557798)
        assert exc_info.value.status_code == 503
        assert route.call_count == 1

    @respx.mock
    def test_transport_error(self, smhi: SmhiClient):
        respx.get(POINT_URL).mock(side_effect=httpx.ConnectError)

        with pytest.raises(SmhiClientError) as exc_info:
            smhi.get_point_forecast(59.3009642, 17.9557798)
        assert exc_info.value.status_code is None

    @respx.mock
    def test_invalid_json(self, smhi: SmhiClient):
        respx.get(POINT_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(SmhiClientError):
            smhi.get_point_forecast(59.3009642, 17.9557798)
