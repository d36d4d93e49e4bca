"""SMHI open-data point forecast client."""

import logging

import httpx

from smhicast.models.errors import SmhiClientError

logger = logging.getLogger(__name__)

SMHI_BASE_URL = "https://opendata-download-metfcst.smhi.se"
DEFAULT_USER_AGENT = "smhicast/0.1.0"
POINT_FORECAST_PATH = (
    "/api/category/pmp3g/version/2/geotype/point/lon/{lon:.4f}/lat/{lat:.4f}/data.json"
)


class SmhiClient:
    """Fetches the raw pmp3g point forecast. One request, no retries."""

    def __init__(
        self,
        base_url: str = SMHI_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def point_forecast_url(self, latitude: float, longitude: float) -> str:
        return self.base_url + POINT_FORECAST_PATH.format(lat=latitude, lon=longitude)

    def get_point_forecast(self, latitude: float, longitude: float) -> dict:
        """Return the decoded JSON body for a point forecast.

        Raises SmhiClientError on a non-200 response, a transport error
        or a body that is not JSON.
        """
        url = self.point_forecast_url(latitude, longitude)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("GET %s", url)
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("SMHI request failed: %s -> %s", url, e)
            raise SmhiClientError(f"Request failed: {e}") from e

        if resp.status_code != 200:
            logger.error("SMHI API %d: %s", resp.status_code, url)
            raise SmhiClientError(f"status code: {resp.status_code}", resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise SmhiClientError(f"Invalid JSON body: {e}", resp.status_code) from e
