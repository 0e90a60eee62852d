"""Nominatim (OpenStreetMap) geocoding API client."""

import logging

import httpx

from weatherdash.config.defaults import DEFAULT_USER_AGENT, NOMINATIM_BASE_URL

logger = logging.getLogger(__name__)


class NominatimClient:
    def __init__(
        self,
        base_url: str = NOMINATIM_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def search(self, query: str) -> list[dict]:
        """Forward-geocode a free-text query. Returns candidates in rank order."""
        url = f"{self.base_url}/search"
        params = {"format": "json", "addressdetails": 1, "q": query}
        data = self._get(url, params)
        if not isinstance(data, list):
            raise ValueError(f"Unexpected search response type: {type(data).__name__}")
        return data

    def reverse(self, lat: float, lon: float) -> dict:
        """Reverse-geocode a coordinate pair into one address record."""
        url = f"{self.base_url}/reverse"
        params = {"format": "json", "lat": lat, "lon": lon, "addressdetails": 1}
        data = self._get(url, params)
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected reverse response type: {type(data).__name__}")
        return data

    def _get(self, url: str, params: dict) -> dict | list:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Nominatim API error for %s: %s", url, e)
            raise
        except httpx.RequestError as e:
            logger.error("Nominatim request failed for %s: %s", url, e)
            raise
