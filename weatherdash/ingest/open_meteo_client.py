"""Open-Meteo forecast API client."""

import logging

import httpx

from weatherdash.config.defaults import DEFAULT_USER_AGENT, OPEN_METEO_BASE_URL

logger = logging.getLogger(__name__)

CURRENT_VARIABLES = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
)
HOURLY_VARIABLES = ("temperature_2m", "weather_code")
DAILY_VARIABLES = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "uv_index_max",
    "precipitation_probability_max",
    "wind_speed_10m_max",
)


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        forecast_days: int = 10,
        timezone: str = "auto",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.base_url = base_url
        self.forecast_days = forecast_days
        self.timezone = timezone
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, lat: float, lon: float) -> dict:
        """Fetch current, hourly and daily series for one point in a single call."""
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": ",".join(CURRENT_VARIABLES),
            "hourly": ",".join(HOURLY_VARIABLES),
            "daily": ",".join(DAILY_VARIABLES),
            "timezone": self.timezone,
            "forecast_days": self.forecast_days,
        }
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Open-Meteo API error for %.4f,%.4f: %s", lat, lon, e)
            raise
        except httpx.RequestError as e:
            logger.error("Open-Meteo request failed for %.4f,%.4f: %s", lat, lon, e)
            raise
