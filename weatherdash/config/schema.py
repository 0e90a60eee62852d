"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherdash.config.defaults import (
    DEFAULT_ICON_BASE_URL,
    DEFAULT_USER_AGENT,
    NOMINATIM_BASE_URL,
    OPEN_METEO_BASE_URL,
)


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NOMINATIM_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None = no timeout; a hung request leaves the loading status up
    timeout: float | None = Field(default=None, gt=0.0)


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPEN_METEO_BASE_URL
    forecast_days: int = Field(default=10, ge=1, le=16)
    timezone: str = "auto"
    timeout: float | None = Field(default=None, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_window: int = Field(default=24, ge=1)
    icon_base_url: str = DEFAULT_ICON_BASE_URL


class SessionConfig(BaseModel):
    model_config = {"extra": "forbid"}

    discard_stale_results: bool = True


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    weather: WeatherConfig = WeatherConfig()
    display: DisplayConfig = DisplayConfig()
    session: SessionConfig = SessionConfig()
    server: ServerConfig = ServerConfig()
