"""Open-Meteo forecast data models."""

from dataclasses import dataclass, replace
from datetime import date, datetime


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    apparent_temperature: float
    relative_humidity: float
    is_daytime: bool
    precipitation: float
    weather_code: int
    wind_speed: float


@dataclass(frozen=True)
class HourlyPoint:
    timestamp: datetime  # local wall-clock, naive
    temperature: float
    weather_code: int


@dataclass(frozen=True)
class DailyPoint:
    date: date
    weather_code: int
    temp_max: float
    temp_min: float
    uv_index_max: float | None
    precip_probability_max: float | None
    wind_speed_max: float


@dataclass(frozen=True)
class ForecastPayload:
    """One complete fetch for one location. Replaced wholesale, never mutated."""

    current: CurrentConditions
    hourly: tuple[HourlyPoint, ...]
    daily: tuple[DailyPoint, ...]
    timezone: str = "GMT"
    utc_offset_seconds: int = 0
    location_name: str = ""

    def with_location_name(self, name: str) -> "ForecastPayload":
        return replace(self, location_name=name)
