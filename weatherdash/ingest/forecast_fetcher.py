"""Forecast fetcher: retrieves and validates an Open-Meteo forecast payload."""

import logging
import math
from datetime import date, datetime, timedelta

import httpx

from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.errors import WeatherUnavailable
from weatherdash.models.forecast import (
    CurrentConditions,
    DailyPoint,
    ForecastPayload,
    HourlyPoint,
)

logger = logging.getLogger(__name__)

HOURLY_STEP = timedelta(hours=1)


class ForecastFetcher:
    def __init__(self, open_meteo_client: OpenMeteoClient):
        self.open_meteo = open_meteo_client

    def fetch(self, lat: float, lon: float) -> ForecastPayload:
        """Fetch and parse the forecast for a point.

        Raises WeatherUnavailable on any network, HTTP or shape problem;
        a payload is either complete or not returned at all.
        """
        try:
            raw = self.open_meteo.get_forecast(lat, lon)
        except (httpx.HTTPError, ValueError) as e:
            raise WeatherUnavailable(
                f"Forecast request failed for {lat:.4f},{lon:.4f}: {e}"
            ) from e

        try:
            payload = parse_forecast(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed forecast for %.4f,%.4f: %s", lat, lon, e)
            raise WeatherUnavailable(f"Malformed forecast response: {e}") from e

        logger.info(
            "Fetched forecast for %.4f,%.4f: %d hourly, %d daily (%s)",
            lat, lon, len(payload.hourly), len(payload.daily), payload.timezone,
        )
        return payload


def parse_forecast(raw: dict) -> ForecastPayload:
    """Turn an Open-Meteo response into a ForecastPayload.

    Raises KeyError/TypeError/ValueError when a requested field is missing,
    null or non-finite where a value is required, the series disagree in
    length, or the hourly timestamps are not one hour apart.
    """
    cur = raw["current"]
    current = CurrentConditions(
        temperature=_number(cur["temperature_2m"]),
        apparent_temperature=_number(cur["apparent_temperature"]),
        relative_humidity=_number(cur["relative_humidity_2m"]),
        is_daytime=bool(_number(cur["is_day"])),
        precipitation=_number(cur["precipitation"]),
        weather_code=int(_number(cur["weather_code"])),
        wind_speed=_number(cur["wind_speed_10m"]),
    )

    hourly_raw = raw["hourly"]
    hourly_series = _series(
        hourly_raw, ("time", "temperature_2m", "weather_code")
    )
    hourly = tuple(
        HourlyPoint(
            timestamp=datetime.fromisoformat(t),
            temperature=_number(temp),
            weather_code=int(_number(code)),
        )
        for t, temp, code in zip(*hourly_series)
    )
    for prev, nxt in zip(hourly, hourly[1:]):
        if nxt.timestamp - prev.timestamp != HOURLY_STEP:
            raise ValueError(f"Hourly series not one hour apart at {nxt.timestamp}")

    daily_raw = raw["daily"]
    daily_series = _series(
        daily_raw,
        (
            "time",
            "weather_code",
            "temperature_2m_max",
            "temperature_2m_min",
            "uv_index_max",
            "precipitation_probability_max",
            "wind_speed_10m_max",
        ),
    )
    daily = tuple(
        DailyPoint(
            date=date.fromisoformat(d),
            weather_code=int(_number(code)),
            temp_max=_number(tmax),
            temp_min=_number(tmin),
            uv_index_max=_optional_number(uv),
            precip_probability_max=_optional_number(pop),
            wind_speed_max=_number(wind),
        )
        for d, code, tmax, tmin, uv, pop, wind in zip(*daily_series)
    )
    if not daily:
        raise ValueError("Daily series is empty")

    return ForecastPayload(
        current=current,
        hourly=hourly,
        daily=daily,
        timezone=raw.get("timezone", "GMT"),
        utc_offset_seconds=int(raw.get("utc_offset_seconds", 0)),
    )


def _series(block: dict, keys: tuple[str, ...]) -> list[list]:
    """Pull same-length lists out of a series block."""
    columns = [block[k] for k in keys]
    for key, col in zip(keys, columns):
        if not isinstance(col, list):
            raise TypeError(f"Series {key!r} is not a list")
    lengths = {len(col) for col in columns}
    if len(lengths) > 1:
        raise ValueError(f"Series lengths differ: {sorted(lengths)}")
    return columns


def _number(value) -> float:
    if value is None or isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return v


def _optional_number(value) -> float | None:
    if value is None:
        return None
    return _number(value)
