"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_fetcher import parse_forecast
from weatherdash.models.forecast import ForecastPayload

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# Sunday
START_DATE = "2026-10-18"
DAILY_CODES = [0, 2, 45, 61, 73, 95, 3, 40, 80, 99]
DAILY_PRECIP = [0, 10, 20, 80, 40, 90, 5, 0, 60, 30]
DAILY_UV = [3.5, 2.0, 1.0, 0.5, 1.5, 2.5, 4.0, 4.5, 3.0, 2.0]


def make_forecast_raw(
    start: str = START_DATE,
    days: int = 10,
    hours: int | None = None,
    hourly_codes: list[int] | None = None,
    **current: object,
) -> dict:
    """Build an Open-Meteo style response: local naive timestamps, timezone=auto."""
    start_day = date.fromisoformat(start)
    hours = days * 24 if hours is None else hours
    base = datetime.combine(start_day, time())
    hourly_codes = hourly_codes or [61] * hours
    cur = {
        "time": f"{start}T15:00",
        "interval": 900,
        "temperature_2m": 18.5,
        "relative_humidity_2m": 60,
        "apparent_temperature": 17.2,
        "is_day": 1,
        "precipitation": 0.0,
        "weather_code": 0,
        "wind_speed_10m": 12.4,
    }
    cur.update(current)
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "timezone": "Europe/Berlin",
        "timezone_abbreviation": "CEST",
        "utc_offset_seconds": 7200,
        "current": cur,
        "hourly": {
            "time": [
                (base + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M")
                for i in range(hours)
            ],
            "temperature_2m": [10.0 + (i % 24) * 0.5 for i in range(hours)],
            "weather_code": hourly_codes[:hours],
        },
        "daily": {
            "time": [(start_day + timedelta(days=i)).isoformat() for i in range(days)],
            "weather_code": DAILY_CODES[:days],
            "temperature_2m_max": [20.5 + i for i in range(days)],
            "temperature_2m_min": [10.4 + i for i in range(days)],
            "uv_index_max": DAILY_UV[:days],
            "precipitation_probability_max": DAILY_PRECIP[:days],
            "wind_speed_10m_max": [15.5 + i for i in range(days)],
        },
    }


@pytest.fixture
def forecast_raw_factory() -> Callable[..., dict]:
    return make_forecast_raw


@pytest.fixture
def forecast_raw() -> dict:
    return make_forecast_raw()


@pytest.fixture
def payload(forecast_raw: dict) -> ForecastPayload:
    return parse_forecast(forecast_raw).with_location_name("Berlin, 10117")


@pytest.fixture
def local_afternoon() -> datetime:
    """Naive local time matching the payload's clock."""
    return datetime(2026, 10, 18, 15, 5)


@pytest.fixture
def default_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "weather": {"forecast_days": 7},
        "display": {"hourly_window": 12},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def search_results() -> list[dict]:
    with open(FIXTURE_DIR / "nominatim_search_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def reverse_result() -> dict:
    with open(FIXTURE_DIR / "nominatim_reverse_berlin.json") as f:
        return json.load(f)
