"""Tests for shared model helpers."""

from datetime import UTC, datetime

import pytest

from weatherdash.models.common import format_number, format_percent, local_now, round_half_up
from weatherdash.models.errors import (
    DashboardError,
    GeolocationUnsupported,
    PermissionDenied,
    WeatherUnavailable,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-0.5, 0), (-1.5, -1), (-2.6, -3)],
    )
    def test_rounding(self, value: float, expected: int):
        assert round_half_up(value) == expected


class TestFormatting:
    def test_number(self):
        assert format_number(0.0) == "0"
        assert format_number(0.4) == "0.4"
        assert format_number(60) == "60"
        assert format_number(None) == "--"

    def test_number_keeps_precision(self):
        assert format_number(12.3456789) == "12.3456789"
        assert format_number(1234567.0) == "1234567"
        assert format_percent(99.95) == "99.95%"

    def test_percent(self):
        assert format_percent(80.0) == "80%"
        assert format_percent(None) == "--"


class TestLocalNow:
    def test_aware_shifted(self):
        now = datetime(2026, 10, 18, 23, 30, tzinfo=UTC)
        assert local_now(7200, now) == datetime(2026, 10, 19, 1, 30)

    def test_negative_offset(self):
        now = datetime(2026, 10, 18, 2, 0, tzinfo=UTC)
        assert local_now(-18000, now) == datetime(2026, 10, 17, 21, 0)

    def test_naive_passthrough(self):
        now = datetime(2026, 10, 18, 9, 0)
        assert local_now(7200, now) == now

    def test_default_is_naive(self):
        assert local_now(0).tzinfo is None


class TestErrors:
    def test_status_messages(self):
        assert WeatherUnavailable().status_message == "Weather data unavailable."
        assert isinstance(GeolocationUnsupported(), PermissionDenied)
        assert issubclass(PermissionDenied, DashboardError)

    def test_detail_in_str(self):
        assert str(WeatherUnavailable("timeout")) == "timeout"
        assert str(WeatherUnavailable()) == "Weather data unavailable."
