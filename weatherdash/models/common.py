"""Common types and helpers shared across models."""

import math
from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    return datetime.now(UTC)


def local_now(utc_offset_seconds: int, now: datetime | None = None) -> datetime:
    """Wall-clock time at a location, as a naive datetime.

    Open-Meteo returns naive local timestamps when queried with timezone=auto,
    so "now" has to be expressed on the same clock before comparing.
    """
    if now is None:
        now = utc_now()
    if now.tzinfo is None:
        return now
    shifted = now.astimezone(UTC) + timedelta(seconds=utc_offset_seconds)
    return shifted.replace(tzinfo=None)


def round_half_up(value: float) -> int:
    """Round .5 upwards instead of to even, like Math.round in browsers."""
    return math.floor(value + 0.5)


def format_number(value: float | None, placeholder: str = "--") -> str:
    """Display a provider number without a trailing '.0'."""
    if value is None:
        return placeholder
    return f"{value:.15g}"


def format_percent(value: float | None, placeholder: str = "--") -> str:
    if value is None:
        return placeholder
    return f"{format_number(value)}%"
