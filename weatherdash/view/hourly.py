"""Hourly strip: which hours to show for a slot, and how to label them."""

from datetime import datetime

from weatherdash.config.defaults import DEFAULT_ICON_BASE_URL
from weatherdash.models.common import round_half_up
from weatherdash.models.forecast import DailyPoint, HourlyPoint
from weatherdash.models.view import CurrentSlot, DaySlot, HourCard, Slot
from weatherdash.view.classifier import classify

HOURLY_WINDOW = 24
NOW_LABEL = "Now"


def clock_label(hour: int) -> str:
    """12-hour clock label: 0 -> '12 AM', 12 -> '12 PM', 13 -> '1 PM'."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def is_daytime_hour(hour: int) -> bool:
    return 6 < hour < 19


def window_start(
    hourly: tuple[HourlyPoint, ...],
    slot: Slot,
    daily: tuple[DailyPoint, ...],
    now: datetime,
) -> int:
    """Index of the first hour to show; 0 when nothing matches."""
    if isinstance(slot, DaySlot):
        target = daily[slot.index].date
        match = (i for i, h in enumerate(hourly) if h.timestamp.date() == target)
    else:
        match = (i for i, h in enumerate(hourly) if h.timestamp > now)
    return next(match, 0)


def select_hourly_window(
    hourly: tuple[HourlyPoint, ...],
    slot: Slot,
    daily: tuple[DailyPoint, ...],
    now: datetime,
    size: int = HOURLY_WINDOW,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> tuple[HourCard, ...]:
    """Up to `size` consecutive hour cards for the slot.

    Returns fewer cards when the payload runs out.
    """
    start = window_start(hourly, slot, daily, now)
    cards = []
    for offset, point in enumerate(hourly[start:start + size]):
        hour = point.timestamp.hour
        daytime = is_daytime_hour(hour)
        meta = classify(point.weather_code, daytime, icon_base_url)
        label = clock_label(hour)
        if isinstance(slot, CurrentSlot) and offset == 0:
            label = NOW_LABEL
        cards.append(
            HourCard(
                timestamp=point.timestamp,
                label=label,
                temperature=round_half_up(point.temperature),
                condition=meta.label,
                icon=meta.icon,
                is_daytime=daytime,
            )
        )
    return tuple(cards)
