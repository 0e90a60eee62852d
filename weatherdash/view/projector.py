"""View projector: forecast payload + selected slot -> RenderModel.

project() has no side effects and reads nothing but its arguments (and the
wall clock, when `now` is not given), so re-rendering the same slot against
the same payload always yields an equal RenderModel.
"""

from datetime import date, datetime

from weatherdash.config.defaults import DEFAULT_ICON_BASE_URL
from weatherdash.models.common import (
    format_number,
    format_percent,
    local_now,
    round_half_up,
)
from weatherdash.models.forecast import ForecastPayload
from weatherdash.models.view import (
    CurrentSlot,
    DayRow,
    DaySlot,
    RenderModel,
    Slot,
    TemperatureRange,
)
from weatherdash.view.classifier import classify
from weatherdash.view.hourly import HOURLY_WINDOW, clock_label, select_hourly_window

HUMIDITY_PLACEHOLDER = "--"
TODAY_LABEL = "Today"


def format_day_label(d: date) -> str:
    """'Sunday, October 18'"""
    return f"{d:%A}, {d:%B} {d.day}"


def format_now_label(dt: datetime) -> str:
    """'Sunday, October 18 at 3:05 PM'"""
    hour, meridiem = clock_label(dt.hour).split()
    return f"{format_day_label(dt.date())} at {hour}:{dt:%M} {meridiem}"


def project(
    payload: ForecastPayload,
    slot: Slot,
    now: datetime | None = None,
    hourly_window: int = HOURLY_WINDOW,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> RenderModel:
    """Derive every displayed value for one slot.

    `now` may be aware (converted to the payload's local clock) or naive
    (taken as already local). Raises IndexError for a day outside the
    forecast.
    """
    now = local_now(payload.utc_offset_seconds, now)

    if isinstance(slot, DaySlot):
        if not 0 <= slot.index < len(payload.daily):
            raise IndexError(
                f"Day {slot.index} outside forecast of {len(payload.daily)} days"
            )
        day = payload.daily[slot.index]
        # Daily rows never show night icons
        meta = classify(day.weather_code, True, icon_base_url)
        date_label = format_day_label(day.date)
        temperature = None
        temperature_range = TemperatureRange(
            high=round_half_up(day.temp_max), low=round_half_up(day.temp_min)
        )
        precipitation = format_percent(day.precip_probability_max)
        humidity = HUMIDITY_PLACEHOLDER
        wind = f"{round_half_up(day.wind_speed_max)} km/h"
        uv_index = format_number(day.uv_index_max)
    else:
        cur = payload.current
        meta = classify(cur.weather_code, cur.is_daytime, icon_base_url)
        date_label = format_now_label(now)
        temperature = round_half_up(cur.temperature)
        temperature_range = None
        precipitation = f"{format_number(cur.precipitation)} mm"
        humidity = format_percent(cur.relative_humidity)
        wind = f"{round_half_up(cur.wind_speed)} km/h"
        uv_index = format_number(payload.daily[0].uv_index_max)

    return RenderModel(
        slot=slot,
        location_name=payload.location_name,
        date_label=date_label,
        condition=meta.label,
        icon=meta.icon,
        theme=meta.theme,
        temperature=temperature,
        temperature_range=temperature_range,
        show_degree_glyph=isinstance(slot, CurrentSlot),
        precipitation=precipitation,
        humidity=humidity,
        wind=wind,
        uv_index=uv_index,
        hourly=select_hourly_window(
            payload.hourly, slot, payload.daily, now, hourly_window, icon_base_url
        ),
        days=project_day_rows(payload, slot, icon_base_url),
    )


def project_day_rows(
    payload: ForecastPayload,
    slot: Slot,
    icon_base_url: str = DEFAULT_ICON_BASE_URL,
) -> tuple[DayRow, ...]:
    """The daily list, with the selected day flagged."""
    selected = slot.index if isinstance(slot, DaySlot) else None
    rows = []
    for i, day in enumerate(payload.daily):
        meta = classify(day.weather_code, True, icon_base_url)
        pop = day.precip_probability_max
        rows.append(
            DayRow(
                index=i,
                name=TODAY_LABEL if i == 0 else f"{day.date:%A}",
                precip_probability=format_percent(pop),
                show_precip=pop is not None and pop > 0,
                condition=meta.label,
                icon=meta.icon,
                high=round_half_up(day.temp_max),
                low=round_half_up(day.temp_min),
                selected=i == selected,
            )
        )
    return tuple(rows)
