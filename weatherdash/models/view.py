"""View models: slots, classifications, and the toolkit-independent RenderModel."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TypeAlias


class Theme(StrEnum):
    CLEAR = "clear"
    NIGHT = "night"
    CLOUDY = "cloudy"
    RAIN = "rain"


@dataclass(frozen=True)
class CurrentSlot:
    """Live conditions."""


@dataclass(frozen=True)
class DaySlot:
    index: int


Slot: TypeAlias = CurrentSlot | DaySlot

CURRENT = CurrentSlot()


@dataclass(frozen=True)
class WeatherClassification:
    label: str
    icon: str
    theme: Theme


@dataclass(frozen=True)
class TemperatureRange:
    high: int
    low: int


@dataclass(frozen=True)
class HourCard:
    timestamp: datetime
    label: str
    temperature: int
    condition: str
    icon: str
    is_daytime: bool


@dataclass(frozen=True)
class DayRow:
    index: int
    name: str
    precip_probability: str
    show_precip: bool
    condition: str
    icon: str
    high: int
    low: int
    selected: bool


@dataclass(frozen=True)
class RenderModel:
    slot: Slot
    location_name: str
    date_label: str
    condition: str
    icon: str
    theme: Theme
    temperature: int | None
    temperature_range: TemperatureRange | None
    show_degree_glyph: bool
    precipitation: str
    humidity: str
    wind: str
    uv_index: str
    hourly: tuple[HourCard, ...]
    days: tuple[DayRow, ...]


@dataclass(frozen=True)
class DashboardView:
    """What the presentation layer shows: a status line or a render."""

    status: str | None
    render: RenderModel | None

    @property
    def is_loading(self) -> bool:
        return self.status is not None or self.render is None
