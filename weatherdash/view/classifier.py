"""WMO weather-code classification into label, icon and theme.

Buckets are checked in order and the first match wins. Codes that fall in
the gaps between buckets (4-44, 49-50, 68-70, 87-94, negatives) get the
"Cloudy" fallback, so every code classifies to exactly one bucket.
"""

from dataclasses import dataclass

from weatherdash.config.defaults import DEFAULT_ICON_BASE_URL
from weatherdash.models.view import Theme, WeatherClassification


@dataclass(frozen=True)
class CodeRange:
    label: str
    icon_code: str
    day_theme: Theme
    night_theme: Theme
    low: int = 0
    high: int | None = None  # None = open-ended

    def matches(self, code: int) -> bool:
        if code < self.low:
            return False
        return self.high is None or code <= self.high


CLEAR_SKY = CodeRange("Clear Sky", "01", Theme.CLEAR, Theme.NIGHT, low=0, high=0)
PARTLY_CLOUDY = CodeRange("Partly Cloudy", "02", Theme.CLOUDY, Theme.CLOUDY, low=1, high=3)
FOGGY = CodeRange("Foggy", "50", Theme.CLOUDY, Theme.CLOUDY, low=45, high=48)
RAIN = CodeRange("Rain", "10", Theme.RAIN, Theme.RAIN, low=51, high=67)
SNOWFALL = CodeRange("Snowfall", "13", Theme.CLOUDY, Theme.CLOUDY, low=71, high=86)
THUNDERSTORM = CodeRange("Thunderstorm", "11", Theme.RAIN, Theme.RAIN, low=95)

CLOUDY_FALLBACK = CodeRange("Cloudy", "03", Theme.CLOUDY, Theme.CLOUDY)

BUCKETS: tuple[CodeRange, ...] = (
    CLEAR_SKY,
    PARTLY_CLOUDY,
    FOGGY,
    RAIN,
    SNOWFALL,
    THUNDERSTORM,
)


def find_bucket(code: int) -> CodeRange:
    for bucket in BUCKETS:
        if bucket.matches(code):
            return bucket
    return CLOUDY_FALLBACK


def icon_url(
    icon_code: str, is_daytime: bool, base_url: str = DEFAULT_ICON_BASE_URL
) -> str:
    suffix = "d" if is_daytime else "n"
    return f"{base_url}/{icon_code}{suffix}@4x.png"


def classify(
    code: int, is_daytime: bool, icon_base_url: str = DEFAULT_ICON_BASE_URL
) -> WeatherClassification:
    bucket = find_bucket(code)
    return WeatherClassification(
        label=bucket.label,
        icon=icon_url(bucket.icon_code, is_daytime, icon_base_url),
        theme=bucket.day_theme if is_daytime else bucket.night_theme,
    )
