"""Dashboard session: the single owner of the fetched payload and the slot.

Two sequences can be in flight at once: locate (device position -> reverse
lookup -> fetch) and search (query -> forward lookup -> fetch). Each takes a
request number when it starts; when stale results are discarded, only the
latest request may commit a payload or change the status line.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime

from weatherdash.config.defaults import LOCATING_STATUS, SEARCHING_STATUS
from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_fetcher import ForecastFetcher
from weatherdash.ingest.geolocation import PositionProvider
from weatherdash.ingest.location_resolver import LocationResolver
from weatherdash.ingest.nominatim_client import NominatimClient
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.errors import DashboardError
from weatherdash.models.forecast import ForecastPayload
from weatherdash.models.view import CURRENT, DashboardView, DaySlot, Slot
from weatherdash.view.projector import project

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    payload: ForecastPayload | None = None
    slot: Slot = CURRENT
    status: str | None = None
    latest_request: int = 0


class DashboardSession:
    def __init__(
        self,
        resolver: LocationResolver,
        fetcher: ForecastFetcher,
        config: DashboardConfig | None = None,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.config = config if config is not None else DashboardConfig()
        self.state = AppState()
        self._lock = threading.Lock()

    # --- Fetch sequences ---

    def locate(self, provider: PositionProvider) -> bool:
        """Run the device-position sequence. Returns True if a payload was committed."""
        request = self._begin(LOCATING_STATUS)
        try:
            lat, lon = provider.current_position()
            name = self.resolver.resolve_by_coordinates(lat, lon)
            payload = self.fetcher.fetch(lat, lon)
        except DashboardError as e:
            logger.warning("Locate request #%d failed: %s", request, e)
            self._fail(request, e)
            return False
        return self._commit(request, payload.with_location_name(name))

    def search(self, query: str) -> bool:
        """Run the manual-search sequence. Blank queries are ignored."""
        query = query.strip()
        if not query:
            return False
        request = self._begin(SEARCHING_STATUS.format(query=query))
        try:
            location = self.resolver.resolve_by_query(query)
            payload = self.fetcher.fetch(location.latitude, location.longitude)
        except DashboardError as e:
            logger.warning("Search request #%d for %r failed: %s", request, query, e)
            self._fail(request, e)
            return False
        return self._commit(request, payload.with_location_name(location.display_name))

    # --- Selection ---

    def select_day(self, index: int) -> Slot:
        with self._lock:
            payload = self.state.payload
            if payload is None:
                raise LookupError("No forecast loaded")
            if not 0 <= index < len(payload.daily):
                raise IndexError(
                    f"Day {index} outside forecast of {len(payload.daily)} days"
                )
            self.state.slot = DaySlot(index)
            return self.state.slot

    def select_current(self) -> Slot:
        with self._lock:
            if self.state.payload is None:
                raise LookupError("No forecast loaded")
            self.state.slot = CURRENT
            return self.state.slot

    def view(self, now: datetime | None = None) -> DashboardView:
        with self._lock:
            payload, slot, status = self.state.payload, self.state.slot, self.state.status
        if status is not None or payload is None:
            return DashboardView(status=status, render=None)
        render = project(
            payload,
            slot,
            now=now,
            hourly_window=self.config.display.hourly_window,
            icon_base_url=self.config.display.icon_base_url,
        )
        return DashboardView(status=None, render=render)

    # --- State transitions ---

    def _begin(self, status: str) -> int:
        with self._lock:
            self.state.latest_request += 1
            self.state.status = status
            return self.state.latest_request

    def _is_stale(self, request: int) -> bool:
        return (
            self.config.session.discard_stale_results
            and request != self.state.latest_request
        )

    def _fail(self, request: int, error: DashboardError) -> None:
        with self._lock:
            if self._is_stale(request):
                logger.info("Ignoring failure of superseded request #%d", request)
                return
            self.state.status = error.status_message

    def _commit(self, request: int, payload: ForecastPayload) -> bool:
        with self._lock:
            if self._is_stale(request):
                logger.warning(
                    "Discarding forecast for %s from request #%d (latest is #%d)",
                    payload.location_name, request, self.state.latest_request,
                )
                return False
            self.state.payload = payload
            self.state.slot = CURRENT
            self.state.status = None
            logger.info("Request #%d committed forecast for %s", request, payload.location_name)
            return True


def build_session(config: DashboardConfig) -> DashboardSession:
    """Wire the HTTP clients, resolver and fetcher from config."""
    nominatim = NominatimClient(
        base_url=config.geocoding.base_url,
        user_agent=config.geocoding.user_agent,
        timeout=config.geocoding.timeout,
    )
    open_meteo = OpenMeteoClient(
        base_url=config.weather.base_url,
        forecast_days=config.weather.forecast_days,
        timezone=config.weather.timezone,
        user_agent=config.geocoding.user_agent,
        timeout=config.weather.timeout,
    )
    return DashboardSession(
        LocationResolver(nominatim), ForecastFetcher(open_meteo), config
    )
