"""Geolocation seam: where the device position comes from."""

from typing import Protocol

from weatherdash.models.errors import GeolocationUnsupported, PermissionDenied


class PositionProvider(Protocol):
    def current_position(self) -> tuple[float, float]:
        """Return (latitude, longitude) or raise PermissionDenied."""
        ...


class FixedPosition:
    """Position handed over by the caller, e.g. a browser geolocation callback.

    Missing coordinates mean the caller's provider refused or failed.
    """

    def __init__(
        self,
        latitude: float | None,
        longitude: float | None,
        supported: bool = True,
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.supported = supported

    def current_position(self) -> tuple[float, float]:
        if not self.supported:
            raise GeolocationUnsupported("No geolocation provider available")
        if self.latitude is None or self.longitude is None:
            raise PermissionDenied("Position was not shared")
        return self.latitude, self.longitude
