"""Error taxonomy. Every error carries the status line shown to the user."""


class DashboardError(Exception):
    status_message = "Something went wrong."

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.status_message)
        self.detail = detail


class PermissionDenied(DashboardError):
    status_message = "Location denied. Please search manually."


class GeolocationUnsupported(PermissionDenied):
    status_message = "Geolocation not supported."


class LocationNotFound(DashboardError):
    status_message = "City not found."


class GeocodingConnectionError(DashboardError):
    status_message = "Search connection error."


class WeatherUnavailable(DashboardError):
    status_message = "Weather data unavailable."
