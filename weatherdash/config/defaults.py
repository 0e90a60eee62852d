"""Default endpoints and display strings."""

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"
DEFAULT_ICON_BASE_URL = "https://openweathermap.org/img/wn"
DEFAULT_USER_AGENT = "weatherdash/0.1.0"

# Address fields tried in order when naming a place
LOCALITY_FIELDS = ("city", "town", "village", "county")

REVERSE_LOOKUP_FALLBACK_NAME = "My Location"
SEARCH_FALLBACK_NAME = "Unknown Location"

LOCATING_STATUS = "Finding your current location..."
SEARCHING_STATUS = "Searching for {query}..."
