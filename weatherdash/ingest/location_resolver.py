"""Location resolver: coordinates or free text -> a displayable place."""

import logging

import httpx

from weatherdash.config.defaults import (
    LOCALITY_FIELDS,
    REVERSE_LOOKUP_FALLBACK_NAME,
    SEARCH_FALLBACK_NAME,
)
from weatherdash.ingest.nominatim_client import NominatimClient
from weatherdash.models.errors import GeocodingConnectionError, LocationNotFound
from weatherdash.models.location import ResolvedLocation

logger = logging.getLogger(__name__)


class LocationResolver:
    def __init__(self, nominatim_client: NominatimClient):
        self.nominatim = nominatim_client

    def resolve_by_coordinates(self, lat: float, lon: float) -> str:
        """Name the place at (lat, lon).

        Never fails: any lookup problem falls back to "My Location".
        """
        try:
            raw = self.nominatim.reverse(lat, lon)
            return format_display_name(
                raw.get("address") or {}, REVERSE_LOOKUP_FALLBACK_NAME
            )
        except (httpx.HTTPError, ValueError, AttributeError):
            logger.exception("Reverse lookup failed for %.4f,%.4f", lat, lon)
            return REVERSE_LOOKUP_FALLBACK_NAME

    def resolve_by_query(self, text: str) -> ResolvedLocation:
        """Resolve a search query to the first matching place.

        Raises LocationNotFound on zero results and GeocodingConnectionError
        on network or response-shape problems.
        """
        try:
            results = self.nominatim.search(text)
        except (httpx.HTTPError, ValueError) as e:
            raise GeocodingConnectionError(f"Search for {text!r} failed: {e}") from e

        if not results:
            logger.info("No geocoding results for %r", text)
            raise LocationNotFound(f"No location matches {text!r}")

        first = results[0]
        try:
            lat = float(first["lat"])
            lon = float(first["lon"])
            address = first.get("address") or {}
            name = format_display_name(address, SEARCH_FALLBACK_NAME)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise GeocodingConnectionError(
                f"Malformed search result for {text!r}: {e}"
            ) from e

        logger.info("Resolved %r to %s (%.4f, %.4f)", text, name, lat, lon)
        return ResolvedLocation(latitude=lat, longitude=lon, display_name=name)


def format_display_name(address: dict, default: str) -> str:
    """First present locality field, plus ", <postcode>" when there is one."""
    name = next(
        (address[f] for f in LOCALITY_FIELDS if address.get(f)),
        default,
    )
    postcode = address.get("postcode")
    if postcode:
        name = f"{name}, {postcode}"
    return name
