"""Resolved location model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLocation:
    latitude: float
    longitude: float
    display_name: str
