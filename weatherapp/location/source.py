"""Coordinate update streams and place-name formatting."""

from collections.abc import AsyncIterator, Iterable
from typing import Protocol

from weatherapp.models.common import UNKNOWN_LABEL, Coordinates


class LocationSource(Protocol):
    def updates(self) -> AsyncIterator[Coordinates]:
        """Lazy, possibly infinite stream of coordinate updates.

        Not restartable: call updates() again to re-subscribe.
        """
        ...


class StaticLocationSource:
    """Replays a fixed list of coordinates once per subscription."""

    def __init__(self, coordinates: Iterable[Coordinates]):
        self.coordinates = list(coordinates)

    async def updates(self) -> AsyncIterator[Coordinates]:
        for coords in self.coordinates:
            yield coords


def validate_coordinates(latitude: float, longitude: float) -> Coordinates:
    """Raise ValueError for coordinates outside the valid ranges."""
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"Latitude out of range: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"Longitude out of range: {longitude}")
    return Coordinates(latitude=latitude, longitude=longitude)


def format_place_name(locality: str | None, admin_area: str | None) -> str:
    """Display name like "Sydney, NSW"; "???" when nothing is known."""
    parts = [p.strip() for p in (locality, admin_area) if p and p.strip()]
    if not parts:
        return UNKNOWN_LABEL
    return ", ".join(parts)
