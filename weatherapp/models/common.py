"""Common types and helpers shared across models."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

UNKNOWN_LABEL = "???"
TODAY_LABEL = "Today"


class IconCategory(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    HEAVY_RAIN = "heavy_rain"
    HAIL = "hail"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()
