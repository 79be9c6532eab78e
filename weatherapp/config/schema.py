"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapp.ingest.openmeteo_client import DEFAULT_TIMEZONE, OPEN_METEO_BASE_URL


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    admin_area: str = ""


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPEN_METEO_BASE_URL
    timezone: str = DEFAULT_TIMEZONE
    timeout_seconds: float | None = Field(default=None, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    day_slots: int = Field(default=5, ge=1, le=6)


class FetchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    drop_stale: bool = False


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
    fetch: FetchConfig = FetchConfig()
    locations: list[LocationConfig] = []
