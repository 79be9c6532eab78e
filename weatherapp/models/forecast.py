"""Open-Meteo forecast response models and derived day records."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from weatherapp.models.common import UNKNOWN_LABEL, IconCategory


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class CurrentConditions(_WireModel):
    time: str
    temperature: float = Field(alias="temperature_2m")
    weather_code: int
    interval: int | None = None


class CurrentUnits(_WireModel):
    time: str | None = None
    interval: str | None = None
    temperature: str | None = Field(default=None, alias="temperature_2m")
    weather_code: str | None = None


class DailyForecast(_WireModel):
    time: tuple[str, ...]
    weather_code: tuple[int, ...]
    temperature_max: tuple[float, ...] = Field(alias="temperature_2m_max")
    temperature_min: tuple[float, ...] = Field(alias="temperature_2m_min")

    @property
    def length(self) -> int:
        """Number of days every daily sequence covers."""
        return min(
            len(self.time),
            len(self.weather_code),
            len(self.temperature_max),
            len(self.temperature_min),
        )


class DailyUnits(_WireModel):
    time: str | None = None
    weather_code: str | None = None
    temperature_max: str | None = Field(default=None, alias="temperature_2m_max")
    temperature_min: str | None = Field(default=None, alias="temperature_2m_min")


class ForecastModel(_WireModel):
    """One parsed Open-Meteo forecast response.

    Only the fields requested by the fetcher are required. Provider metadata
    (units, elevation, generation time) is kept when present. Every field,
    including the daily sequences, is immutable.
    """

    latitude: float
    longitude: float
    timezone: str
    current: CurrentConditions
    daily: DailyForecast

    generationtime_ms: float | None = None
    utc_offset_seconds: int | None = None
    timezone_abbreviation: str | None = None
    elevation: float | None = None
    current_units: CurrentUnits = CurrentUnits()
    daily_units: DailyUnits = DailyUnits()

    @property
    def temperature_unit(self) -> str:
        return self.daily_units.temperature_max or self.current_units.temperature or ""


@dataclass(frozen=True)
class ForecastDay:
    label: str
    temperature_high: float | None
    temperature_low: float | None
    icon_category: IconCategory
    current_temperature: float | None = None

    @property
    def average_temperature(self) -> float | None:
        if self.temperature_high is None or self.temperature_low is None:
            return None
        return (self.temperature_high + self.temperature_low) / 2


# Returned wherever a requested day is absent or out of range
PLACEHOLDER_DAY = ForecastDay(
    label=UNKNOWN_LABEL,
    temperature_high=0.0,
    temperature_low=0.0,
    icon_category=IconCategory.UNKNOWN,
    current_temperature=0.0,
)
