"""Read accessors producing display-ready day records from a forecast."""

import logging

from weatherapp.forecast.classifier import classify
from weatherapp.forecast.labels import label
from weatherapp.models.forecast import PLACEHOLDER_DAY, ForecastDay, ForecastModel

logger = logging.getLogger(__name__)

MAX_DAY_OFFSET = 5
DEFAULT_DAY_SLOTS = 5


class ForecastQuery:
    """Queries over one immutable ForecastModel.

    Missing or out-of-range days come back as PLACEHOLDER_DAY so fixed-slot
    layouts can render without special-casing absent data.
    """

    def __init__(self, model: ForecastModel):
        self.model = model

    def current_day(self) -> ForecastDay:
        """Current conditions, labelled "Today".

        Assumes the provider's current block and daily[0] fall on the same
        local day; only the current temperature and code are used.
        """
        daily = self.model.daily
        if not daily.time:
            return PLACEHOLDER_DAY
        current = self.model.current
        return ForecastDay(
            label=label(daily.time[0], is_today=True),
            temperature_high=None,
            temperature_low=None,
            icon_category=classify(current.weather_code),
            current_temperature=current.temperature,
        )

    def day_offset(self, n: int) -> ForecastDay:
        """Forecast for the day `n` days from today (0 <= n <= 5)."""
        daily = self.model.daily
        if n < 0 or n > MAX_DAY_OFFSET or n >= len(daily.time):
            return PLACEHOLDER_DAY
        if n >= daily.length:
            logger.warning(
                "Daily sequences have unequal lengths (time=%d, usable=%d); "
                "offset %d unavailable",
                len(daily.time), daily.length, n,
            )
            return PLACEHOLDER_DAY
        return ForecastDay(
            label=label(daily.time[n], is_today=(n == 0)),
            temperature_high=daily.temperature_max[n],
            temperature_low=daily.temperature_min[n],
            icon_category=classify(daily.weather_code[n]),
        )

    def days(self, count: int = DEFAULT_DAY_SLOTS) -> list[ForecastDay]:
        return [self.day_offset(i) for i in range(count)]
