"""Forecast service: wires the fetcher, the forecast store and a location stream."""

import logging

from weatherapp.errors import FetchError
from weatherapp.forecast.query import ForecastQuery
from weatherapp.ingest.fetcher import WeatherFetcher
from weatherapp.ingest.store import FetchTicket, ForecastStore
from weatherapp.location.source import LocationSource
from weatherapp.models.common import Coordinates
from weatherapp.models.forecast import ForecastModel

logger = logging.getLogger(__name__)


class ForecastService:
    """Owns the current forecast for one session.

    Construct once and pass to consumers; there is no module-level instance.
    """

    def __init__(self, fetcher: WeatherFetcher, store: ForecastStore | None = None):
        self.fetcher = fetcher
        self.store = store if store is not None else ForecastStore()
        self._last_ticket: FetchTicket | None = None

    async def refresh(self, coordinates: Coordinates) -> ForecastModel:
        """Fetch for coordinates and publish the result.

        A failed fetch leaves the current forecast untouched and re-raises.
        """
        ticket = self.store.begin(coordinates)
        self._last_ticket = ticket
        try:
            model = await self.fetcher.fetch(coordinates.latitude, coordinates.longitude)
        except FetchError as e:
            logger.warning(
                "Fetch #%d for (%.4f, %.4f) failed: %s",
                ticket.sequence, coordinates.latitude, coordinates.longitude, e,
            )
            raise
        self.store.publish(ticket, model)
        return model

    def cancel_pending(self) -> None:
        """Ignore the result of the most recently started fetch."""
        if self._last_ticket is not None:
            self._last_ticket.cancel()

    async def follow(self, source: LocationSource) -> int:
        """Refresh on every coordinate update until the stream ends.

        Failures are logged and the loop moves on. Returns the number of
        successful refreshes.
        """
        successes = 0
        async for coords in source.updates():
            try:
                await self.refresh(coords)
            except FetchError:
                continue
            successes += 1
        return successes

    def query(self) -> ForecastQuery | None:
        model = self.store.current
        if model is None:
            return None
        return ForecastQuery(model)
