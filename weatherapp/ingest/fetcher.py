"""Weather fetcher: one forecast request per coordinate pair."""

import logging

import httpx

from weatherapp.errors import DecodeError, NoDataError, ParseError
from weatherapp.ingest.openmeteo_client import OpenMeteoClient
from weatherapp.ingest.parser import parse
from weatherapp.models.forecast import ForecastModel

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    async def fetch(self, latitude: float, longitude: float) -> ForecastModel:
        """Fetch and parse the forecast for a coordinate pair.

        Raises NoDataError when nothing usable came back over the wire and
        DecodeError when the body does not parse.
        """
        try:
            raw = await self.client.get_forecast_bytes(latitude, longitude)
        except httpx.HTTPStatusError as e:
            raise NoDataError(
                f"Forecast request returned {e.response.status_code}",
                latitude, longitude,
            ) from e
        except httpx.RequestError as e:
            raise NoDataError(
                f"Forecast request failed: {e}", latitude, longitude
            ) from e

        if not raw:
            raise NoDataError("Forecast response was empty", latitude, longitude)

        try:
            model = parse(raw)
        except ParseError as e:
            raise DecodeError(str(e), latitude, longitude) from e

        logger.info(
            "Fetched forecast for (%.4f, %.4f): %d days, tz=%s",
            latitude, longitude, len(model.daily.time), model.timezone,
        )
        return model
