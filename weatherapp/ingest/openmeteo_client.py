"""Open-Meteo forecast API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"
DEFAULT_TIMEZONE = "Australia/Sydney"
DEFAULT_USER_AGENT = "weatherapp/0.1.0"

CURRENT_FIELDS = ("temperature_2m", "weather_code")
DAILY_FIELDS = ("weather_code", "temperature_2m_max", "temperature_2m_min")


def build_forecast_params(
    latitude: float, longitude: float, timezone: str = DEFAULT_TIMEZONE
) -> dict[str, str]:
    """Query parameters for one forecast request."""
    return {
        "latitude": str(latitude),
        "longitude": str(longitude),
        "current": ",".join(CURRENT_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "timezone": timezone,
    }


class OpenMeteoClient:
    """Issues forecast GETs. No retry; timeout is httpx's unless configured."""

    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timezone: str = DEFAULT_TIMEZONE,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timezone = timezone
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    def forecast_url(self) -> str:
        return f"{self.base_url}/forecast"

    async def get_forecast_bytes(self, latitude: float, longitude: float) -> bytes:
        """Fetch the raw forecast body.

        Raises httpx.RequestError on transport failure and
        httpx.HTTPStatusError on a non-2xx response.
        """
        url = self.forecast_url()
        params = build_forecast_params(latitude, longitude, self.timezone)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        client_kwargs: dict = {"transport": self.transport}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout

        async with httpx.AsyncClient(**client_kwargs) as client:
            resp = await client.get(url, params=params, headers=headers)
            logger.debug("GET %s -> %d", resp.url, resp.status_code)
            resp.raise_for_status()
            return resp.content
