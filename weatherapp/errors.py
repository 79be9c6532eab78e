"""Exception hierarchy for parsing and fetching forecasts."""


class WeatherAppError(Exception):
    pass


class ParseError(WeatherAppError):
    pass


class MalformedPayloadError(ParseError):
    """Payload is not JSON or does not have the expected forecast shape."""


class FetchError(WeatherAppError):
    def __init__(self, message: str, latitude: float, longitude: float):
        super().__init__(message)
        self.latitude = latitude
        self.longitude = longitude


class NoDataError(FetchError):
    """No bytes were received: transport failure, bad status or empty body."""


class DecodeError(FetchError):
    """Bytes were received but did not parse into a forecast."""
