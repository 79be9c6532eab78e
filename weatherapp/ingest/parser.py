"""Decode raw Open-Meteo response bytes into a ForecastModel."""

import json
import logging

from pydantic import ValidationError

from weatherapp.errors import MalformedPayloadError
from weatherapp.models.forecast import ForecastModel

logger = logging.getLogger(__name__)


def parse(raw: bytes | str) -> ForecastModel:
    """Parse a forecast payload.

    Raises MalformedPayloadError if the payload is not a JSON object or a
    required field is missing or mistyped. Daily sequence lengths are not
    compared here.
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError) as e:
        raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    try:
        model = ForecastModel.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) for err in e.errors()
        )
        raise MalformedPayloadError(f"Invalid forecast payload: {fields}") from e

    logger.debug(
        "Parsed forecast for (%.4f, %.4f) with %d daily entries",
        model.latitude, model.longitude, len(model.daily.time),
    )
    return model
