"""Output formatters for forecast day records."""

import json

from weatherapp.models.common import IconCategory
from weatherapp.models.forecast import ForecastDay

ICON_GLYPHS: dict[IconCategory, str] = {
    IconCategory.CLEAR: "☀",
    IconCategory.PARTLY_CLOUDY: "⛅",
    IconCategory.CLOUDY: "☁",
    IconCategory.FOG: "🌫",
    IconCategory.DRIZZLE: "🌦",
    IconCategory.RAIN: "🌧",
    IconCategory.HEAVY_RAIN: "🌧",
    IconCategory.HAIL: "🧊",
    IconCategory.SNOW: "❄",
    IconCategory.THUNDERSTORM: "⛈",
    IconCategory.UNKNOWN: "?",
}


def format_temperature(value: float | None, unit: str = "°") -> str:
    if value is None:
        return "--"
    return f"{value:.0f}{unit}"


def format_day_text(day: ForecastDay, unit: str = "°") -> str:
    """One-line plain text for a forecast slot."""
    glyph = ICON_GLYPHS[day.icon_category]
    return (
        f"{day.label:<5} {glyph} {day.icon_category.value:<13} "
        f"H {format_temperature(day.temperature_high, unit)} "
        f"L {format_temperature(day.temperature_low, unit)}"
    )


def format_current_text(day: ForecastDay, place_name: str, unit: str = "°") -> str:
    glyph = ICON_GLYPHS[day.icon_category]
    return (
        f"{place_name}: {format_temperature(day.current_temperature, unit)} "
        f"{glyph} {day.icon_category.value}"
    )


def format_forecast_text(
    current: ForecastDay, days: list[ForecastDay], place_name: str, unit: str = "°"
) -> str:
    lines = [f"=== {format_current_text(current, place_name, unit)} ==="]
    lines.extend(format_day_text(d, unit) for d in days)
    return "\n".join(lines)


def day_to_dict(day: ForecastDay) -> dict:
    return {
        "label": day.label,
        "temperature_high": day.temperature_high,
        "temperature_low": day.temperature_low,
        "average_temperature": day.average_temperature,
        "current_temperature": day.current_temperature,
        "icon_category": day.icon_category.value,
    }


def format_forecast_json(
    current: ForecastDay, days: list[ForecastDay], place_name: str
) -> str:
    """JSON document for programmatic consumption."""
    data = {
        "place": place_name,
        "current": day_to_dict(current),
        "days": [day_to_dict(d) for d in days],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
