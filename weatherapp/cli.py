"""CLI entry point for the weather forecast client."""

import argparse
import asyncio
import logging

from weatherapp.config.loader import (
    find_location,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherapp.config.schema import AppConfig
from weatherapp.errors import FetchError
from weatherapp.forecast.query import ForecastQuery
from weatherapp.ingest.fetcher import WeatherFetcher
from weatherapp.ingest.openmeteo_client import OpenMeteoClient
from weatherapp.ingest.store import ForecastStore
from weatherapp.location.source import format_place_name, validate_coordinates
from weatherapp.reporting.formatters import format_forecast_json, format_forecast_text
from weatherapp.service import ForecastService

DEFAULT_CONFIG = "weatherapp.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Current conditions and five-day forecast from Open-Meteo",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch and show a forecast")
    fc_p.add_argument("--lat", type=float, help="Latitude")
    fc_p.add_argument("--lon", type=float, help="Longitude")
    fc_p.add_argument("--location", help="Configured location slug")
    fc_p.add_argument("--json", action="store_true", help="JSON output")

    # locations
    sub.add_parser("locations", help="List configured locations")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "locations":
        return _cmd_locations(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def build_service(config: AppConfig) -> ForecastService:
    client = OpenMeteoClient(
        base_url=config.provider.base_url,
        timezone=config.provider.timezone,
        timeout=config.provider.timeout_seconds,
    )
    store = ForecastStore(drop_stale=config.fetch.drop_stale)
    return ForecastService(WeatherFetcher(client), store)


def _cmd_forecast(config: AppConfig, args) -> int:
    if args.location:
        loc = find_location(config, args.location)
        if loc is None:
            print(f"Error: unknown location '{args.location}'")
            return 1
        lat, lon = loc.latitude, loc.longitude
        place_name = format_place_name(loc.name, loc.admin_area)
    elif args.lat is not None and args.lon is not None:
        lat, lon = args.lat, args.lon
        place_name = f"{lat:.4f}, {lon:.4f}"
    else:
        print("Error: give --location or both --lat and --lon")
        return 1

    try:
        coords = validate_coordinates(lat, lon)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    service = build_service(config)
    try:
        model = asyncio.run(service.refresh(coords))
    except FetchError as e:
        print(f"Error: {e}")
        return 1

    query = ForecastQuery(model)
    current = query.current_day()
    days = query.days(config.display.day_slots)
    if args.json:
        print(format_forecast_json(current, days, place_name))
    else:
        unit = model.temperature_unit or "°"
        print(format_forecast_text(current, days, place_name, unit))
    return 0


def _cmd_locations(config: AppConfig) -> int:
    for loc in config.locations:
        print(f"{loc.slug:<12} {loc.name} ({loc.latitude:.4f}, {loc.longitude:.4f})")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            get_config_value(config, key)
            new_config = set_config_value(config, key, value)
        except (KeyError, ValueError, IndexError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"{key} = {get_config_value(new_config, key)} (saved to {args.config})")
        return 0
    else:
        print("Error: use 'config show' or 'config set'")
        return 1
