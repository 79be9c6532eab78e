"""YAML config loader and writer with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.defaults import DEFAULT_LOCATIONS
from weatherapp.config.schema import AppConfig, LocationConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or file gives the defaults. If no locations are specified,
    injects DEFAULT_LOCATIONS.
    """
    raw: dict = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return AppConfig(**raw)


def save_config(config: AppConfig, path: str | Path) -> None:
    """Write config back to YAML so it is picked up by the next load."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)


def find_location(config: AppConfig, slug: str) -> LocationConfig | None:
    for loc in config.locations:
        if loc.slug == slug:
            return loc
    return None


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.timezone'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AppConfig(**data)
