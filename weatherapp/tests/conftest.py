"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherapp.config.defaults import DEFAULT_LOCATIONS
from weatherapp.config.schema import AppConfig
from weatherapp.ingest.parser import parse
from weatherapp.models.forecast import ForecastModel

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def sydney_bytes() -> bytes:
    return (FIXTURE_DIR / "openmeteo_forecast_sydney.json").read_bytes()


@pytest.fixture
def sydney_payload(sydney_bytes: bytes) -> dict:
    return json.loads(sydney_bytes)


@pytest.fixture
def sydney_model(sydney_bytes: bytes) -> ForecastModel:
    return parse(sydney_bytes)


@pytest.fixture
def week_model() -> ForecastModel:
    return parse((FIXTURE_DIR / "openmeteo_forecast_week.json").read_bytes())


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default locations."""
    return AppConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"timezone": "Australia/Sydney"},
        "display": {"day_slots": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
