"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from beachcast.config.defaults import DEFAULT_LOCATIONS
from beachcast.config.schema import BeachcastConfig, ProvidersConfig
from beachcast.store.location_store import LocationStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_PROVIDERS = ProvidersConfig(
    air_base_url="https://test-air.example.com/v1/forecast",
    marine_base_url="https://test-marine.example.com/v1/marine",
    geocoding_base_url="https://test-geo.example.com/v1/search",
)

# 14:30 local in Lisbon summer time (UTC+1)
FIXED_NOW = datetime(2026, 6, 10, 13, 30, tzinfo=UTC)


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def default_config() -> BeachcastConfig:
    """Return default config with test provider URLs and default seeds."""
    return BeachcastConfig(providers=TEST_PROVIDERS, locations=DEFAULT_LOCATIONS)


@pytest.fixture
def store() -> LocationStore:
    return LocationStore(DEFAULT_LOCATIONS)


@pytest.fixture
def air_payload() -> dict:
    return load_fixture("air_guincho.json")


@pytest.fixture
def marine_payload() -> dict:
    return load_fixture("marine_guincho.json")


@pytest.fixture
def tide_payload() -> dict:
    return load_fixture("tide_guincho.json")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "search": {"debounce_ms": 500},
        "forecast": {"max_days": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
