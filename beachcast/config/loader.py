"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from beachcast.config.defaults import DEFAULT_LOCATIONS
from beachcast.config.schema import BeachcastConfig


def load_config(path: str | Path | None = None) -> BeachcastConfig:
    """Load and validate config from a YAML file.

    A missing path yields the built-in defaults. If no locations are
    specified in the YAML, injects DEFAULT_LOCATIONS.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return BeachcastConfig(**raw)


def get_config_value(config: BeachcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.debounce_ms'."""
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


def set_config_value(
    config: BeachcastConfig, dotted_key: str, value: Any
) -> BeachcastConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new BeachcastConfig instance.
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
    return BeachcastConfig(**data)
