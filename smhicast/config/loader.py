"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from smhicast.config.defaults import DEFAULT_LOCATION
from smhicast.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path, missing file or empty file yields the defaults. If no
    location is given, DEFAULT_LOCATION is injected.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("location"):
        raw["location"] = DEFAULT_LOCATION.model_dump()

    return AppConfig(**raw)


def override_location(
    config: AppConfig,
    latitude: float | None = None,
    longitude: float | None = None,
    name: str | None = None,
) -> AppConfig:
    """Return a re-validated copy with the given location fields replaced."""
    data = config.model_dump()
    if latitude is not None:
        data["location"]["latitude"] = latitude
    if longitude is not None:
        data["location"]["longitude"] = longitude
    if name is not None:
        data["location"]["name"] = name
    return AppConfig(**data)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'location.latitude'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def dump_config(config: AppConfig) -> str:
    return yaml.safe_dump(config.model_dump(), sort_keys=False, allow_unicode=True)
